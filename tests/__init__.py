"""
Test suite for ha-numeric

Contains:
- tests/unit/          : Unit tests for digits, Integer, Fraction, Complex, contracts
"""
