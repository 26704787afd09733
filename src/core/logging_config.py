"""
Logging Config — логирование числовой башни

Арифметика не выполняет I/O: единственные записи — диагностика невалидных
литералов (DEBUG). Обработчики на import не настраиваются; приложение
вызывает setup_logging() явно.

Использование:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Literal rejected", extra={"literal": "012"})
"""

import logging
import sys
from typing import Any, Final, MutableMapping, Optional, TextIO, Tuple

# =============================================================================
# ПАРАМЕТРЫ ЛОГИРОВАНИЯ
# =============================================================================

# Корневой logger пакета
ROOT_LOGGER_NAME: Final[str] = "src"

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO

# Формат: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# FORMATTER / ADAPTER
# =============================================================================


class NumericLogFormatter(logging.Formatter):
    """
    Formatter со структурированным хвостом "| key=value".
    """

    def __init__(self, include_extra: bool = True) -> None:
        self.include_extra = include_extra
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        if self.include_extra and hasattr(record, "extra_info"):
            extra_str = " | ".join(f"{k}={v}" for k, v in record.extra_info.items())
            log_message += f" | {extra_str}"

        return log_message


class StructuredLogger(logging.LoggerAdapter):
    """
    Logger, складывающий `extra` в атрибут записи `extra_info`.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        if extra:
            kwargs["extra"] = {"extra_info": extra}
        return msg, kwargs


# =============================================================================
# SETUP
# =============================================================================


def setup_logging(
    level: int = DEFAULT_LOG_LEVEL,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Настройка консольного логирования для пакета.

    Повторный вызов заменяет ранее установленный обработчик (без дубликатов).

    Args:
        level: Уровень логирования (например, logging.DEBUG для диагностики литералов)
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Установленный handler
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_numeric_console", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(NumericLogFormatter())
    handler._numeric_console = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    return handler


def get_logger(name: str) -> StructuredLogger:
    """
    Структурированный logger для модуля.

    Args:
        name: Имя компонента (обычно __name__)
    """
    return StructuredLogger(logging.getLogger(name), {})


# Библиотека молчит, пока приложение не вызовет setup_logging()
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
