import logging
from typing import Optional

from document_manager.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Настройка корневого логгера приложения"""
    global _handler

    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    # Повторный вызов не добавляет второй обработчик
    if _handler is not None and _handler in root.handlers:
        return

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
