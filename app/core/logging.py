import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Библиотеки, которые слишком шумят на INFO
_NOISY_LOGGERS = ("uvicorn.access", "httpx", "multipart")


def configure_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера приложения"""
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if not any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
