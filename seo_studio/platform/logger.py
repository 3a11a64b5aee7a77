import logging
import os
from logging.handlers import RotatingFileHandler

from seo_studio.platform.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "seo_studio.log"


def get_logger(name: str) -> logging.Logger:
    """
    Creates a logger instance that writes to console and, when LOG_TO_FILE
    is enabled, to a rotating file under LOG_DIR.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.LOG_DIR, LOG_FILE_NAME),
            maxBytes=10_000_000,
            backupCount=5,
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    # Handlers are attached here; don't duplicate through the root logger
    logger.propagate = False

    return logger
