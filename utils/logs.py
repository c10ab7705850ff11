import os
import sys

from loguru import logger

from data import config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"

_configured = False


def setup_logging(level: str = "INFO", log_to_file: bool = True) -> None:
    global _configured
    if _configured:
        return

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_to_file:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        logger.add(os.path.join(config.LOG_DIR, "toolkit.log"), level="DEBUG", rotation="5 MB", retention=5, encoding="utf-8")
    _configured = True
