import logging
import sys
from config import settings

def setup_logger(name: str = "file_summary", level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else settings.log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(settings.log_format)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
