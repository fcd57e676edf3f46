import logging
import sys

from src.utils.config import get_settings

logger_name = 'obscore'
settings = get_settings()


def resolve_level(name: str) -> int:
    """Numeric level for a level name; anything unknown falls back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


# Create logger
logger = logging.getLogger(logger_name)
logger.setLevel(resolve_level(settings.log_level))

# Formatter
formatter = logging.Formatter("{asctime} - {levelname} - {message}", style="{", datefmt="%Y-%m-%d %H:%M:%S")

# Console Handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)

# Add handlers
if not logger.handlers:
    logger.addHandler(console_handler)
    # File Handler only when a log file is configured
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8", mode="a")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
