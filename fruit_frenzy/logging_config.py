"""
Logging setup for the game.

The level and an optional log file come from the environment so a player can
turn on spawn/catch tracing without touching code:

    FRUIT_FRENZY_LOG_LEVEL=DEBUG FRUIT_FRENZY_LOG_FILE=frenzy.log python main.py
"""
import logging
import os
import sys
from typing import Optional, Union

LEVEL_ENV = "FRUIT_FRENZY_LOG_LEVEL"
FILE_ENV = "FRUIT_FRENZY_LOG_FILE"

# Chatty HTTP stacks behind the commentary client
NOISY_LOGGERS = ("openai", "httpx", "httpcore")


def resolve_level(value: Union[int, str, None], default: int = logging.INFO) -> int:
    """Turn 'debug', 'WARNING', '10' or an int into a logging level."""
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the 'fruit_frenzy' logger and return it.

    Args:
        level: Explicit level; falls back to FRUIT_FRENZY_LOG_LEVEL, then INFO.
        log_file: Explicit path; falls back to FRUIT_FRENZY_LOG_FILE.
    """
    level = resolve_level(level if level is not None else os.getenv(LEVEL_ENV))
    log_file = log_file or os.getenv(FILE_ENV) or None

    logger = logging.getLogger("fruit_frenzy")
    logger.setLevel(level)
    # Restarting in the same process must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Per-request HTTP chatter only when actually debugging
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)

    logger.info("Logging at %s%s", logging.getLevelName(level), f" to {log_file}" if log_file else "")
    return logger
