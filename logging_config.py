import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "kitty"
DEFAULT_LOG_FILE = "kitty.log"


def setup_logger(log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures and returns the "kitty" logger.
    - File handler: DEBUG level, detailed format (time, file, line). The path
      comes from ``log_file``, then KITTY_LOG_FILE, then ./kitty.log.
    - Console handler: INFO level, short format (message only).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # own handlers only: hasHandlers() would also see the root logger's
    if logger.handlers:
        return logger

    log_file = log_file or os.environ.get("KITTY_LOG_FILE") or DEFAULT_LOG_FILE
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger


def set_console_level(level: int) -> None:
    """Change the level of the console handler only; the log file keeps DEBUG."""
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)
