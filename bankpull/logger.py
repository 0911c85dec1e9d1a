"""Logging configuration for bankpull.

Sets up logging to the console and, optionally, to a date-named file.
"""

import logging
from datetime import date

from .config import Settings

LOGGER_NAME = "bankpull"


def setup_logging(config: Settings) -> logging.Logger:
    """Set up application logging.

    Args:
        config: Settings containing log level, debug flag and optional log directory.

    Returns:
        Configured logger instance.
    """
    level = "DEBUG" if config.debug else config.log_level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = config.log_dir / f"bankpull-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
