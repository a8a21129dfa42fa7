"""
logging_utils.py
----------------

Console (colorized) and optional rotating-file logging for the runner.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by the application entry point.
"""

from __future__ import annotations

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]

MONO_FORMAT = "[%(asctime)s] [%(levelname)-5s] [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Colorized console formatter: ``[time] [LEVEL] [logger] message``."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        message = (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{color}{record.levelname:<5s}{reset}] "
            f"[{record.name}] "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = None,
                      name: str = "curveplot",
                      run_prefix: str = "run") -> Optional[Path]:
    """Attach a colorized console handler, and a rotating file handler if
    ``log_dir`` is given, to the ``name`` logger.

    Existing handlers on that logger are replaced, so calling this twice does
    not duplicate output.

    Returns:
        Path of the log file, or ``None`` when logging to the console only.
    """
    colorama_init(strip=False)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(ColorFormatter(datefmt=DATE_FORMAT))
    logger.addHandler(console)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        file_handler.setFormatter(logging.Formatter(MONO_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
