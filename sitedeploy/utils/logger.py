"""
Logging setup for the sitedeploy logger tree.

Handlers live only on the "sitedeploy" logger; module loggers are plain
children that propagate to it. Nothing is written (and no logs/ folder is
created) until configure_logging() runs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import colorlog


LOGS_DIR = Path("logs")
ROOT_LOGGER_NAME = "sitedeploy"

# Marker attribute so reconfiguring only replaces handlers installed here
_HANDLER_FLAG = "_sitedeploy_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
        reset=True,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
    ))
    return _mark(handler)


def _file_handler(logs_dir: Path) -> logging.Handler:
    logs_dir.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y-%m-%d")
    handler = logging.FileHandler(logs_dir / f"sitedeploy_{today}.log", encoding='utf-8')
    handler.setLevel(logging.DEBUG)  # the file always gets everything
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    return _mark(handler)


def configure_logging(
    level: str = "INFO",
    console: bool = True,
    logs_dir: Optional[Path] = LOGS_DIR,
) -> logging.Logger:
    """
    Attach console and daily-file handlers to the sitedeploy logger.

    Safe to call more than once: handlers from an earlier call are closed
    and replaced, so output is never duplicated.

    Args:
        level:    Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console:  Whether to log to stdout
        logs_dir: Folder for the daily log file; None disables file logging

    Returns:
        The configured sitedeploy logger
    """
    numeric_level = getattr(logging, level.upper())
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(logging.DEBUG if logs_dir is not None else numeric_level)
    root.propagate = False

    if console:
        root.addHandler(_console_handler(numeric_level))
    if logs_dir is not None:
        root.addHandler(_file_handler(Path(logs_dir)))

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, placed under the sitedeploy tree.

    Names outside the tree (e.g. "__main__") are nested under it so their
    records reach the configured handlers.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
