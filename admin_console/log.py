"""Logging configuration for the admin console."""

import logging
import sys

import colorlog

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)


def setup_logging(level: int | str = logging.INFO, use_colors: bool = True) -> None:
    """Configure the root logger with a single console handler.

    Args:
        level: Logging level, as a number or a name like "INFO"
        use_colors: Whether to colour the level names on the console
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[_create_console_handler(use_colors)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _create_console_handler(use_colors: bool) -> logging.Handler:
    """Create console handler with the matching formatter."""
    console_handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
            "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m",
            datefmt="%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    else:
        formatter = logging.Formatter(BASE_LOG_FORMAT, datefmt="%m-%d %H:%M:%S")

    console_handler.setFormatter(formatter)
    return console_handler
