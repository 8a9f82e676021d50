from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from appenv.errors import ParseError
from appenv.runtime.process import Process

if TYPE_CHECKING:
    from appenv.runtime.env import Environment

_LOGGER_NAME = "appenv"

LOG_LEVEL_VAR = "LOG_LEVEL"

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_log_level(value: str) -> int:
    level = _LEVELS.get(value.strip().lower())
    if level is None:
        raise ParseError(
            f"unknown log level {value!r}; expected one of: {', '.join(_LEVELS)}"
        )
    return level


def resolve_log_level(
    environment: "Environment",
    *,
    process: Process | None = None,
    env_var: str = LOG_LEVEL_VAR,
) -> int:
    """
    Pick the log level for ``environment``.

    The ``--log`` option is consumed from the environment's arguments, then
    ``LOG_LEVEL`` is consulted. Without either, production logs at WARNING
    and everything else at INFO.
    """
    command_input = environment.command_input
    value = command_input.parse_option("log", help="Change the application's log level")
    environment.command_input = command_input

    if value is None:
        value = (process or Process()).get(env_var)
    if value is None:
        return logging.WARNING if environment.name == "production" else logging.INFO
    return parse_log_level(value)


def setup_logging(
    level: int = logging.INFO,
    *,
    log_file: Optional[Path] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Configure the appenv logger.

    Parameters
    ----------
    level : int
        Logging level (default: INFO).
    log_file : Path, optional
        Rotating log file; skipped when None.
    console : bool
        Whether to also log to stderr.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    logger.propagate = False
    logger.debug("Logging initialized")

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a child logger.

    Example:
        logger = get_logger(__name__)
    """
    base = logging.getLogger(_LOGGER_NAME)
    if name is None or name == _LOGGER_NAME:
        return base
    if name.startswith(_LOGGER_NAME + "."):
        name = name[len(_LOGGER_NAME) + 1 :]
    return base.getChild(name)
