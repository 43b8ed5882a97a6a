"""Logging helpers.

easymatch logs through loguru but stays silent until `configure_logging`
is called. Forwarding stdlib `logging` is opt-in.
"""

from __future__ import annotations

import inspect
import logging
import sys
from logging import Handler

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from easymatch.config import LogProfile, MatchSettings, get_settings

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None
_CONFIGURED_SINKS: list[int] = []


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _build_console_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(handler, InterceptHandler) for handler in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(
    *,
    profile: LogProfile | None = None,
    settings: MatchSettings | None = None,
    intercept_stdlib: bool = False,
) -> None:
    """Enable easymatch logging and install a sink once per profile.

    Only sinks added here are replaced on reconfiguration; sinks owned by
    the host application are left alone. With `intercept_stdlib`, stdlib
    `logging` records are forwarded to loguru as well.

    Levels come from `settings.log_filter` (EASYMATCH_LOG_FILTER):
    - "info" - global INFO level
    - "info,easymatch.dispatch=trace" - every arm test traced
    - "debug,easymatch.arm=false" - global DEBUG, easymatch.arm disabled
    """
    global _CONFIGURED_PROFILE

    settings = settings or get_settings()
    profile = profile or settings.log_profile
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = settings.parse_log_filter()
    # the sink admits everything; the "" entry carries the global level
    level_filter = {"": global_level.upper(), **module_filter}

    while _CONFIGURED_SINKS:
        logger.remove(_CONFIGURED_SINKS.pop())
    logger.enable("easymatch")

    if profile == "console":
        sink_id = logger.add(
            _build_console_handler(),
            level=0,
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=level_filter,
        )
    else:
        sink_id = logger.add(
            sys.stderr,
            level=0,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=level_filter,
        )

    _CONFIGURED_SINKS.append(sink_id)

    if intercept_stdlib:
        _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
