"""Logging setup for applications and the ``generic-functions`` CLI.

The library modules only create module loggers; nothing here runs on import.
Callers that want console output or a crash log wire these helpers to the
root logger:

- :func:`config_console_handler` builds a Rich handler writing to stderr.
- :func:`config_flight_recorder` builds an in-memory buffer of records that is
  written to a file once something goes wrong (WARNING or above by default).
- :class:`ThirdPartyPrefixFilter` tags records from other libraries, e.g.
  ``[urllib3]``, so they stand out on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib import metadata
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import requests
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "generic_functions"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records that do not come from generic-functions.

    Sets ``record.prefix`` to the top-level package of the emitting logger in
    brackets (``"urllib3.connectionpool"`` gives ``"[urllib3]"``), or to an
    empty string for the project's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source locations instead
            of the short third-party prefix.
        color: Use colors. Mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: The handler, ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder.

    Up to ``capacity`` records of any level are kept in memory and written to
    ``path`` when a record at ``flush_level`` or above arrives, when the
    buffer is full, or on close if ``flush_on_close`` is set. The file is
    truncated when the handler is created.

    Args:
        path: File receiving the flushed records.
        capacity: Number of records buffered before a forced flush.
        flush_level: Level that triggers a flush.
        flush_on_close: Also flush whatever is buffered when logging shuts down.

    Returns:
        MemoryHandler: The buffering handler, wrapping a file handler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line INFO summary of the session, then DEBUG diagnostics.

    Diagnostics cover the interpreter, platform, process, the versions of
    requests and rich, the attached handlers, the flight recorder settings and
    the per-logger level overrides.

    Args:
        logger: Logger receiving the messages.
        app_version: Version of generic-functions.
        level: Console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight recorder file, or None.
        flight_recorder: Whether the flight recorder is attached.
        flight_capacity: Flight recorder capacity, or None.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Level overrides by logger name.
    """
    logger.info(
        "generic-functions %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("requests: %s", requests.__version__)
    logger.debug("rich: %s", _distribution_version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
