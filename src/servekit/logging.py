"""Logging setup for servekit and its CLI.

Console output goes through Rich on stderr. Banner and version lines are
logged at the ``STARTUP`` level, which the console always shows regardless of
the chosen verbosity. An optional in-memory "flight recorder" keeps recent
records at DEBUG granularity and writes them to a file once a WARNING shows
up, so a failed run leaves a trace without a noisy console.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from . import __version__
from .dependencies import DependencyRegistry, OptionalDependencies, default_registry

if TYPE_CHECKING:
    from logging import Handler, Logger

PROJECT_PREFIX = "servekit"

# Between INFO and WARNING.
STARTUP = 25
logging.addLevelName(STARTUP, "STARTUP")

CONSOLE_THEME = Theme({"logging.level.startup": "bold cyan"})


def startup(logger: Logger, msg: str, *args: object) -> None:
    """Log *msg* at the STARTUP level."""
    logger.log(STARTUP, msg, *args)


class ConsoleFilter(logging.Filter):
    """Console gate: records below *level* are dropped, STARTUP records never are.

    Records that pass get an ``origin`` attribute, ``"[jinja2] "`` for a
    library logger and empty for servekit's own.
    """

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.level and record.levelno != STARTUP:
            return False
        package = record.name.partition(".")[0]
        record.origin = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


def console_handler(
    level: int = logging.WARNING, debug: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Outside debug mode the handler shows records at *level* and above plus
    every STARTUP record. In debug mode it shows everything, with logger names,
    timestamps and source locations.
    """
    console = Console(
        color_system="auto" if color else None, stderr=True, theme=CONSOLE_THEME
    )
    handler = RichHandler(
        level=logging.DEBUG if debug else min(level, STARTUP),
        console=console,
        rich_tracebacks=True,
        show_time=debug,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.addFilter(ConsoleFilter(level))
        handler.setFormatter(logging.Formatter("%(origin)s%(message)s"))
    return handler


def flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Return a handler that buffers *capacity* records and dumps them to *path*.

    The buffer is written when a WARNING or worse arrives, when it fills up,
    and on close if *flush_on_close* is set. The file is only created on the
    first write.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s [%(threadName)s] %(name)s:%(lineno)d %(message)s"
        )
    )
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


@dataclass(frozen=True)
class LoggingSettings:
    """How the process should log.

    Attributes:
        level: Minimum console level outside debug mode.
        debug: Show everything on the console, with locations.
        color: Allow colored console output.
        log_path: Flight recorder destination; None disables the recorder.
        capacity: Flight recorder size, in records.
        flush_on_close: Dump the flight recorder on shutdown even without a
            WARNING.
        logger_levels: Minimum level per logger name, applied to every handler.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    flush_on_close: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    Replaces any handlers already on the root logger. The root logger itself
    passes everything; each handler applies its own threshold.

    Returns:
        list[Handler]: The installed handlers.
    """
    handlers: list[Handler] = [
        console_handler(settings.level, debug=settings.debug, color=settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(
                settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.flush_on_close,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    registry: DependencyRegistry | None = None,
) -> None:
    """Log a one-line summary, then the optional dependency inventory at DEBUG.

    Checking the inventory goes through *registry* (the process-wide one by
    default), so libraries found here are already cached for later checks.
    """
    logger.info(
        "servekit %s: console=%s, flight-recorder=%s",
        __version__,
        "DEBUG" if settings.debug else logging.getLevelName(settings.level),
        settings.log_path if settings.log_path is not None else "off",
    )
    if not logger.isEnabledFor(logging.DEBUG):
        return

    registry = registry or default_registry
    present: list[str] = []
    missing: list[str] = []
    for member in OptionalDependencies:
        dependency = member.dependency
        found = registry.is_present(dependency)
        (present if found else missing).append(dependency.display_name)
    logger.debug("Optional dependencies present: %s", ", ".join(present) or "<none>")
    logger.debug("Optional dependencies missing: %s", ", ".join(missing) or "<none>")
    logger.debug("Python %s on %s", platform.python_version(), platform.platform())
    if settings.logger_levels:
        logger.debug(
            "Logger levels: %s",
            ", ".join(
                f"{name}={logging.getLevelName(level)}"
                for name, level in settings.logger_levels.items()
            ),
        )
