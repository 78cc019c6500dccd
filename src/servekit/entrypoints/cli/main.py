"""servekit CLI entry point.

Defines the top-level ``servekit`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available groups
- ``servekit deps``: list and check optional dependencies.
- ``servekit paths``: normalize and prefix context paths.
- ``servekit checksum`` / ``servekit banner``: small diagnostics.

Examples
    $ servekit --version
    $ servekit deps check jinja2 orjson
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from servekit import __version__
from servekit.logging import LoggingSettings, configure_logging, log_startup

from .deps import deps as deps_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .tools import banner, checksum, paths

logger = logging.getLogger(__name__)


HELP = """servekit command-line interface.

    servekit bundles the support routines of a web-serving framework: context
    path normalization, optional dependency checks, exception handler lookup,
    startup banner and response checksums. This CLI exposes them for
    diagnosing an installation.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://servekit.readthedocs.io/"),
        "  Issues: " + hyperlink("https://github.com/servekit/servekit/issues"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("servekit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="SERVEKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SERVEKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via SERVEKIT_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SERVEKIT_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L asyncio=INFO) or via "
        "SERVEKIT_LOGGER_LEVELS (comma/space list)."
    ),
    default=("asyncio=WARNING", "websockets=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def servekit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """servekit command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    settings = LoggingSettings(
        level=max(logging.DEBUG, min(logging.CRITICAL, level)),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, settings)

    ctx.call_on_close(logging.shutdown)


servekit.add_command(deps_group)
servekit.add_command(paths)
servekit.add_command(checksum)
servekit.add_command(banner)
