"""generic-functions CLI entry point.

Defines the top-level ``generic-functions`` command (via Click-Extra), wires
console logging and the flight recorder, and registers the catalog commands.

Commands
- ``list``: functions grouped by category.
- ``search``: functions whose name or description matches a term.
- ``show``: full documentation of one function or constant.
- ``constants``: the library's constants.

Examples
    $ generic-functions --version
    $ generic-functions -v search case
    $ generic-functions show get_format
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from generic_functions import __version__
from generic_functions.config import ENV_PREFIX
from generic_functions.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .catalog import constants, list_functions, search, show
from .helpers import hyperlink, parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """generic-functions command-line interface.

    Browse the generic-functions utility library from the terminal: list its
    helpers by category, search them, and read the signature, parameters and
    example of any function or constant.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://mathieu-ai.github.io/generic-functions/"),
        "  Issues: " + hyperlink("https://github.com/Mathieu-ai/generic-functions/issues"),
    ]
)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("generic-functions", appauthor=False, ensure_exists=True))
    / "latest.log"
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
    help="Enable debug mode (timestamps, logger names and source paths on the console).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=DEFAULT_LOG_PATH,
    envvar=f"{ENV_PREFIX}LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar=f"{ENV_PREFIX}FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records in memory at DEBUG granularity (unaffected by "
        f"-v/-q, N tunable via {ENV_PREFIX}FLIGHT_RECORDER_CAPACITY) and write them "
        "to --log-path when a WARNING or ERROR occurs, or on exit with --force-flush."
    ),
    default=True,
    envvar=f"{ENV_PREFIX}FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit, even without warnings.",
    default=False,
    envvar=f"{ENV_PREFIX}FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the MINIMUM LEVEL of a LOGGER (NAME=LEVEL), for both the console and "
        "the flight recorder. Repeatable (e.g. -L urllib3=DEBUG -L "
        "generic_functions.catalog=INFO) or a comma/space list in the env var."
    ),
    default=("urllib3=WARNING", "requests=WARNING"),
    envvar=f"{ENV_PREFIX}LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def generic_functions(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """generic-functions command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


generic_functions.add_command(list_functions)
generic_functions.add_command(search)
generic_functions.add_command(show)
generic_functions.add_command(constants)
