"""WORDCAP CLI entry point.

Defines the top-level ``wordcap`` command (via Click-Extra), wires up logging
and registers the word commands.

Running ``wordcap`` without a subcommand runs the demo, which prints
``[Hello, World, From, Kotlin]``.

Examples
    $ wordcap
    $ wordcap capitalize "hellO wOrlD" null "" "kOtlin"
    $ printf 'fOo bAr\\n\\nbaZ\\n' | wordcap capitalize --stdin --format lines
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from wordcap import __version__, config
from wordcap.logging import (
    LoggingSettings,
    configure_logging,
    level_from_counts,
    log_startup,
)

from .helpers import parse_log_level
from .words import capitalize, demo

logger = logging.getLogger(__name__)

ENV = config.ENV_PREFIX

HELP = """WORDCAP command-line interface.

    Normalizes lists of strings into capitalized words: each item is split on
    spaces and every word is re-cased as "Word". Absent and empty items are
    skipped with a notice on stderr.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    invoke_without_command=True,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the WARNING console level by one step per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the WARNING console level by one step per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Debug console output with timestamps and source paths.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight recorder file (defaults to the user log directory).",
    default=config.default_log_path,
    envvar=f"{ENV}_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar=f"{ENV}_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N DEBUG records in memory and write them to --log-path "
        "when a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
    envvar=f"{ENV}_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar=f"{ENV}_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=f"{ENV}_LOGGER_LEVEL",
    help=(
        "Set the minimum level of a logger (NAME=LEVEL). Repeatable, or a "
        "comma/space separated list in the environment variable."
    ),
    show_envvar=True,
)
@clickx.pass_context
def wordcap(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """WORDCAP command-line interface."""

    settings = LoggingSettings(
        level=level_from_counts(verbose_count, quiet_count),
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, app_version=__version__, settings=settings, handlers=handlers)

    ctx.call_on_close(logging.shutdown)

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


wordcap.add_command(demo)
wordcap.add_command(capitalize)
