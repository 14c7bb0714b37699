"""Logging setup for the WORDCAP CLI.

Console output goes through a Rich handler on stderr, leaving stdout for the
capitalized words. An optional "flight recorder" keeps recent DEBUG records in
memory and writes them to a file once something at WARNING or above happens
(or on exit, when forced). Records from libraries other than wordcap are
tagged with a short ``[library]`` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "wordcap"
BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI decided about logging for one invocation.

    Attributes:
        level: Console level (numeric).
        debug_mode: Debug formatting on the console (paths, timestamps).
        color: Allow colored console output.
        log_path: Flight-recorder destination file.
        flight_recorder: Whether the flight recorder is attached.
        flight_capacity: Records buffered by the flight recorder.
        force_flush: Flush the flight recorder on close even without a WARNING.
        logger_levels: Per-logger minimum levels.
    """

    level: int = BASE_LEVEL
    debug_mode: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[lib]`` for non-wordcap loggers, ``""`` otherwise."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach the prefix to the record and let it through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True; nothing is filtered out.
        """
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def level_from_counts(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Turn repeated -v/-q flags into a console level.

    Each ``-v`` lowers the WARNING default by one step and each ``-q`` raises
    it; the result is clamped to DEBUG..CRITICAL.

    Args:
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        int: A standard numeric logging level.
    """
    level = BASE_LEVEL - LEVEL_STEP * verbose_count + LEVEL_STEP * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum console level; debug mode forces DEBUG.
        debug_mode: Show source paths and timestamps, skip third-party prefixes.
        color: ``False`` disables color, matching Click-Extra's ``--no-color``.

    Returns:
        RichHandler: Handler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a MemoryHandler in front of a FileHandler.

    The file is truncated when the handler is created, so each run leaves only
    its own records behind.

    Args:
        path: File that receives flushed records.
        capacity: Number of records buffered before an automatic flush.
        flush_level: Records at this level or above trigger a flush.
        flush_on_close: Flush whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: The buffering handler.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    Any existing root configuration is replaced. The root logger itself is
    opened up to DEBUG so each handler applies its own threshold; per-logger
    levels from ``settings.logger_levels`` are applied afterwards.

    Args:
        settings: Logging choices for this invocation.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.level,
            debug_mode=settings.debug_mode,
            color=settings.color,
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
) -> None:
    """Emit a one-line INFO summary followed by DEBUG diagnostics.

    Args:
        logger: Logger to write to.
        app_version: Version string shown in the summary.
        settings: Logging choices for this invocation.
        handlers: Handlers attached to the root logger.
    """
    flight_recorder = settings.flight_recorder and settings.log_path is not None
    logger.info(
        "WORDCAP %s — console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", os.getcwd())
    logger.debug("Click: %s", version("click"))
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in settings.logger_levels.items()
        }
        or "<none>",
    )
