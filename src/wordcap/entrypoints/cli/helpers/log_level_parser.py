"""Parse ``-L NAME=LEVEL`` logger overrides for the CLI.

Values may be repeated on the command line or packed into a single
comma/space-separated string (as they arrive from an environment variable).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SEPARATORS.split(chunk) if item]


def _to_level(level_str: str) -> int:
    level = logging.getLevelName(level_str.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {level_str}")
    return level


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback mapping NAME=LEVEL items to ``{name: numeric level}``.

    The result starts from DEFAULT_LIB_LEVELS; later items override earlier
    ones for the same logger.

    Raises:
        click.BadParameter: If an item has no ``=``, an empty name, or an
            unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _to_level(level_str)
    return levels
