"""Configuration utilities for WORDCAP.

This module centralizes small helpers and constants related to application
configuration. Environment variables are read through the CLI options (see
`wordcap.entrypoints.cli.main`), never directly here.
"""

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "wordcap"  # pragma: no mutate
ENV_PREFIX = "WORDCAP"  # pragma: no mutate

SKIP_NOTICE = "Skipped"  # pragma: no mutate
DEFAULT_NULL_MARKER = "null"  # pragma: no mutate

DEMO_ITEMS: tuple[str | None, ...] = (
    "hellO wOrlD",
    None,
    "fRom",
    None,
    "kOtlin",
    "",
)


def default_log_path() -> Path:
    """Return the default flight-recorder file path.

    The directory is the platform's per-user log directory for WORDCAP and is
    created if it does not exist yet.

    Returns:
        ``<user log dir>/latest.log``.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"
