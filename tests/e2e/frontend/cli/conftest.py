"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level (from a wordcap logger and a third-party logger), plus fixtures to
register it, obtain a CliRunner, and run inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from wordcap.entrypoints.cli.main import wordcap

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'wordcap.demo' and on 'some.thirdparty'."""
    logger = logging.getLogger("wordcap.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    # Click-Extra keeps its own per-section registries
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the `wordcap` group for the duration of a test."""
    wordcap.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command(wordcap, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes to ./wordcap.log."""
    return CliRunner(env={"WORDCAP_LOG_PATH": "wordcap.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield
