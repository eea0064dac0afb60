"""Fixtures and test helpers for CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, and run tests within an
isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from crudcontract.entrypoints.cli.main import crudcontract

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages at every level.

    Messages go to a 'crudcontract.demo' logger and to a 'some.thirdparty'
    logger to exercise logger-level filtering.
    """
    logger = logging.getLogger("crudcontract.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    crudcontract.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(crudcontract, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
