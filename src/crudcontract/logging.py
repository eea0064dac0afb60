"""Console logging for the crudcontract CLI.

The CLI logs to stderr through a single Rich handler. Verbosity counts from
WARNING (`-v` lowers the threshold, `-q` raises it), `--debug` switches to a
timestamped format with source locations, and records from other packages
(Werkzeug, Flask) are tagged with their package name.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping

PROJECT_PREFIX = "crudcontract"

PLAIN_FORMAT = "%(prefix)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

# Distributions whose versions are reported in debug diagnostics.
REPORTED_DISTRIBUTIONS = ("flask", "inflect", "pytest")


class LoggerPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set `record.prefix` to `[package]` for loggers outside `project`.

    Records from the project's own loggers get an empty prefix. Nothing is
    filtered out.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == self.project else f"[{package}]"
        return True


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Return the console level for `-v`/`-q` counts, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def console_handler(
    level: int = logging.WARNING, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Return a stderr `RichHandler`.

    In debug mode the handler accepts DEBUG regardless of `level` and shows
    timestamps, logger names and source paths; otherwise records are tagged by
    `LoggerPrefixFilter`.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else PLAIN_FORMAT))
    if not debug:
        handler.addFilter(LoggerPrefixFilter())
    return handler


def configure_logging(
    level: int,
    *,
    debug: bool = False,
    color: bool = True,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Route all logging to one console handler and apply per-logger levels.

    The root logger passes everything; the handler decides what is shown.

    Returns:
        The handlers installed on the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(level, debug=debug, color=color)
    ]
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def distribution_version(name: str) -> str:
    """Return the installed version of distribution `name`, or `"<not installed>"`."""
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def startup_diagnostics(
    handlers: list[logging.Handler], logger_levels: Mapping[str, int]
) -> dict[str, object]:
    """Collect the environment details logged at DEBUG on startup."""
    diagnostics: dict[str, object] = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
    }
    diagnostics.update({name: distribution_version(name) for name in REPORTED_DISTRIBUTIONS})
    diagnostics["Handlers"] = [type(h).__name__ for h in handlers]
    diagnostics["Per-logger overrides"] = {
        name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()
    } or "<none>"
    return diagnostics


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line INFO summary, then `startup_diagnostics` at DEBUG."""
    logger.info("CRUDCONTRACT %s, console=%s", app_version, logging.getLevelName(level))
    for key, value in startup_diagnostics(handlers, logger_levels).items():
        logger.debug("%s: %s", key, value)
