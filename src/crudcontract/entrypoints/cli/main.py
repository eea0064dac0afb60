"""crudcontract CLI entry point.

Defines the top-level ``crudcontract`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``crudcontract names``    show the naming variants derived for a resource.
- ``crudcontract scaffold`` write contract tests for one controller.

Examples
    $ crudcontract --version
    $ crudcontract names LineItem
    $ crudcontract scaffold Asset -n shop.models --app shop.web:create_app
"""

import logging

import click
import click_extra as clickx

from crudcontract import __version__
from crudcontract.logging import configure_logging, log_startup, verbosity_level

from .helpers import parse_log_level
from .names import names as names_command
from .scaffold import scaffold as scaffold_command

logger = logging.getLogger(__name__)


HELP = """crudcontract command-line interface.

    crudcontract ships shared contract tests for the index, show, create, update,
    destroy and edit actions of CRUD controllers. These commands inspect the
    names a resource is known by and scaffold the test modules that adopt the
    suites for a controller.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
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
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L werkzeug=INFO -L crudcontract.naming=DEBUG) or via "
        "CRUDCONTRACT_LOGGER_LEVELS (comma/space list)."
    ),
    default=("werkzeug=WARNING",),
    envvar="CRUDCONTRACT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def crudcontract(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """crudcontract command-line interface."""

    level = verbosity_level(verbose_count, quiet_count)
    handlers = configure_logging(
        level,
        debug=debug,
        # None or True allows color
        color=ctx.color is not False,
        logger_levels=logger_levels,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


crudcontract.add_command(names_command)
crudcontract.add_command(scaffold_command)
