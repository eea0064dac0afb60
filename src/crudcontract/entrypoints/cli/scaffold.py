"""`crudcontract scaffold`: write contract tests for one controller.

Two files are written into the output directory:

- `conftest.py` providing the `crud_names` and `crud_client` fixtures for the
  resource, with the client built from the given Flask app factory, and a
  `crud_not_found` fixture when `--not-found` names the controller's
  not-found exception.
- `test_<plural_key>_controller.py` wildcard-importing the chosen suites.

Existing files are left untouched unless `--force` is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from crudcontract.errors import CrudContractError
from crudcontract.naming import ResourceNames, derive_names
from crudcontract.suites import SUITES

from .helpers import success, warn

logger = logging.getLogger(__name__)

CONFTEST_TEMPLATE = '''\
"""Fixtures for the {plural_key} controller contract tests."""

import pytest

from crudcontract.adapters.flask_client import FlaskControllerClient
from crudcontract.naming import derive_names
from {app_module} import {app_factory}
{not_found_import}

@pytest.fixture
def crud_names(crud_route_prefix):
    """Names of the {model_name} resource."""
    return derive_names(
        "{model_name}", namespace="{namespace}", route_prefix=crud_route_prefix
    )


@pytest.fixture
def crud_client(crud_names):
    """Client for the {plural_key} controller."""
    return FlaskControllerClient({app_factory}(), crud_names)
{not_found_fixture}'''

NOT_FOUND_FIXTURE = '''

@pytest.fixture
def crud_not_found():
    """Exception the {plural_key} controller catches for a missing record."""
    return {not_found}
'''

TEST_MODULE_TEMPLATE = '''\
"""Contract tests for the {plural_key} controller."""

# ruff: noqa: F403
# pylint: disable=wildcard-import, unused-wildcard-import
{imports}
'''


def _split_reference(value: str, *, expected: str, param_hint: str) -> tuple[str, str]:
    module, sep, attr = value.partition(":")
    if not sep or not module or not attr:
        raise click.BadParameter(
            f"Expected {expected}, got {value!r}", param_hint=param_hint
        )
    return module, attr


def render_files(
    names: ResourceNames,
    *,
    namespace: str,
    app: str,
    actions: tuple[str, ...],
    not_found: str | None = None,
) -> dict[str, str]:
    """Return the scaffolded file names mapped to their contents.

    `not_found` names the exception the controller catches for a missing
    record as `MODULE:NAME` (`NAME` may be dotted, e.g. `Asset.DoesNotExist`);
    it becomes a `crud_not_found` fixture.
    """
    app_module, app_factory = _split_reference(
        app, expected="MODULE:FACTORY", param_hint="--app"
    )
    not_found_import = not_found_fixture = ""
    if not_found is not None:
        nf_module, nf_name = _split_reference(
            not_found, expected="MODULE:NAME", param_hint="--not-found"
        )
        not_found_import = f"from {nf_module} import {nf_name.partition('.')[0]}\n"
        not_found_fixture = NOT_FOUND_FIXTURE.format(
            plural_key=names.plural_key, not_found=nf_name
        )
    imports = "\n".join(
        f"from crudcontract.suites.{action} import *"
        for action in SUITES
        if action in actions
    )
    return {
        "conftest.py": CONFTEST_TEMPLATE.format(
            plural_key=names.plural_key,
            model_name=names.model_name,
            namespace=namespace,
            app_module=app_module,
            app_factory=app_factory,
            not_found_import=not_found_import,
            not_found_fixture=not_found_fixture,
        ),
        f"test_{names.plural_key}_controller.py": TEST_MODULE_TEMPLATE.format(
            plural_key=names.plural_key, imports=imports
        ),
    }


@click.command()
@click.argument("model")
@click.option(
    "--namespace",
    "-n",
    required=True,
    help="Module the model class is defined in (e.g. shop.models).",
)
@click.option(
    "--app",
    "app",
    required=True,
    help="Flask app factory as MODULE:FACTORY (e.g. shop.web:create_app).",
)
@click.option(
    "--action",
    "-a",
    "actions",
    type=click.Choice(SUITES, case_sensitive=False),
    multiple=True,
    help="Suite to include. Repeatable; defaults to every suite.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write into. Defaults to tests/controllers/<plural_key>.",
)
@click.option(
    "--not-found",
    "not_found",
    help=(
        "Exception the controller catches for a missing record, as MODULE:NAME "
        "(e.g. shop.models:Asset.DoesNotExist). Defaults to RecordNotFound."
    ),
)
@click.option("--force", is_flag=True, help="Overwrite existing files.")
def scaffold(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    model: str,
    namespace: str,
    app: str,
    actions: tuple[str, ...],
    output: Path | None,
    not_found: str | None,
    force: bool,
) -> None:
    """Write contract tests adopting the CRUD suites for MODEL's controller."""
    try:
        names = derive_names(model, resolve=False)
    except CrudContractError as e:
        raise click.ClickException(str(e)) from e

    chosen = tuple(a.lower() for a in actions) or SUITES
    files = render_files(
        names, namespace=namespace, app=app, actions=chosen, not_found=not_found
    )
    directory = output or Path("tests") / "controllers" / names.plural_key
    directory.mkdir(parents=True, exist_ok=True)

    for filename, content in files.items():
        path = directory / filename
        if path.exists() and not force:
            warn(f"{path} exists, skipping (use --force to overwrite).")
            continue
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(content), path)
        success(f"Wrote {path}")
