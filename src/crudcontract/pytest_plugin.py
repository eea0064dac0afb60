"""pytest plugin wiring the CRUD contract suites.

pytest loads it through the `pytest11` entry point as soon as crudcontract is
installed; run with `-p no:crudcontract` to disable it.

Provided fixtures
-----------------
- **crud_route_prefix**: Prefix the controllers are mounted under. Taken from
  the `crud_route_prefix` ini option, else `CRUDCONTRACT_ROUTE_PREFIX`, else
  `/admin`.
- **crud_not_found**: Exception type a finder raises for a missing record.
  Defaults to `RecordNotFound`; override it with the ORM's own exception.
- **crud**: A fresh `CrudFixture` per test, built by `setup_crud`.

Required fixtures (supplied by the project)
-------------------------------------------
- **crud_names**: `ResourceNames` of the controller under test.
- **crud_client**: `ControllerClient` for the controller under test.

Every test defined in a `crudcontract.suites` module is marked
`crud_contract`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from crudcontract.config import get_route_prefix, normalize_route_prefix
from crudcontract.doubles import setup_crud
from crudcontract.errors import RecordNotFound

if TYPE_CHECKING:
    from crudcontract.doubles import CrudFixture
    from crudcontract.naming import ResourceNames

# pylint: disable=redefined-outer-name, unused-argument

# Suite modules are imported from site-packages; make their asserts informative.
pytest.register_assert_rewrite("crudcontract.suites")

logger = logging.getLogger(__name__)

MARKER_NAME = "crud_contract"
SUITES_PACKAGE = "crudcontract.suites"
ROUTE_PREFIX_INI = "crud_route_prefix"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the `crud_route_prefix` ini option."""
    parser.addini(
        ROUTE_PREFIX_INI,
        help="Route prefix CRUD controllers are mounted under (default: /admin).",
        default=None,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the `crud_contract` marker."""
    config.addinivalue_line(
        "markers", f"{MARKER_NAME}: test defined by a crudcontract shared suite"
    )


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `crud_contract` mark to tests defined in a suite module."""
    for item in items:
        function = getattr(item, "function", None)
        module = getattr(function, "__module__", "") or ""
        if module.startswith(SUITES_PACKAGE):
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.crud_contract)


@pytest.fixture
def crud_route_prefix(pytestconfig: pytest.Config) -> str:
    """Return the route prefix the controllers under test are mounted at."""
    if configured := pytestconfig.getini(ROUTE_PREFIX_INI):
        return normalize_route_prefix(configured)
    return get_route_prefix()


@pytest.fixture
def crud_not_found() -> type[Exception]:
    """Return the exception a finder raises for a missing record."""
    return RecordNotFound


@pytest.fixture
def crud(
    crud_names: ResourceNames,
    crud_not_found: type[Exception],
    monkeypatch: pytest.MonkeyPatch,
) -> CrudFixture:
    """Return fresh doubles for `crud_names` with the model class stubbed.

    Stubs are installed through `monkeypatch`, so nothing outlives the test.
    """
    logger.debug("Setting up CRUD doubles for %s", crud_names.model_name)
    return setup_crud(crud_names, monkeypatch, not_found=crud_not_found)
