"""Pytest fixtures for the CRUD controller contract tests.

Provided fixtures
-----------------
- **crud_names**: Parametrized over the sample resources. Returns the names
  bundle of the controller under test.
- **crud_not_found**: The model's own `DoesNotExist`, so each controller is
  driven with the exception it actually catches.
- **crud_client**: A Flask client for a fresh admin app mounted at the
  configured route prefix.
"""

from __future__ import annotations

import pytest

from crudcontract.adapters.flask_client import FlaskControllerClient
from crudcontract.interfaces.controller_client import ControllerClient
from crudcontract.naming import ResourceNames, derive_names
from tests.helpers import models
from tests.helpers.admin_app import create_admin_app

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["Asset", "LineItem"])
def crud_names(request: pytest.FixtureRequest, crud_route_prefix: str) -> ResourceNames:
    """Return the names of the resource whose controller is under test.

    Current params:
      - `"Asset"`    → `/admin/assets`
      - `"LineItem"` → `/admin/line_items`

    Extend by adding model names defined in `tests.helpers.models`.
    """
    return derive_names(request.param, namespace=models, route_prefix=crud_route_prefix)


@pytest.fixture
def crud_not_found(crud_names: ResourceNames) -> type[Exception]:
    """Return the not-found exception the resource's controller catches."""
    return crud_names.model_class.DoesNotExist


@pytest.fixture
def crud_client(crud_names: ResourceNames) -> ControllerClient:
    """Return a client for the resource's controller in a fresh admin app."""
    app = create_admin_app(route_prefix=crud_names.route_prefix)
    return FlaskControllerClient(app, crud_names)
