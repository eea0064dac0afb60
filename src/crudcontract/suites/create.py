"""Contract tests for the `create` action.

Behavior under test:
    - with valid params, `new(params)` receives exactly the submitted map, the
      record is saved, HTML redirects to the new record's edit form and XML
      answers with the new record's `to_xml()`
    - with invalid params, HTML renders the `new` view and XML answers with the
      validation errors' `to_xml()`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from crudcontract.config import CREATE_PARAMS
from crudcontract.doubles import make_errors_double, make_new_double

if TYPE_CHECKING:
    from unittest import mock

    from crudcontract.doubles import CrudFixture
    from crudcontract.interfaces.controller_client import (
        ControllerClient,
        ControllerResponse,
    )

# pylint: disable=redefined-outer-name, unused-argument


def _post_create(client: ControllerClient, fmt: str = "html") -> ControllerResponse:
    return client.post("create", params=dict(CREATE_PARAMS), format=fmt)


class TestCreateWithValidParams:
    """POST create with params that pass validation."""

    @pytest.fixture(autouse=True)
    def new_record(self, crud: CrudFixture) -> mock.Mock:
        """The record `new()` builds; its `save()` succeeds."""
        double = make_new_double(crud.names, saved=True)
        crud.stub_new(double)
        return double

    @staticmethod
    def test_create_builds_record_from_params(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """`new()` receives exactly the submitted parameter map."""
        _post_create(crud_client)
        crud.stubbed("new").assert_called_once_with(CREATE_PARAMS)

    @staticmethod
    def test_create_saves_record(crud_client: ControllerClient, new_record: mock.Mock):
        """The new record is saved."""
        _post_create(crud_client)
        new_record.save.assert_called_once_with()

    @staticmethod
    def test_create_redirects_to_edit_form_via_html(
        crud: CrudFixture, crud_client: ControllerClient, new_record: mock.Mock
    ):
        """Requesting HTML redirects to the new record's edit form."""
        response = _post_create(crud_client)
        assert response.redirects_to(crud.names.edit_path(new_record.id)), (
            response.location
        )

    @staticmethod
    def test_create_renders_record_xml(
        crud_client: ControllerClient, new_record: mock.Mock
    ):
        """Requesting XML answers with the new record's serialized XML."""
        response = _post_create(crud_client, "xml")
        new_record.to_xml.assert_called_once_with()
        assert response.body == new_record.to_xml.return_value


class TestCreateWithInvalidParams:
    """POST create with params that fail validation."""

    @pytest.fixture(autouse=True)
    def invalid_errors(self, crud: CrudFixture) -> mock.MagicMock:
        """Validation errors of the unsaved record."""
        errors = make_errors_double()
        crud.stub_new(make_new_double(crud.names, saved=False, errors=errors))
        return errors

    @staticmethod
    def test_create_invalid_renders_new_view(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML renders the `new` form again."""
        response = _post_create(crud_client)
        assert response.rendered_view == "new"

    @staticmethod
    def test_create_invalid_renders_errors_xml(
        crud_client: ControllerClient, invalid_errors: mock.MagicMock
    ):
        """Requesting XML answers with the validation errors' serialized XML."""
        response = _post_create(crud_client, "xml")
        invalid_errors.to_xml.assert_called_once_with()
        assert response.body == invalid_errors.to_xml.return_value
