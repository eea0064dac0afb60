"""Contract tests for the `update` action.

Behavior under test:
    - with valid params, the record is fetched with `find(str(id))`, receives
      exactly the submitted map in `update_attributes()`, HTML redirects to the
      collection index with a `notice` flash and XML answers 200
    - with invalid params, HTML renders the `edit` view and XML answers with the
      validation errors' `to_xml()`
    - when the record does not exist, HTML redirects to the collection index
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from crudcontract.config import UPDATE_PARAMS
from crudcontract.doubles import make_errors_double

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any
    from unittest import mock

    from crudcontract.doubles import CrudFixture
    from crudcontract.interfaces.controller_client import (
        ControllerClient,
        ControllerResponse,
    )

# pylint: disable=redefined-outer-name, unused-argument


def _put_update(
    client: ControllerClient,
    record_id: object,
    params: Mapping[str, Any],
    fmt: str = "html",
) -> ControllerResponse:
    return client.put("update", id=record_id, params=dict(params), format=fmt)


class TestUpdateWithValidParams:
    """PUT update with params that pass validation."""

    @pytest.fixture(autouse=True)
    def _update_succeeds(self, crud: CrudFixture) -> None:
        crud.resource.update_attributes.return_value = True
        crud.stub_find(returns=crud.resource)

    @staticmethod
    def test_update_finds_record(crud: CrudFixture, crud_client: ControllerClient):
        """The record is looked up by its id in string form."""
        _put_update(crud_client, crud.resource.id, UPDATE_PARAMS)
        crud.stubbed("find").assert_called_once_with(str(crud.resource.id))

    @staticmethod
    def test_update_saves_submitted_attributes(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """`update_attributes()` receives exactly the submitted map."""
        _put_update(crud_client, crud.resource.id, UPDATE_PARAMS)
        crud.resource.update_attributes.assert_called_once_with(UPDATE_PARAMS)

    @staticmethod
    def test_update_redirects_to_index_with_notice_via_html(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML redirects to the collection index with a notice."""
        response = _put_update(crud_client, crud.resource.id, UPDATE_PARAMS)
        assert response.redirects_to(crud.names.index_path), response.location
        assert response.notice is not None

    @staticmethod
    def test_update_is_200_via_xml(crud: CrudFixture, crud_client: ControllerClient):
        """Requesting XML answers 200 OK."""
        response = _put_update(crud_client, crud.resource.id, UPDATE_PARAMS, "xml")
        assert response.status_code == 200


class TestUpdateWithInvalidParams:
    """PUT update with params that fail validation."""

    @pytest.fixture(autouse=True)
    def invalid_errors(self, crud: CrudFixture) -> mock.MagicMock:
        """Validation errors of the record that failed to update."""
        errors = make_errors_double()
        crud.resource.errors = errors
        crud.resource.update_attributes.return_value = False
        crud.stub_find(returns=crud.resource)
        return errors

    @staticmethod
    def test_update_missing_redirects_to_index(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """A record that does not exist redirects to the collection index."""
        crud.stub_find_not_found()
        response = _put_update(crud_client, crud.resource.id, {})
        assert response.redirects_to(crud.names.index_path), response.location

    @staticmethod
    def test_update_invalid_renders_edit_view(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML renders the `edit` form again."""
        response = _put_update(crud_client, crud.resource.id, {})
        assert response.rendered_view == "edit"

    @staticmethod
    def test_update_invalid_renders_errors_xml(
        crud: CrudFixture,
        crud_client: ControllerClient,
        invalid_errors: mock.MagicMock,
    ):
        """Requesting XML answers with the validation errors' serialized XML."""
        response = _put_update(crud_client, crud.resource.id, {}, "xml")
        invalid_errors.to_xml.assert_called_once_with()
        assert response.body == invalid_errors.to_xml.return_value
