"""Contract tests for the `destroy` action.

Behavior under test:
    - with a valid id, the record is fetched with `find(str(id))` and destroyed,
      HTML redirects to the collection index and XML answers 200
    - with an unknown id, HTML redirects to the collection index and XML
      answers 404
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from crudcontract.config import INVALID_RECORD_ID

if TYPE_CHECKING:
    from crudcontract.doubles import CrudFixture
    from crudcontract.interfaces.controller_client import (
        ControllerClient,
        ControllerResponse,
    )

# pylint: disable=redefined-outer-name, unused-argument


def _delete_destroy(
    client: ControllerClient, record_id: object, fmt: str = "html"
) -> ControllerResponse:
    return client.delete("destroy", id=record_id, format=fmt)


class TestDestroyWithValidId:
    """DELETE destroy for an existing record."""

    @pytest.fixture(autouse=True)
    def _destroy_succeeds(self, crud: CrudFixture) -> None:
        crud.resource.destroy.return_value = True
        crud.stub_find(returns=crud.resource)

    @staticmethod
    def test_destroy_finds_requested_record(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """The record is looked up by its id in string form."""
        _delete_destroy(crud_client, crud.resource.id)
        crud.stubbed("find").assert_called_once_with(str(crud.resource.id))

    @staticmethod
    def test_destroy_destroys_record(crud: CrudFixture, crud_client: ControllerClient):
        """The record is destroyed."""
        _delete_destroy(crud_client, crud.resource.id)
        crud.resource.destroy.assert_called_once_with()

    @staticmethod
    def test_destroy_redirects_to_index_via_html(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML redirects to the collection index."""
        response = _delete_destroy(crud_client, crud.resource.id)
        assert response.redirects_to(crud.names.index_path), response.location

    @staticmethod
    def test_destroy_is_200_via_xml(crud: CrudFixture, crud_client: ControllerClient):
        """Requesting XML answers 200 OK."""
        response = _delete_destroy(crud_client, crud.resource.id, "xml")
        assert response.status_code == 200


class TestDestroyWithInvalidId:
    """DELETE destroy for a record that does not exist."""

    @pytest.fixture(autouse=True)
    def _find_raises_not_found(self, crud: CrudFixture) -> None:
        crud.stub_find_not_found()

    @staticmethod
    def test_destroy_missing_redirects_to_index_via_html(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML redirects to the collection index."""
        response = _delete_destroy(crud_client, INVALID_RECORD_ID)
        assert response.redirects_to(crud.names.index_path), response.location

    @staticmethod
    def test_destroy_missing_is_404_via_xml(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting XML answers 404 Not Found."""
        response = _delete_destroy(crud_client, INVALID_RECORD_ID, "xml")
        assert response.status_code == 404
