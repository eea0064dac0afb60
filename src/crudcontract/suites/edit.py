"""Contract tests for the `edit` action.

Behavior under test:
    - with a valid id, the record is fetched with `find(str(id))` and HTML
      renders the `edit` view successfully
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


def _get_edit(
    client: ControllerClient, record_id: object, fmt: str = "html"
) -> ControllerResponse:
    return client.get("edit", id=record_id, format=fmt)


class TestEditWithValidId:
    """GET edit for an existing record."""

    @pytest.fixture(autouse=True)
    def _find_returns_resource(self, crud: CrudFixture) -> None:
        crud.stub_find(returns=crud.resource)

    @staticmethod
    def test_edit_finds_requested_record(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """The record is looked up by its id in string form."""
        _get_edit(crud_client, crud.resource.id)
        crud.stubbed("find").assert_called_once_with(str(crud.resource.id))

    @staticmethod
    def test_edit_renders_edit_view(crud: CrudFixture, crud_client: ControllerClient):
        """Requesting HTML renders the `edit` view."""
        response = _get_edit(crud_client, crud.resource.id)
        assert response.rendered_view == "edit"

    @staticmethod
    def test_edit_is_successful(crud: CrudFixture, crud_client: ControllerClient):
        """The action answers with a 2xx status."""
        response = _get_edit(crud_client, crud.resource.id)
        assert response.is_success, f"unexpected status {response.status_code}"


class TestEditWithInvalidId:
    """GET edit for a record that does not exist."""

    @pytest.fixture(autouse=True)
    def _find_raises_not_found(self, crud: CrudFixture) -> None:
        crud.stub_find_not_found()

    @staticmethod
    def test_edit_missing_redirects_to_index_via_html(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML redirects to the collection index."""
        response = _get_edit(crud_client, INVALID_RECORD_ID)
        assert response.redirects_to(crud.names.index_path), response.location

    @staticmethod
    def test_edit_missing_is_404_via_xml(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting XML answers 404 Not Found."""
        response = _get_edit(crud_client, INVALID_RECORD_ID, "xml")
        assert response.status_code == 404
