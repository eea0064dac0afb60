"""Contract tests for the `show` action.

Behavior under test:
    - with a valid id, the record is fetched with `find(str(id))`, HTML renders
      the `show` view and XML answers with the record's `to_xml()`
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


def _get_show(
    client: ControllerClient, record_id: object, fmt: str = "html"
) -> ControllerResponse:
    return client.get("show", id=record_id, format=fmt)


class TestShowWithValidId:
    """GET show for an existing record."""

    @pytest.fixture(autouse=True)
    def _find_returns_resource(self, crud: CrudFixture) -> None:
        crud.stub_find(returns=crud.resource)

    @staticmethod
    def test_show_finds_requested_record(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """The record is looked up by its id in string form."""
        _get_show(crud_client, crud.resource.id)
        crud.stubbed("find").assert_called_once_with(str(crud.resource.id))

    @staticmethod
    def test_show_renders_show_view(crud: CrudFixture, crud_client: ControllerClient):
        """Requesting HTML renders the `show` view."""
        response = _get_show(crud_client, crud.resource.id)
        assert response.rendered_view == "show"

    @staticmethod
    def test_show_renders_record_xml(crud: CrudFixture, crud_client: ControllerClient):
        """Requesting XML answers with the record's serialized XML."""
        response = _get_show(crud_client, crud.resource.id, "xml")
        crud.resource.to_xml.assert_called_once_with()
        assert response.body == crud.resource.to_xml.return_value


class TestShowWithInvalidId:
    """GET show for a record that does not exist."""

    @pytest.fixture(autouse=True)
    def _find_raises_not_found(self, crud: CrudFixture) -> None:
        crud.stub_find_not_found()

    @staticmethod
    def test_show_missing_redirects_to_index_via_html(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting HTML redirects to the collection index."""
        response = _get_show(crud_client, INVALID_RECORD_ID)
        assert response.redirects_to(crud.names.index_path), response.location

    @staticmethod
    def test_show_missing_is_404_via_xml(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting XML answers 404 Not Found."""
        response = _get_show(crud_client, INVALID_RECORD_ID, "xml")
        assert response.status_code == 404
