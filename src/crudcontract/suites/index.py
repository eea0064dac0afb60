"""Contract tests for the `index` action.

Behavior under test:
    - all records are fetched with `find_all()` and no filter
    - the response succeeds and renders the `index` view
    - the collection is assigned under the plural key
    - `format=xml` answers with exactly the collection's `to_xml()`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crudcontract.doubles import CrudFixture
    from crudcontract.interfaces.controller_client import (
        ControllerClient,
        ControllerResponse,
    )

# pylint: disable=redefined-outer-name, unused-argument


def _get_index(client: ControllerClient, fmt: str = "html") -> ControllerResponse:
    return client.get("index", format=fmt)


class TestIndex:
    """GET index."""

    @staticmethod
    def test_index_finds_all_records(crud: CrudFixture, crud_client: ControllerClient):
        """The action fetches every record with an unfiltered `find_all()`."""
        _get_index(crud_client)
        crud.stubbed("find_all").assert_called_once_with()

    @staticmethod
    def test_index_is_successful(crud: CrudFixture, crud_client: ControllerClient):
        """The action answers with a 2xx status."""
        response = _get_index(crud_client)
        assert response.is_success, f"unexpected status {response.status_code}"

    @staticmethod
    def test_index_renders_index_view(crud: CrudFixture, crud_client: ControllerClient):
        """The action renders the `index` view."""
        response = _get_index(crud_client)
        assert response.rendered_view == "index"

    @staticmethod
    def test_index_assigns_collection(crud: CrudFixture, crud_client: ControllerClient):
        """The records are assigned to the view under the plural key."""
        response = _get_index(crud_client)
        assert response.assigns[crud.names.plural_key] == crud.collection

    @staticmethod
    def test_index_renders_collection_xml(
        crud: CrudFixture, crud_client: ControllerClient
    ):
        """Requesting XML answers with the collection's serialized XML."""
        response = _get_index(crud_client, "xml")
        crud.collection.to_xml.assert_called_once_with()
        assert response.body == crud.collection.to_xml.return_value
