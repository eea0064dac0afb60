"""Unit tests for crudcontract.doubles."""

from unittest import mock

import pytest

from crudcontract.config import CANNED_XML, DEFAULT_COUNT
from crudcontract.doubles import (
    CollectionDouble,
    make_errors_double,
    make_new_double,
    make_resource_double,
    setup_crud,
)
from crudcontract.errors import (
    ModelResolutionError,
    RecordNotFound,
    StubNotInstalledError,
)
from crudcontract.naming import derive_names

# pylint: disable=redefined-outer-name


class Gizmo:
    """Model class owned by this module so stubs never leak elsewhere."""

    @classmethod
    def find_all(cls):
        return []

    @classmethod
    def find(cls, record_id):
        return f"real {record_id}"

    @classmethod
    def count(cls):
        return 0


class GizmoMissing(RecordNotFound):
    """Custom not-found condition."""


@pytest.fixture
def names():
    return derive_names(Gizmo, route_prefix="/admin")


def test_resource_double(names):
    """A resource double has an id, canned XML and the mock flag."""
    double = make_resource_double(names, record_id=7, xml="<gizmo/>", title="x")

    assert double.id == 7
    assert double.mock_object is True
    assert double.to_xml() == "<gizmo/>"
    assert double.title == "x"


def test_collection_double_tracks_to_xml(names):
    """The collection is a one-element list with its own to_xml()."""
    resource = make_resource_double(names)
    collection = CollectionDouble([resource], xml="<gizmos/>")

    assert list(collection) == [resource]
    assert collection.to_xml() == "<gizmos/>"
    collection.to_xml.assert_called_once_with()


def test_errors_double_is_empty_but_serializable():
    """The errors double iterates as empty and answers with canned XML."""
    errors = make_errors_double()

    assert list(errors) == []
    assert errors.full_messages() == []
    assert errors.to_xml() == CANNED_XML


def test_new_double(names):
    """The double returned by new() reports the configured save outcome."""
    errors = make_errors_double(xml="<errors/>")
    double = make_new_double(names, saved=False, errors=errors)

    assert double.save() is False
    assert double.errors is errors
    assert make_new_double(names, saved=True).save() is True


def test_setup_crud_stubs_collection_operations(names, monkeypatch):
    """find_all() and count() are stubbed for every example."""
    crud = setup_crud(names, monkeypatch)

    assert Gizmo.find_all() is crud.collection
    assert Gizmo.count() == DEFAULT_COUNT
    assert crud.collection == [crud.resource]
    assert crud.stubbed("find_all") is Gizmo.find_all
    assert crud.not_found is RecordNotFound


def test_stub_find_variants(names, monkeypatch):
    """find() can be made to return a record or raise not-found."""
    crud = setup_crud(names, monkeypatch, not_found=GizmoMissing)

    crud.stub_find(crud.resource)
    assert Gizmo.find("1") is crud.resource

    crud.stub_find_not_found()
    with pytest.raises(GizmoMissing):
        Gizmo.find("-1")
    crud.stubbed("find").assert_called_once_with("-1")


def test_stub_new(names, monkeypatch):
    """new() returns the given double."""
    crud = setup_crud(names, monkeypatch)
    double = make_new_double(names, saved=True)

    crud.stub_new(double)

    assert Gizmo.new({"title": "test"}) is double


def test_stubbed_requires_a_stub(names, monkeypatch):
    """Asking for an operation that was never stubbed is an error."""
    crud = setup_crud(names, monkeypatch)

    with pytest.raises(StubNotInstalledError, match="Gizmo.find has not been stubbed"):
        crud.stubbed("find")
    with pytest.raises(StubNotInstalledError):
        crud.stubbed("destroy_all")


def test_stubs_are_undone(names):
    """Undoing the monkeypatch restores the model class."""
    patcher = pytest.MonkeyPatch()
    try:
        crud = setup_crud(names, patcher)
        crud.stub_find(crud.resource)
        assert isinstance(Gizmo.find, mock.Mock)
    finally:
        patcher.undo()

    assert Gizmo.find("1") == "real 1"
    assert Gizmo.find_all() == []
    assert Gizmo.count() == 0


def test_setup_crud_requires_a_model_class(monkeypatch):
    """Unresolved names cannot be stubbed."""
    names = derive_names("Gadget", resolve=False)

    with pytest.raises(ModelResolutionError, match="Gadget"):
        setup_crud(names, monkeypatch)
