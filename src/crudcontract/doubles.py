"""Test doubles standing in for a CRUD controller's model.

`setup_crud` is the per-test setup of the suites: it builds a resource double,
wraps it in a one-element collection double, and installs class-level stand-ins
on the model class through pytest's `monkeypatch` so every stub is undone at the
end of the test. Suites then re-stub individual class-level operations (`find`,
`new`) for their branch before invoking the action under test.

All stand-ins are `unittest.mock` objects, so call counts and arguments are
available to the suites' assertions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from unittest import mock

from crudcontract.config import CANNED_XML, DEFAULT_COUNT, DEFAULT_RECORD_ID
from crudcontract.errors import (
    ModelResolutionError,
    RecordNotFound,
    StubNotInstalledError,
)

if TYPE_CHECKING:
    from pytest import MonkeyPatch

    from crudcontract.naming import ResourceNames

logger = logging.getLogger(__name__)


class CollectionDouble(list):
    """Stand-in for the result of a model's `find_all()`.

    A list of resource doubles with its own tracked `to_xml()`.
    """

    def __init__(self, items: list[Any], *, xml: str = CANNED_XML) -> None:
        super().__init__(items)
        self.to_xml = mock.Mock(name="collection.to_xml", return_value=xml)


def make_resource_double(
    names: ResourceNames,
    *,
    record_id: int = DEFAULT_RECORD_ID,
    xml: str = CANNED_XML,
    **attrs: Any,
) -> mock.Mock:
    """Build a stand-in for one persisted record.

    Args:
        names: Names of the resource the double stands in for.
        record_id: Identity of the record.
        xml: Canned response of `to_xml()`.
        **attrs: Additional attributes or canned responses, passed to `Mock`.

    Returns:
        A `Mock` with `id`, `to_xml()` and a `mock_object` flag set.
    """
    double = mock.Mock(name=names.model_name, id=record_id, mock_object=True, **attrs)
    double.to_xml.return_value = xml
    return double


def make_collection_double(
    resource: mock.Mock, *, xml: str = CANNED_XML
) -> CollectionDouble:
    """Wrap `resource` in a one-element `CollectionDouble`."""
    return CollectionDouble([resource], xml=xml)


def make_errors_double(*, xml: str = CANNED_XML) -> mock.MagicMock:
    """Build a stand-in for a failed validation's error collection.

    It iterates as empty, `full_messages()` returns `[]` and `to_xml()` returns
    `xml`.
    """
    errors = mock.MagicMock(name="errors")
    errors.__iter__.return_value = []
    errors.full_messages.return_value = []
    errors.to_xml.return_value = xml
    return errors


def make_new_double(
    names: ResourceNames,
    *,
    saved: bool,
    errors: mock.MagicMock | None = None,
    record_id: int = DEFAULT_RECORD_ID,
    xml: str = CANNED_XML,
) -> mock.Mock:
    """Build the double returned by the model's class-level `new()`.

    Args:
        names: Names of the resource.
        saved: What `save()` reports.
        errors: Validation errors exposed as `errors`; a fresh errors double is
            used when omitted.
        record_id: Identity the record gets once saved.
        xml: Canned response of `to_xml()`.
    """
    double = make_resource_double(names, record_id=record_id, xml=xml)
    double.save.return_value = saved
    double.errors = errors if errors is not None else make_errors_double()
    return double


@dataclass
class CrudFixture:  # pylint: disable=too-many-instance-attributes
    """Everything a suite needs for one test example.

    Attributes:
        names: Naming variants of the resource.
        model_class: The model class carrying the class-level stand-ins.
        resource: Stand-in for one persisted record.
        collection: Stand-in for the result of `find_all()`.
        count: Canned result of `count()`.
        not_found: Exception type a finder raises for a missing record.
    """

    names: ResourceNames
    model_class: type
    resource: mock.Mock
    collection: CollectionDouble
    count: int
    not_found: type[Exception]
    monkeypatch: MonkeyPatch = field(repr=False)

    def stub(self, operation: str, **config: Any) -> mock.Mock:
        """Install a tracked stand-in for a class-level operation.

        Args:
            operation: Name of the class attribute to replace (e.g. `"find"`).
            **config: `Mock` configuration such as `return_value` or
                `side_effect`.

        Returns:
            The installed `Mock`.
        """
        stand_in = mock.Mock(name=f"{self.names.model_name}.{operation}", **config)
        self.monkeypatch.setattr(self.model_class, operation, stand_in)
        logger.debug("Stubbed %s.%s with %r", self.names.model_name, operation, config)
        return stand_in

    def stub_find(self, returns: Any) -> mock.Mock:
        """Make `find(id)` return `returns`."""
        return self.stub("find", return_value=returns)

    def stub_find_not_found(self) -> mock.Mock:
        """Make `find(id)` raise the record-not-found condition."""
        return self.stub("find", side_effect=self.not_found)

    def stub_new(self, double: mock.Mock) -> mock.Mock:
        """Make `new(params)` return `double`."""
        return self.stub("new", return_value=double)

    def stubbed(self, operation: str) -> mock.Mock:
        """Return the stand-in installed for a class-level operation.

        Raises:
            StubNotInstalledError: If `operation` was never stubbed.
        """
        stand_in = getattr(self.model_class, operation, None)
        if not isinstance(stand_in, mock.Mock):
            raise StubNotInstalledError(self.names.model_name, operation)
        return stand_in


def setup_crud(
    names: ResourceNames,
    monkeypatch: MonkeyPatch,
    *,
    not_found: type[Exception] = RecordNotFound,
    record_id: int = DEFAULT_RECORD_ID,
    xml: str = CANNED_XML,
    count: int = DEFAULT_COUNT,
) -> CrudFixture:
    """Build the doubles for one test example and stub the model class.

    `find_all()` returns the collection double unconditionally and `count()`
    returns `count`. Both are undone by `monkeypatch` at the end of the test.

    Raises:
        ModelResolutionError: If `names` carries no model class.
    """
    if names.model_class is None:
        raise ModelResolutionError(names.model_name)

    resource = make_resource_double(names, record_id=record_id, xml=xml)
    crud = CrudFixture(
        names=names,
        model_class=names.model_class,
        resource=resource,
        collection=make_collection_double(resource, xml=xml),
        count=count,
        not_found=not_found,
        monkeypatch=monkeypatch,
    )
    crud.stub("find_all", return_value=crud.collection)
    crud.stub("count", return_value=count)
    return crud
