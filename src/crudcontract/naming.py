"""Derive the naming variants a CRUD controller's resource is known by.

A controller bound to the `LineItem` model is reached under
`/admin/line_items`, exposes its records to views as `line_items` and
`line_item`, and receives form parameters nested under `line_item`. All of these
forms are computed once from the single resource name by `derive_names` and
passed to the suites as a `ResourceNames` bundle.

Example:
    ```py
    names = derive_names("LineItem", namespace="shop.models")
    names.plural_key         # "line_items"
    names.index_path         # "/admin/line_items"
    names.edit_path(1)       # "/admin/line_items/1/edit"
    ```
"""

from __future__ import annotations

import importlib
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any

import inflect

from crudcontract.config import get_route_prefix, normalize_route_prefix
from crudcontract.errors import ModelResolutionError

logger = logging.getLogger(__name__)

Namespace = ModuleType | Mapping[str, type] | str

_INFLECT = inflect.engine()

_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z\d])([A-Z])")
_SEPARATOR_RE = re.compile(r"[\s\-]+")
_CLASS_NAME_RE = re.compile(r"[A-Z][A-Za-z\d]*")

# Endings inflect would wrongly strip from singular words.
_SINGULAR_ENDINGS = ("ss", "us", "is")


# --- Inflections ---


def underscore(word: str) -> str:
    """Convert a CamelCase (or dashed/spaced) word to snake_case.

    Examples:
        >>> underscore("LineItem")
        'line_item'
        >>> underscore("HTTPRequest")
        'http_request'
    """
    word = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2", word.strip())
    word = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", word)
    return _SEPARATOR_RE.sub("_", word).lower()


def camelize(word: str) -> str:
    """Convert a snake_case word to CamelCase, keeping inner capitals."""
    return "".join(part[:1].upper() + part[1:] for part in word.split("_") if part)


def pluralize(word: str) -> str:
    """Return the plural of the last `_`-separated segment of `word`."""
    head, _, last = word.rpartition("_")
    plural = _INFLECT.plural_noun(last) if last else last
    return f"{head}_{plural}" if head else plural


def singularize(word: str) -> str:
    """Return the singular of the last `_`-separated segment of `word`.

    Words that are already singular are returned unchanged: a candidate is
    accepted only when it pluralizes back to the word, and words ending in
    `-ss`, `-us` or `-is` (`address`, `status`, `analysis`) are kept as is.
    """
    head, _, last = word.rpartition("_")
    singular = last
    if last and not last.endswith(_SINGULAR_ENDINGS):
        candidate = _INFLECT.singular_noun(last)
        if candidate and _INFLECT.plural_noun(candidate) == last:
            singular = candidate
    return f"{head}_{singular}" if head else singular


def classify(name: str) -> str:
    """Return the model class name for a (possibly plural) resource name.

    CamelCase names are class names already and are returned unchanged.

    Examples:
        >>> classify("line_items")
        'LineItem'
        >>> classify("Address")
        'Address'
    """
    if _CLASS_NAME_RE.fullmatch(name):
        return name
    return camelize(singularize(underscore(name)))


def humanize(word: str) -> str:
    """Return a snake_case word as capitalized, space separated text."""
    text = word.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


# --- Class resolution ---


def _split_dotted(name: str) -> tuple[str, str] | None:
    """Split `pkg.mod:Class` or `pkg.mod.Class` into module and attribute."""
    if ":" in name:
        module, _, attr = name.partition(":")
        return module, attr
    if "." in name:
        module, _, attr = name.rpartition(".")
        return module, attr
    return None


def resolve_model(name: str, namespace: Namespace | None = None) -> type:
    """Resolve a model class name to the class itself.

    Args:
        name: A class name (looked up in `namespace`) or a dotted path such as
            `shop.models:LineItem` / `shop.models.LineItem`.
        namespace: A module, an importable module name, or a mapping of class
            names to classes.

    Returns:
        The resolved class.

    Raises:
        ModelResolutionError: If the class cannot be found or is not a class.
    """
    try:
        if (dotted := _split_dotted(name)) is not None:
            module_name, attr = dotted
            found: Any = getattr(importlib.import_module(module_name), attr)
        elif namespace is None:
            raise ModelResolutionError(name)
        elif isinstance(namespace, Mapping):
            found = namespace[name]
        elif isinstance(namespace, str):
            found = getattr(importlib.import_module(namespace), name)
        else:
            found = getattr(namespace, name)
    except (ImportError, AttributeError, KeyError) as e:
        raise ModelResolutionError(name, namespace) from e

    if not isinstance(found, type):
        raise ModelResolutionError(name, namespace)
    return found


# --- Names bundle ---


@dataclass(frozen=True)
class ResourceNames:  # pylint: disable=too-many-instance-attributes
    """Naming variants of one CRUD resource.

    For an `AssetsController` these are:

    | attribute      | value      |
    |----------------|------------|
    | `model_name`   | `"Asset"`  |
    | `model_class`  | `Asset`    |
    | `symbol`       | `"Asset"`  |
    | `human_plural` | `"Assets"` |
    | `singular_key` | `"asset"`  |
    | `plural_key`   | `"assets"` |
    | `route_prefix` | `"/admin"` |
    """

    model_name: str
    model_class: type | None
    symbol: str
    human_plural: str
    singular_key: str
    plural_key: str
    route_prefix: str = "/admin"

    @property
    def route_segment(self) -> str:
        """Path segment the controller is mounted under."""
        return self.plural_key

    @property
    def index_path(self) -> str:
        """Collection index path, e.g. `/admin/assets`."""
        return f"{self.route_prefix}/{self.route_segment}"

    def member_path(self, record_id: object) -> str:
        """Path of one record, e.g. `/admin/assets/1`."""
        return f"{self.index_path}/{record_id}"

    def edit_path(self, record_id: object) -> str:
        """Path of a record's edit form, e.g. `/admin/assets/1/edit`."""
        return f"{self.member_path(record_id)}/edit"


def derive_names(
    model: str | type,
    *,
    namespace: Namespace | None = None,
    route_prefix: str | None = None,
    resolve: bool = True,
) -> ResourceNames:
    """Derive the `ResourceNames` bundle for a resource.

    Args:
        model: The canonical singular resource name (`"Asset"`), any
            underscored or plural spelling of it (`"assets"`, `"line_item"`), a
            dotted path (`"shop.models:LineItem"`) or the model class itself.
        namespace: Where to look the class up when `model` is a bare name.
        route_prefix: Prefix the controller is mounted under. Defaults to
            `get_route_prefix()`.
        resolve: When False, skip class resolution and leave `model_class`
            as None.

    Returns:
        The derived names. Repeated calls with the same arguments return equal
        bundles.

    Raises:
        ModelResolutionError: If `resolve` is True and the class cannot be
            resolved.
    """
    model_class: type | None
    if isinstance(model, type):
        model_class = model
        model_name = model.__name__
    else:
        dotted = _split_dotted(model)
        model_name = classify(dotted[1] if dotted else model)
        lookup = model if dotted else model_name
        model_class = resolve_model(lookup, namespace) if resolve else None

    singular_key = underscore(model_name)
    plural_key = pluralize(singular_key)
    prefix = (
        get_route_prefix()
        if route_prefix is None
        else normalize_route_prefix(route_prefix)
    )

    names = ResourceNames(
        model_name=model_name,
        model_class=model_class,
        symbol=model_name,
        human_plural=humanize(plural_key),
        singular_key=singular_key,
        plural_key=plural_key,
        route_prefix=prefix,
    )
    logger.debug("Derived names for %s: %s", model_name, names)
    return names
