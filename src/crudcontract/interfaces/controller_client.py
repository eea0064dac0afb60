"""Interface for driving a CRUD controller from a test.

The suites never talk to a web framework directly. They issue requests through
a `ControllerClient` and assert on the `ControllerResponse` it returns, which
captures everything observable about one request: status code, body, rendered
template, assigned view variables, redirect target and flash messages.
"""

from __future__ import annotations

import abc
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from crudcontract.errors import ActionMethodMismatchError, UnknownActionError

if TYPE_CHECKING:
    from crudcontract.naming import ResourceNames


class Action(enum.Enum):
    """The CRUD actions and how they are routed.

    Each member's value is `(http_method, needs_id, path_suffix)`.
    """

    INDEX = ("GET", False, "")
    SHOW = ("GET", True, "")
    CREATE = ("POST", False, "")
    UPDATE = ("PUT", True, "")
    DESTROY = ("DELETE", True, "")
    EDIT = ("GET", True, "/edit")

    def __init__(self, method: str, needs_id: bool, suffix: str) -> None:
        self.method = method
        self.needs_id = needs_id
        self.suffix = suffix

    @classmethod
    def parse(cls, action: Action | str) -> Action:
        """Return the member named `action` (case-insensitive).

        Raises:
            UnknownActionError: If `action` names no CRUD action.
        """
        if isinstance(action, Action):
            return action
        try:
            return cls[action.upper()]
        except KeyError as e:
            raise UnknownActionError(action) from e

    def path(self, names: ResourceNames, record_id: object = None) -> str:
        """Return the request path of this action for a resource.

        Raises:
            ValueError: If the action needs an id and none was given.
        """
        if not self.needs_id:
            return names.index_path
        if record_id is None:
            raise ValueError(f"action {self.name.lower()!r} requires an id")
        return f"{names.member_path(record_id)}{self.suffix}"


@dataclass(frozen=True)
class ControllerResponse:
    """Observable outcome of one controller request.

    Attributes:
        status_code: HTTP status code.
        body: Response body as text.
        template: Name of the last template rendered, or None.
        assigns: View variables passed to that template.
        location: Raw `Location` header, or None.
        flash: Flash messages keyed by category (e.g. `"notice"`), each a
            list in the order the messages were flashed.
    """

    status_code: int
    body: str = ""
    template: str | None = None
    assigns: Mapping[str, Any] = field(default_factory=dict)
    location: str | None = None
    flash: Mapping[str, list[str]] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """True for a 2xx status."""
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        """True for a 3xx status carrying a `Location` header."""
        return 300 <= self.status_code < 400 and self.location is not None

    @property
    def redirect_path(self) -> str | None:
        """Path component of the redirect target, or None if not a redirect."""
        if not self.is_redirect:
            return None
        return urlsplit(self.location).path

    @property
    def rendered_view(self) -> str | None:
        """Bare view name of the rendered template (`admin/edit.html` -> `edit`)."""
        if self.template is None:
            return None
        return PurePosixPath(self.template).name.split(".", 1)[0]

    @property
    def notice(self) -> str | None:
        """The last `notice` flash message, if any."""
        messages = self.flash.get("notice")
        return messages[-1] if messages else None

    def redirects_to(self, path: str) -> bool:
        """True if the response redirects to exactly `path`."""
        return self.redirect_path == path


class ControllerClient(abc.ABC):
    """Contract for issuing requests to one resource's CRUD controller."""

    @abc.abstractmethod
    def request(
        self,
        action: Action | str,
        *,
        id: object = None,  # pylint: disable=redefined-builtin
        format: str = "html",  # pylint: disable=redefined-builtin
        params: Mapping[str, Any] | None = None,
    ) -> ControllerResponse:
        """Issue one request for a CRUD action.

        Args:
            action: The action (or its name) to invoke.
            id: Record id for member actions.
            format: Requested representation, `"html"` or `"xml"`.
            params: Attribute map submitted nested under the resource's
                singular key.

        Returns:
            The observable outcome of the request.
        """

    def _dispatch(
        self, method: str, action: Action | str, **kwargs: Any
    ) -> ControllerResponse:
        parsed = Action.parse(action)
        if parsed.method != method:
            raise ActionMethodMismatchError(parsed.name.lower(), method, parsed.method)
        return self.request(parsed, **kwargs)

    def get(self, action: Action | str, **kwargs: Any) -> ControllerResponse:
        """Issue a GET request for `action`."""
        return self._dispatch("GET", action, **kwargs)

    def post(self, action: Action | str, **kwargs: Any) -> ControllerResponse:
        """Issue a POST request for `action`."""
        return self._dispatch("POST", action, **kwargs)

    def put(self, action: Action | str, **kwargs: Any) -> ControllerResponse:
        """Issue a PUT request for `action`."""
        return self._dispatch("PUT", action, **kwargs)

    def delete(self, action: Action | str, **kwargs: Any) -> ControllerResponse:
        """Issue a DELETE request for `action`."""
        return self._dispatch("DELETE", action, **kwargs)
