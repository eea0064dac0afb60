"""`ControllerClient` backed by Flask's test client.

Requests are routed Rails-style under the resource's index path:

| action    | request                          |
|-----------|----------------------------------|
| `index`   | `GET    /admin/assets`           |
| `show`    | `GET    /admin/assets/<id>`      |
| `create`  | `POST   /admin/assets`           |
| `update`  | `PUT    /admin/assets/<id>`      |
| `destroy` | `DELETE /admin/assets/<id>`      |
| `edit`    | `GET    /admin/assets/<id>/edit` |

The requested format travels as the `format` query parameter, and a parameter
map is sent as form fields named `<singular_key>[<field>]`. Redirects are not
followed. Rendered templates are captured through Flask's `template_rendered`
signal, and flash messages are read from the session (the app needs a
`secret_key` for flashing to work at all).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from flask import template_rendered

from crudcontract.interfaces.controller_client import (
    Action,
    ControllerClient,
    ControllerResponse,
)

if TYPE_CHECKING:
    from flask import Flask
    from jinja2 import Template

    from crudcontract.naming import ResourceNames

logger = logging.getLogger(__name__)

FLASHES_SESSION_KEY = "_flashes"


def nest_params(key: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Encode `params` as form fields nested under `key`.

    Example:
        >>> nest_params("asset", {"title": "test"})
        {'asset[title]': 'test'}
    """
    return {f"{key}[{name}]": value for name, value in params.items()}


@contextmanager
def captured_templates(app: Flask) -> Iterator[list[tuple[Template, dict[str, Any]]]]:
    """Record every template `app` renders while the context is active."""
    recorded: list[tuple[Template, dict[str, Any]]] = []

    def record(sender, template, context, **extra):  # pylint: disable=unused-argument
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


class FlaskControllerClient(ControllerClient):
    """Drive one resource's controller in a Flask app."""

    def __init__(self, app: Flask, names: ResourceNames) -> None:
        self.app = app
        self.names = names
        self._client = app.test_client()

    def request(
        self,
        action: Action | str,
        *,
        id: object = None,  # pylint: disable=redefined-builtin
        format: str = "html",  # pylint: disable=redefined-builtin
        params: Mapping[str, Any] | None = None,
    ) -> ControllerResponse:
        action = Action.parse(action)
        path = action.path(self.names, id)
        data = nest_params(self.names.singular_key, params) if params is not None else None
        logger.debug("%s %s format=%s params=%r", action.method, path, format, params)

        with captured_templates(self.app) as rendered:
            response = self._client.open(
                path,
                method=action.method,
                query_string={"format": format},
                data=data,
                follow_redirects=False,
            )

        template, assigns = rendered[-1] if rendered else (None, {})
        return ControllerResponse(
            status_code=response.status_code,
            body=response.get_data(as_text=True),
            template=template.name if template is not None else None,
            assigns=dict(assigns),
            location=response.headers.get("Location"),
            flash=self._pop_flashes(),
        )

    def _pop_flashes(self) -> dict[str, list[str]]:
        """Read and clear the flash messages left in the session, by category."""
        if not self.app.secret_key:
            return {}
        with self._client.session_transaction() as session:
            flashes = session.pop(FLASHES_SESSION_KEY, [])
        grouped: dict[str, list[str]] = {}
        for category, message in flashes:
            grouped.setdefault(category, []).append(message)
        return grouped
