"""Configuration constants and helpers for CRUDCONTRACT.

This module centralizes the canned values the doubles answer with and the
route prefix the controllers under test are mounted at.
"""

import os

ROUTE_PREFIX_ENV = "CRUDCONTRACT_ROUTE_PREFIX"  # pragma: no mutate
DEFAULT_ROUTE_PREFIX = "/admin"

DEFAULT_RECORD_ID = 1
INVALID_RECORD_ID = -1
CANNED_XML = "XML"
DEFAULT_COUNT = 10

# Parameter maps submitted by the create and update suites.
CREATE_PARAMS = {"title": "test", "key": "value"}
UPDATE_PARAMS = {"title": "test"}


def normalize_route_prefix(prefix: str) -> str:
    """Return `prefix` with exactly one leading slash and no trailing slash.

    An empty or all-slash prefix normalizes to `""` (controllers mounted at
    the application root).

    Examples:
        >>> normalize_route_prefix("admin/")
        '/admin'
        >>> normalize_route_prefix("/")
        ''
    """
    stripped = prefix.strip().strip("/")
    return f"/{stripped}" if stripped else ""


def get_route_prefix() -> str:
    """Get the route prefix from the environment.

    Returns:
        The normalized value of `CRUDCONTRACT_ROUTE_PREFIX`, or
        `DEFAULT_ROUTE_PREFIX` when the variable is unset.
    """
    if (prefix := os.environ.get(ROUTE_PREFIX_ENV)) is None:
        return DEFAULT_ROUTE_PREFIX
    return normalize_route_prefix(prefix)
