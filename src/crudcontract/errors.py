"""Errors raised by CRUDCONTRACT."""


class CrudContractError(Exception):
    """Base class for all crudcontract errors."""


class RecordNotFound(CrudContractError):
    """Default record-not-found condition raised by a stubbed finder.

    Controllers under test are expected to translate it into a redirect to the
    collection index (HTML) or a 404 (XML). Projects whose ORM raises its own
    exception override the `crud_not_found` fixture instead.
    """


class ModelResolutionError(CrudContractError):
    """Raised when a resource name cannot be resolved to a model class."""

    def __init__(self, name: str, namespace: object | None = None) -> None:
        self.name = name
        self.namespace = namespace
        where = f" in {namespace!r}" if namespace is not None else ""
        super().__init__(f"Cannot resolve model class {name!r}{where}")


class UnknownActionError(CrudContractError):
    """Raised when an action name is not one of the CRUD actions."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Unknown CRUD action: {action!r}")


class ActionMethodMismatchError(CrudContractError):
    """Raised when an action is requested with the wrong HTTP method."""

    def __init__(self, action: str, method: str, expected: str) -> None:
        self.action = action
        self.method = method
        self.expected = expected
        super().__init__(
            f"Action {action!r} is routed with {expected}, not {method}"
        )


class StubNotInstalledError(CrudContractError):
    """Raised when asserting on a class-level operation that was never stubbed."""

    def __init__(self, model: str, operation: str) -> None:
        self.model = model
        self.operation = operation
        super().__init__(f"{model}.{operation} has not been stubbed")
