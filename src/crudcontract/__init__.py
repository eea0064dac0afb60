"""CRUDCONTRACT

Reusable contract tests for the standard REST actions of generated CRUD
controllers. One canonical set of suites (index, show, create, update, destroy,
edit) runs against any controller once the controller's resource names and a
client are provided as pytest fixtures.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
