"""Shared contract suites for CRUD controller actions.

Each module holds the tests for one action. A project adopts them for a
controller by wildcard-importing the modules into a test module and providing
two fixtures, usually in the neighboring `conftest.py`:

- `crud_names`: the controller's `ResourceNames` (see `derive_names`).
- `crud_client`: a `ControllerClient` for the controller.

The `crud` fixture used by every suite comes from `crudcontract.pytest_plugin`,
which pytest loads automatically once crudcontract is installed.

Example:
    ```py
    # tests/controllers/assets/test_assets_controller.py
    # ruff: noqa: F403
    # pylint: disable=wildcard-import, unused-wildcard-import
    from crudcontract.suites.index import *
    from crudcontract.suites.show import *
    from crudcontract.suites.create import *
    from crudcontract.suites.update import *
    from crudcontract.suites.destroy import *
    from crudcontract.suites.edit import *
    ```
"""

SUITES = ("index", "show", "create", "update", "destroy", "edit")
