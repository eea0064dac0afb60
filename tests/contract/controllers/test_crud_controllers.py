"""Contract tests for the sample admin CRUD controllers.

Every shared suite runs once per resource parametrized in `conftest.py`, which
shows one set of assertions covering controllers bound to different models.
"""

# ruff: noqa: F403
# pylint: disable=wildcard-import, unused-wildcard-import
from crudcontract.suites.create import *
from crudcontract.suites.destroy import *
from crudcontract.suites.edit import *
from crudcontract.suites.index import *
from crudcontract.suites.show import *
from crudcontract.suites.update import *
