"""Global pytest fixtures for crudcontract.

`crudcontract.pytest_plugin` is loaded through its `pytest11` entry point.
"""

pytest_plugins = ["pytester"]
