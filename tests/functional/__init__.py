"""Functional tests.

Scope
- The `crudcontract` CLI as a user runs it.
- Whole pytest sessions adopting the suites, run through `pytester`.
"""
