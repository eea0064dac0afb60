"""Interfaces (ports) the suites depend on.

Concrete implementations live in `crudcontract.adapters`.
"""
