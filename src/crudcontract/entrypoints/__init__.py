"""Entrypoints (inbound adapters) for crudcontract.

Expose the library to the outside world through the `crudcontract` command.
"""
