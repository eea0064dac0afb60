"""Adapters implementing `crudcontract.interfaces` for concrete web frameworks."""
