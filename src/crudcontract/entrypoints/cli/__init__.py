"""The `crudcontract` command-line interface."""
