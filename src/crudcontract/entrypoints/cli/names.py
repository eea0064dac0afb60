"""`crudcontract names`: show the names derived for a resource."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from crudcontract.errors import CrudContractError
from crudcontract.naming import ResourceNames, derive_names


def names_table(names: ResourceNames) -> Table:
    """Render a names bundle as a two-column Rich table."""
    model_class = names.model_class
    table = Table(title=f"{names.model_name} resource names")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("value")
    table.add_row("model_name", names.model_name)
    table.add_row(
        "model_class",
        f"{model_class.__module__}.{model_class.__qualname__}"
        if model_class is not None
        else "<unresolved>",
    )
    table.add_row("symbol", names.symbol)
    table.add_row("human_plural", names.human_plural)
    table.add_row("singular_key", names.singular_key)
    table.add_row("plural_key", names.plural_key)
    table.add_row("index_path", names.index_path)
    table.add_row("edit_path", names.edit_path("<id>"))
    return table


@click.command()
@click.argument("model")
@click.option(
    "--namespace",
    "-n",
    help="Module the model class is defined in. Enables class resolution.",
)
@click.option(
    "--route-prefix",
    help="Prefix the controller is mounted under.",
    envvar="CRUDCONTRACT_ROUTE_PREFIX",
    show_envvar=True,
)
def names(model: str, namespace: str | None, route_prefix: str | None) -> None:
    """Show the naming variants derived from MODEL.

    MODEL is a resource name such as `Asset`, `line_items` or a dotted path
    such as `shop.models:LineItem`.
    """
    resolve = namespace is not None or ":" in model or "." in model
    try:
        derived = derive_names(
            model, namespace=namespace, route_prefix=route_prefix, resolve=resolve
        )
    except CrudContractError as e:
        raise click.ClickException(str(e)) from e
    Console().print(names_table(derived))
