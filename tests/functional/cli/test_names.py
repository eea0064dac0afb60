"""CLI tests for `crudcontract names`."""

import pytest

from crudcontract.entrypoints.cli.main import crudcontract


def test_unresolved_names(runner):
    """A bare name without a namespace is derived but not resolved."""
    result = runner.invoke(crudcontract, ["names", "line_items"])

    assert result.exit_code == 0, result.output
    for value in (
        "LineItem",
        "<unresolved>",
        "Line items",
        "line_item",
        "line_items",
        "/admin/line_items",
        "/admin/line_items/<id>/edit",
    ):
        assert value in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["names", "Asset", "-n", "tests.helpers.models"],
        ["names", "tests.helpers.models:Asset"],
    ],
    ids=["namespace", "dotted-path"],
)
def test_resolved_names(runner, args):
    """A namespace or dotted path resolves the model class."""
    result = runner.invoke(crudcontract, args)

    assert result.exit_code == 0, result.output
    assert "tests.helpers.models.Asset" in result.output
    assert "/admin/assets" in result.output


@pytest.mark.parametrize(
    "env, cli_args",
    [({}, ["--route-prefix", "backoffice/"]), ({"CRUDCONTRACT_ROUTE_PREFIX": "/backoffice"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_route_prefix(runner, env, cli_args):
    result = runner.invoke(crudcontract, ["names", "Asset", *cli_args], env=env)

    assert result.exit_code == 0, result.output
    assert "/backoffice/assets" in result.output


def test_unresolvable_model_fails(runner):
    """Resolution failures are reported as CLI errors."""
    result = runner.invoke(crudcontract, ["names", "Gadget", "-n", "tests.helpers.models"])

    assert result.exit_code == 1
    assert "Cannot resolve model class 'Gadget'" in result.output
