"""Unit tests for crudcontract.adapters.flask_client.

A tiny inline Flask app stands in for a controller so that routing, form
encoding, template capture and flash handling are checked in isolation.
"""

import pytest
from flask import Flask, flash, redirect, render_template, request, template_rendered

from crudcontract.adapters.flask_client import (
    FlaskControllerClient,
    captured_templates,
    nest_params,
)
from crudcontract.naming import derive_names

# pylint: disable=redefined-outer-name


@pytest.fixture
def names():
    return derive_names("Asset", resolve=False, route_prefix="/admin")


@pytest.fixture
def app(tmp_path):
    (tmp_path / "index.html").write_text("{% for a in assets %}{{ a }};{% endfor %}")
    (tmp_path / "edit.html").write_text("editing {{ asset_id }}")

    app = Flask(__name__, template_folder=str(tmp_path))
    app.secret_key = "unit-tests"
    app.config["received"] = []

    @app.route("/admin/assets", methods=["GET", "POST"])
    def collection():
        app.config["received"].append(
            (request.method, request.args.get("format"), request.form.to_dict())
        )
        if request.method == "POST":
            flash("Created", "notice")
            if request.form.get("asset[twice]"):
                flash("Indexed", "notice")
                flash("Check the title", "alert")
            return redirect("/admin/assets/5/edit")
        return render_template("index.html", assets=["a", "b"])

    @app.route("/admin/assets/<asset_id>", methods=["GET", "PUT", "DELETE"])
    def member(asset_id):
        return f"{request.method} {asset_id} {request.args.get('format')}"

    @app.route("/admin/assets/<asset_id>/edit")
    def edit(asset_id):
        return render_template("edit.html", asset_id=asset_id)

    return app


@pytest.fixture
def client(app, names):
    return FlaskControllerClient(app, names)


def test_nest_params():
    """Fields are nested under the resource key."""
    assert nest_params("line_item", {"title": "t", "key": "v"}) == {
        "line_item[title]": "t",
        "line_item[key]": "v",
    }


def test_index_captures_template(client, app):
    """The last rendered template and its variables are captured."""
    response = client.get("index")

    assert response.status_code == 200
    assert response.body == "a;b;"
    assert response.template == "index.html"
    assert response.rendered_view == "index"
    assert response.assigns["assets"] == ["a", "b"]
    assert app.config["received"] == [("GET", "html", {})]


def test_format_travels_as_query_parameter(client):
    """The requested format reaches the view as `format`."""
    response = client.get("show", id=3, format="xml")

    assert response.body == "GET 3 xml"
    assert response.template is None
    assert response.assigns == {}


@pytest.mark.parametrize("method, action", [("PUT", "update"), ("DELETE", "destroy")])
def test_member_methods(client, method, action):
    """Member actions use their HTTP method and the record id."""
    response = client.request(action, id=1)
    assert response.body == f"{method} 1 html"


def test_edit_path(client):
    response = client.get("edit", id=9)

    assert response.rendered_view == "edit"
    assert response.assigns["asset_id"] == "9"


def test_create_posts_nested_form_and_does_not_follow_redirect(client, app):
    """Params are nested form fields; the redirect is returned as is."""
    response = client.post("create", params={"title": "test"})

    assert app.config["received"] == [("POST", "html", {"asset[title]": "test"})]
    assert response.status_code == 302
    assert response.redirects_to("/admin/assets/5/edit")
    assert response.template is None


def test_flash_is_read_once(client):
    """Flash messages are returned with the response that set them."""
    assert client.post("create", params={}).notice == "Created"
    assert client.get("index").flash == {}


def test_no_secret_key_means_no_flash(app, names):
    """Apps without sessions report no flash messages."""
    app.secret_key = None
    response = FlaskControllerClient(app, names).get("index")

    assert response.is_success
    assert response.flash == {}


def test_captured_templates_disconnects(app):
    """The signal receiver only lives inside the context."""
    with app.test_request_context(), captured_templates(app) as rendered:
        render_template("edit.html", asset_id=1)

    assert [template.name for template, _ in rendered] == ["edit.html"]
    assert not template_rendered.has_receivers_for(app)


def test_repeated_flashes_are_all_kept(client):
    """Every message is kept, grouped by category in flashing order."""
    response = client.post("create", params={"twice": "yes"})

    assert response.flash == {
        "notice": ["Created", "Indexed"],
        "alert": ["Check the title"],
    }
    assert response.notice == "Indexed"
