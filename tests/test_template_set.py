import pytest
from jinja2 import DictLoader, Environment

from config import ConfigError
from ui.template_set import VIEWS, EXTENSION_KEY, TemplateNotRegistered, TemplateSet


def test_app_loads_every_view(app):
    template_set = app.extensions[EXTENSION_KEY]
    assert template_set.names == frozenset(VIEWS)
    assert "landing" in template_set


def test_missing_template_file_is_a_config_error():
    env = Environment(loader=DictLoader({"landing.html": "hi"}))
    with pytest.raises(ConfigError, match="help.html"):
        TemplateSet.load(env, {"landing": "landing.html", "help": "help.html"})


def test_unregistered_view_raises(app):
    template_set = app.extensions[EXTENSION_KEY]
    with app.test_request_context("/"):
        with pytest.raises(TemplateNotRegistered):
            template_set.render("index")


def test_render_registered_view(app):
    template_set = app.extensions[EXTENSION_KEY]
    with app.test_request_context("/"):
        html = template_set.render("error", code=418, message="short and stout")
    assert "Error 418" in html
    assert "short and stout" in html


def test_set_is_read_only(app):
    template_set = app.extensions[EXTENSION_KEY]
    with pytest.raises(TypeError):
        template_set._templates["extra"] = None


def test_unregistered_view_in_a_handler_is_a_500(app, monkeypatch):
    monkeypatch.setattr("ui.routes_pages.render_view",
                        lambda name, **ctx: app.extensions[EXTENSION_KEY].render("landing_v2"))
    resp = app.test_client().get("/help")
    assert resp.status_code == 500
