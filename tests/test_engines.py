"""Tests for the built-in engines and the registry."""

import pytest

from qwsite import SiteConfig, TemplateError
from qwsite.engines import (
    EngineRegistry,
    InterpEngine,
    JinjaEngine,
    MustacheEngine,
    default_registry,
    last_extension,
)
from qwsite.engines.interp import interpolate
from tests.conftest import write


def test_last_extension():
    assert last_extension("a/b.css.j2") == "j2"
    assert last_extension("a/b") == ""
    assert last_extension("a.d/b") == ""


def test_default_registry_maps_extensions():
    registry = default_registry()

    assert registry.names() == ["jinja", "interp", "mustache"]
    assert registry.engine_for("j2").name == "jinja"
    assert registry.engine_for(".hbs").name == "mustache"
    assert registry.engine_for_path("x/page.html.tpl").name == "interp"
    assert registry.engine_for_path("page.html") is None
    assert registry.is_template("page.mustache")
    assert not registry.is_template("page")


def test_extensions_for_engine_id_or_extension():
    registry = default_registry()

    assert registry.extensions_for("jinja") == ["j2", "jinja", "jinja2"]
    assert registry.extensions_for("hbs") == ["mustache", "hbs"]
    assert registry.extensions_for("erb") == []
    assert "interp" in registry
    assert "erb" not in registry


def test_register_with_explicit_extensions():
    registry = EngineRegistry()
    registry.register(InterpEngine(), ["txt", ".text"])

    assert registry.extensions_for("interp") == ["txt", "text"]
    assert registry.engine_for_path("notes.text").name == "interp"
    assert registry.engine_for("tpl") is None


# --- Jinja ---


def test_jinja_embeds_content():
    engine = JinjaEngine()
    assert engine.embeds_content("<main>{{ yield_content() }}</main>")
    assert not engine.embeds_content("<main>{{ content }}</main>")


def test_jinja_block_is_exposed_as_callable():
    engine = JinjaEngine()
    out = engine.render("[{{ yield_content() }}]", {}, block="<p>x</p>")
    assert out == "[<p>x</p>]"


def test_jinja_includes_relative_to_searchpath(tmp_path):
    write(tmp_path, "partials/nav.j2", "nav:{{ title }}")
    engine = JinjaEngine(tmp_path)

    assert engine.render("{% include 'partials/nav.j2' %}", {"title": "T"}) == "nav:T"


def test_jinja_environment_options_from_config(tmp_path):
    config = SiteConfig(
        base_dir=tmp_path, engines={"jinja": {"options": {"trim_blocks": True}}}
    )
    jinja = default_registry(config).get("jinja")

    assert jinja.env.trim_blocks is True
    assert jinja.env.keep_trailing_newline is True


# --- Interp ---


def test_interpolate_nested_lookup():
    out = interpolate("Hello ${{ site.name }}", {"site": {"name": "world"}})
    assert out == "Hello world"


def test_interpolate_calls_callables():
    assert interpolate("${{ now }}", {"now": lambda: "today"}) == "today"


def test_interpolate_undefined_variable():
    with pytest.raises(TemplateError, match="site.missing"):
        interpolate("${{ site.missing }}", {"site": {}})


def test_interpolate_falls_back_to_attributes(tmp_path):
    out = interpolate("${{ page.path.name }}", {"page": {"path": tmp_path / "a.html"}})
    assert out == "a.html"


def test_interpolate_leaves_plain_braces():
    assert interpolate("{{ keep }}", {}) == "{{ keep }}"


def test_interp_embeds_content():
    engine = InterpEngine()
    assert engine.embeds_content("<div>${{ yield_content }}</div>")
    assert not engine.embeds_content("<div>${{ title }}</div>")
    assert engine.render("<${{ yield_content }}>", {}, block="b") == "<b>"


# --- Mustache ---


def test_mustache_renders_and_embeds():
    engine = MustacheEngine()
    assert engine.render("Hi {{ name }}", {"name": "Bob"}) == "Hi Bob"
    assert engine.embeds_content("<div>{{{ yield_content }}}</div>")
    assert not engine.embeds_content("<div>yield_content</div>")
    assert engine.render("<{{{ yield_content }}}>", {}, block="<i>") == "<<i>>"


def test_mustache_calls_helpers_but_keeps_section_lambdas():
    engine = MustacheEngine()

    def shout(text, render):
        return render(text).upper()

    out = engine.render(
        "{{ current_locale }}/{{#shout}}{{ name }}{{/shout}}",
        {"current_locale": lambda: "en", "shout": shout, "name": "bob"},
    )
    assert out == "en/BOB"
