"""End-to-end rendering of examples/hello-site."""

from pathlib import Path

import pytest

from qwsite import Application

EXAMPLE = Path(__file__).parent.parent / "examples" / "hello-site" / "qwsite.yaml"


@pytest.fixture
def app():
    return Application.from_config_file(EXAMPLE)


def test_index_is_wrapped_in_layout(app):
    html = app.render("index.html", {"name": "Ada"})

    assert '<html lang="en">' in html
    assert "<h1>Hello, Ada!</h1>" in html


def test_lang_option(app):
    html = app.render("index.html", options={"lang": "de"})

    assert '<html lang="de">' in html
    assert app.locale.get() == "en"


def test_mustache_page_uses_jinja_layout(app):
    html = app.render("about.html", {"name": "qwsite", "title": "About"})

    assert "<title>About</title>" in html
    assert "<p>About qwsite</p>" in html


def test_explicit_layout(app):
    html = app.render("index.html", options={"layout": "plain"})

    assert html.startswith("<pre><h1>Hello, world!</h1>")


def test_chained_stylesheet(app):
    css = app.render("style.css", {"color": "teal"}, {"layout": False})

    assert css.strip() == "body { color: teal; margin: 8px; }"


def test_static_feed_is_not_wrapped(app):
    feed = app.render("feed.xml")

    assert "<html" not in feed
    assert feed.strip() == '<rss version="2.0"></rss>'
