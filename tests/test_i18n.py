"""Tests for locale accessors and the scoped switch."""

import threading

import pytest

from qwsite import ContextLocale, GlobalLocale, switch_locale


def test_switch_and_restore():
    locale = GlobalLocale("en")

    with switch_locale(locale, "de") as current:
        assert current == "de"
        assert locale.get() == "de"
    assert locale.get() == "en"


def test_restore_on_error():
    locale = GlobalLocale("en")

    with pytest.raises(RuntimeError):
        with switch_locale(locale, "de"):
            raise RuntimeError("boom")
    assert locale.get() == "en"


def test_no_lang_keeps_locale_but_restores_nested_changes():
    locale = GlobalLocale("en")

    with switch_locale(locale, None):
        assert locale.get() == "en"
        locale.set("fr")
    assert locale.get() == "en"


def test_nested_switches():
    locale = GlobalLocale("en")

    with switch_locale(locale, "de"):
        with switch_locale(locale, "ja"):
            assert locale.get() == "ja"
        assert locale.get() == "de"
    assert locale.get() == "en"


def test_without_accessor_is_noop():
    with switch_locale(None, "de") as current:
        assert current is None


def test_context_locale_is_per_thread():
    locale = ContextLocale("en")
    seen = []

    def worker():
        with switch_locale(locale, "de"):
            seen.append(locale.get())

    with switch_locale(locale, "fr"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        assert locale.get() == "fr"

    assert seen == ["de"]
    assert locale.get() == "en"
