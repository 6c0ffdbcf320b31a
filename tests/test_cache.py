"""Tests for the resolution cache."""

from qwsite import ResolutionCache


def test_fetch_computes_once():
    cache = ResolutionCache()
    calls = []

    def factory():
        calls.append(1)
        return "value"

    assert cache.fetch("op", "a", {"x": 1}, factory=factory) == "value"
    assert cache.fetch("op", "a", {"x": 1}, factory=factory) == "value"
    assert len(calls) == 1


def test_option_order_does_not_matter():
    cache = ResolutionCache()
    cache.fetch("op", "a", {"x": 1, "y": 2}, factory=lambda: "first")

    assert cache.fetch("op", "a", {"y": 2, "x": 1}, factory=lambda: "second") == "first"
    assert ("op", "a", {"y": 2, "x": 1}) in cache


def test_none_is_cached():
    cache = ResolutionCache()
    calls = []

    def factory():
        calls.append(1)
        return None

    cache.fetch("op", "missing", {}, factory=factory)
    cache.fetch("op", "missing", {}, factory=factory)
    assert len(calls) == 1


def test_clear():
    cache = ResolutionCache()
    cache.fetch("op", "a", {}, factory=lambda: 1)
    assert len(cache) == 1

    cache.clear()
    assert len(cache) == 0
    assert cache.fetch("op", "a", {}, factory=lambda: 2) == 2
