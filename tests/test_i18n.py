"""Tests for locale loading and lookup."""

import json

import pytest

from momi_site.pages.i18n import PAGE_NAMESPACES, load_translations, resolve_locale, translate


def test_resolve_locale():
    assert resolve_locale("ko") == "ko"
    assert resolve_locale("fr") == "en"
    assert resolve_locale(None) == "en"


def test_bundled_locales_have_common():
    for locale in ("en", "zh", "ko"):
        strings = load_translations(locale)
        assert translate(strings, "navigation.home") != "navigation.home"


def test_translate_nested():
    strings = load_translations("ko", ["common"])
    assert translate(strings, "navigation.home") == "홈"


def test_translate_missing_key():
    strings = load_translations("en", ["common"])
    assert translate(strings, "navigation.nowhere") == "navigation.nowhere"
    assert translate(strings, "navigation.nowhere", "Fallback") == "Fallback"
    # A non-leaf key is not a string
    assert translate(strings, "navigation") == "navigation"


def test_missing_namespace_falls_back_to_default_locale(tmp_path):
    (tmp_path / "en").mkdir()
    (tmp_path / "en" / "home.json").write_text(json.dumps({"title": "Welcome"}), encoding="utf-8")
    (tmp_path / "zh").mkdir()

    strings = load_translations("zh", ["home", "common"], locales_dir=tmp_path)
    assert translate(strings, "title", namespace="home") == "Welcome"
    assert strings["common"] == {}


def test_unknown_namespace():
    with pytest.raises(ValueError):
        load_translations("en", ["nope"])


def test_page_namespaces_are_loadable():
    for namespaces in PAGE_NAMESPACES.values():
        strings = load_translations("en", namespaces)
        assert "common" in strings
