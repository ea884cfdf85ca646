"""Locale resolution and translation lookup."""

import json
import logging
from pathlib import Path

from momi_site.config import DEFAULT_LOCALE, DEFAULT_NAMESPACE, LOCALES, LOCALES_DIR, NAMESPACES

logger = logging.getLogger(__name__)

# Namespaces each page needs
PAGE_NAMESPACES: dict[str, list[str]] = {
    "home": ["common", "home"],
    "gallery": ["common", "gallery"],
    "photographers": ["common", "photographers"],
    "collections": ["common", "collections"],
    "campaigns": ["common"],
    "magazine": ["common"],
    "contact": ["common"],
}


def resolve_locale(locale: str | None) -> str:
    """Return ``locale`` if supported, else the default locale."""
    if locale in LOCALES:
        return locale
    return DEFAULT_LOCALE


def load_translations(
    locale: str | None,
    namespaces: list[str] | None = None,
    locales_dir: Path | None = None,
) -> dict[str, dict]:
    """Load namespace files for a locale: ``{namespace: strings}``.

    A namespace file missing for the locale falls back to the default
    locale's file, then to an empty dict.
    """
    locale = resolve_locale(locale)
    base = locales_dir or LOCALES_DIR
    strings: dict[str, dict] = {}
    for ns in namespaces or [DEFAULT_NAMESPACE]:
        if ns not in NAMESPACES:
            raise ValueError(f"Unknown namespace: {ns}")
        strings[ns] = _read_namespace(base, locale, ns)
    return strings


def _read_namespace(base: Path, locale: str, ns: str) -> dict:
    for candidate in (locale, DEFAULT_LOCALE):
        path = base / candidate / f"{ns}.json"
        if path.is_file():
            return json.loads(path.read_text(encoding="utf-8"))
    logger.debug("No %s translations for %s", ns, locale)
    return {}


def translate(
    translations: dict[str, dict],
    key: str,
    default: str | None = None,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """Look up a dotted key, e.g. ``navigation.home``.

    Missing keys return ``default``, or the key itself.
    """
    node: object = translations.get(namespace, {})
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default if default is not None else key
        node = node[part]
    return node if isinstance(node, str) else (default if default is not None else key)
