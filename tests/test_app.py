"""Tests for the Gradio app helpers."""

import gradio as gr

from momi_site.pages.app import (
    SITE_NAMESPACES,
    create_app,
    existing_items,
    filter_choices,
    page_labels,
    url_to_path,
)
from momi_site.pages.i18n import load_translations


def test_url_to_path(tmp_path):
    path = url_to_path("/assets/images/gallery/wedding/wedding_001.jpg", tmp_path)
    assert path == tmp_path / "gallery" / "wedding" / "wedding_001.jpg"


def test_existing_items_hides_missing(tmp_path):
    present = tmp_path / "a.jpg"
    present.write_bytes(b"img")
    items = existing_items([(present, "A"), (tmp_path / "missing.jpg", "B")])
    assert items == [(str(present), "A")]


def test_page_labels_follow_locale():
    en = page_labels(load_translations("en", SITE_NAMESPACES))
    ko = page_labels(load_translations("ko", SITE_NAMESPACES))
    assert en["latest_works"] == "Latest Works"
    assert en["gallery_title"] == "Gallery"
    assert ko["latest_works"] == "최신 작품"
    assert ko["categories"] == "카테고리"


def test_filter_choices():
    en = filter_choices(load_translations("en", SITE_NAMESPACES))
    assert en[0] == ("All", "all")
    assert ("Wedding", "wedding") in en
    zh = filter_choices(load_translations("zh", SITE_NAMESPACES))
    assert zh[0] == ("全部", "all")
    assert [value for _, value in zh] == [value for _, value in en]


def test_create_app(manifest):
    app = create_app(manifest, locale="ko")
    assert isinstance(app, gr.Blocks)
