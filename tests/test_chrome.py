"""Tests for navigation, footer and page meta."""

from momi_site.pages.chrome import layout_head, render_footer, render_navigation
from momi_site.pages.i18n import load_translations


def test_render_navigation_marks_active():
    nav = render_navigation(load_translations("en"), active="/gallery")
    assert nav.startswith("## MOMI")
    assert "**Gallery**" in nav
    assert "[Home](/)" in nav
    assert "[Behind the Scenes](/exhibitions)" in nav


def test_render_navigation_localized():
    nav = render_navigation(load_translations("zh"))
    assert "**首页**" in nav


def test_render_footer():
    footer = render_footer(load_translations("en"))
    assert "[Wedding](/gallery/wedding)" in footer
    assert "[Nicholas Fols](/photographers/nicholas-fols)" in footer
    assert "[Privacy Policy](/privacy)" in footer
    assert footer.endswith("© 2024 MOMI. All rights reserved.")


def test_layout_head_defaults():
    head = layout_head()
    assert head["title"] == "MOMI"
    assert head["og:description"] == "A minimalist fashion platform"
    assert head["viewport"] == "width=device-width, initial-scale=1"


def test_layout_head_custom():
    head = layout_head("Wedding - MOMI", "Love stories")
    assert head["og:title"] == "Wedding - MOMI"
    assert head["description"] == "Love stories"
