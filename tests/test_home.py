"""Tests for the landing page."""

import random

from conftest import make_manifest

from momi_site.pages.home import HERO_TITLES, build_home


def test_build_home(manifest):
    home = build_home(manifest, rng=random.Random(5))

    assert len(home.slides) == 5
    assert all(slide.image.startswith("/assets/images/gallery/") for slide in home.slides)
    assert [slide.title for slide in home.slides] == HERO_TITLES[:5]
    assert len({slide.image for slide in home.slides}) == 5
    assert home.gallery == list(manifest.global_random[:20])
    assert [row.id for row in home.categories] == ["fashion", "wedding", "editorial"]


def test_build_home_without_selections():
    home = build_home(make_manifest({"fashion": 3}, with_selections=False))
    assert home.slides == []
    assert home.gallery == []
    assert home.categories[0].count == 3
