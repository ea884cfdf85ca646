"""Landing page content assembled from the manifest."""

import random
from dataclasses import dataclass

from momi_site.images.query import (
    get_categories_stats,
    get_featured_images,
    get_image_url,
    get_random_images,
    shuffle_images,
)
from momi_site.models import CategoryStats, ImageRecord, Manifest

HERO_SLIDES = 5
HERO_POOL = 8
RANDOM_GALLERY_SIZE = 20

HERO_TITLES = [
    "OBSESSION N.2",
    "CINEMATIC STORIES",
    "EDITORIAL SERIES",
    "PORTRAIT OF A LADY",
    "WEDDING TALES",
    "ARTISTIC VISION",
    "FASHION FORWARD",
    "TIMELESS MOMENTS",
]
HERO_SUBTITLES = [
    "Women in Canvas",
    "Frames from untold films",
    "Stories told through fashion",
    "Timeless elegance",
    "Love in every frame",
    "Beyond the ordinary",
]
HERO_LINKS = [
    "/collections/obsession",
    "/gallery/cinematic",
    "/gallery/editorial",
    "/campaigns/portrait-of-a-lady",
    "/gallery/wedding",
    "/gallery/artistic",
    "/gallery/fashion",
    "/gallery",
]


@dataclass(frozen=True)
class HeroSlide:
    image: str
    title: str
    subtitle: str
    link: str


@dataclass(frozen=True)
class HomePage:
    slides: list[HeroSlide]
    gallery: list[ImageRecord]
    categories: list[CategoryStats]


def build_home(manifest: Manifest, rng: random.Random | None = None) -> HomePage:
    """Hero slides, random gallery and category stats for the landing page."""
    featured = get_featured_images(manifest, None, HERO_POOL, rng)
    if featured:
        hero = shuffle_images(featured, rng)[:HERO_SLIDES]
    else:
        hero = get_random_images(manifest, None, HERO_SLIDES)

    slides = [
        HeroSlide(
            image=get_image_url(image),
            title=HERO_TITLES[i % len(HERO_TITLES)],
            subtitle=HERO_SUBTITLES[i % len(HERO_SUBTITLES)],
            link=HERO_LINKS[i % len(HERO_LINKS)],
        )
        for i, image in enumerate(hero)
    ]
    return HomePage(
        slides=slides,
        gallery=get_random_images(manifest, None, RANDOM_GALLERY_SIZE),
        categories=get_categories_stats(manifest),
    )
