"""Queries against a loaded manifest."""

import math
import random
import re
from pathlib import Path

from momi_site.config import IMAGE_ROOT, IMAGE_URL_PREFIX
from momi_site.models import CategoryStats, ImageRecord, Manifest, PageResult

CATEGORY_NAMES: dict[str, str] = {
    "photographers": "Photographers",
    "editorial": "Editorial",
    "cinematic": "Cinematic",
    "artistic": "Artistic",
    "collections": "Collections",
    "wedding": "Wedding",
    "portrait": "Portrait",
    "featured": "Featured",
    "fashion": "Fashion",
    "gallery": "Gallery",
}

_IMAGE_EXT_RE = re.compile(r"\.(jpg|jpeg|png|gif)$", re.IGNORECASE)


def get_category_images(manifest: Manifest, category: str) -> list[ImageRecord]:
    """All images of a category, or an empty list for unknown categories."""
    bucket = manifest.categories.get(category)
    if bucket is None:
        return []
    return list(bucket.images)


def get_random_images(
    manifest: Manifest, category: str | None = None, count: int = 12
) -> list[ImageRecord]:
    """Prefix of the generation-time random selection.

    Falls back to the global selection when the category has none.
    """
    if category and category in manifest.random_selections:
        return list(manifest.random_selections[category].random[:count])
    return list(manifest.global_random[:count])


def get_featured_images(
    manifest: Manifest,
    category: str | None = None,
    count: int = 6,
    rng: random.Random | None = None,
) -> list[ImageRecord]:
    """Featured images of a category, or a fresh cross-category sample.

    Without a category, up to two featured images are taken from every
    category and the pool is reshuffled on every call.
    """
    if category and category in manifest.random_selections:
        return list(manifest.random_selections[category].featured[:count])

    pool: list[ImageRecord] = []
    for name in manifest.categories:
        selection = manifest.random_selections.get(name)
        if selection is not None:
            pool.extend(selection.featured[:2])
    return shuffle_images(pool, rng)[:count]


def get_categories_stats(manifest: Manifest) -> list[CategoryStats]:
    """One summary row per category, in manifest order."""
    stats = []
    for name, bucket in manifest.categories.items():
        first = bucket.images[0].relative_path if bucket.images else ""
        stats.append(
            CategoryStats(
                id=name,
                name=format_category_name(name),
                count=bucket.count,
                target_path=bucket.target_path,
                featured=f"{IMAGE_URL_PREFIX}{first}",
            )
        )
    return stats


def format_category_name(category: str) -> str:
    """Display name for a category id."""
    if category in CATEGORY_NAMES:
        return CATEGORY_NAMES[category]
    return category[:1].upper() + category[1:]


def shuffle_images(
    images: list[ImageRecord], rng: random.Random | None = None
) -> list[ImageRecord]:
    """Return a shuffled copy. The input list is left untouched."""
    shuffled = list(images)
    (rng or random).shuffle(shuffled)
    return shuffled


def paginate_images(
    images: list[ImageRecord], page: int = 1, page_size: int = 20
) -> PageResult:
    """Slice one page out of ``images``.

    Pages outside ``1..total_pages`` give empty items; the totals are
    still computed from the full list.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total = len(images)
    start = (page - 1) * page_size
    end = start + page_size
    items = list(images[start:end]) if start >= 0 else []
    return PageResult(
        items=items,
        current_page=page,
        total_pages=math.ceil(total / page_size),
        total_images=total,
        has_more=end < total,
        has_previous=page > 1,
    )


def search_images(
    manifest: Manifest, query: str, category: str | None = None
) -> list[ImageRecord]:
    """Case-insensitive substring match on file name or relative path."""
    if category and category in manifest.categories:
        candidates = list(manifest.categories[category].images)
    else:
        candidates = [img for bucket in manifest.categories.values() for img in bucket.images]

    needle = query.lower()
    return [
        img
        for img in candidates
        if needle in img.file_name.lower() or needle in img.relative_path.lower()
    ]


def get_image_url(image: ImageRecord) -> str:
    """Public URL of an image."""
    return f"{IMAGE_URL_PREFIX}{image.relative_path}"


def get_image_path(image: ImageRecord, image_root: Path | None = None) -> Path:
    """Local file backing the public URL of an image."""
    return (image_root or IMAGE_ROOT) / image.relative_path


def get_responsive_image_props(image: ImageRecord) -> dict[str, str]:
    """Attributes for a lazily loaded ``<img>`` element."""
    alt = _IMAGE_EXT_RE.sub("", image.file_name).replace("_", " ")
    return {
        "src": get_image_url(image),
        "alt": alt,
        "loading": "lazy",
        "sizes": "(max-width: 768px) 100vw, (max-width: 1200px) 50vw, 33vw",
    }
