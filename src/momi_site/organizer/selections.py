"""Generation-time featured and random selections."""

import random

from momi_site.config import FEATURED_PER_CATEGORY, GLOBAL_RANDOM_SIZE, RANDOM_PER_CATEGORY
from momi_site.models import CategoryBucket, ImageRecord, Manifest, RandomSelection


def build_selections(
    categories: dict[str, CategoryBucket],
    rng: random.Random | None = None,
) -> tuple[dict[str, RandomSelection], list[ImageRecord]]:
    """Pick per-category selections and the global random sample.

    The shuffles happen once here and are persisted, so a running site
    always sees the same "random" order for a given build.
    """
    rng = rng or random.Random()

    selections: dict[str, RandomSelection] = {}
    for name, bucket in categories.items():
        images = list(bucket.images)
        shuffled = images[:]
        rng.shuffle(shuffled)
        selections[name] = RandomSelection(
            featured=tuple(images[:FEATURED_PER_CATEGORY]),
            random=tuple(shuffled[:RANDOM_PER_CATEGORY]),
        )

    all_images = [img for bucket in categories.values() for img in bucket.images]
    rng.shuffle(all_images)
    return selections, all_images[:GLOBAL_RANDOM_SIZE]


def with_selections(index: Manifest, rng: random.Random | None = None) -> Manifest:
    """Return a copy of ``index`` carrying freshly generated selections."""
    selections, global_random = build_selections(dict(index.categories), rng)
    return Manifest(
        categories=index.categories,
        total_images=index.total_images,
        last_updated=index.last_updated,
        random_selections=selections,
        global_random=tuple(global_random),
    )
