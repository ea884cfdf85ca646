"""Shared test fixtures."""

import json
from io import BytesIO

import pytest
from PIL import Image

from momi_site.models import CategoryBucket, ImageRecord, Manifest, RandomSelection


def make_record(category: str, number: int, subdir: str = "gallery") -> ImageRecord:
    """Helper to create an ImageRecord with a unique path."""
    file_name = f"{category}_{number:03d}.jpg"
    return ImageRecord(
        file_name=file_name,
        relative_path=f"{subdir}/{category}/{file_name}",
        original_path=f"/src/{category}/IMG_{number:04d}.JPG",
        size=1000 + number,
    )


def make_manifest(counts: dict[str, int], with_selections: bool = True) -> Manifest:
    """Helper to build a manifest with ``counts[category]`` images per category.

    Selections are deterministic: featured are the first six images, random
    are the first twelve in reverse order.
    """
    categories = {
        name: CategoryBucket(
            count=count,
            target_path=f"gallery/{name}",
            images=tuple(make_record(name, i + 1) for i in range(count)),
        )
        for name, count in counts.items()
    }
    selections = {}
    global_random: list[ImageRecord] = []
    if with_selections:
        for name, bucket in categories.items():
            selections[name] = RandomSelection(
                featured=bucket.images[:6],
                random=tuple(reversed(bucket.images[:12])),
            )
        global_random = [img for b in categories.values() for img in b.images][:20]
    return Manifest(
        categories=categories,
        total_images=sum(counts.values()),
        last_updated="2024-05-01T09:30:00.000Z",
        random_selections=selections,
        global_random=tuple(global_random),
    )


def png_bytes() -> bytes:
    buf = BytesIO()
    Image.new("RGB", (4, 4), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def manifest() -> Manifest:
    """Manifest with a 23-image wedding category and two smaller ones."""
    return make_manifest({"fashion": 5, "wedding": 23, "editorial": 3})


@pytest.fixture
def manifest_file(tmp_path, manifest):
    """The ``manifest`` fixture written to disk as image-manifest.json."""
    path = tmp_path / "image-manifest.json"
    path.write_text(json.dumps(manifest.to_dict()), encoding="utf-8")
    return path
