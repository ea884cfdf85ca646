"""Tests for the recursive image sync."""

import json
import random

from conftest import make_manifest

from momi_site.images.manifest import load_index, load_manifest
from momi_site.organizer.selections import build_selections, with_selections
from momi_site.organizer.sync import (
    collect_image_files,
    process_category,
    sync_all,
    target_subdir,
    unique_target,
)


def _touch(path, content: bytes = b"img"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


# ── collect_image_files ──────────────────────────────────────────────


def test_collect_image_files_recursive(tmp_path):
    _touch(tmp_path / "b.jpg")
    _touch(tmp_path / "a.PNG")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "day2" / "c.jpeg")
    _touch(tmp_path / "day2" / "deeper" / "d.webp")

    files = collect_image_files(tmp_path)
    assert [f.name for f in files] == ["a.PNG", "b.jpg", "c.jpeg", "d.webp"]


def test_collect_image_files_missing_dir(tmp_path):
    assert collect_image_files(tmp_path / "nope") == []


# ── unique_target ────────────────────────────────────────────────────


def test_unique_target_sanitizes_name(tmp_path):
    target = unique_target(tmp_path / "src" / "Look Book #1.JPG", tmp_path / "out")
    assert target == tmp_path / "out" / "look_book__1.JPG"


def test_unique_target_appends_counter(tmp_path):
    out = tmp_path / "out"
    _touch(out / "shot.jpg")
    _touch(out / "shot_1.jpg")
    assert unique_target(tmp_path / "Shot.jpg", out) == out / "shot_2.jpg"


def test_target_subdir():
    assert target_subdir("wedding") == "gallery/wedding"
    assert target_subdir("gallery") == "gallery/misc"
    assert target_subdir("featured") == "featured"
    assert target_subdir("backstage") == "gallery/backstage"


# ── process_category ─────────────────────────────────────────────────


def test_process_category_flattens_and_dedupes(tmp_path):
    source = tmp_path / "src"
    target = tmp_path / "public"
    _touch(source / "wedding" / "Ceremony.jpg", b"12345")
    _touch(source / "wedding" / "day2" / "ceremony.jpg", b"123")

    bucket = process_category("wedding", source, target)

    assert bucket.count == 2
    assert bucket.target_path == "gallery/wedding"
    assert [img.relative_path for img in bucket.images] == [
        "gallery/wedding/ceremony.jpg",
        "gallery/wedding/ceremony_1.jpg",
    ]
    assert bucket.images[0].size == 5
    assert bucket.images[0].original_path == str(source / "wedding" / "Ceremony.jpg")
    assert (target / "gallery/wedding/ceremony_1.jpg").read_bytes() == b"123"


def test_process_category_missing_source(tmp_path):
    bucket = process_category("portrait", tmp_path / "src", tmp_path / "public")
    assert bucket.count == 0
    assert bucket.images == ()


# ── sync_all ─────────────────────────────────────────────────────────


def test_sync_all_writes_index_and_manifest(tmp_path):
    source = tmp_path / "src"
    target = tmp_path / "public"
    for i in range(25):
        _touch(source / "fashion" / f"look_{i:02d}.jpg")
    for i in range(3):
        _touch(source / "editorial" / f"story {i}.png")

    manifest = sync_all(
        source, target, ["fashion", "editorial"], rng=random.Random(0), show_progress=False
    )

    assert manifest.total_images == 28
    assert manifest.last_updated.endswith("Z")

    index_data = json.loads((target / "image-index.json").read_text(encoding="utf-8"))
    assert set(index_data) == {"categories", "totalImages", "lastUpdated"}
    assert index_data["categories"]["editorial"]["images"][0]["fileName"] == "story_0.png"

    loaded = load_manifest(target / "image-manifest.json")
    assert loaded.total_images == 28
    assert len(loaded.random_selections["fashion"].featured) == 6
    assert len(loaded.random_selections["fashion"].random) == 12
    assert len(loaded.random_selections["editorial"].random) == 3
    assert len(loaded.global_random) == 20

    assert load_index(target / "image-index.json").categories["fashion"].count == 25


def test_sync_all_rerun_creates_suffixed_copies(tmp_path):
    source = tmp_path / "src"
    target = tmp_path / "public"
    _touch(source / "portrait" / "face.jpg")

    sync_all(source, target, ["portrait"], show_progress=False)
    second = sync_all(source, target, ["portrait"], show_progress=False)

    assert second.categories["portrait"].images[0].file_name == "face_1.jpg"
    assert (target / "gallery/portrait/face.jpg").exists()


def test_sync_all_empty_category_is_present(tmp_path):
    manifest = sync_all(tmp_path / "src", tmp_path / "public", ["wedding"], show_progress=False)
    assert manifest.categories["wedding"].count == 0
    assert manifest.global_random == ()


# ── selections ───────────────────────────────────────────────────────


def test_build_selections_sizes_and_membership():
    index = make_manifest({"fashion": 15, "wedding": 4}, with_selections=False)
    selections, global_random = build_selections(dict(index.categories), random.Random(7))

    fashion = index.categories["fashion"].images
    assert selections["fashion"].featured == fashion[:6]
    assert len(selections["fashion"].random) == 12
    assert set(selections["fashion"].random) <= set(fashion)
    assert len(set(selections["fashion"].random)) == 12
    assert selections["wedding"].featured == index.categories["wedding"].images
    assert len(global_random) == 19


def test_build_selections_leaves_categories_untouched():
    index = make_manifest({"fashion": 15}, with_selections=False)
    before = index.categories["fashion"].images
    build_selections(dict(index.categories), random.Random(1))
    assert index.categories["fashion"].images == before


def test_with_selections_keeps_index_fields():
    index = make_manifest({"fashion": 3}, with_selections=False)
    manifest = with_selections(index, random.Random(0))
    assert manifest.categories == index.categories
    assert manifest.total_images == 3
    assert manifest.last_updated == index.last_updated
    assert "fashion" in manifest.random_selections
