"""Tests for gallery pages and the lightbox."""

import pytest
from conftest import make_record

from momi_site.images.query import get_image_path
from momi_site.pages.gallery import (
    GalleryView,
    Lightbox,
    category_copy,
    display_description,
    display_title,
    gallery_index,
    navigate,
)


def test_navigate_wraps_both_ways():
    assert navigate(0, 5, "next") == 1
    assert navigate(4, 5, "next") == 0
    assert navigate(0, 5, "prev") == 4
    assert navigate(3, 5, "prev") == 2


def test_navigate_single_item():
    assert navigate(0, 1, "next") == 0
    assert navigate(0, 1, "prev") == 0


def test_navigate_empty():
    with pytest.raises(ValueError):
        navigate(0, 0, "next")


def test_lightbox_cycles():
    box = Lightbox(["a", "b", "c"], 2)
    assert box.current == "c"
    assert box.next() == "a"
    assert box.prev() == "c"
    assert box.prev() == "b"


def test_gallery_view_pages(manifest):
    view = GalleryView.load(manifest, "wedding")
    assert view.page_numbers() == [1, 2]
    assert len(view.page().items) == 20

    second = view.go_to(2)
    assert [img.file_name for img in second.items] == [
        "wedding_021.jpg", "wedding_022.jpg", "wedding_023.jpg",
    ]
    assert view.current_page == 2
    assert len(view.captions()) == 3


def test_gallery_view_unknown_category(manifest):
    view = GalleryView.load(manifest, "nonexistent")
    assert view.images == []
    assert view.page_numbers() == []
    assert view.page().items == []


def test_gallery_view_lightbox_spans_category(manifest):
    view = GalleryView.load(manifest, "wedding")
    view.go_to(2)
    box = view.open_lightbox(view.page().items[0])
    assert box.index == 20
    assert box.next().file_name == "wedding_022.jpg"


def test_gallery_view_lightbox_last_wraps_to_first(manifest):
    view = GalleryView.load(manifest, "fashion")
    box = view.open_lightbox(make_record("fashion", 5))
    assert box.next() == make_record("fashion", 1)


def test_display_copy_by_index():
    titles = category_copy("wedding").titles
    assert display_title("wedding", 0) == "Eternal Promise"
    assert display_title("wedding", len(titles)) == "Eternal Promise"
    assert display_description("wedding", 1).startswith("Romantic wedding photography")


def test_category_copy_wedding():
    copy = category_copy("wedding")
    assert copy.subtitle == "Celebrating love's eternal moments"
    assert copy.count_noun == "love stories"


def test_category_copy_unknown_uses_default():
    copy = category_copy("backstage")
    assert copy.count_noun == "works"
    assert display_title("backstage", 7) == "Untitled"


def test_gallery_index_filters(manifest):
    assert [row.id for row in gallery_index(manifest)] == ["fashion", "wedding", "editorial"]
    assert [row.id for row in gallery_index(manifest, "wedding")] == ["wedding"]
    assert gallery_index(manifest, "cinematic") == []


def _write_images(root, category, numbers):
    for number in numbers:
        path = get_image_path(make_record(category, number), root)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"img")


def test_tiles_skip_missing_files(manifest, tmp_path):
    _write_images(tmp_path, "fashion", [2, 3, 4, 5])
    view = GalleryView.load(manifest, "fashion")
    tiles = view.tiles(tmp_path)
    assert [image.file_name for image, _ in tiles] == [
        "fashion_002.jpg", "fashion_003.jpg", "fashion_004.jpg", "fashion_005.jpg",
    ]
    # titles stay tied to the page position of the record
    assert tiles[0][1] == display_title("fashion", 1)


def test_open_tile_maps_grid_position_to_record(manifest, tmp_path):
    _write_images(tmp_path, "fashion", [2, 3, 4, 5])
    view = GalleryView.load(manifest, "fashion")

    box = view.open_tile(0, tmp_path)
    assert box.current == make_record("fashion", 2)

    box = view.open_tile(3, tmp_path)
    assert box.current == make_record("fashion", 5)
    # stepping never lands on the missing image
    assert box.next() == make_record("fashion", 2)


def test_open_tile_out_of_range(manifest, tmp_path):
    _write_images(tmp_path, "fashion", [1])
    view = GalleryView.load(manifest, "fashion")
    assert view.open_tile(1, tmp_path) is None
    assert view.open_tile(-1, tmp_path) is None
