"""Tests for manifest loading."""

import json

import pytest

from momi_site.images.manifest import ManifestLoadError, load_index, load_manifest


def test_load_manifest(manifest_file, manifest):
    loaded = load_manifest(manifest_file)
    assert loaded.total_images == 31
    assert loaded.last_updated == "2024-05-01T09:30:00.000Z"
    assert loaded.categories["wedding"].count == 23
    assert loaded.global_random == manifest.global_random


def test_load_manifest_missing_file(tmp_path):
    with pytest.raises(ManifestLoadError):
        load_manifest(tmp_path / "nope.json")


def test_load_manifest_invalid_json(tmp_path):
    path = tmp_path / "image-manifest.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestLoadError):
        load_manifest(path)


def test_load_manifest_missing_keys(tmp_path):
    path = tmp_path / "image-manifest.json"
    path.write_text(json.dumps({"totalImages": 0}), encoding="utf-8")
    with pytest.raises(ManifestLoadError):
        load_manifest(path)


def test_load_manifest_not_an_object(tmp_path):
    path = tmp_path / "image-manifest.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ManifestLoadError):
        load_manifest(path)


def test_load_index_has_empty_selections(tmp_path, manifest):
    path = tmp_path / "image-index.json"
    path.write_text(json.dumps(manifest.to_index_dict()), encoding="utf-8")
    index = load_index(path)
    assert index.categories["fashion"].count == 5
    assert dict(index.random_selections) == {}
    assert index.global_random == ()


def test_load_manifest_not_utf8(tmp_path):
    path = tmp_path / "image-manifest.json"
    path.write_bytes(b"\xff\xfe{\x00}\x00")
    with pytest.raises(ManifestLoadError):
        load_manifest(path)


def test_load_manifest_count_mismatch(tmp_path, manifest):
    data = manifest.to_dict()
    data["categories"]["wedding"]["count"] = 159
    path = tmp_path / "image-manifest.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ManifestLoadError, match="159"):
        load_manifest(path)
