"""Copy images from the fixed Featured/Gallery/Photographers source layout."""

import logging
import re
import shutil
from pathlib import Path

from momi_site.config import GALLERY_CATEGORIES
from momi_site.organizer.sync import write_json

logger = logging.getLogger(__name__)

LEGACY_EXTENSIONS = (".jpg", ".png")


def numbered_name(prefix: str, position: int) -> str:
    """``<prefix>_NNN.jpg`` for a 1-based position."""
    return f"{prefix}_{position:03d}.jpg"


def photographer_key(name: str) -> str:
    return re.sub(r"\s+", "_", name.lower())


def _copy(source: Path, target: Path) -> bool:
    if not source.is_file():
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
    logger.info("Copied: %s -> %s", source.name, target)
    return True


def _copy_numbered(source_dir: Path, target_dir: Path, prefix: str, filter_ext: bool) -> list[str]:
    """Copy a directory's files as ``<prefix>_NNN.jpg``.

    Numbers follow the position in the sorted listing, so skipped entries
    leave gaps.
    """
    names: list[str] = []
    for position, source in enumerate(sorted(source_dir.iterdir()), start=1):
        if filter_ext and not source.name.endswith(LEGACY_EXTENSIONS):
            continue
        new_name = numbered_name(prefix, position)
        if _copy(source, target_dir / new_name):
            names.append(new_name)
    return names


def organize_fixed_layout(
    source_dir: Path,
    target_dir: Path,
    logo_source: Path | None = None,
) -> dict:
    """Organize a ``Featured/``, ``Gallery/<Category>/``, ``Photographers/<Name>/`` tree.

    Writes ``manifest.json`` into ``target_dir`` and returns the mapping.
    """
    mapping: dict = {
        "featured": [],
        "gallery": {category: [] for category in GALLERY_CATEGORIES},
        "photographers": {},
        "collections": {},
        "campaigns": {},
    }

    if logo_source is not None:
        _copy(logo_source, target_dir / "logo.png")

    featured_dir = source_dir / "Featured"
    if featured_dir.is_dir():
        mapping["featured"] = _copy_numbered(
            featured_dir, target_dir / "featured", "featured", filter_ext=False
        )

    gallery_dir = source_dir / "Gallery"
    if gallery_dir.is_dir():
        for category_dir in sorted(gallery_dir.iterdir()):
            category = category_dir.name.lower()
            if not category_dir.is_dir() or category not in mapping["gallery"]:
                continue
            mapping["gallery"][category] = _copy_numbered(
                category_dir, target_dir / "gallery" / category, category, filter_ext=True
            )

    photographers_dir = source_dir / "Photographers"
    if photographers_dir.is_dir():
        for person_dir in sorted(photographers_dir.iterdir()):
            if not person_dir.is_dir():
                continue
            key = photographer_key(person_dir.name)
            mapping["photographers"][key] = _copy_numbered(
                person_dir, target_dir / "photographers" / key, key, filter_ext=True
            )

    write_json(target_dir / "manifest.json", mapping)
    logger.info("Image organization complete")
    return mapping
