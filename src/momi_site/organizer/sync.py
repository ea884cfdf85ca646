"""Recursively copy categorized source images and write the manifest."""

import json
import logging
import random
import re
import shutil
from datetime import UTC, datetime
from pathlib import Path

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from momi_site.config import CATEGORY_MAPPING, DEFAULT_CATEGORIES, IMAGE_EXTENSIONS
from momi_site.models import CategoryBucket, ImageRecord, Manifest
from momi_site.organizer.selections import with_selections

logger = logging.getLogger(__name__)

INDEX_FILENAME = "image-index.json"
MANIFEST_FILENAME = "image-manifest.json"


def collect_image_files(directory: Path) -> list[Path]:
    """All image files below ``directory``, depth-first in name order."""
    if not directory.is_dir():
        logger.warning("Directory does not exist: %s", directory)
        return []

    files: list[Path] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            files.extend(collect_image_files(entry))
        elif entry.is_file() and entry.suffix.lower() in IMAGE_EXTENSIONS:
            files.append(entry)
    return files


def unique_target(source: Path, target_dir: Path) -> Path:
    """Sanitized target path that does not collide with an existing file.

    Names are derived from the source name plus a numeric suffix, so a
    re-run against an already populated target produces ``_1`` copies.
    """
    base = re.sub(r"[^a-z0-9]", "_", source.stem.lower())
    candidate = target_dir / f"{base}{source.suffix}"
    index = 0
    while candidate.exists():
        index += 1
        candidate = target_dir / f"{base}_{index}{source.suffix}"
    return candidate


def target_subdir(category: str) -> str:
    return CATEGORY_MAPPING.get(category, f"gallery/{category}")


def process_category(
    category: str,
    source_root: Path,
    target_root: Path,
    progress: Progress | None = None,
) -> CategoryBucket:
    """Copy one category's images and return its bucket."""
    source_dir = source_root / category
    subdir = target_subdir(category)
    target_dir = target_root / subdir

    files = collect_image_files(source_dir)
    logger.info("Category %s: found %d image files in %s", category, len(files), source_dir)

    task = progress.add_task(category, total=len(files)) if progress else None
    records: list[ImageRecord] = []
    for source in files:
        target = unique_target(source, target_dir)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            size = source.stat().st_size
        except OSError as e:
            logger.error("Error copying %s to %s: %s", source, target, e)
        else:
            records.append(
                ImageRecord(
                    file_name=target.name,
                    relative_path=target.relative_to(target_root).as_posix(),
                    original_path=str(source),
                    size=size,
                )
            )
        if progress is not None:
            progress.advance(task)

    logger.info("Copied %d/%d images for %s", len(records), len(files), category)
    return CategoryBucket(count=len(records), target_path=subdir, images=tuple(records))


def sync_all(
    source_root: Path,
    target_root: Path,
    categories: list[str] | None = None,
    rng: random.Random | None = None,
    show_progress: bool = True,
) -> Manifest:
    """Organize every category and write ``image-index.json`` and ``image-manifest.json``.

    Args:
        source_root: Directory holding one sub-directory per category.
        target_root: Public image root the files are copied into.
        categories: Category names to process (default: all mapped categories).
        rng: Random source for the generation-time selections.
        show_progress: Render a rich progress bar per category.

    Returns:
        The manifest that was written.
    """
    categories = categories if categories is not None else DEFAULT_CATEGORIES
    buckets: dict[str, CategoryBucket] = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        disable=not show_progress,
    ) as progress:
        for category in categories:
            buckets[category] = process_category(category, source_root, target_root, progress)

    index = Manifest(
        categories=buckets,
        total_images=sum(bucket.count for bucket in buckets.values()),
        last_updated=_timestamp(),
    )
    manifest = with_selections(index, rng)

    write_json(target_root / INDEX_FILENAME, manifest.to_index_dict())
    write_json(target_root / MANIFEST_FILENAME, manifest.to_dict())
    return manifest


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Wrote %s", path)


def _timestamp() -> str:
    """UTC timestamp with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
