"""Load the generated manifest JSON files."""

import json
import logging
from pathlib import Path

from momi_site.config import INDEX_PATH, MANIFEST_PATH
from momi_site.models import Manifest

logger = logging.getLogger(__name__)


class ManifestLoadError(RuntimeError):
    """The manifest asset is missing or malformed. Not retryable."""


def load_manifest(path: str | Path | None = None) -> Manifest:
    """Parse ``image-manifest.json``. Defaults to the project image root."""
    return _load(Path(path or MANIFEST_PATH))


def load_index(path: str | Path | None = None) -> Manifest:
    """Parse ``image-index.json``; selections come back empty."""
    return _load(Path(path or INDEX_PATH))


def _load(path: Path) -> Manifest:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestLoadError(f"Cannot read manifest {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestLoadError(f"Manifest {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestLoadError(f"Manifest {path} must be a JSON object")

    try:
        manifest = Manifest.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ManifestLoadError(f"Manifest {path} is malformed: {e!r}") from e

    logger.info(
        "Loaded manifest %s: %d categories, %d images",
        path,
        len(manifest.categories),
        manifest.total_images,
    )
    return manifest
