"""Project-wide configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(os.environ.get("MOMI_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

LOG_LEVEL = os.environ.get("MOMI_LOG_LEVEL", "INFO")

# Public web root
PUBLIC_DIR = PROJECT_ROOT / "public"
IMAGE_ROOT = PUBLIC_DIR / "assets" / "images"
IMAGE_URL_PREFIX = "/assets/images/"
INDEX_PATH = IMAGE_ROOT / "image-index.json"
MANIFEST_PATH = IMAGE_ROOT / "image-manifest.json"

# Deployed site, used when warming image URLs
SITE_BASE_URL = os.environ.get("MOMI_SITE_BASE_URL", "http://localhost:3000")

# Organizer sources
SOURCE_DIR = Path(os.environ.get("MOMI_SOURCE_DIR", PROJECT_ROOT / "source" / "images"))
LEGACY_SOURCE_DIR = Path(os.environ.get("MOMI_LEGACY_SOURCE_DIR", PROJECT_ROOT / "source" / "eg"))
LOGO_SOURCE = LEGACY_SOURCE_DIR.parent / "logo.png"

# Category name -> directory under IMAGE_ROOT
CATEGORY_MAPPING: dict[str, str] = {
    "photographers": "photographers",
    "cinematic": "gallery/cinematic",
    "editorial": "gallery/editorial",
    "artistic": "gallery/artistic",
    "collections": "collections",
    "wedding": "gallery/wedding",
    "portrait": "gallery/portrait",
    "featured": "featured",
    "fashion": "gallery/fashion",
    "gallery": "gallery/misc",
}
DEFAULT_CATEGORIES = list(CATEGORY_MAPPING)
GALLERY_CATEGORIES = ["fashion", "editorial", "cinematic", "portrait", "wedding", "artistic"]
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

# Generation-time selection sizes
FEATURED_PER_CATEGORY = 6
RANDOM_PER_CATEGORY = 12
GLOBAL_RANDOM_SIZE = 20

PAGE_SIZE = 20

# Locales
LOCALES = ["en", "zh", "ko"]
DEFAULT_LOCALE = "en"
NAMESPACES = ["common", "home", "gallery", "photographers", "collections"]
DEFAULT_NAMESPACE = "common"
LOCALES_DIR = Path(__file__).parent / "locales"
