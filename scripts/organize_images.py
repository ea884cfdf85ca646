"""Organize the fixed Featured/Gallery/Photographers source tree into public/assets/images."""

from momi_site.config import IMAGE_ROOT, LEGACY_SOURCE_DIR, LOGO_SOURCE
from momi_site.log import setup_logging
from momi_site.organizer.legacy import organize_fixed_layout


def main() -> None:
    setup_logging()
    if not LEGACY_SOURCE_DIR.is_dir():
        print(f"Error: source directory not found: {LEGACY_SOURCE_DIR}")
        print("Set MOMI_LEGACY_SOURCE_DIR in .env")
        return

    mapping = organize_fixed_layout(LEGACY_SOURCE_DIR, IMAGE_ROOT, LOGO_SOURCE)
    print(f"Featured images: {len(mapping['featured'])}")
    for category, names in mapping["gallery"].items():
        print(f"  gallery/{category}: {len(names)}")
    for key, names in mapping["photographers"].items():
        print(f"  photographers/{key}: {len(names)}")
    print(f"\nManifest saved to: {IMAGE_ROOT / 'manifest.json'}")


if __name__ == "__main__":
    main()
