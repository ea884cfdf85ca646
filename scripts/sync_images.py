"""Sync every source category into the public image tree and rebuild the manifest."""

from momi_site.config import IMAGE_ROOT, SOURCE_DIR
from momi_site.log import setup_logging
from momi_site.organizer.sync import sync_all


def main() -> None:
    setup_logging()
    print(f"Syncing images from {SOURCE_DIR} to {IMAGE_ROOT}\n")
    manifest = sync_all(SOURCE_DIR, IMAGE_ROOT)

    print(f"\nDone! Total images: {manifest.total_images}")
    print("\nPer category:")
    for name, bucket in manifest.categories.items():
        print(f"  {name}: {bucket.count} images")


if __name__ == "__main__":
    main()
