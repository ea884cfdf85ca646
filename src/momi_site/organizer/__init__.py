"""Asset organizer CLI: copy source images into the public tree and build the manifest."""

import argparse
from pathlib import Path


def main() -> None:
    """CLI entry point for the asset organizer."""
    parser = argparse.ArgumentParser(description="MOMI image organizer")
    parser.add_argument("--log-level", help="Logging level (default: MOMI_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command")

    # organize
    org_parser = subparsers.add_parser(
        "organize", help="Copy the fixed Featured/Gallery/Photographers layout"
    )
    org_parser.add_argument("--source", type=Path, help="Source tree (or set MOMI_LEGACY_SOURCE_DIR)")
    org_parser.add_argument("--target", type=Path, help="Target image root (default: public/assets/images)")
    org_parser.add_argument("--logo", type=Path, help="Logo file copied to logo.png")

    # sync
    sync_parser = subparsers.add_parser(
        "sync", help="Recursively copy every category and write the manifest"
    )
    sync_parser.add_argument("--source", type=Path, help="Source root (or set MOMI_SOURCE_DIR)")
    sync_parser.add_argument("--target", type=Path, help="Target image root (default: public/assets/images)")
    sync_parser.add_argument(
        "--category", action="append", dest="categories",
        help="Category to process (repeatable, default: all)",
    )
    sync_parser.add_argument("--seed", type=int, help="Seed for the random selections")

    # stats
    stats_parser = subparsers.add_parser("stats", help="Show per-category image counts")
    stats_parser.add_argument("--manifest", type=Path, help="Manifest file (default: image-manifest.json)")

    # warm
    warm_parser = subparsers.add_parser(
        "warm", help="Preload the first images of every category from the deployed site"
    )
    warm_parser.add_argument("--manifest", type=Path, help="Manifest file (default: image-manifest.json)")
    warm_parser.add_argument("--limit", type=int, default=5, help="Images per category (default: 5)")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    from momi_site.log import setup_logging

    setup_logging(args.log_level)

    if args.command == "organize":
        _cmd_organize(args)
    elif args.command == "sync":
        _cmd_sync(args)
    elif args.command == "stats":
        _cmd_stats(args)
    elif args.command == "warm":
        _cmd_warm(args)


def _cmd_organize(args: argparse.Namespace) -> None:
    """Run the fixed-layout organizer."""
    from momi_site.config import IMAGE_ROOT, LEGACY_SOURCE_DIR, LOGO_SOURCE
    from momi_site.organizer.legacy import organize_fixed_layout

    target = args.target or IMAGE_ROOT
    mapping = organize_fixed_layout(
        args.source or LEGACY_SOURCE_DIR, target, args.logo or LOGO_SOURCE
    )
    gallery_total = sum(len(names) for names in mapping["gallery"].values())
    print(f"Featured: {len(mapping['featured'])}  Gallery: {gallery_total}  "
          f"Photographers: {len(mapping['photographers'])}")
    print(f"Manifest saved to: {target / 'manifest.json'}")


def _cmd_sync(args: argparse.Namespace) -> None:
    """Run the recursive sync and print per-category counts."""
    import random

    from momi_site.config import IMAGE_ROOT, SOURCE_DIR
    from momi_site.organizer.sync import INDEX_FILENAME, MANIFEST_FILENAME, sync_all

    target = args.target or IMAGE_ROOT
    rng = random.Random(args.seed) if args.seed is not None else None
    manifest = sync_all(args.source or SOURCE_DIR, target, args.categories, rng)

    print(f"\nTotal images: {manifest.total_images}")
    print(f"Index saved to: {target / INDEX_FILENAME}")
    print(f"Manifest saved to: {target / MANIFEST_FILENAME}")
    for name, bucket in manifest.categories.items():
        print(f"  {name:15s} {bucket.count:>5} images")


def _load_or_exit(path: Path | None):
    from momi_site.images.manifest import ManifestLoadError, load_manifest

    try:
        return load_manifest(path)
    except ManifestLoadError as e:
        print(f"Error: {e}")
        return None


def _cmd_stats(args: argparse.Namespace) -> None:
    """Print category statistics from the manifest."""
    from momi_site.images.query import get_categories_stats

    manifest = _load_or_exit(args.manifest)
    if manifest is None:
        return

    print(f"Last updated: {manifest.last_updated}")
    for row in get_categories_stats(manifest):
        print(f"  {row.id:15s} {row.count:>5}  {row.name:15s} {row.target_path}")
    print(f"Total: {manifest.total_images}")


def _cmd_warm(args: argparse.Namespace) -> None:
    """Preload category lead images against the deployed site."""
    import asyncio

    from momi_site.config import SITE_BASE_URL
    from momi_site.images.preload import preload_images
    from momi_site.images.query import get_category_images

    manifest = _load_or_exit(args.manifest)
    if manifest is None:
        return

    async def _warm() -> None:
        for name in manifest.categories:
            images = get_category_images(manifest, name)
            loaded = await preload_images(images, limit=args.limit)
            print(f"  {name:15s} {loaded}/{min(args.limit, len(images))} loaded")

    print(f"Warming images from {SITE_BASE_URL}")
    asyncio.run(_warm())
