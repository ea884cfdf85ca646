"""Site pages rendered with Gradio."""


def main() -> None:
    """CLI entry point for the site UI."""
    from momi_site.config import IMAGE_ROOT
    from momi_site.images.manifest import ManifestLoadError
    from momi_site.log import setup_logging
    from momi_site.pages.app import create_app

    setup_logging()
    try:
        app = create_app()
    except ManifestLoadError as e:
        print(f"Error: {e}")
        print("Run `momi-organizer sync` to generate the image manifest.")
        raise SystemExit(1) from e
    app.launch(allowed_paths=[str(IMAGE_ROOT)])
