"""Gradio application rendering the site pages."""

import logging
from pathlib import Path

import gradio as gr

from momi_site.config import DEFAULT_LOCALE, GALLERY_CATEGORIES, IMAGE_ROOT, IMAGE_URL_PREFIX, LOCALES
from momi_site.images.manifest import load_manifest
from momi_site.images.query import get_image_path
from momi_site.models import Manifest
from momi_site.pages.chrome import SITE_NAME, layout_head, render_footer, render_navigation
from momi_site.pages.content import CAMPAIGNS, COLLECTIONS, MAGAZINE_ARTICLES, PHOTOGRAPHERS
from momi_site.pages.detail import (
    DetailPage,
    render_article,
    render_campaign,
    render_collection,
    render_photographer,
)
from momi_site.pages.forms import (
    CONTACT_INFO,
    INQUIRY_TYPES,
    OFFICES,
    ContactForm,
    submit_contact,
    subscribe_newsletter,
)
from momi_site.pages.gallery import (
    GalleryView,
    Lightbox,
    category_copy,
    display_description,
    display_title,
    gallery_index,
    navigate,
)
from momi_site.pages.home import build_home
from momi_site.pages.i18n import PAGE_NAMESPACES, load_translations, translate

logger = logging.getLogger(__name__)

SITE_NAMESPACES = sorted(set(PAGE_NAMESPACES["home"] + PAGE_NAMESPACES["gallery"]))

CUSTOM_CSS = """
.full-height-gallery .grid-wrap {
    overflow-y: visible !important;
    max-height: none !important;
}
.full-height-gallery .grid-container {
    grid-template-rows: none !important;
}
.site-footer {
    opacity: 0.7;
    font-size: 0.85em;
}
"""


def url_to_path(url: str, image_root: Path | None = None) -> Path:
    """Map a public ``/assets/images/...`` URL onto the local image root."""
    return (image_root or IMAGE_ROOT) / url.removeprefix(IMAGE_URL_PREFIX)


def existing_items(items: list[tuple[Path, str]]) -> list[tuple[str, str]]:
    """Drop entries whose file is missing; a broken image is hidden, not an error."""
    kept = [(str(path), caption) for path, caption in items if path.is_file()]
    if len(kept) < len(items):
        logger.debug("Hiding %d missing images", len(items) - len(kept))
    return kept


def page_labels(translations: dict[str, dict]) -> dict[str, str]:
    """Localized headings of the home and gallery tabs."""
    return {
        "latest_works": translate(
            translations, "sections.latestWorks", "Latest Works", namespace="home"
        ),
        "categories": translate(translations, "sections.categories", "Categories", namespace="home"),
        "gallery_title": translate(translations, "title", "Gallery", namespace="gallery"),
        "gallery_subtitle": translate(translations, "subtitle", "", namespace="gallery"),
    }


def filter_choices(translations: dict[str, dict]) -> list[tuple[str, str]]:
    """(label, value) pairs for the gallery filter, ``all`` first."""
    choices = [(translate(translations, "filters.all", "All", namespace="gallery"), "all")]
    for category in GALLERY_CATEGORIES:
        choices.append((translate(translations, f"gallery.{category}", category.title()), category))
    return choices


def create_app(manifest: Manifest | None = None, locale: str = DEFAULT_LOCALE) -> gr.Blocks:
    """Create and return the Gradio Blocks app.

    The manifest is loaded once here; ``ManifestLoadError`` propagates.
    """
    manifest = manifest or load_manifest()
    head = layout_head(SITE_NAME, "Fashion photography, collections and campaigns")

    def _chrome(loc: str) -> tuple:
        strings = load_translations(loc, SITE_NAMESPACES)
        labels = page_labels(strings)
        return (
            render_navigation(strings),
            render_footer(strings),
            gr.update(label=labels["latest_works"]),
            f"### {labels['categories']}",
            f"## {labels['gallery_title']}\n\n{labels['gallery_subtitle']}",
            gr.update(choices=filter_choices(strings), value="all"),
        )

    # ── Gallery helpers ──────────────────────────────────────────────

    def _page_items(view: GalleryView) -> list[tuple[str, str]]:
        return [(str(get_image_path(image)), title) for image, title in view.tiles()]

    def _page_info(view: GalleryView) -> str:
        page = view.page()
        if not page.total_images:
            return "No images in this category yet."
        return f"Page {page.current_page} of {page.total_pages} · {page.total_images} images"

    def _hidden_lightbox() -> tuple:
        hidden = gr.update(visible=False)
        return (gr.update(value=None, visible=False), hidden, hidden, hidden, hidden)

    def _show_category(category: str) -> tuple:
        view = GalleryView.load(manifest, category)
        copy = category_copy(category)
        hero = f"# {copy.title}\n\n{copy.subtitle}\n\n{len(view.images)} {copy.count_noun}"
        pages = view.page_numbers()
        return (
            hero,
            _page_items(view),
            gr.update(choices=pages, value=1 if pages else None, visible=len(pages) > 1),
            _page_info(view),
            view,
        ) + _hidden_lightbox() + (None,)

    def _change_page(page: int | None, view: GalleryView) -> tuple:
        if page is None:
            return gr.update(), gr.update(), view
        view.go_to(int(page))
        return _page_items(view), _page_info(view), view

    def _lightbox_at(view: GalleryView, lightbox: Lightbox) -> tuple:
        image = lightbox.current
        position = view.images.index(image)
        caption = (
            f"### {display_title(view.category, position)}\n\n"
            f"{display_description(view.category, position)}"
        )
        shown = gr.update(visible=True)
        return (
            gr.update(value=str(get_image_path(image)), visible=True),
            gr.update(value=caption, visible=True),
            shown, shown, shown,
            lightbox.index,
        )

    def _on_gallery_select(view: GalleryView, evt: gr.SelectData) -> tuple:
        lightbox = view.open_tile(evt.index) if isinstance(evt.index, int) else None
        if lightbox is None:
            return _hidden_lightbox() + (None,)
        return _lightbox_at(view, lightbox)

    def _step(direction: str):
        def handler(view: GalleryView, index: int | None) -> tuple:
            items = view.viewable() if view is not None else []
            if index is None or not items:
                return _hidden_lightbox() + (None,)
            start = min(index, len(items) - 1)
            lightbox = Lightbox(items, navigate(start, len(items), direction))
            return _lightbox_at(view, lightbox)
        return handler

    def _close_lightbox() -> tuple:
        return _hidden_lightbox() + (None,)

    def _category_table(active_filter: str) -> str:
        rows = gallery_index(manifest, active_filter)
        if not rows:
            return "No categories."
        lines = ["| Category | Works | Description |", "|---|---|---|"]
        for row in rows:
            lines.append(f"| {row.name} | {row.count} | {category_copy(row.id).description} |")
        return "\n".join(lines)

    # ── Detail helpers ───────────────────────────────────────────────

    def _render_detail(page: DetailPage) -> tuple:
        items = existing_items([(url_to_path(url), caption) for url, caption in page.images])
        return page.markdown, gr.update(value=items, visible=page.found and bool(items))

    def _detail_tab(label: str, keys: list[str], render, param: str) -> None:
        with gr.TabItem(label):
            with gr.Row():
                key_input = gr.Dropdown(
                    choices=keys, value=keys[0] if keys else None,
                    allow_custom_value=True, label=param,
                )
                open_btn = gr.Button("Open")
            body = gr.Markdown("")
            works = gr.Gallery(
                label="Works", columns=3, height="auto",
                elem_classes=["full-height-gallery"],
            )
            open_btn.click(
                fn=lambda key: _render_detail(render(key)),
                inputs=[key_input], outputs=[body, works],
            )
            key_input.change(
                fn=lambda key: _render_detail(render(key)),
                inputs=[key_input], outputs=[body, works],
            )

    # ── Build UI ─────────────────────────────────────────────────────

    home = build_home(manifest)
    strings = load_translations(locale, SITE_NAMESPACES)
    labels = page_labels(strings)

    with gr.Blocks(title=head["title"], css=CUSTOM_CSS) as app:
        with gr.Row():
            navigation = gr.Markdown(render_navigation(strings))
            locale_input = gr.Dropdown(choices=LOCALES, value=locale, label="Language", scale=0)

        with gr.Tabs():
            # ── Home ─────────────────────────────────────────────────
            with gr.TabItem("Home"):
                gr.Gallery(
                    value=existing_items([
                        (url_to_path(slide.image), f"{slide.title} · {slide.subtitle}")
                        for slide in home.slides
                    ]),
                    label="Featured", columns=5, height=360,
                )
                latest_gallery = gr.Gallery(
                    value=existing_items([(get_image_path(img), img.file_name) for img in home.gallery]),
                    label=labels["latest_works"], columns=5, height="auto",
                    elem_classes=["full-height-gallery"],
                )
                categories_heading = gr.Markdown(f"### {labels['categories']}")
                gr.Markdown(
                    "\n".join(f"- **{row.name}**: {row.count} works" for row in home.categories)
                )

            # ── Gallery ──────────────────────────────────────────────
            with gr.TabItem("Gallery"):
                gallery_heading = gr.Markdown(
                    f"## {labels['gallery_title']}\n\n{labels['gallery_subtitle']}"
                )
                with gr.Row():
                    filter_input = gr.Radio(
                        choices=filter_choices(strings), value="all", label="Filter",
                    )
                categories_md = gr.Markdown(_category_table("all"))
                category_input = gr.Dropdown(
                    choices=GALLERY_CATEGORIES, value=GALLERY_CATEGORIES[0], label="Category",
                )
                hero_md = gr.Markdown("")

                preview_image = gr.Image(label="Preview", visible=False, height=520)
                preview_caption = gr.Markdown("", visible=False)
                with gr.Row():
                    prev_btn = gr.Button("Previous", visible=False)
                    next_btn = gr.Button("Next", visible=False)
                    close_btn = gr.Button("Close", visible=False)

                grid = gr.Gallery(
                    label="Works", columns=4, height="auto",
                    allow_preview=False, elem_classes=["full-height-gallery"],
                )
                page_input = gr.Radio(choices=[], label="Page", visible=False)
                page_info = gr.Markdown("")

                view_state = gr.State(None)
                lightbox_index_state = gr.State(None)

                lightbox_outputs = [
                    preview_image, preview_caption, prev_btn, next_btn, close_btn,
                    lightbox_index_state,
                ]

                filter_input.change(fn=_category_table, inputs=[filter_input], outputs=[categories_md])
                category_input.change(
                    fn=_show_category,
                    inputs=[category_input],
                    outputs=[hero_md, grid, page_input, page_info, view_state] + lightbox_outputs,
                )
                page_input.change(
                    fn=_change_page,
                    inputs=[page_input, view_state],
                    outputs=[grid, page_info, view_state],
                )
                grid.select(fn=_on_gallery_select, inputs=[view_state], outputs=lightbox_outputs)
                prev_btn.click(
                    fn=_step("prev"), inputs=[view_state, lightbox_index_state],
                    outputs=lightbox_outputs,
                )
                next_btn.click(
                    fn=_step("next"), inputs=[view_state, lightbox_index_state],
                    outputs=lightbox_outputs,
                )
                close_btn.click(fn=_close_lightbox, outputs=lightbox_outputs)

            # ── Detail pages ─────────────────────────────────────────
            _detail_tab("Photographers", list(PHOTOGRAPHERS), render_photographer, "id")
            _detail_tab("Collections", list(COLLECTIONS), render_collection, "id")
            _detail_tab("Campaigns", list(CAMPAIGNS), render_campaign, "id")
            _detail_tab("Magazine", list(MAGAZINE_ARTICLES), render_article, "slug")

            # ── Contact ──────────────────────────────────────────────
            with gr.TabItem("Contact"):
                gr.Markdown("\n".join(
                    [f"- **{title}** · {email} · {desc}" for title, email, desc in CONTACT_INFO]
                    + [""]
                    + [f"- {city}, {country} ({area}, {tz})" for city, area, country, tz in OFFICES]
                ))
                with gr.Row():
                    name_input = gr.Textbox(label="Name")
                    email_input = gr.Textbox(label="Email")
                type_input = gr.Dropdown(
                    choices=[(label, key) for key, label in INQUIRY_TYPES.items()],
                    value="general", label="Inquiry type",
                )
                subject_input = gr.Textbox(label="Subject")
                message_input = gr.Textbox(label="Message", lines=5)
                send_btn = gr.Button("Send Message")
                contact_status = gr.Markdown("")

                gr.Markdown("### Newsletter")
                with gr.Row():
                    newsletter_email = gr.Textbox(label="Email", placeholder="Enter your email")
                    subscribe_btn = gr.Button("Subscribe")
                newsletter_status = gr.Markdown("")

                def do_contact(name, email, subject, message, inquiry_type) -> str:
                    result = submit_contact(ContactForm(
                        name=name or "", email=email or "", subject=subject or "",
                        message=message or "", type=inquiry_type or "general",
                    ))
                    return "\n".join([result.message] + [f"- {e}" for e in result.errors])

                def do_subscribe(email: str) -> str:
                    return subscribe_newsletter(email or "").message

                send_btn.click(
                    fn=do_contact,
                    inputs=[name_input, email_input, subject_input, message_input, type_input],
                    outputs=[contact_status],
                )
                subscribe_btn.click(fn=do_subscribe, inputs=[newsletter_email], outputs=[newsletter_status])

        footer = gr.Markdown(render_footer(strings), elem_classes=["site-footer"])

        locale_input.change(
            fn=_chrome,
            inputs=[locale_input],
            outputs=[
                navigation, footer, latest_gallery, categories_heading, gallery_heading,
                filter_input,
            ],
        )
        app.load(
            fn=_show_category,
            inputs=[category_input],
            outputs=[hero_md, grid, page_input, page_info, view_state] + lightbox_outputs,
        )

    return app
