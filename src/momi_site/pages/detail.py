"""Render photographer, collection, campaign and magazine detail pages."""

from dataclasses import dataclass, field

from momi_site.pages.chrome import SITE_NAME
from momi_site.pages.content import get_article, get_campaign, get_collection, get_photographer


@dataclass(frozen=True)
class DetailPage:
    """A rendered detail page, or its not-found variant."""

    title: str
    markdown: str
    images: list[tuple[str, str]] = field(default_factory=list)  # (url, caption)
    found: bool = True


def _not_found(kind: str, index_href: str, browse_label: str) -> DetailPage:
    return DetailPage(
        title=f"{kind} Not Found - {SITE_NAME}",
        markdown=f"# {kind} Not Found\n\n[{browse_label}]({index_href})",
        found=False,
    )


def render_photographer(photographer_id: str | None) -> DetailPage:
    p = get_photographer(photographer_id)
    if p is None:
        return _not_found("Photographer", "/photographers", "Browse All Photographers")

    lines = [
        f"# {p.name}",
        f"*{p.specialty}* · {p.location}",
        "",
        p.long_bio,
        "",
        f"**{p.work_count} works**",
    ]
    if p.instagram:
        lines.append(f"Instagram: {p.instagram}")
    if p.website:
        lines.append(f"Website: {p.website}")
    lines += ["", "### Achievements"] + [f"- {a}" for a in p.achievements]
    return DetailPage(
        title=f"{p.name} - {SITE_NAME}",
        markdown="\n".join(lines),
        images=[(src, f"{p.name} {i + 1}") for i, src in enumerate(p.works)],
    )


def render_collection(collection_id: str | None) -> DetailPage:
    c = get_collection(collection_id)
    if c is None:
        return _not_found("Collection", "/collections", "Browse All Collections")

    lines = [
        f"# {c.title}",
        f"{c.season} {c.year} · {c.designer}",
        "",
        c.description,
        "",
        c.long_description,
        "",
        f"**{c.image_count} looks**",
    ]
    return DetailPage(
        title=f"{c.title} - {SITE_NAME}",
        markdown="\n".join(lines),
        images=[(img.src, img.title) for img in c.images],
    )


def render_campaign(campaign_id: str | None) -> DetailPage:
    c = get_campaign(campaign_id)
    if c is None:
        return _not_found("Campaign", "/campaigns", "Browse All Campaigns")

    credits = [("Photographer", c.credits.photographer)]
    credits += [
        (label, value)
        for label, value in (
            ("Art Director", c.credits.art_director),
            ("Stylist", c.credits.stylist),
            ("Model", c.credits.model),
            ("Location", c.credits.location),
        )
        if value
    ]
    lines = [
        f"# {c.title}",
        f"{c.brand} · {c.category} · {c.year}",
        "",
        c.long_description,
        "",
        "### Credits",
    ] + [f"- **{label}:** {value}" for label, value in credits]
    return DetailPage(
        title=f"{c.title} - {SITE_NAME}",
        markdown="\n".join(lines),
        images=[(src, c.title) for src in c.images],
    )


def render_article(slug: str | None) -> DetailPage:
    a = get_article(slug)
    if a is None:
        return _not_found("Article", "/magazine", "Back to Magazine")

    lines = [f"# {a.title}"]
    if a.subtitle:
        lines.append(f"*{a.subtitle}*")
    lines += ["", f"{a.photographer} · {a.publication} · {a.date}", ""]
    for paragraph in a.paragraphs:
        lines += [paragraph, ""]
    lines.append(" ".join(f"`{tag}`" for tag in a.tags))
    return DetailPage(
        title=f"{a.title} - {SITE_NAME} Magazine",
        markdown="\n".join(lines),
        images=[(src, a.title) for src in a.images],
    )
