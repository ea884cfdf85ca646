"""Site-wide navigation, footer and page meta."""

from dataclasses import dataclass

from momi_site.pages.i18n import translate

SITE_NAME = "MOMI"
DEFAULT_DESCRIPTION = "A minimalist fashion platform"
COPYRIGHT_YEAR = 2024


@dataclass(frozen=True)
class NavItem:
    href: str
    label_key: str  # key in the common namespace, or a literal label
    literal: bool = False


NAV_ITEMS = [
    NavItem("/", "navigation.home"),
    NavItem("/gallery", "navigation.gallery"),
    NavItem("/collections", "navigation.collections"),
    NavItem("/photographers", "navigation.photographers"),
    NavItem("/magazine", "navigation.magazine"),
    NavItem("/campaigns", "navigation.campaigns"),
    NavItem("/exhibitions", "navigation.behindTheScenes"),
    NavItem("/about", "navigation.about"),
]

FOOTER_SECTIONS: list[tuple[str, list[NavItem]]] = [
    ("navigation.gallery", [
        NavItem("/gallery/fashion", "gallery.fashion"),
        NavItem("/gallery/editorial", "gallery.editorial"),
        NavItem("/gallery/cinematic", "gallery.cinematic"),
        NavItem("/gallery/portrait", "gallery.portrait"),
        NavItem("/gallery/wedding", "gallery.wedding"),
        NavItem("/gallery/artistic", "gallery.artistic"),
    ]),
    ("navigation.photographers", [
        NavItem("/photographers/nicholas-fols", "Nicholas Fols", literal=True),
        NavItem("/photographers/ramie-pl", "Ramie Pl", literal=True),
        NavItem("/photographers/soyul", "Soyul", literal=True),
        NavItem("/photographers/eui", "Eui", literal=True),
        NavItem("/photographers/lespecs", "Lespecs", literal=True),
    ]),
    ("navigation.collections", [
        NavItem("/collections/ss24", "Spring/Summer 2024", literal=True),
        NavItem("/collections/couture", "Couture", literal=True),
        NavItem("/collections/bridal", "Bridal", literal=True),
        NavItem("/collections/obsession", "OBSESSION N.2", literal=True),
    ]),
    ("navigation.contact", [
        NavItem("/contact", "navigation.contact"),
        NavItem("/newsletter", "Newsletter", literal=True),
        NavItem("/careers", "Careers", literal=True),
    ]),
]

LEGAL_LINKS = [
    NavItem("/privacy", "footer.privacyPolicy"),
    NavItem("/terms", "footer.termsOfService"),
    NavItem("/cookies", "footer.cookiePolicy"),
]


def _label(item: NavItem, translations: dict[str, dict]) -> str:
    return item.label_key if item.literal else translate(translations, item.label_key)


def render_navigation(translations: dict[str, dict], active: str = "/") -> str:
    """Markdown header bar; the active route is shown in bold."""
    links = []
    for item in NAV_ITEMS:
        label = _label(item, translations)
        links.append(f"**{label}**" if item.href == active else f"[{label}]({item.href})")
    return f"## {SITE_NAME}\n\n" + " · ".join(links)


def render_footer(translations: dict[str, dict]) -> str:
    """Markdown footer with link sections, legal links and copyright."""
    lines = []
    for heading_key, items in FOOTER_SECTIONS:
        lines.append(f"**{translate(translations, heading_key)}**")
        lines.append(" · ".join(f"[{_label(i, translations)}]({i.href})" for i in items))
        lines.append("")
    lines.append(" · ".join(f"[{_label(i, translations)}]({i.href})" for i in LEGAL_LINKS))
    lines.append("")
    rights = translate(translations, "footer.allRightsReserved")
    lines.append(f"© {COPYRIGHT_YEAR} {SITE_NAME}. {rights}")
    return "\n".join(lines)


def layout_head(title: str | None = None, description: str | None = None) -> dict[str, str]:
    """Title and meta tags every page is wrapped with."""
    title = title or SITE_NAME
    description = description or DEFAULT_DESCRIPTION
    return {
        "title": title,
        "description": description,
        "og:title": title,
        "og:description": description,
        "og:type": "website",
        "viewport": "width=device-width, initial-scale=1",
    }
