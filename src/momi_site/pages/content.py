"""Static records behind the photographer, collection, campaign and magazine pages.

Keys are the route parameters; the set of valid routes is exactly the key
set of each table. Work counts are editorial copy and are not derived from
the manifest.
"""

from dataclasses import dataclass, field

from momi_site.config import IMAGE_URL_PREFIX


def numbered_urls(category: str, start: int, count: int) -> list[str]:
    """Public URLs of ``<category>_NNN.jpg`` files starting at ``start``."""
    return [
        f"{IMAGE_URL_PREFIX}gallery/{category}/{category}_{i:03d}.jpg"
        for i in range(start, start + count)
    ]


@dataclass(frozen=True)
class Photographer:
    id: str
    name: str
    specialty: str
    location: str
    bio: str
    long_bio: str
    work_count: int
    featured: str
    works: list[str]
    achievements: list[str]
    instagram: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class CollectionImage:
    id: str
    src: str
    title: str
    description: str | None = None


@dataclass(frozen=True)
class Collection:
    id: str
    title: str
    season: str
    year: str
    designer: str
    description: str
    long_description: str
    image_count: int
    cover_image: str
    images: list[CollectionImage]
    featured: bool


@dataclass(frozen=True)
class CampaignCredits:
    photographer: str
    art_director: str | None = None
    stylist: str | None = None
    model: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class Campaign:
    id: str
    title: str
    brand: str
    photographer: str
    year: str
    description: str
    long_description: str
    cover_image: str
    images: list[str]
    category: str
    credits: CampaignCredits


@dataclass(frozen=True)
class MagazineArticle:
    slug: str
    title: str
    photographer: str
    publication: str
    date: str
    cover_image: str
    paragraphs: list[str]
    images: list[str]
    tags: list[str] = field(default_factory=list)
    subtitle: str | None = None


def _looks(
    prefix: str, label: str, category: str, start: int, count: int, season_title: str
) -> list[CollectionImage]:
    return [
        CollectionImage(
            id=f"{prefix}_{i + 1}",
            src=src,
            title=f"{label} {i + 1}",
            description=f"{season_title} - Look {i + 1}",
        )
        for i, src in enumerate(numbered_urls(category, start, count))
    ]


PHOTOGRAPHERS: dict[str, Photographer] = {
    "nicholas-fols": Photographer(
        id="nicholas-fols",
        name="Nicholas Fols",
        specialty="Fashion & Editorial",
        location="Seoul, Korea",
        bio="Master of light and shadow, creating timeless fashion narratives",
        long_bio=(
            "Nicholas Fols is a Seoul-based photographer known for his use of light and "
            "shadow in fashion photography, blending minimalist aesthetics with dramatic "
            "storytelling across international publications and luxury campaigns."
        ),
        work_count=159,
        featured=f"{IMAGE_URL_PREFIX}photographers/nicholasfols/nicholasfols_001.jpg",
        instagram="@nicholasfols",
        website="nicholasfols.com",
        works=numbered_urls("fashion", 1, 20),
        achievements=[
            "Vogue Korea Photographer of the Year 2023",
            "Harper's Bazaar Featured Artist",
            "Seoul Fashion Week Official Photographer",
        ],
    ),
    "ramie-pl": Photographer(
        id="ramie-pl",
        name="Ramie Pl",
        specialty="Portrait & Artistic",
        location="New York, USA",
        bio="Capturing raw emotions and authentic moments in every frame",
        long_bio=(
            "Ramie Pl is a New York-based photographer specializing in intimate portraits "
            "that explore identity, emotion and human connection."
        ),
        work_count=213,
        featured=f"{IMAGE_URL_PREFIX}photographers/ramiepl/ramiepl_001.jpg",
        instagram="@ramiepl",
        works=numbered_urls("portrait", 1, 25),
        achievements=[
            "International Portrait Photography Award",
            "Featured in TIME Magazine",
            "Solo Exhibition at MoMA",
        ],
    ),
    "soyul": Photographer(
        id="soyul",
        name="Studio Soyul",
        specialty="Wedding & Romance",
        location="Seoul, Korea",
        bio="Seoul-based studio specializing in romantic and cinematic wedding photography",
        long_bio=(
            "Studio Soyul creates dreamy, film-like wedding images in Korea and abroad, "
            "with a cinematic approach to capturing love stories."
        ),
        work_count=60,
        featured=f"{IMAGE_URL_PREFIX}photographers/soyul/soyul_001.jpg",
        instagram="@studio_soyul",
        works=numbered_urls("wedding", 1, 15),
        achievements=[
            "Korea Wedding Photographer of the Year",
            "Featured in Korean Vogue",
            "International Wedding Photography Awards",
        ],
    ),
    "eui": Photographer(
        id="eui",
        name="Eui",
        specialty="Lifestyle & Wedding",
        location="Jeju, Korea",
        bio="Creating dreamy, youth-inspired narratives in Jeju and beyond",
        long_bio=(
            "Eui is a Jeju-based photographer working with natural light and candid "
            "moments for wedding and lifestyle portraits."
        ),
        work_count=39,
        featured=f"{IMAGE_URL_PREFIX}photographers/eui/eui_001.jpg",
        instagram="@eui.me",
        works=numbered_urls("wedding", 10, 12),
        achievements=[
            "Jeju Tourism Board Official Photographer",
            "Featured in Wedding Magazine Korea",
            "Natural Light Photography Award",
        ],
    ),
    "lespecs": Photographer(
        id="lespecs",
        name="Lespecs",
        specialty="Commercial Fashion",
        location="Paris, France",
        bio="Bold commercial fashion photography with a minimalist aesthetic",
        long_bio=(
            "Lespecs is a Paris-based photographer balancing commercial appeal with a bold, "
            "minimalist artistic vision in campaigns and editorial spreads."
        ),
        work_count=24,
        featured=f"{IMAGE_URL_PREFIX}photographers/lespecs/lespecs_001.jpg",
        instagram="@wolfcubwolfcub",
        works=numbered_urls("fashion", 15, 10),
        achievements=[
            "Paris Fashion Week Featured Photographer",
            "Commercial Photography Excellence Award",
            "Featured in Elle France",
        ],
    ),
}

COLLECTIONS: dict[str, Collection] = {
    "ss24": Collection(
        id="ss24",
        title="Spring/Summer 2024",
        season="Spring/Summer",
        year="2024",
        designer="MOMI Creative Team",
        description="A celebration of minimalist elegance and contemporary silhouettes",
        long_description=(
            "Clean lines, sustainable materials and contemporary silhouettes, balancing "
            "comfort and sophistication."
        ),
        image_count=15,
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_001.jpg",
        images=_looks("ss24", "Look", "fashion", 1, 15, "Spring/Summer 2024"),
        featured=True,
    ),
    "couture": Collection(
        id="couture",
        title="Couture 2024",
        season="Couture",
        year="2024",
        designer="KIMHĒKIM",
        description="Handcrafted excellence in every stitch",
        long_description=(
            "Intricate beadwork, delicate embroidery and innovative construction by master "
            "artisans."
        ),
        image_count=12,
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_002.jpg",
        images=_looks("couture", "Couture Look", "fashion", 10, 12, "Couture 2024"),
        featured=True,
    ),
    "bridal": Collection(
        id="bridal",
        title="Bridal 2024",
        season="Bridal",
        year="2024",
        designer="Various",
        description="Modern romance for the contemporary bride",
        long_description=(
            "From minimalist crepe gowns to intricate lace, contemporary silhouettes with "
            "timeless elegance."
        ),
        image_count=10,
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_003.jpg",
        images=_looks("bridal", "Bridal Look", "wedding", 1, 10, "Bridal 2024"),
        featured=False,
    ),
    "obsession": Collection(
        id="obsession",
        title="OBSESSION N.2 - Women in Canvas",
        season="Special",
        year="2024",
        designer="KIMHĒKIM",
        description="An artistic exploration of feminine power and grace",
        long_description=(
            "Inspired by classical paintings and contemporary feminism, presenting women as "
            "both muse and artist."
        ),
        image_count=8,
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_001.jpg",
        images=_looks("obsession", "Obsession Look", "editorial", 1, 8, "OBSESSION N.2"),
        featured=True,
    ),
}

CAMPAIGNS: dict[str, Campaign] = {
    "portrait-of-a-lady": Campaign(
        id="portrait-of-a-lady",
        title="Portrait of a Lady",
        brand="Frederic Malle",
        photographer="Various Artists",
        year="2024",
        description="Timeless elegance captured in a sophisticated fragrance campaign",
        long_description=(
            "A fragrance campaign celebrating the modern woman who embodies both strength "
            "and grace."
        ),
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_004.jpg",
        images=numbered_urls("portrait", 1, 4),
        category="Fragrance",
        credits=CampaignCredits(
            photographer="Various Artists",
            art_director="MOMI Creative",
            stylist="Fashion Collective",
            model="International Models",
            location="Studio & Location",
        ),
    ),
    "obsession-campaign": Campaign(
        id="obsession-campaign",
        title="OBSESSION N.2 Campaign",
        brand="KIMHĒKIM",
        photographer="KIMHĒKIM Studio",
        year="2024",
        description="Women in Canvas - An artistic exploration of feminine power",
        long_description=(
            "A visual narrative at the intersection of fashion and contemporary art, "
            "celebrating feminine strength."
        ),
        cover_image=f"{IMAGE_URL_PREFIX}featured/featured_001.jpg",
        images=numbered_urls("editorial", 1, 3) + numbered_urls("artistic", 1, 1),
        category="Fashion",
        credits=CampaignCredits(
            photographer="KIMHĒKIM Studio",
            art_director="KIMHĒKIM",
            stylist="KIMHĒKIM Design Team",
            model="Contemporary Artists",
            location="Art Studio",
        ),
    ),
}

MAGAZINE_ARTICLES: dict[str, MagazineArticle] = {
    "lake-of-memories": MagazineArticle(
        slug="lake-of-memories",
        title="The Lake of Memories",
        subtitle="A photographic journey through time and emotion",
        photographer="Umberto Manca & Priscah G",
        publication="MOMI Magazine",
        date="December 2023",
        cover_image=f"{IMAGE_URL_PREFIX}gallery/editorial/editorial_001.jpg",
        paragraphs=[
            "Set against a serene lake at dawn, this series explores nostalgia, loss and "
            "the beautiful impermanence of moments.",
            "Flowing fabrics mirror the movement of water and time, in a palette of soft "
            "blues and ethereal whites.",
        ],
        images=numbered_urls("editorial", 1, 4),
        tags=["Editorial", "Collaboration", "Memory", "Fine Art"],
    ),
    "vanity-fair-italia": MagazineArticle(
        slug="vanity-fair-italia",
        title="Vanity Fair Italia Feature",
        subtitle="Italian elegance meets contemporary fashion",
        photographer="Cintia Dicker",
        publication="Vanity Fair Italia",
        date="December 2023",
        cover_image=f"{IMAGE_URL_PREFIX}gallery/editorial/editorial_002.jpg",
        paragraphs=[
            "From the cobblestone streets of Rome to the terraces of Tuscany, a feature on "
            "Italian sophistication and modern fashion.",
            "Natural light gives every frame a warm, golden glow.",
        ],
        images=numbered_urls("editorial", 2, 1) + numbered_urls("editorial", 5, 2),
        tags=["Italian Fashion", "Vanity Fair", "Editorial", "Culture"],
    ),
    "my-siren": MagazineArticle(
        slug="my-siren",
        title="My Siren",
        subtitle="Exploring feminine mystique and power",
        photographer="Angelin Michelle",
        publication="Independent",
        date="November 2023",
        cover_image=f"{IMAGE_URL_PREFIX}gallery/editorial/editorial_003.jpg",
        paragraphs=[
            "The siren reimagined not as a destroyer but as a symbol of strength, allure "
            "and independence.",
            "Flowing fabrics suggest freedom while structured pieces speak to control.",
        ],
        images=numbered_urls("editorial", 3, 1) + numbered_urls("editorial", 7, 2),
        tags=["Feminine Power", "Mythology", "Editorial", "Independence"],
    ),
    "sunset-of-fire": MagazineArticle(
        slug="sunset-of-fire",
        title="The Sunset of Fire",
        subtitle="Passion captured in golden hour",
        photographer="Jaelefo & Barten",
        publication="MOMI Magazine",
        date="November 2023",
        cover_image=f"{IMAGE_URL_PREFIX}gallery/editorial/editorial_004.jpg",
        paragraphs=[
            "Shot during the golden hour across several sessions, a series about desire, "
            "intensity and fleeting moments.",
            "Warm tones echo the sunset palette and fabrics catch the light.",
        ],
        images=numbered_urls("editorial", 4, 1) + numbered_urls("editorial", 9, 2),
        tags=["Collaboration", "Golden Hour", "Passion", "Dramatic"],
    ),
}


def get_photographer(photographer_id: str | None) -> Photographer | None:
    return PHOTOGRAPHERS.get(photographer_id or "")


def get_collection(collection_id: str | None) -> Collection | None:
    return COLLECTIONS.get(collection_id or "")


def get_campaign(campaign_id: str | None) -> Campaign | None:
    return CAMPAIGNS.get(campaign_id or "")


def get_article(slug: str | None) -> MagazineArticle | None:
    return MAGAZINE_ARTICLES.get(slug or "")
