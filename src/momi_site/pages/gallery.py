"""Category gallery pages: paging, lightbox navigation and display copy."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from momi_site.config import GALLERY_CATEGORIES, PAGE_SIZE
from momi_site.images.query import (
    get_categories_stats,
    get_category_images,
    get_image_path,
    paginate_images,
)
from momi_site.models import CategoryStats, ImageRecord, Manifest, PageResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CategoryCopy:
    """Hero text and cosmetic per-image captions of one gallery page."""

    title: str
    subtitle: str
    count_noun: str
    description: str
    titles: list[str]
    descriptions: list[str]


CATEGORY_COPY: dict[str, CategoryCopy] = {
    "fashion": CategoryCopy(
        title="Fashion",
        subtitle="Where style meets artistry",
        count_noun="fashion stories",
        description="Contemporary fashion photography",
        titles=[
            "Urban Elegance", "Runway Dreams", "Modern Silhouette", "Haute Couture",
            "Street Style", "Minimal Chic", "Avant-Garde", "Classic Revival",
            "Bold Statement", "Timeless Grace",
        ],
        descriptions=[
            "Contemporary fashion photography that balances bold styling with refined composition.",
            "A study of silhouette and texture in modern fashion.",
            "Editorial styling meets commercial clarity in this fashion frame.",
        ],
    ),
    "editorial": CategoryCopy(
        title="Editorial",
        subtitle="Stories told through fashion",
        count_noun="editorial stories",
        description="Editorial stories and campaigns",
        titles=[
            "Cover Story", "The Interview", "Visual Essay", "Feature Spread",
            "Behind the Lens", "Narrative Frame", "Press Moment", "Story Arc",
        ],
        descriptions=[
            "An editorial narrative built across a carefully sequenced series.",
            "Magazine-ready imagery with a strong sense of story.",
            "Fashion as a vehicle for character and place.",
        ],
    ),
    "cinematic": CategoryCopy(
        title="Cinematic",
        subtitle="Frames from films that never were",
        count_noun="cinematic frames",
        description="Film-inspired photography",
        titles=[
            "Golden Hour", "Film Noir", "Wide Shot", "Opening Scene",
            "Silver Screen", "Final Cut", "Slow Motion", "Long Take",
        ],
        descriptions=[
            "Film-inspired lighting and framing that suggest a larger story.",
            "A still that feels like a single frame from a feature film.",
            "Atmosphere and color grading borrowed from cinema.",
        ],
    ),
    "portrait": CategoryCopy(
        title="Portrait",
        subtitle="The essence of a person in a single frame",
        count_noun="portraits",
        description="Intimate portrait photography",
        titles=[
            "Quiet Gaze", "Inner Light", "Soft Focus", "True Self",
            "Still Moment", "Natural Grace", "Open Eyes", "Silent Story",
        ],
        descriptions=[
            "An intimate portrait that reveals character through light and expression.",
            "Natural light portraiture focused on authentic emotion.",
            "A close study of presence, pose and personality.",
        ],
    ),
    "wedding": CategoryCopy(
        title="Wedding",
        subtitle="Celebrating love's eternal moments",
        count_noun="love stories",
        description="Romantic wedding photography",
        titles=[
            "Eternal Promise", "Love's Symphony", "Sacred Moments", "Wedding Bliss",
            "Forever Begins", "Romantic Dreams", "Pure Joy", "Love Story",
            "Wedding Magic", "Heartfelt Vows",
        ],
        descriptions=[
            "A beautiful celebration of love captured through elegant wedding photography.",
            "Romantic wedding photography that tells the story of two hearts becoming one.",
            "Joy, elegance and emotional depth on the most important day.",
        ],
    ),
    "artistic": CategoryCopy(
        title="Artistic",
        subtitle="Experiments at the edge of fashion and fine art",
        count_noun="artworks",
        description="Experimental and artistic works",
        titles=[
            "Abstract Form", "Color Study", "Dreamscape", "Fragment",
            "Surreal Light", "Shadow Play", "Texture", "Reflection",
        ],
        descriptions=[
            "Experimental photography exploring form, color and abstraction.",
            "Fashion reinterpreted as a fine art object.",
            "A visual experiment in light and texture.",
        ],
    ),
}

_DEFAULT_COPY = CategoryCopy(
    title="Gallery",
    subtitle="",
    count_noun="works",
    description="Photography collection",
    titles=["Untitled"],
    descriptions=[""],
)


def category_copy(category: str) -> CategoryCopy:
    return CATEGORY_COPY.get(category, _DEFAULT_COPY)


def display_title(category: str, index: int) -> str:
    """Cosmetic caption chosen by position, not derived from the image."""
    titles = category_copy(category).titles
    return titles[index % len(titles)]


def display_description(category: str, index: int) -> str:
    descriptions = category_copy(category).descriptions
    return descriptions[index % len(descriptions)]


def navigate(index: int, length: int, direction: str) -> int:
    """Cyclic prev/next step over ``length`` items."""
    if length <= 0:
        raise ValueError("Cannot navigate an empty sequence")
    step = 1 if direction == "next" else -1
    return (index + step + length) % length


@dataclass
class Lightbox(Generic[T]):
    """Full-screen viewer over a fixed sequence of items."""

    items: list[T]
    index: int = 0

    @property
    def current(self) -> T:
        return self.items[self.index]

    def next(self) -> T:
        self.index = navigate(self.index, len(self.items), "next")
        return self.current

    def prev(self) -> T:
        self.index = navigate(self.index, len(self.items), "prev")
        return self.current


@dataclass
class GalleryView:
    """State of one category gallery page."""

    category: str
    images: list[ImageRecord] = field(default_factory=list)
    current_page: int = 1
    page_size: int = PAGE_SIZE

    @classmethod
    def load(cls, manifest: Manifest, category: str) -> "GalleryView":
        return cls(category=category, images=get_category_images(manifest, category))

    def page(self) -> PageResult:
        return paginate_images(self.images, self.current_page, self.page_size)

    def page_numbers(self) -> list[int]:
        return list(range(1, self.page().total_pages + 1))

    def go_to(self, page: int) -> PageResult:
        self.current_page = page
        return self.page()

    def captions(self) -> list[tuple[str, str]]:
        """(title, description) for each item on the current page."""
        return [
            (display_title(self.category, i), display_description(self.category, i))
            for i in range(len(self.page().items))
        ]

    def tiles(self, image_root: Path | None = None) -> list[tuple[ImageRecord, str]]:
        """(record, title) for each item on the current page whose file exists.

        Grid positions index this list, not ``page().items``.
        """
        shown = [
            (image, title)
            for image, (title, _) in zip(self.page().items, self.captions())
            if get_image_path(image, image_root).is_file()
        ]
        hidden = len(self.page().items) - len(shown)
        if hidden:
            logger.debug("Hiding %d missing images in %s", hidden, self.category)
        return shown

    def viewable(self, image_root: Path | None = None) -> list[ImageRecord]:
        """Category images whose file exists."""
        return [img for img in self.images if get_image_path(img, image_root).is_file()]

    def open_lightbox(self, image: ImageRecord) -> Lightbox[ImageRecord]:
        """Lightbox over all category images, positioned on ``image``."""
        return Lightbox(self.images, self.images.index(image))

    def open_tile(
        self, tile: int, image_root: Path | None = None
    ) -> Lightbox[ImageRecord] | None:
        """Lightbox over the viewable images, positioned on the record at grid ``tile``."""
        shown = self.tiles(image_root)
        if not 0 <= tile < len(shown):
            return None
        items = self.viewable(image_root)
        return Lightbox(items, items.index(shown[tile][0]))


def gallery_index(manifest: Manifest, active_filter: str = "all") -> list[CategoryStats]:
    """Stats rows of the gallery categories, optionally narrowed to one."""
    rows = [row for row in get_categories_stats(manifest) if row.id in GALLERY_CATEGORIES]
    if active_filter == "all":
        return rows
    return [row for row in rows if row.id == active_filter]
