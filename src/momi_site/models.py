"""Data models for the image manifest."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ImageRecord:
    """A single organized image file.

    Two records with the same ``relative_path`` are the same image.
    """

    file_name: str = field(compare=False)
    relative_path: str
    original_path: str = field(default="", compare=False)
    size: int = field(default=0, compare=False)

    @classmethod
    def from_dict(cls, data: dict) -> "ImageRecord":
        return cls(
            file_name=data["fileName"],
            relative_path=data["relativePath"],
            original_path=data.get("originalPath", ""),
            size=int(data.get("size", 0)),
        )

    def to_dict(self) -> dict:
        return {
            "fileName": self.file_name,
            "relativePath": self.relative_path,
            "originalPath": self.original_path,
            "size": self.size,
        }


@dataclass(frozen=True)
class CategoryBucket:
    """One named collection of images."""

    count: int
    target_path: str
    images: tuple[ImageRecord, ...]

    @classmethod
    def from_dict(cls, data: dict) -> "CategoryBucket":
        images = tuple(ImageRecord.from_dict(img) for img in data["images"])
        count = int(data["count"])
        if count != len(images):
            raise ValueError(f"count {count} does not match {len(images)} images")
        return cls(count=count, target_path=data["targetPath"], images=images)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "targetPath": self.target_path,
            "images": [img.to_dict() for img in self.images],
        }


@dataclass(frozen=True)
class RandomSelection:
    """Generation-time selections for one category."""

    featured: tuple[ImageRecord, ...]
    random: tuple[ImageRecord, ...]

    @classmethod
    def from_dict(cls, data: dict) -> "RandomSelection":
        return cls(
            featured=tuple(ImageRecord.from_dict(img) for img in data.get("featured", [])),
            random=tuple(ImageRecord.from_dict(img) for img in data.get("random", [])),
        )

    def to_dict(self) -> dict:
        return {
            "featured": [img.to_dict() for img in self.featured],
            "random": [img.to_dict() for img in self.random],
        }


@dataclass(frozen=True)
class Manifest:
    """The generated image manifest, loaded once and never mutated."""

    categories: Mapping[str, CategoryBucket]
    total_images: int
    last_updated: str
    random_selections: Mapping[str, RandomSelection] = field(
        default_factory=lambda: MappingProxyType({})
    )
    global_random: tuple[ImageRecord, ...] = ()

    def __post_init__(self) -> None:
        # Freeze the mappings so callers cannot mutate shared state
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(
            self, "random_selections", MappingProxyType(dict(self.random_selections))
        )
        object.__setattr__(self, "global_random", tuple(self.global_random))

    @classmethod
    def from_dict(cls, data: dict) -> "Manifest":
        """Build a Manifest from either ``image-index.json`` or ``image-manifest.json``."""
        return cls(
            categories={
                name: CategoryBucket.from_dict(bucket)
                for name, bucket in data["categories"].items()
            },
            total_images=int(data["totalImages"]),
            last_updated=data["lastUpdated"],
            random_selections={
                name: RandomSelection.from_dict(sel)
                for name, sel in data.get("randomSelections", {}).items()
            },
            global_random=tuple(
                ImageRecord.from_dict(img) for img in data.get("globalRandom", [])
            ),
        )

    def to_index_dict(self) -> dict:
        """Fields written to ``image-index.json``."""
        return {
            "categories": {name: bucket.to_dict() for name, bucket in self.categories.items()},
            "totalImages": self.total_images,
            "lastUpdated": self.last_updated,
        }

    def to_dict(self) -> dict:
        """Fields written to ``image-manifest.json``."""
        data = self.to_index_dict()
        data["randomSelections"] = {
            name: sel.to_dict() for name, sel in self.random_selections.items()
        }
        data["globalRandom"] = [img.to_dict() for img in self.global_random]
        return data


@dataclass(frozen=True)
class PageResult:
    """One page of a paginated image list."""

    items: list[ImageRecord]
    current_page: int
    total_pages: int
    total_images: int
    has_more: bool
    has_previous: bool


@dataclass(frozen=True)
class CategoryStats:
    """Summary row for one category."""

    id: str
    name: str
    count: int
    target_path: str
    featured: str  # public URL of the first image
