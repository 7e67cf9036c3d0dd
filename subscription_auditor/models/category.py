from dataclasses import dataclass
from typing import Dict, Optional

OTHER = "Other"


@dataclass(frozen=True)
class CategoryMeta:
    """Display metadata for a category. Never used in any calculation."""

    name: str
    color: str
    icon: str


CATEGORIES: Dict[str, CategoryMeta] = {
    meta.name: meta
    for meta in (
        CategoryMeta("Entertainment", "#e63946", "🎬"),
        CategoryMeta("Music", "#e76f51", "🎵"),
        CategoryMeta("SaaS", "#2a9d8f", "💻"),
        CategoryMeta("Gaming", "#9b5de5", "🎮"),
        CategoryMeta("Fitness", "#00bbf9", "💪"),
        CategoryMeta("News", "#f4a261", "📰"),
        CategoryMeta("Cloud", "#577590", "☁️"),
        CategoryMeta("AI", "#43aa8b", "🤖"),
        CategoryMeta("Food", "#f9844a", "🍔"),
        CategoryMeta(OTHER, "#6c757d", "📦"),
    )
}


def is_known_category(name: Optional[str]) -> bool:
    return name in CATEGORIES


def aggregation_bucket(name: Optional[str]) -> str:
    """Category used when grouping; unrecognized names land in ``Other``."""
    return name if is_known_category(name) else OTHER


def category_meta(name: Optional[str]) -> CategoryMeta:
    return CATEGORIES[aggregation_bucket(name)]
