"""Category taxonomy and severity tiers.

Categories form a closed enumeration whose declaration order is canonical:
catalogs expose their categories in this order and category selection during
generation indexes into it, so it must never depend on insertion or hash order.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Category(str, Enum):
    """Fixed category taxonomy plus the ``Unknown`` fallback."""

    ABSTRACT = "Abstract"
    BODY = "Body"
    CREATURE = "Creature"
    FOOD = "Food"
    MACHINE = "Machine"
    NATURE = "Nature"
    FORM = "Form"
    STORAGE = "Storage"
    WEAPON = "Weapon"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def glyph(self) -> str:
        return CATEGORY_GLYPHS[self]

    @property
    def keyword(self) -> str:
        """Header keyword recognised in type files (``#food``)."""
        return self.value.lower()

    @classmethod
    def from_keyword(cls, text: str) -> "Category":
        """Resolve a header keyword, case-insensitively; unmatched text is Unknown."""
        return _KEYWORD_INDEX.get(text.strip().lower(), cls.UNKNOWN)

    @classmethod
    def ordered(cls) -> List["Category"]:
        return list(cls)

    def __str__(self) -> str:
        return self.value


CATEGORY_GLYPHS: Dict[Category, str] = {
    Category.ABSTRACT: "🎭",
    Category.BODY: "👁️",
    Category.CREATURE: "🐈",
    Category.FOOD: "🌶",
    Category.MACHINE: "⚙️",
    Category.NATURE: "☁️",
    Category.FORM: "⚪",
    Category.STORAGE: "📦",
    Category.WEAPON: "🗡️",
    Category.UNKNOWN: "❓",
}

# Unknown has no header keyword of its own; "#unknown" still resolves to it
# through the fallback.
_KEYWORD_INDEX: Dict[str, Category] = {
    c.keyword: c for c in Category if c is not Category.UNKNOWN
}

CATEGORY_ORDER: Dict[Category, int] = {c: i for i, c in enumerate(Category)}


class Tier(str, Enum):
    """Severity label attached to modifiers and anomalies."""

    MINOR = "Minor"
    INTERMEDIATE = "Intermediate"
    MAJOR = "Major"

    def __str__(self) -> str:
        return self.value


TIERS: List[Tier] = list(Tier)


__all__ = ["Category", "CATEGORY_GLYPHS", "CATEGORY_ORDER", "Tier", "TIERS"]
