"""Descriptor value type, text rendering and asset filename derivation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from tcpgen.settings import IMAGE_EXTENSION, TYPELESS_LABEL

from .taxonomy import Category, Tier

# Ad-hoc descriptors from the rendering service may carry labels outside the
# taxonomy (e.g. "typeless"); generated ones always use Category members.
CategoryLabel = Union[Category, str]


class TypePair(NamedTuple):
    category: CategoryLabel
    item: str

    @property
    def label(self) -> str:
        if isinstance(self.category, Category):
            return self.category.display_name
        return str(self.category)

    @property
    def glyph(self) -> str:
        if isinstance(self.category, Category):
            return self.category.glyph
        return ""


class TieredName(NamedTuple):
    name: str
    tier: Optional[Tier] = None

    def render(self) -> str:
        if self.tier is None:
            return self.name
        return f"{self.name} ({self.tier.value})"


@dataclass(frozen=True)
class Descriptor:
    """One generated (or externally assembled) composite result."""

    type_pairs: Tuple[TypePair, ...] = ()
    conditions: Tuple[str, ...] = ()
    modifiers: Tuple[TieredName, ...] = ()
    anomalies: Tuple[TieredName, ...] = ()
    designer: bool = False

    @classmethod
    def from_names(
        cls,
        types: Sequence[str],
        conditions: Sequence[str] = (),
        modifiers: Sequence[str] = (),
        anomalies: Sequence[str] = (),
        designer: bool = False,
    ) -> "Descriptor":
        """Assemble a descriptor straight from caller-supplied names.

        Nothing is checked against a catalog and no tiers are assigned. A type
        name matching a category keyword is bound to that category; any other
        name is kept verbatim as its own label. An empty type list becomes
        ``["typeless"]``.
        """
        names = [t for t in types if t]
        if not names:
            names = [TYPELESS_LABEL]
        pairs = []
        for name in names:
            category = Category.from_keyword(name)
            if category is Category.UNKNOWN and name.strip().lower() != Category.UNKNOWN.keyword:
                pairs.append(TypePair(name, name))
            else:
                pairs.append(TypePair(category, name))
        return cls(
            type_pairs=tuple(pairs),
            conditions=tuple(conditions),
            modifiers=tuple(TieredName(m) for m in modifiers),
            anomalies=tuple(TieredName(a) for a in anomalies),
            designer=designer,
        )

    def type_labels(self) -> List[str]:
        return [pair.label for pair in self.type_pairs]

    def render_text(self) -> str:
        parts: List[str] = []
        if self.designer:
            parts.append("designer ")
        parts.append("/".join(f"{pair.glyph}{pair.item}" for pair in self.type_pairs))
        if self.conditions:
            parts.append(", conditions: " + ", ".join(self.conditions))
        if self.anomalies:
            parts.append(", anomalies: " + ", ".join(a.render() for a in self.anomalies))
        if self.modifiers:
            parts.append(", modifiers: " + ", ".join(m.render() for m in self.modifiers))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render_text()


def _canonical_join(names: Iterable[str]) -> str:
    return ".".join(sorted(name.lower() for name in names))


def asset_filename(descriptor: Descriptor, extension: str = IMAGE_EXTENSION) -> str:
    """Derive the canonical base-image filename for a descriptor.

    Type category labels, anomalies, conditions and modifiers are each
    lower-cased and sorted on their own, so pick order never changes the
    name: ``food.weapon-a_glow.png``.
    """
    filename = _canonical_join(descriptor.type_labels())
    if descriptor.anomalies:
        filename += "-a_" + _canonical_join(a.name for a in descriptor.anomalies)
    if descriptor.conditions:
        filename += "-c_" + _canonical_join(descriptor.conditions)
    if descriptor.modifiers:
        filename += "-m_" + _canonical_join(m.name for m in descriptor.modifiers)
    return filename + extension


def fallback_filenames(descriptor: Descriptor, extension: str = IMAGE_EXTENSION) -> List[Tuple[str, str]]:
    """Per-type ``(label, filename)`` candidates used when no combined base exists."""
    return [(label, f"{label.lower()}{extension}") for label in descriptor.type_labels()]


__all__ = ["Descriptor", "TypePair", "TieredName", "asset_filename", "fallback_filenames"]
