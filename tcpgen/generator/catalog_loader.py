"""Loader for the word-list tree backing descriptor generation."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from tcpgen import logging_util
from tcpgen.exceptions import CatalogLoadError
from tcpgen.path_util import catalog_root_dir
from tcpgen.settings import (
    ANOMALIES_DIRECTORY,
    CONDITIONS_DIRECTORY,
    HEADER_MARKER,
    MIN_SAFE_CATEGORY_SIZE,
    MODIFIERS_DIRECTORY,
    TYPES_DIRECTORY,
)

from .taxonomy import CATEGORY_ORDER, Category

LOGGER = logging_util.get_logger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot of every loaded category and flat attribute list.

    ``categories`` iterates in canonical category order. Every sequence is
    sorted and duplicate-free; an item name belongs to at most one category.
    """

    categories: Mapping[Category, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    conditions: Tuple[str, ...] = ()
    modifiers: Tuple[str, ...] = ()
    anomalies: Tuple[str, ...] = ()

    def category_list(self) -> List[Category]:
        return list(self.categories.keys())

    def items(self, category: Category) -> Tuple[str, ...]:
        return self.categories.get(category, ())

    def type_count(self) -> int:
        return sum(len(items) for items in self.categories.values())

    def unknown_count(self) -> int:
        return len(self.items(Category.UNKNOWN))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "types": {c.display_name: list(items) for c, items in self.categories.items()},
            "conditions": list(self.conditions),
            "modifiers": list(self.modifiers),
            "anomalies": list(self.anomalies),
        }


def _resolve_root(override: str | os.PathLike[str] | None) -> Path:
    if override:
        return Path(override)
    return Path(catalog_root_dir())


def _iter_files(directory: Path) -> Iterator[Path]:
    """Yield every regular file below ``directory`` in sorted path order."""
    if not directory.is_dir():
        raise CatalogLoadError(str(directory), "directory not found")

    def _raise(exc: OSError) -> None:
        raise CatalogLoadError(str(exc.filename or directory), str(exc)) from exc

    for dirpath, dirnames, filenames in os.walk(directory, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.is_file():
                yield path


def _read_lines(path: Path) -> Iterator[str]:
    """Yield the trimmed, non-blank lines of a word-list file."""
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(str(path), str(exc)) from exc
    # Only "\n" ends a line; strip() drops a trailing "\r"
    for raw in text.split("\n"):
        line = raw.strip()
        if line:
            yield line


def _load_types(directory: Path) -> Dict[Category, Tuple[str, ...]]:
    seen: set[str] = set()
    buckets: Dict[Category, set[str]] = {}
    for path in _iter_files(directory):
        # Category state never carries over from the previous file
        current = Category.UNKNOWN
        for line in _read_lines(path):
            if line.startswith(HEADER_MARKER):
                current = Category.from_keyword(line[len(HEADER_MARKER):])
                continue
            if line in seen:
                continue
            seen.add(line)
            buckets.setdefault(current, set()).add(line)

    ordered = sorted(buckets.items(), key=lambda kv: CATEGORY_ORDER[kv[0]])
    return {category: tuple(sorted(names)) for category, names in ordered if names}


def _load_flat_list(directory: Path) -> Tuple[str, ...]:
    names: set[str] = set()
    for path in _iter_files(directory):
        names.update(_read_lines(path))
    return tuple(sorted(names))


def load_catalog(root: str | os.PathLike[str] | None = None) -> Catalog:
    """Walk the word-list tree under ``root`` and build an immutable catalog.

    Args:
        root: Directory containing ``types/``, ``conditions/``, ``modifiers/``
            and ``anomalies/``. Defaults to ``TCPGEN_ROOT`` or the current
            directory.

    Returns:
        A :class:`Catalog` whose contents depend only on the files' text, not
        on the host's directory iteration order.

    Raises:
        CatalogLoadError: when a source directory is missing or any file in
            it cannot be read. No partial catalog is produced.
    """
    resolved = _resolve_root(root)
    types = _load_types(resolved / TYPES_DIRECTORY)
    catalog = Catalog(
        categories=MappingProxyType(types),
        conditions=_load_flat_list(resolved / CONDITIONS_DIRECTORY),
        modifiers=_load_flat_list(resolved / MODIFIERS_DIRECTORY),
        anomalies=_load_flat_list(resolved / ANOMALIES_DIRECTORY),
    )

    for category, items in catalog.categories.items():
        if len(items) < MIN_SAFE_CATEGORY_SIZE:
            LOGGER.warning(
                "catalog_small_category category=%s size=%s minimum=%s",
                category.display_name, len(items), MIN_SAFE_CATEGORY_SIZE,
            )
    LOGGER.info(
        "catalog_loaded categories=%s types=%s unknown=%s conditions=%s modifiers=%s anomalies=%s root=%s",
        len(catalog.categories), catalog.type_count(), catalog.unknown_count(),
        len(catalog.conditions), len(catalog.modifiers), len(catalog.anomalies), resolved,
    )
    return catalog


__all__ = ["Catalog", "load_catalog"]
