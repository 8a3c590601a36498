"""Base-image lookups against the on-disk asset store."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from tcpgen.generator import Catalog, Descriptor, asset_filename
from tcpgen.generator.descriptor import fallback_filenames
from tcpgen.path_util import bases_dir
from tcpgen.settings import IMAGE_EXTENSION


class AssetStore:
    """Read-only view over the bases directory."""

    def __init__(self, base_dir: str | Path | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path(bases_dir())

    def resolve(self, filename: str) -> Optional[Path]:
        """Return the file for ``filename`` if it exists inside the store.

        Names that would escape the bases directory resolve to None.
        """
        if not filename:
            return None
        root = self.base_dir.resolve()
        candidate = (root / filename).resolve()
        try:
            candidate.relative_to(root)
        except ValueError:
            return None
        if not candidate.is_file():
            return None
        return candidate

    def exists(self, filename: str) -> bool:
        return self.resolve(filename) is not None

    def fallbacks_for(self, descriptor: Descriptor) -> List[Dict[str, str]]:
        """Per-type bases that exist, for descriptors with no combined base."""
        found = []
        for label, filename in fallback_filenames(descriptor):
            if self.exists(filename):
                found.append({"label": label, "filename": filename})
        return found

    def lookup(self, descriptor: Descriptor) -> Dict[str, object]:
        filename = asset_filename(descriptor)
        if self.exists(filename):
            return {"filename": filename, "found": True, "fallbacks": []}
        return {"filename": filename, "found": False, "fallbacks": self.fallbacks_for(descriptor)}

    def baseless(self, catalog: Catalog) -> Dict[str, List[str]]:
        """Items, per category, that have no ``<item>.png`` base of their own."""
        missing: Dict[str, List[str]] = {}
        for category, items in catalog.categories.items():
            names = [item for item in items if not self.exists(f"{item}{IMAGE_EXTENSION}")]
            if names:
                missing[category.display_name] = names
        return missing


def render_baseless(missing: Dict[str, List[str]]) -> str:
    out = []
    for category, names in missing.items():
        out.append(f"{category} {{\n    " + "\n    ".join(names) + "\n}\n")
    return "".join(out)


__all__ = ["AssetStore", "render_baseless"]
