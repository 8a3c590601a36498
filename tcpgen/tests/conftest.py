"""Pytest configuration and shared word-list fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable

import pytest

# Keep test runs from writing logs into the working tree
os.environ.setdefault('TCPGEN_LOG_DIR', os.path.join(tempfile.gettempdir(), 'tcpgen-test-logs'))

FOOD = ["Apple", "Pear", "Plum", "Fig", "Date"]
WEAPON = ["Sword", "Axe", "Bow", "Spear", "Mace"]
NATURE = ["Cloud", "River", "Stone", "Tree", "Wind"]
CONDITIONS = ["Wet", "Frozen", "Burning", "Rotten", "Sleepy"]
MODIFIERS = ["Big", "Tiny", "Hollow", "Twin", "Heavy"]
ANOMALIES = ["Glow", "Echo", "Phase", "Drift", "Hum"]


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write ``{relative_path: text}`` below ``root`` and return ``root``."""
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    for sub in ("types", "conditions", "modifiers", "anomalies"):
        (root / sub).mkdir(parents=True, exist_ok=True)
    return root


def lines(*names: Iterable[str] | str) -> str:
    out = []
    for name in names:
        if isinstance(name, str):
            out.append(name)
        else:
            out.extend(name)
    return "\n".join(out) + "\n"


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """A small, well-formed word-list tree where every pool can satisfy composite descriptors."""
    return write_tree(tmp_path / "catalog", {
        "types/core.txt": lines("#food", FOOD, "", "#WEAPON", WEAPON),
        "types/extra/nature.txt": lines("  #Nature  ", NATURE),
        "conditions/all.txt": lines(CONDITIONS),
        "modifiers/all.txt": lines(MODIFIERS),
        "anomalies/all.txt": lines(ANOMALIES),
    })


@pytest.fixture
def catalog(catalog_root: Path):
    from tcpgen.generator import load_catalog

    return load_catalog(catalog_root)


@pytest.fixture(autouse=True)
def ensure_test_environment():
    """Restore environment variables mutated by a test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)
