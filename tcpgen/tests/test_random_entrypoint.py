from __future__ import annotations

import math
from collections import Counter
from pathlib import Path
from types import MappingProxyType

import pytest

from tcpgen.exceptions import EmptyCatalogError, PoolExhaustedError
from tcpgen.generator import Catalog, Category, Tier, generate, load_catalog
from tcpgen.generator.random_entrypoint import (
    CompositeCounts,
    generate_composite,
    generate_simple,
    pick_type_pairs,
    roll_counts,
    sample_names,
)
from tcpgen.random_util import seeded_random
from tcpgen.tests.conftest import lines, write_tree

TRIALS = 20000


def _single_category_catalog(items) -> Catalog:
    return Catalog(
        categories=MappingProxyType({Category.FOOD: tuple(sorted(items))}),
        conditions=("Wet", "Dry"),
        modifiers=("Big",),
        anomalies=("Glow", "Echo"),
    )


def _is_simple(d) -> bool:
    return len(d.type_pairs) == 1 and not d.conditions and not d.modifiers and not d.anomalies


def test_simple_descriptor_shape(catalog) -> None:
    rng = seeded_random(101)
    for _ in range(200):
        d = generate_simple(catalog, rng)
        assert _is_simple(d)
        category, item = d.type_pairs[0]
        assert item in catalog.items(category)


def test_generate_is_deterministic_with_seed(catalog) -> None:
    out1 = [generate(catalog, seeded_random(12345)) for _ in range(3)]
    out2 = [generate(catalog, seeded_random(12345)) for _ in range(3)]
    assert out1 == out2


def test_composite_bounds_and_uniqueness(catalog) -> None:
    rng = seeded_random(102)
    for _ in range(2000):
        d = generate(catalog, rng)
        assert 1 <= len(d.type_pairs) <= 5
        assert 0 <= len(d.conditions) <= 4
        assert 0 <= len(d.modifiers) <= 4
        assert 0 <= len(d.anomalies) <= 4
        assert len(set(d.type_pairs)) == len(d.type_pairs)
        assert len(set(d.conditions)) == len(d.conditions)
        assert len({m.name for m in d.modifiers}) == len(d.modifiers)
        assert len({a.name for a in d.anomalies}) == len(d.anomalies)
        for category, item in d.type_pairs:
            assert item in catalog.items(category)
        assert all(isinstance(c, str) for c in d.conditions)
        assert all(m.tier in Tier for m in d.modifiers)
        assert all(a.tier in Tier for a in d.anomalies)


def test_without_replacement_exhausts_single_category_exactly() -> None:
    catalog = _single_category_catalog(["Apple", "Pear", "Plum"])
    rng = seeded_random(7)
    d = generate_composite(catalog, rng, counts=CompositeCounts(types=3))
    items = [item for _category, item in d.type_pairs]
    assert len(set(items)) == 3
    assert set(items) == {"Apple", "Pear", "Plum"}
    assert all(category is Category.FOOD for category, _item in d.type_pairs)


def test_category_pool_exhaustion_is_fatal() -> None:
    catalog = _single_category_catalog(["Apple", "Pear"])
    with pytest.raises(PoolExhaustedError) as excinfo:
        pick_type_pairs(catalog, 3, seeded_random(1))
    assert excinfo.value.pool == "Food"
    assert excinfo.value.available == 2
    assert excinfo.value.code == "POOL_EXHAUSTED"


def test_flat_list_exhaustion_is_fatal() -> None:
    catalog = _single_category_catalog(["Apple", "Pear", "Plum", "Fig", "Date"])
    with pytest.raises(PoolExhaustedError) as excinfo:
        generate_composite(catalog, seeded_random(1), counts=CompositeCounts(types=1, modifiers=2))
    assert excinfo.value.pool == "modifiers"


def test_generation_leaves_catalog_untouched(catalog) -> None:
    before = catalog.to_dict()
    rng = seeded_random(103)
    for _ in range(500):
        generate(catalog, rng)
    assert catalog.to_dict() == before


def test_empty_catalog_is_fatal(tmp_path: Path) -> None:
    catalog = load_catalog(write_tree(tmp_path, {}))
    with pytest.raises(EmptyCatalogError):
        generate(catalog, seeded_random(1))


def test_designer_rate_is_about_one_quarter(catalog) -> None:
    rng = seeded_random(104)
    hits = sum(generate(catalog, rng).designer for _ in range(TRIALS))
    assert abs(hits / TRIALS - 0.25) < 0.02


def test_modes_split_evenly(catalog) -> None:
    rng = seeded_random(105)
    # Composite descriptors can also come out single-typed and bare, so the
    # simple share sits a little above one half
    simple = sum(_is_simple(generate(catalog, rng)) for _ in range(TRIALS))
    p_bare = (0.87 ** 4) * (0.95 ** 4) * (0.87 ** 4) * (0.77 ** 4)
    expected = 0.5 + 0.5 * p_bare
    assert abs(simple / TRIALS - expected) < 0.02


def test_type_count_follows_shifted_binomial() -> None:
    rng = seeded_random(106)
    counts = Counter(roll_counts(rng).types for _ in range(TRIALS))
    assert set(counts) <= {1, 2, 3, 4, 5}
    for k in range(1, 6):
        expected = math.comb(4, k - 1) * (0.13 ** (k - 1)) * (0.87 ** (5 - k))
        assert abs(counts[k] / TRIALS - expected) < 0.015


def test_attribute_counts_match_thresholds() -> None:
    rng = seeded_random(107)
    rolls = [roll_counts(rng) for _ in range(TRIALS)]
    for attr, p in (("conditions", 0.05), ("modifiers", 0.13), ("anomalies", 0.23)):
        mean = sum(getattr(r, attr) for r in rolls) / TRIALS
        assert abs(mean - 4 * p) < 0.03
        assert max(getattr(r, attr) for r in rolls) <= 4


def test_tiers_are_roughly_uniform(catalog) -> None:
    rng = seeded_random(108)
    tiers = Counter()
    for _ in range(TRIALS):
        d = generate_composite(catalog, rng, counts=CompositeCounts(types=1, modifiers=2, anomalies=2))
        tiers.update(m.tier for m in d.modifiers)
        tiers.update(a.tier for a in d.anomalies)
    total = sum(tiers.values())
    assert set(tiers) == set(Tier)
    for tier in Tier:
        assert abs(tiers[tier] / total - 1 / 3) < 0.02


def test_category_choice_is_uniform_over_categories(tmp_path: Path) -> None:
    root = write_tree(tmp_path, {
        "types/a.txt": lines("#food", [f"Food{i}" for i in range(40)], "#weapon", "Sword"),
    })
    catalog = load_catalog(root)
    rng = seeded_random(109)
    picks = Counter(generate_simple(catalog, rng).type_pairs[0].category for _ in range(TRIALS))
    assert abs(picks[Category.WEAPON] / TRIALS - 0.5) < 0.02


def test_sample_names_covers_all_subsets() -> None:
    rng = seeded_random(110)
    population = ["a", "b", "c", "d"]
    seen = Counter(frozenset(sample_names("x", population, 2, rng)) for _ in range(6000))
    assert len(seen) == 6
    for count in seen.values():
        assert abs(count / 6000 - 1 / 6) < 0.03
