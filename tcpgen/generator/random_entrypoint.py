from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from tcpgen.exceptions import EmptyCatalogError, PoolExhaustedError
from tcpgen.random_util import get_random
from tcpgen.settings import (
    ANOMALY_THRESHOLD,
    COMPOSITE_ROUNDS,
    CONDITION_THRESHOLD,
    DESIGNER_PROBABILITY,
    MODIFIER_THRESHOLD,
    ROLL_SIDES,
    TYPE_THRESHOLD,
)

from .catalog_loader import Catalog
from .descriptor import Descriptor, TieredName, TypePair
from .taxonomy import TIERS, Category


@dataclass(frozen=True)
class CompositeCounts:
    """Rolled attribute counts for one composite descriptor."""

    types: int = 1
    conditions: int = 0
    modifiers: int = 0
    anomalies: int = 0


def roll_counts(rng: random.Random) -> CompositeCounts:
    """Roll the composite attribute counts.

    Each of the rounds draws four integers in [0, 100) in the fixed order
    type, condition, modifier, anomaly. After all rounds ``types`` lies in
    [1, 5] and the other counts in [0, 4], each binomially distributed.
    """
    types, conditions, modifiers, anomalies = 1, 0, 0, 0
    for _ in range(COMPOSITE_ROUNDS):
        if rng.randrange(ROLL_SIDES) > TYPE_THRESHOLD:
            types += 1
        if rng.randrange(ROLL_SIDES) > CONDITION_THRESHOLD:
            conditions += 1
        if rng.randrange(ROLL_SIDES) > MODIFIER_THRESHOLD:
            modifiers += 1
        if rng.randrange(ROLL_SIDES) > ANOMALY_THRESHOLD:
            anomalies += 1
    return CompositeCounts(types=types, conditions=conditions, modifiers=modifiers, anomalies=anomalies)


def _choose_category(categories: Sequence[Category], rng: random.Random) -> Category:
    # Uniform over categories, not weighted by how many items each holds
    return categories[rng.randrange(len(categories))]


def pick_type_pairs(catalog: Catalog, count: int, rng: random.Random) -> List[TypePair]:
    """Pick ``count`` type pairs, without replacement within each category.

    Categories are drawn with replacement. The first draw of a category copies
    its items into a scratch pool local to this call; every draw removes one
    item from that pool, so the shared catalog is never touched.

    Raises:
        PoolExhaustedError: a category is drawn more often than it has items.
    """
    categories = catalog.category_list()
    if not categories:
        raise EmptyCatalogError()
    pools: Dict[Category, List[str]] = {}
    pairs: List[TypePair] = []
    for _ in range(count):
        category = _choose_category(categories, rng)
        pool = pools.get(category)
        if pool is None:
            pool = pools[category] = list(catalog.items(category))
        if not pool:
            taken = sum(1 for pair in pairs if pair.category is category)
            raise PoolExhaustedError(
                category.display_name,
                requested=taken + 1,
                available=len(catalog.items(category)),
            )
        pairs.append(TypePair(category, pool.pop(rng.randrange(len(pool)))))
    return pairs


def sample_names(pool_name: str, population: Sequence[str], k: int, rng: random.Random) -> List[str]:
    """Uniformly sample ``k`` distinct names; every k-subset is equally likely."""
    if k > len(population):
        raise PoolExhaustedError(pool_name, requested=k, available=len(population))
    return rng.sample(list(population), k)


def _assign_tiers(names: Sequence[str], rng: random.Random) -> Tuple[TieredName, ...]:
    return tuple(TieredName(name, rng.choice(TIERS)) for name in names)


def generate_simple(catalog: Catalog, rng: random.Random, designer: bool = False) -> Descriptor:
    """Single-pick descriptor: one category, one item, nothing else."""
    categories = catalog.category_list()
    if not categories:
        raise EmptyCatalogError()
    category = _choose_category(categories, rng)
    items = catalog.items(category)
    if not items:
        raise PoolExhaustedError(category.display_name, requested=1, available=0)
    return Descriptor(type_pairs=(TypePair(category, rng.choice(items)),), designer=designer)


def generate_composite(
    catalog: Catalog,
    rng: random.Random,
    designer: bool = False,
    counts: Optional[CompositeCounts] = None,
) -> Descriptor:
    """Multi-attribute descriptor built from rolled (or supplied) counts."""
    if counts is None:
        counts = roll_counts(rng)
    type_pairs = pick_type_pairs(catalog, counts.types, rng)
    conditions = sample_names("conditions", catalog.conditions, counts.conditions, rng)
    modifiers = sample_names("modifiers", catalog.modifiers, counts.modifiers, rng)
    anomalies = sample_names("anomalies", catalog.anomalies, counts.anomalies, rng)
    return Descriptor(
        type_pairs=tuple(type_pairs),
        conditions=tuple(conditions),
        modifiers=_assign_tiers(modifiers, rng),
        anomalies=_assign_tiers(anomalies, rng),
        designer=designer,
    )


def generate(catalog: Catalog, rng: Optional[random.Random] = None) -> Descriptor:
    """Generate one descriptor from ``catalog``.

    - Designer flag: true with probability 0.25.
    - A fair bit then picks the simple (single pick) or composite mode.
    - Reads the catalog only; all entropy comes from ``rng``. Pass a seeded
      stream (``random_util.seeded_random``) to pin the output in tests.

    Raises:
        EmptyCatalogError: the catalog holds no categories.
        PoolExhaustedError: a category or flat list runs out of distinct
            elements; there is no clamping or retry.
    """
    if rng is None:
        rng = get_random()
    if not catalog.categories:
        raise EmptyCatalogError()
    designer = rng.random() < DESIGNER_PROBABILITY
    if rng.getrandbits(1) == 0:
        return generate_simple(catalog, rng, designer=designer)
    return generate_composite(catalog, rng, designer=designer)


def generate_many(catalog: Catalog, count: int, rng: Optional[random.Random] = None) -> List[Descriptor]:
    if rng is None:
        rng = get_random()
    return [generate(catalog, rng) for _ in range(max(0, int(count)))]


__all__ = [
    "CompositeCounts",
    "roll_counts",
    "pick_type_pairs",
    "sample_names",
    "generate_simple",
    "generate_composite",
    "generate",
    "generate_many",
]
