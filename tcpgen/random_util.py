from __future__ import annotations

import random
import secrets

"""
Randomness sources for descriptor generation.

Every consumer (one console session, one web request) owns its own
random.Random so concurrent callers never share a stream, and nothing here
touches the module-level PRNG.
"""


def get_random() -> random.Random:
    """Return a fresh stream seeded from OS entropy."""
    return random.Random(secrets.randbits(63))


def seeded_random(seed: int) -> random.Random:
    """Return a deterministic stream for pinning generator output in tests."""
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    return random.Random(seed)
