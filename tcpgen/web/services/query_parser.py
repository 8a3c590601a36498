"""Turn a rendering-service query string into an ad-hoc descriptor."""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple
from urllib.parse import unquote

from tcpgen.generator import Descriptor

logger = logging.getLogger(__name__)

_LIST_KEYS = ("types", "anomalies", "conditions", "modifiers")


def parse_query_pairs(query: str) -> List[Tuple[str, str | None]]:
    """Split a raw query into ``(key, value)`` pairs.

    Each ``&``-separated argument is percent-decoded as a whole before being
    split on the first ``=``; keys are lower-cased. A bare key has value None.
    """
    pairs: List[Tuple[str, str | None]] = []
    for arg in query.split("&"):
        if not arg:
            continue
        decoded = unquote(arg, errors="replace")
        key, sep, value = decoded.partition("=")
        pairs.append((key.lower(), value if sep else None))
    return pairs


def descriptor_from_query(query: str) -> Descriptor:
    """Build a descriptor from caller-supplied names, bypassing the catalog.

    List keys are comma-separated and may repeat; ``designer`` only needs to
    be present. Unknown keys are skipped with a warning.
    """
    lists: Dict[str, List[str]] = {key: [] for key in _LIST_KEYS}
    designer = False
    for key, value in parse_query_pairs(query):
        if key in lists:
            if value is not None:
                lists[key].extend(v for v in value.split(",") if v)
        elif key == "designer":
            designer = True
        else:
            logger.warning("Unknown parameter: %s", key)
    return Descriptor.from_names(
        lists["types"],
        conditions=lists["conditions"],
        modifiers=lists["modifiers"],
        anomalies=lists["anomalies"],
        designer=designer,
    )


__all__ = ["parse_query_pairs", "descriptor_from_query"]
