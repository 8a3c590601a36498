from __future__ import annotations

# Standard library imports
import os

# ----------------------------------------------------------------------------------
# CATALOG SOURCE LAYOUT
# ----------------------------------------------------------------------------------
# Word lists live under a single root directory:
#   <root>/types       -> category-headed item lists
#   <root>/conditions  -> flat condition list
#   <root>/modifiers   -> flat modifier list
#   <root>/anomalies   -> flat anomaly list

TYPES_DIRECTORY: str = 'types'
CONDITIONS_DIRECTORY: str = 'conditions'
MODIFIERS_DIRECTORY: str = 'modifiers'
ANOMALIES_DIRECTORY: str = 'anomalies'

# A type-file line starting with this marker switches the current category
HEADER_MARKER: str = '#'

# ----------------------------------------------------------------------------------
# GENERATION PROBABILITIES
# ----------------------------------------------------------------------------------

DESIGNER_PROBABILITY: float = 0.25

# Composite descriptors roll this many rounds; each round draws one integer in
# [0, ROLL_SIDES) per attribute and bumps the count when the draw exceeds the
# attribute's threshold (86 -> 13%, 94 -> 5%, 76 -> 23%).
COMPOSITE_ROUNDS: int = 4
ROLL_SIDES: int = 100
TYPE_THRESHOLD: int = 86
CONDITION_THRESHOLD: int = 94
MODIFIER_THRESHOLD: int = 86
ANOMALY_THRESHOLD: int = 76

# Largest number of type pairs a composite descriptor can ask for. Any category
# smaller than this may run dry while sampling without replacement.
MAX_TYPE_COUNT: int = 1 + COMPOSITE_ROUNDS
MIN_SAFE_CATEGORY_SIZE: int = MAX_TYPE_COUNT

# ----------------------------------------------------------------------------------
# RENDERING SERVICE
# ----------------------------------------------------------------------------------

IMAGE_EXTENSION: str = '.png'
TYPELESS_LABEL: str = 'typeless'
API_MAX_COUNT: int = 50


def _as_int(val: str | None, default: int) -> int:
    try:
        return int(val) if val is not None and str(val).strip() != "" else default
    except Exception:
        return default


WEB_HOST: str = os.getenv('TCPGEN_HOST', 'localhost')
WEB_PORT: int = _as_int(os.getenv('TCPGEN_PORT'), 17080)
