from __future__ import annotations

import os


def catalog_root_dir() -> str:
    """Return the root directory holding the word-list subtrees.

    Defaults to the current directory. Override with TCPGEN_ROOT for tests or
    alternate content packs.
    """
    try:
        base = os.getenv("TCPGEN_ROOT")
        base = base.strip() if isinstance(base, str) else None
        return base or "."
    except Exception:
        return "."


def bases_dir() -> str:
    """Return the directory of base images served by the web service.

    Defaults to '<root>/bases'. Override with TCPGEN_BASES_DIR.
    """
    try:
        base = os.getenv("TCPGEN_BASES_DIR")
        base = base.strip() if isinstance(base, str) else None
        return base or os.path.join(catalog_root_dir(), "bases")
    except Exception:
        return os.path.join(catalog_root_dir(), "bases")


def log_dir() -> str:
    """Return the log directory. Override with TCPGEN_LOG_DIR."""
    base = os.getenv("TCPGEN_LOG_DIR")
    base = base.strip() if isinstance(base, str) else None
    return base or "logs"
