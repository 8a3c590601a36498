"""Root package for the TCP generator.

The generator core lives in ``tcpgen.generator``; ``tcpgen.main`` is the
console entrypoint and ``tcpgen.web`` the rendering service.
"""

from __future__ import annotations

__version__ = "0.2.0"

__all__ = ["__version__"]
