"""Polar masking filter applied to served base images.

Fully transparent pixels that fall on alternating 5 degree spokes around the
image centre, and inside the radial band rule below, are painted opaque black.
"""
from __future__ import annotations

from io import BytesIO

import numpy as np
from PIL import Image

MASK_COLOR = (0, 0, 0, 255)
SPOKE_PERIOD_DEG = 10.0
SPOKE_WIDTH_DEG = 5.0


def polar_mask(image: Image.Image) -> Image.Image:
    """Return an RGBA copy of ``image`` with the polar mask applied."""
    rgba = np.array(image.convert("RGBA"))
    height, width = rgba.shape[:2]
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    dx = width / 2.0 - xs
    dy = height / 2.0 - ys

    # atan2(dx, dy): angle measured from the vertical axis
    angle = np.degrees(np.arctan2(dx, dy)) + 360.0
    distance = np.hypot(dx, dy)
    root = np.sqrt(distance)
    with np.errstate(divide="ignore", invalid="ignore"):
        band = np.fmod(distance, root) > root / np.sqrt(root / 3.0)
    spokes = np.fmod(angle, SPOKE_PERIOD_DEG) < SPOKE_WIDTH_DEG

    mask = (rgba[..., 3] == 0) & spokes & band
    rgba[mask] = MASK_COLOR
    return Image.fromarray(rgba)


def mask_png_bytes(data: bytes) -> bytes:
    """Decode PNG bytes, apply :func:`polar_mask` and re-encode as PNG."""
    with Image.open(BytesIO(data)) as src:
        masked = polar_mask(src)
    out = BytesIO()
    masked.save(out, format="PNG")
    return out.getvalue()


__all__ = ["polar_mask", "mask_png_bytes"]
