from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response

from ..services.asset_store import AssetStore
from ..services.image_filter import mask_png_bytes

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bases"])


@router.get("/{resource:path}")
def base_image(resource: str, request: Request):
    """Serve a file from the bases directory.

    Any query string on a PNG request runs it through the polar mask first.
    """
    store: AssetStore = request.app.state.assets
    path = store.resolve(resource)
    if path is None:
        logger.info("base_missing resource=%s", resource)
        return PlainTextResponse(f"{resource} doesn't exist", status_code=404)
    if request.url.query and path.suffix.lower() == ".png":
        return Response(content=mask_png_bytes(path.read_bytes()), media_type="image/png")
    return FileResponse(str(path))
