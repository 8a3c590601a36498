from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from tcpgen.generator import Catalog, generate, generate_many
from tcpgen.random_util import get_random
from tcpgen.settings import API_MAX_COUNT

from ..app import templates
from ..models.descriptor_api import CatalogInfo, DescriptorBatch, DescriptorModel
from ..services.asset_store import AssetStore, render_baseless
from ..services.query_parser import descriptor_from_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["descriptors"])


def _catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def _assets(request: Request) -> AssetStore:
    return request.app.state.assets


@router.get("/", response_class=HTMLResponse)
async def descriptor_page(request: Request):
    """Render one descriptor and its base image.

    Without a query string a fresh descriptor is generated (own RNG per
    request); with one, the descriptor is assembled from the query as-is.
    """
    query = request.url.query
    if query:
        descriptor = descriptor_from_query(query)
    else:
        descriptor = generate(_catalog(request), get_random())
    lookup = _assets(request).lookup(descriptor)
    image_src = lookup["filename"]
    if lookup["found"] and descriptor.designer:
        image_src += "?designer"
    return templates.TemplateResponse(request, "descriptor.html", {
        "title": descriptor.render_text(),
        "found": lookup["found"],
        "filename": lookup["filename"],
        "image_src": image_src,
        "fallbacks": lookup["fallbacks"],
    })


@router.get("/info")
async def catalog_info(request: Request) -> CatalogInfo:
    return CatalogInfo.from_catalog(_catalog(request))


@router.get("/baseless", response_class=PlainTextResponse)
async def baseless(request: Request):
    """List catalog items that have no base image of their own."""
    missing = _assets(request).baseless(_catalog(request))
    return PlainTextResponse(render_baseless(missing))


@router.get("/api/descriptor")
async def api_descriptor(request: Request, count: int = Query(1, ge=1, le=API_MAX_COUNT)) -> DescriptorBatch:
    descriptors = generate_many(_catalog(request), count, get_random())
    logger.info("api_descriptor count=%s", count)
    return DescriptorBatch(
        count=len(descriptors),
        descriptors=[DescriptorModel.from_descriptor(d) for d in descriptors],
    )
