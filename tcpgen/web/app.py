from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from tcpgen import logging_util
from tcpgen.exceptions import TCPGenError
from tcpgen.generator import load_catalog
from tcpgen.path_util import bases_dir, catalog_root_dir
from tcpgen.settings import WEB_HOST, WEB_PORT

from .services.asset_store import AssetStore

logger = logging_util.get_logger("tcpgen.web")

# Resolve template dir relative to this file
_THIS_DIR = Path(__file__).resolve().parent
_TEMPLATES_DIR = _THIS_DIR / "templates"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Load the catalog once for the lifetime of the process.

    A catalog that cannot be read aborts startup; requests never reload it.
    """
    root = catalog_root_dir()
    app.state.catalog = load_catalog(root)
    app.state.assets = AssetStore(bases_dir())
    logger.info("web_ready root=%s bases=%s", root, app.state.assets.base_dir)
    yield  # (no shutdown tasks currently)


app = FastAPI(title="TCP Generator", lifespan=_lifespan)

# Jinja templates
templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))


# --- Exception handling ---
@app.exception_handler(TCPGenError)
async def tcpgen_exception_handler(request: Request, exc: TCPGenError):
    rid = getattr(request.state, "request_id", None) or uuid.uuid4().hex
    logging.getLogger("tcpgen.web").error(
        f"Generation failed [rid={rid}] {request.method} {request.url.path}: {exc}"
    )
    return JSONResponse(status_code=500, content={
        "error": True,
        "status": 500,
        "code": exc.code,
        "detail": exc.message,
        "request_id": rid,
        "path": str(request.url.path),
    }, headers={"X-Request-ID": rid})


# Routers (the bases router holds the catch-all resource route and goes last)
from .routes import descriptors as descriptor_routes  # noqa: E402
from .routes import bases as bases_routes  # noqa: E402
app.include_router(descriptor_routes.router)
app.include_router(bases_routes.router)


def run() -> None:  # pragma: no cover - process entrypoint
    import uvicorn

    uvicorn.run(app, host=WEB_HOST, port=WEB_PORT)


if __name__ == "__main__":  # pragma: no cover
    run()
