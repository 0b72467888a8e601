from __future__ import annotations

import logging
import os
import socket
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, Path, Query, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from models.errors import HypermediaError, UnsupportedFormatError
from models.health import Health
from models.render import FormatInfo
from routers import render
from services.renderers.registry import RendererRegistry
from services.rendering import get_registry

port = int(os.environ.get("FASTAPIPORT", 8000))

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Hypermedia Renderer",
    description="Renders resource graphs as HAL or JSON:API hypermedia documents.",
    version="0.1.0",
)

# -----------------------------------------------------------------------------
# Error mapping
# -----------------------------------------------------------------------------
@app.exception_handler(HypermediaError)
async def hypermedia_error_handler(request: Request, exc: HypermediaError):
    status_code = 404 if isinstance(exc, UnsupportedFormatError) else 422
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "details": exc.details,
        },
    )

# -----------------------------------------------------------------------------
# Health endpoints
# -----------------------------------------------------------------------------

def _host_address() -> str:
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        return "127.0.0.1"

def make_health(echo: Optional[str], path_echo: Optional[str]=None) -> Health:
    return Health(
        status=200,
        status_message="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        ip_address=_host_address(),
        echo=echo,
        path_echo=path_echo
    )

@app.get("/health", response_model=Health)
def get_health_no_path(echo: str | None = Query(None, description="Optional echo string")):
    return make_health(echo=echo, path_echo=None)

@app.get("/health/{path_echo}", response_model=Health)
def get_health_with_path(
    path_echo: str = Path(..., description="Required echo in the URL path"),
    echo: str | None = Query(None, description="Optional echo string"),
):
    return make_health(echo=echo, path_echo=path_echo)

# -----------------------------------------------------------------------------
# Formats
# -----------------------------------------------------------------------------
@app.get("/formats", response_model=List[FormatInfo])
def list_formats(registry: RendererRegistry = Depends(get_registry)):
    return [
        FormatInfo(name=name, media_type=registry.media_type(name))
        for name in registry.formats()
    ]

# -----------------------------------------------------------------------------
# Routers
# -----------------------------------------------------------------------------

app.include_router(router=render.router)


# -----------------------------------------------------------------------------
# Root
# -----------------------------------------------------------------------------
@app.get("/")
def root():
    return {"message": "Hypermedia Renderer. POST a resource graph to /render/{format}; see /docs for OpenAPI UI."}

# -----------------------------------------------------------------------------
# Entrypoint for `python main.py`
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
