import logging

from fastapi import APIRouter, Depends, Request

from config.settings import settings
from models.render import CollectionRenderRequest, RenderRequest
from services.renderers.registry import RendererRegistry
from services.rendering import get_registry
from utils.etag import document_response


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/render",
    tags=["Render"],
)


# -----------------------------------------------------------------------------
# POST Endpoints
# -----------------------------------------------------------------------------

@router.post("", status_code=200, name="render_default_format")
async def render_default_format(
    request: Request,
    payload: RenderRequest,
    registry: RendererRegistry = Depends(get_registry),
):
    """Render a resource in the configured default format"""
    return await render_resource(request, settings.DEFAULT_FORMAT, payload, registry)


@router.post("/{format}", status_code=200, name="render_resource")
async def render_resource(
    request: Request,
    format: str,
    payload: RenderRequest,
    registry: RendererRegistry = Depends(get_registry),
):
    """Render a single resource graph as a hypermedia document"""
    logger.debug("Rendering %s/%s as %s", payload.resource.type, payload.resource.id, format)

    document = registry.render(payload.resource, format, payload.options())
    return document_response(request, document, registry.media_type(format))


@router.post("/{format}/collection", status_code=200, name="render_collection")
async def render_collection(
    request: Request,
    format: str,
    payload: CollectionRenderRequest,
    registry: RendererRegistry = Depends(get_registry),
):
    """Render a list of resources of one type as a collection document"""
    logger.debug("Rendering %d %s resources as %s", len(payload.resources), payload.type, format)

    document = registry.render_collection(payload.resources, payload.type, format, payload.options())
    return document_response(request, document, registry.media_type(format))
