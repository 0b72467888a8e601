from __future__ import annotations

from config.settings import settings, build_link_templates
from services.renderers.registry import RendererRegistry
from utils.hateoas import LinkResolver

# -----------------------------------------------------------------------------
# Default Registry
# -----------------------------------------------------------------------------
resolver = LinkResolver(build_link_templates(settings))

registry = RendererRegistry(resolver, jsonapi_version=settings.JSONAPI_VERSION)

# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------
def get_registry() -> RendererRegistry:
    """
    FastAPI dependency to provide the renderer registry.
    The registry is read-only after startup, so one instance serves every request.
    """
    return registry
