from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Protocol

from models.errors import UnsupportedFormatError
from models.render import RenderOptions
from models.resource import Resource
from services.renderers.hal import HALRenderer
from services.renderers.jsonapi import DEFAULT_JSONAPI_VERSION, JSONAPIRenderer
from utils.hateoas import LinkResolver


class Renderer(Protocol):
    media_type: str

    def render(self, resource: Resource, options: Optional[RenderOptions] = None) -> Dict[str, Any]:
        ...

    def render_collection(
        self,
        resources: Iterable[Resource],
        type: str,
        options: Optional[RenderOptions] = None,
    ) -> Dict[str, Any]:
        ...


# -----------------------------------------------------------------------------
# Renderer Registry
# -----------------------------------------------------------------------------
class RendererRegistry:
    """
    Selects a renderer by format name.

    Renderers are registered up front; render calls only read the table.
    """

    def __init__(self, resolver: LinkResolver, jsonapi_version: str = DEFAULT_JSONAPI_VERSION):
        self.resolver = resolver
        self._renderers: Dict[str, Renderer] = {}
        self._media_types: Dict[str, str] = {}
        self.register("hal", HALRenderer(resolver))
        self.register("jsonapi", JSONAPIRenderer(resolver, version=jsonapi_version))

    def register(self, name: str, renderer: Renderer, media_type: Optional[str] = None) -> None:
        self._renderers[name] = renderer
        self._media_types[name] = media_type or renderer.media_type

    def formats(self) -> List[str]:
        return list(self._renderers)

    def get(self, format: str) -> Renderer:
        renderer = self._renderers.get(format)
        if renderer is None:
            raise UnsupportedFormatError(
                f"Unsupported format '{format}'",
                details={"format": format, "supported": self.formats()},
            )
        return renderer

    def media_type(self, format: str) -> str:
        self.get(format)
        return self._media_types[format]

    def render(
        self,
        resource: Resource,
        format: str,
        options: Optional[RenderOptions] = None,
    ) -> Dict[str, Any]:
        return self.get(format).render(resource, options)

    def render_collection(
        self,
        resources: Iterable[Resource],
        type: str,
        format: str,
        options: Optional[RenderOptions] = None,
    ) -> Dict[str, Any]:
        return self.get(format).render_collection(resources, type, options)
