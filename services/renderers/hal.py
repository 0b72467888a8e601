from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, List, Optional

from models.errors import ReservedAttributeError
from models.hateoas import HALLink
from models.render import RenderOptions
from models.resource import Cardinality, RelationshipRef, Resource
from utils.hateoas import LinkResolver


HAL_MEDIA_TYPE = "application/hal+json"

RESERVED_KEYS = ("_links", "_embedded")


def _link(href: str) -> Dict[str, Any]:
    return HALLink(href=href).model_dump()


def _has_link(rel: RelationshipRef) -> bool:
    # an empty to-one relationship points nowhere, so it gets no _links entry
    return not (rel.cardinality == Cardinality.ONE and not rel.target_ids)


# -----------------------------------------------------------------------------
# HAL Renderer
# -----------------------------------------------------------------------------
class HALRenderer:
    """
    Renders a resource as a HAL document.

    Attributes are flattened at the top level next to `_links`. To-many
    relationships with resolved targets are embedded under `_embedded`, one
    level deep: embedded children carry their own links but never their own
    `_embedded` section.
    """

    media_type = HAL_MEDIA_TYPE

    def __init__(self, resolver: LinkResolver):
        self.resolver = resolver

    def render(self, resource: Resource, options: Optional[RenderOptions] = None) -> Dict[str, Any]:
        return self._document(resource, embed=True)

    def render_collection(
        self,
        resources: Iterable[Resource],
        type: str,
        options: Optional[RenderOptions] = None,
    ) -> Dict[str, Any]:
        members: List[Dict[str, Any]] = [self._document(r, embed=False) for r in resources]
        return {
            "count": len(members),
            "_links": {"self": _link(self.resolver.resolve_collection(type))},
            "_embedded": {type: members},
        }

    def _links(self, resource: Resource) -> Dict[str, Any]:
        links: Dict[str, Any] = {"self": _link(self.resolver.resolve_self(resource))}
        for rel in resource.relationships:
            if _has_link(rel):
                links[rel.name] = _link(self.resolver.resolve_related(resource, rel.name))
        return links

    def _document(self, resource: Resource, embed: bool) -> Dict[str, Any]:
        for key in RESERVED_KEYS:
            if key in resource.attributes:
                raise ReservedAttributeError(
                    f"Attribute '{key}' of '{resource.type}' collides with a reserved HAL key",
                    details={"type": resource.type, "id": resource.id, "attribute": key},
                )

        doc: Dict[str, Any] = copy.deepcopy(resource.attributes)
        doc["_links"] = self._links(resource)

        if not embed:
            return doc

        embedded: Dict[str, Any] = {}
        for rel in resource.relationships:
            if rel.cardinality == Cardinality.MANY and rel.resolved_targets is not None:
                embedded[rel.name] = [
                    self._document(target, embed=False) for target in rel.resolved_targets
                ]
        if embedded:
            doc["_embedded"] = embedded
        return doc
