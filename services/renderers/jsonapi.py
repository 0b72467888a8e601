from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from models.errors import IncludeNotResolvedError, MissingSelfLinkError
from models.hateoas import ResourceIdentifier
from models.render import RenderOptions
from models.resource import Cardinality, RelationshipRef, Resource, get_relationship
from utils.hateoas import LinkResolver


JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
DEFAULT_JSONAPI_VERSION = "1.1"


def _identifier(type: str, id: str) -> Dict[str, Any]:
    return ResourceIdentifier(type=type, id=id).model_dump()


def _linkage(rel: RelationshipRef) -> Any:
    """Resource linkage of a relationship: null/object for to-one, ordered list for to-many."""
    if rel.cardinality == Cardinality.ONE:
        if not rel.target_ids:
            return None
        return _identifier(rel.target_type, rel.target_ids[0])
    return [_identifier(rel.target_type, target_id) for target_id in rel.target_ids]


# -----------------------------------------------------------------------------
# JSON:API Renderer
# -----------------------------------------------------------------------------
class JSONAPIRenderer:
    """
    Renders a resource as a JSON:API document.

    Relationship linkage keeps the order of `target_ids`. Included resources
    come only from already resolved targets and appear once per (type, id)
    across the whole document.
    """

    media_type = JSONAPI_MEDIA_TYPE

    def __init__(self, resolver: LinkResolver, version: str = DEFAULT_JSONAPI_VERSION):
        self.resolver = resolver
        self.version = version

    def render(self, resource: Resource, options: Optional[RenderOptions] = None) -> Dict[str, Any]:
        include = set(options.include) if options else set()
        included_rels = self._included_relationships(resource, include)

        doc: Dict[str, Any] = {
            "jsonapi": {"version": self.version},
            "data": self._resource_object(resource),
        }
        if include:
            seen: Set[Tuple[str, Optional[str]]] = {resource.identifier}
            doc["included"] = self._collect_included(included_rels, seen)
        return doc

    def render_collection(
        self,
        resources: Iterable[Resource],
        type: str,
        options: Optional[RenderOptions] = None,
    ) -> Dict[str, Any]:
        resources = list(resources)
        include = set(options.include) if options else set()
        included_rels = [
            rel
            for resource in resources
            for rel in self._included_relationships(resource, include)
        ]

        doc: Dict[str, Any] = {
            "jsonapi": {"version": self.version},
            "links": {"self": self.resolver.resolve_collection(type)},
            "data": [self._resource_object(r) for r in resources],
        }
        if include:
            seen = {r.identifier for r in resources}
            doc["included"] = self._collect_included(included_rels, seen)
        return doc

    def _included_relationships(self, resource: Resource, include: Set[str]) -> List[RelationshipRef]:
        """
        Validate `include` against the resource and return the matching
        relationships in the resource's own relationship order.
        """
        for name in sorted(include):
            rel = get_relationship(resource, name)
            if rel.resolved_targets is None:
                raise IncludeNotResolvedError(
                    f"Relationship '{name}' of '{resource.type}' was requested in include but its targets are not resolved",
                    details={"type": resource.type, "id": resource.id, "relationship": name},
                )
        return [rel for rel in resource.relationships if rel.name in include]

    def _collect_included(
        self,
        relationships: Iterable[RelationshipRef],
        seen: Set[Tuple[str, Optional[str]]],
    ) -> List[Dict[str, Any]]:
        included: List[Dict[str, Any]] = []
        for rel in relationships:
            for target in rel.resolved_targets or []:
                if not target.id:
                    raise MissingSelfLinkError(
                        f"Included resource of type '{target.type}' in '{rel.name}' has no id",
                        details={"type": target.type, "relationship": rel.name},
                    )
                if target.identifier in seen:
                    continue
                seen.add(target.identifier)
                included.append(self._primary_data(target))
        return included

    def _primary_data(self, resource: Resource) -> Dict[str, Any]:
        return {
            "type": resource.type,
            "id": resource.id,
            "attributes": copy.deepcopy(resource.attributes),
        }

    def _resource_object(self, resource: Resource) -> Dict[str, Any]:
        obj = self._primary_data(resource)
        if resource.relationships:
            obj["relationships"] = {
                rel.name: {
                    "links": {"related": self.resolver.resolve_related(resource, rel.name)},
                    "data": _linkage(rel),
                }
                for rel in resource.relationships
            }
        obj["links"] = {"self": self.resolver.resolve_self(resource)}
        return obj
