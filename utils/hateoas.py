from __future__ import annotations
from typing import Dict, Optional, Tuple, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.errors import (
    MissingCollectionLinkError,
    MissingRelatedLinkError,
    MissingSelfLinkError,
)
from models.resource import Resource, get_relationship


ID_TOKEN = "{id}"
RELATIONSHIP_TOKEN = "{relationship}"
SELF_TOKEN = "{self}"

DEFAULT_RELATED_FALLBACK = SELF_TOKEN + "/" + RELATIONSHIP_TOKEN


# -----------------------------------------------------------------------------
# Link Templates
# -----------------------------------------------------------------------------
class LinkTemplates(BaseModel):
    """
    URL-template strategy for the link resolver.
    Patterns are plain paths with placeholder tokens substituted at resolve time.
    """
    base_url: str = Field(
        "",
        description="Prefix prepended to every resolved path (e.g., 'https://api.example.com')"
    )
    resource_paths: Dict[str, str] = Field(
        default_factory=dict,
        description="Self link pattern per resource type (e.g., {'order': '/orders/{id}'})"
    )
    related_paths: Dict[Tuple[str, str], str] = Field(
        default_factory=dict,
        description="Related link pattern per (type, relationship); 'type.relationship' keys are accepted"
    )
    collection_paths: Dict[str, str] = Field(
        default_factory=dict,
        description="Collection link pattern per resource type (e.g., {'order': '/orders'})"
    )
    related_fallback: Optional[str] = Field(
        DEFAULT_RELATED_FALLBACK,
        description="Pattern used when no related pattern matches; None disables the fallback"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("related_paths", mode="before")
    @classmethod
    def _split_dotted_keys(cls, value):
        if not isinstance(value, dict):
            return value
        out: Dict[Tuple[str, str], str] = {}
        for key, pattern in value.items():
            if isinstance(key, str):
                type_name, sep, rel_name = key.partition(".")
                if not sep or not type_name or not rel_name:
                    raise ValueError(f"related path key must look like 'type.relationship', got '{key}'")
                key = (type_name, rel_name)
            out[tuple(key)] = pattern
        return out


def _substitute(pattern: str, **tokens: str) -> str:
    # unknown {tokens} are left untouched
    for token, value in tokens.items():
        pattern = pattern.replace("{" + token + "}", value)
    return pattern


def _quote(value: str) -> str:
    return quote(value, safe="")


# -----------------------------------------------------------------------------
# Link Resolver
# -----------------------------------------------------------------------------
class LinkResolver:
    """
    Computes canonical URLs for resources and their relationships.

    Configured once with a LinkTemplates instance and read-only afterwards, so
    a single resolver can be shared across concurrent render calls.
    """

    def __init__(self, templates: Union[LinkTemplates, dict, None] = None):
        if templates is None:
            templates = LinkTemplates()
        elif isinstance(templates, dict):
            templates = LinkTemplates.model_validate(templates)
        self._templates = templates

    @property
    def templates(self) -> LinkTemplates:
        return self._templates

    def _self_path(self, resource: Resource) -> str:
        if not resource.id:
            raise MissingSelfLinkError(
                f"Resource of type '{resource.type}' has no id",
                details={"type": resource.type},
            )
        pattern = self._templates.resource_paths.get(resource.type)
        if pattern is None:
            raise MissingSelfLinkError(
                f"No path pattern configured for resource type '{resource.type}'",
                details={"type": resource.type, "id": resource.id},
            )
        return _substitute(pattern, id=_quote(resource.id), type=resource.type)

    def resolve_self(self, resource: Resource) -> str:
        return self._templates.base_url + self._self_path(resource)

    def resolve_related(self, resource: Resource, relationship_name: str) -> str:
        """
        Resolve the 'related' link of a relationship.

        Raises UnknownRelationshipError when the resource has no such
        relationship, and MissingRelatedLinkError when neither a specific
        pattern nor the fallback covers it.
        """
        get_relationship(resource, relationship_name)

        pattern = self._templates.related_paths.get((resource.type, relationship_name))
        if pattern is not None:
            if not resource.id and ID_TOKEN in pattern:
                raise MissingRelatedLinkError(
                    f"Resource of type '{resource.type}' has no id to build its '{relationship_name}' link",
                    details={"type": resource.type, "relationship": relationship_name},
                )
            path = _substitute(
                pattern,
                id=_quote(resource.id or ""),
                type=resource.type,
                relationship=relationship_name,
            )
            return self._templates.base_url + path

        fallback = self._templates.related_fallback
        if fallback is None:
            raise MissingRelatedLinkError(
                f"No related path pattern configured for '{resource.type}.{relationship_name}'",
                details={"type": resource.type, "relationship": relationship_name},
            )
        path = fallback
        if SELF_TOKEN in path:
            path = path.replace(SELF_TOKEN, self._self_path(resource))
        path = _substitute(
            path,
            id=_quote(resource.id or ""),
            type=resource.type,
            relationship=relationship_name,
        )
        return self._templates.base_url + path

    def resolve_collection(self, type: str) -> str:
        pattern = self._templates.collection_paths.get(type)
        if pattern is None:
            raise MissingCollectionLinkError(
                f"No collection path pattern configured for resource type '{type}'",
                details={"type": type},
            )
        return self._templates.base_url + _substitute(pattern, type=type)
