from __future__ import annotations
from enum import Enum as PyEnum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.errors import (
    CardinalityError,
    DuplicateRelationshipError,
    UnknownRelationshipError,
)

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------
class Cardinality(str, PyEnum):
    """How many targets a relationship points at"""
    ONE = "one"      # to-one: zero or one target
    MANY = "many"    # to-many: ordered list of targets


# -----------------------------------------------------------------------------
# Pydantic Models
# -----------------------------------------------------------------------------
class RelationshipRef(BaseModel):
    """One named relation from a source resource to zero, one or many targets."""
    name: str = Field(
        ...,
        min_length=1,
        description="Relationship name, unique per source resource (e.g., 'items')"
    )
    cardinality: Cardinality = Field(
        ...,
        description="Whether the relationship is to-one or to-many"
    )
    target_type: str = Field(
        ...,
        min_length=1,
        description="Resource type of the targets (e.g., 'item')"
    )
    target_ids: List[str] = Field(
        default_factory=list,
        description="Ordered identifiers of the targets; order is preserved on output"
    )
    resolved_targets: Optional[List[Resource]] = Field(
        None,
        description="Already loaded target resources, present only when the caller wants them embedded/included"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("target_ids", mode="before")
    @classmethod
    def _coerce_target_ids(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return value

    @model_validator(mode="after")
    def _check_cardinality(self) -> "RelationshipRef":
        if self.cardinality == Cardinality.ONE and len(self.target_ids) > 1:
            raise CardinalityError(
                f"Relationship '{self.name}' is to-one but has {len(self.target_ids)} target ids",
                details={"relationship": self.name, "target_ids": list(self.target_ids)},
            )
        return self


class Resource(BaseModel):
    """A single domain entity in a resource graph."""
    type: str = Field(
        ...,
        min_length=1,
        description="Resource type tag (e.g., 'order')"
    )
    id: Optional[str] = Field(
        None,
        description="Opaque identifier, unique within its type; absent for unsaved resources"
    )
    attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field values of the resource, excluding relationship fields"
    )
    relationships: List[RelationshipRef] = Field(
        default_factory=list,
        description="Ordered relationships of the resource"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @model_validator(mode="after")
    def _check_unique_relationships(self) -> "Resource":
        seen = set()
        for rel in self.relationships:
            if rel.name in seen:
                raise DuplicateRelationshipError(
                    f"Resource '{self.type}' already has a relationship named '{rel.name}'",
                    details={"type": self.type, "id": self.id, "relationship": rel.name},
                )
            seen.add(rel.name)
        return self

    @property
    def identifier(self) -> Tuple[str, Optional[str]]:
        return (self.type, self.id)


RelationshipRef.model_rebuild()


# -----------------------------------------------------------------------------
# Graph Operations
# -----------------------------------------------------------------------------
def new_resource(
    type: str,
    id: Optional[Any],
    attributes: Optional[Dict[str, Any]] = None,
) -> Resource:
    return Resource(type=type, id=id, attributes=dict(attributes or {}))


def add_relationship(
    resource: Resource,
    name: str,
    cardinality: Cardinality | str,
    target_type: str,
    target_ids: Optional[List[Any]] = None,
    resolved_targets: Optional[List[Resource]] = None,
) -> Resource:
    """
    Return a copy of `resource` with one more relationship appended.

    The original resource is left untouched. Raises DuplicateRelationshipError
    if the name is already taken and CardinalityError if a to-one relationship
    gets more than one target id.
    """
    if any(rel.name == name for rel in resource.relationships):
        raise DuplicateRelationshipError(
            f"Resource '{resource.type}' already has a relationship named '{name}'",
            details={"type": resource.type, "id": resource.id, "relationship": name},
        )

    rel = RelationshipRef(
        name=name,
        cardinality=Cardinality(cardinality),
        target_type=target_type,
        target_ids=list(target_ids or []),
        resolved_targets=list(resolved_targets) if resolved_targets is not None else None,
    )
    return resource.model_copy(
        update={"relationships": [*resource.relationships, rel]}
    )


def get_relationship(resource: Resource, name: str) -> RelationshipRef:
    for rel in resource.relationships:
        if rel.name == name:
            return rel
    raise UnknownRelationshipError(
        f"Resource '{resource.type}' has no relationship named '{name}'",
        details={"type": resource.type, "id": resource.id, "relationship": name},
    )
