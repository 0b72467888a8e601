from __future__ import annotations
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from models.resource import Resource

# -----------------------------------------------------------------------------
# Render Options
# -----------------------------------------------------------------------------
class RenderOptions(BaseModel):
    include: Set[str] = Field(
        default_factory=set,
        description="Relationship names whose resolved targets go into the JSON:API 'included' list"
    )

    model_config = ConfigDict(frozen=True)


# -----------------------------------------------------------------------------
# Request Schemas
# -----------------------------------------------------------------------------
class RenderRequest(BaseModel):
    resource: Resource = Field(
        ...,
        description="Resource graph to render, with any resolved relationship targets"
    )
    include: Optional[List[str]] = Field(
        None,
        description="Relationship names to include (JSON:API only)"
    )

    def options(self) -> RenderOptions:
        return RenderOptions(include=set(self.include or []))


class CollectionRenderRequest(BaseModel):
    type: str = Field(
        ...,
        min_length=1,
        description="Resource type of the collection (selects the collection link pattern)"
    )
    resources: List[Resource] = Field(
        default_factory=list,
        description="Members of the collection, in output order"
    )
    include: Optional[List[str]] = Field(
        None,
        description="Relationship names to include (JSON:API only)"
    )

    def options(self) -> RenderOptions:
        return RenderOptions(include=set(self.include or []))


class FormatInfo(BaseModel):
    name: str = Field(..., description="Format name used in the render path")
    media_type: str = Field(..., description="Content type of documents in this format")
