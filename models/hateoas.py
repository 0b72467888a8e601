from pydantic import BaseModel, ConfigDict, Field


class HALLink(BaseModel):
    href: str           # resolved URL

    model_config = ConfigDict(frozen=True)


class ResourceIdentifier(BaseModel):
    """JSON:API resource identifier object: the `{type, id}` pair."""
    type: str = Field(..., description="Resource type of the target")
    id: str = Field(..., description="Identifier of the target")

    model_config = ConfigDict(frozen=True)
