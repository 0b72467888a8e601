from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field


class Health(BaseModel):
    status: int = Field(..., description="HTTP-style status code of the service")
    status_message: str = Field(..., description="Human-readable status")
    timestamp: str = Field(..., description="ISO-8601 timestamp of the check")
    ip_address: str = Field(..., description="Address of the host serving the request")
    echo: Optional[str] = Field(None, description="Echo of the query parameter, if given")
    path_echo: Optional[str] = Field(None, description="Echo of the path segment, if given")
