"""Define Pydantic models for request payloads and zone responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ZonePatchRequest(BaseModel):
    """Partial update for a zone.

    Every field is optional and accepts any JSON value. Only fields present
    in the incoming document are applied (``model_dump(exclude_unset=True)``),
    so an explicit ``null`` is distinguishable from an omitted key.
    """

    model_config = ConfigDict(extra="ignore")

    mode: Any = None
    r: Any = None
    g: Any = None
    b: Any = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ZoneResponse(BaseModel):
    """Serialized zone record; free-form extra attributes pass through."""

    model_config = ConfigDict(extra="allow")

    id: int
    mode: Any
    r: Any
    g: Any
    b: Any


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    error: str
