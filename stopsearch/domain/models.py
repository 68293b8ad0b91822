"""Pydantic models shared by the service and controller layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StopCandidate(BaseModel):
    """One autocomplete match: display name plus the opaque stop id."""

    model_config = ConfigDict(frozen=True, validate_by_alias=True, validate_by_name=True)

    name: str = Field(alias="n")
    id: str | None = Field(default=None, alias="i")


ResultSet = tuple[StopCandidate, ...]


__all__ = ["ResultSet", "StopCandidate"]
