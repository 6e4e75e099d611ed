from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    floor: int | None = Field(default=None, ge=0)
