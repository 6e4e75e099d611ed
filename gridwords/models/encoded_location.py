from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EncodedLocation(BaseModel):
    """Three words for one grid cell, plus an optional floor.

    The floor is carried alongside the words; it is not part of grid_id.
    """

    model_config = ConfigDict(frozen=True)

    words: tuple[str, str, str]
    floor: int | None = Field(default=None, ge=0)
    grid_id: int = Field(ge=0)


class ParsedCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: tuple[str, str, str]
    floor: int | None = Field(default=None, ge=0)
