from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from gridwords.models.encoded_location import EncodedLocation
from gridwords.models.location import Location


class ResolvedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    # "code" for "word.word.word[.floor]", "coordinates" for "lat, lng".
    kind: Literal["code", "coordinates"]
    location: Location
    encoded: EncodedLocation
    code: str
