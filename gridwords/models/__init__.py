"""Value objects passed across the codec boundary."""

from __future__ import annotations

from gridwords.models.encoded_location import EncodedLocation, ParsedCode
from gridwords.models.grid_cell import GridCell
from gridwords.models.location import Location
from gridwords.models.query import ResolvedQuery

__all__ = [
    "EncodedLocation",
    "GridCell",
    "Location",
    "ParsedCode",
    "ResolvedQuery",
]
