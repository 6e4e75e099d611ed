from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    # Column / row inside the region; grid_id = y * total_columns + x.
    x: int
    y: int
    grid_id: int
