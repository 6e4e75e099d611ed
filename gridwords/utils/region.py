from __future__ import annotations

import math
from dataclasses import dataclass

from gridwords.core.settings import Settings, get_settings


@dataclass(frozen=True)
class Region:
    """Axis-aligned bounding box cut into square cells of ``cell_size_m``.

    Degree-to-meter scales are a flat-earth approximation valid near the
    region's mean latitude only.
    """

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float
    meters_per_degree_lat: float
    meters_per_degree_lng: float
    cell_size_m: float

    def __post_init__(self) -> None:
        for name in (
            "min_lat",
            "max_lat",
            "min_lng",
            "max_lng",
            "meters_per_degree_lat",
            "meters_per_degree_lng",
            "cell_size_m",
        ):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if not self.min_lat < self.max_lat:
            raise ValueError("min_lat must be < max_lat")
        if not self.min_lng < self.max_lng:
            raise ValueError("min_lng must be < max_lng")
        if self.meters_per_degree_lat <= 0 or self.meters_per_degree_lng <= 0:
            raise ValueError("meters_per_degree_* must be > 0")
        if self.cell_size_m <= 0:
            raise ValueError("cell_size_m must be > 0")
        if self.total_columns < 1 or self.total_rows < 1:
            raise ValueError("region must be at least one cell wide and tall")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Region:
        settings = settings or get_settings()
        return cls(
            min_lat=float(settings.min_lat),
            max_lat=float(settings.max_lat),
            min_lng=float(settings.min_lng),
            max_lng=float(settings.max_lng),
            meters_per_degree_lat=float(settings.meters_per_degree_lat),
            meters_per_degree_lng=float(settings.meters_per_degree_lng),
            cell_size_m=float(settings.cell_size_m),
        )

    @property
    def total_columns(self) -> int:
        return math.floor(
            (self.max_lng - self.min_lng) * self.meters_per_degree_lng / self.cell_size_m
        )

    @property
    def total_rows(self) -> int:
        return math.floor(
            (self.max_lat - self.min_lat) * self.meters_per_degree_lat / self.cell_size_m
        )

    @property
    def total_cells(self) -> int:
        return self.total_columns * self.total_rows


DEFAULT_REGION = Region(
    min_lat=8.08,
    max_lat=13.50,
    min_lng=76.00,
    max_lng=80.50,
    meters_per_degree_lat=110574.0,
    meters_per_degree_lng=109639.0,
    cell_size_m=3.0,
)
