from __future__ import annotations

"""Region grid math: lat/lng <-> cell <-> grid id, altitude -> floor.

Cells are quantized with floor (not round) so that re-encoding a decoded
cell center always lands in the same cell.
"""

import math

from gridwords.models.grid_cell import GridCell
from gridwords.models.location import Location
from gridwords.utils.region import DEFAULT_REGION, Region

FLOOR_HEIGHT_M = 3.2
EARTH_RADIUS_M = 6_371_000.0


def is_within_region(lat: float, lng: float, *, region: Region = DEFAULT_REGION) -> bool:
    # NaN fails every comparison; infinities fail the bounds.
    return (
        region.min_lat <= lat <= region.max_lat
        and region.min_lng <= lng <= region.max_lng
    )


def to_grid(lat: float, lng: float, *, region: Region = DEFAULT_REGION) -> GridCell:
    """Return the cell containing (lat, lng).

    Does not check the region; callers must. Points on the inclusive upper
    edges, and in the partial cell past the last full column/row, are
    clamped into the last full column/row.
    """

    cols = region.total_columns
    rows = region.total_rows

    x = math.floor(
        (lng - region.min_lng) * region.meters_per_degree_lng / region.cell_size_m
    )
    y = math.floor(
        (lat - region.min_lat) * region.meters_per_degree_lat / region.cell_size_m
    )
    x = min(x, cols - 1)
    y = min(y, rows - 1)

    return GridCell(x=x, y=y, grid_id=y * cols + x)


def grid_id_to_cell(grid_id: int, *, region: Region = DEFAULT_REGION) -> GridCell:
    if grid_id < 0 or grid_id >= region.total_cells:
        raise ValueError(
            f"grid_id {grid_id} outside [0, {region.total_cells})"
        )
    y, x = divmod(grid_id, region.total_columns)
    return GridCell(x=x, y=y, grid_id=grid_id)


def to_lat_lng(x: int, y: int, *, region: Region = DEFAULT_REGION) -> Location:
    """Return the center of cell (x, y)."""

    cell = region.cell_size_m
    lng = (
        region.min_lng
        + x * cell / region.meters_per_degree_lng
        + cell / 2.0 / region.meters_per_degree_lng
    )
    lat = (
        region.min_lat
        + y * cell / region.meters_per_degree_lat
        + cell / 2.0 / region.meters_per_degree_lat
    )
    return Location(lat=lat, lng=lng)


def altitude_to_floor(altitude: float, *, floor_height_m: float = FLOOR_HEIGHT_M) -> int:
    if not math.isfinite(altitude):
        raise ValueError(f"altitude must be finite, got {altitude!r}")
    return math.floor(altitude / floor_height_m)


def floor_to_altitude_range(
    floor: int, *, floor_height_m: float = FLOOR_HEIGHT_M
) -> tuple[float, float]:
    """Return (min, max) altitude in meters for a floor; max is 10 cm under the next floor."""

    return floor * floor_height_m, (floor + 1) * floor_height_m - 0.1


def distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    # Spherical (haversine) distance; plenty for meter-scale accuracy checks.
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    a = (
        math.sin(dphi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


def planar_distance_m(
    lat1: float, lng1: float, lat2: float, lng2: float, *, region: Region = DEFAULT_REGION
) -> float:
    """Distance in the region's own flat-earth meters (the metric cells are cut in)."""

    dy = (lat2 - lat1) * region.meters_per_degree_lat
    dx = (lng2 - lng1) * region.meters_per_degree_lng
    return math.hypot(dx, dy)
