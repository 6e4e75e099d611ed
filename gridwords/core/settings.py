from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDWORDS_",
        case_sensitive=False,
    )

    # Region bounds (degrees). Default covers Tamil Nadu.
    min_lat: float = 8.08
    max_lat: float = 13.50
    min_lng: float = 76.00
    max_lng: float = 80.50

    # Local flat-earth scale at ~10.5°N; not geodesically exact.
    meters_per_degree_lat: float = 110574.0
    meters_per_degree_lng: float = 109639.0  # cos(10.5°) * 111320

    # Grid
    cell_size_m: float = 3.0

    # Floors. 3.2 m is intentionally not the grid cell size.
    floor_height_m: float = 3.2
    max_floor: int = 999

    # Word list: None means the list bundled with the package.
    word_list_path: str | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
