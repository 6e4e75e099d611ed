from __future__ import annotations

from pathlib import Path

import pytest

from gridwords.core.errors import CapacityExceededError
from gridwords.core.settings import Settings, get_settings
from gridwords.services.codec import build_codec, get_codec


def _use_tiny_region(monkeypatch: pytest.MonkeyPatch) -> None:
    # 20 x 20 cells, see the tiny_region fixture.
    monkeypatch.setenv("GRIDWORDS_MIN_LAT", "0")
    monkeypatch.setenv("GRIDWORDS_MAX_LAT", "0.25")
    monkeypatch.setenv("GRIDWORDS_MIN_LNG", "0")
    monkeypatch.setenv("GRIDWORDS_MAX_LNG", "0.25")
    monkeypatch.setenv("GRIDWORDS_METERS_PER_DEGREE_LAT", "80")
    monkeypatch.setenv("GRIDWORDS_METERS_PER_DEGREE_LNG", "80")
    monkeypatch.setenv("GRIDWORDS_CELL_SIZE_M", "1")


def test_settings_defaults() -> None:
    settings = Settings()
    assert (settings.min_lat, settings.max_lat) == (8.08, 13.50)
    assert (settings.min_lng, settings.max_lng) == (76.00, 80.50)
    assert settings.cell_size_m == 3.0
    assert settings.floor_height_m == 3.2
    assert settings.word_list_path is None
    assert get_settings() is get_settings()


def test_codec_built_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _use_tiny_region(monkeypatch)
    words_path = tmp_path / "words.txt"
    words_path.write_text("\n".join("abcdefgh"), encoding="utf-8")
    monkeypatch.setenv("GRIDWORDS_WORD_LIST_PATH", str(words_path))
    monkeypatch.setenv("gridwords_floor_height_m", "4")
    get_settings.cache_clear()

    codec = get_codec()
    assert codec.region.total_cells == 400
    assert len(codec.words) == 8

    encoded = codec.encode(0.1, 0.2, altitude=9.0)
    assert encoded.floor == 2
    assert codec.format_code(encoded) == ".".join(encoded.words) + ".2"


def test_codec_rejects_configured_word_list_too_small(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _use_tiny_region(monkeypatch)
    words_path = tmp_path / "words.txt"
    # 7**3 = 343 < 400 cells.
    words_path.write_text("\n".join("abcdefg"), encoding="utf-8")
    monkeypatch.setenv("GRIDWORDS_WORD_LIST_PATH", str(words_path))
    get_settings.cache_clear()

    with pytest.raises(CapacityExceededError):
        build_codec()


def test_max_floor_setting_limits_query_floors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDWORDS_MAX_FLOOR", "10")
    get_settings.cache_clear()

    codec = build_codec()
    words = ".".join(codec.encode(10.7905, 78.7047).words)
    assert codec.resolve_query(f"{words}.10") is not None
    assert codec.resolve_query(f"{words}.11") is None
