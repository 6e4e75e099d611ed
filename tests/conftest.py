from __future__ import annotations

import os
import string
from pathlib import Path
import sys

import pytest


# Ensure `import gridwords.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    # Tests must not pick up GRIDWORDS_* from the developer's shell.
    for key in list(os.environ):
        if key.upper().startswith("GRIDWORDS_"):
            monkeypatch.delenv(key)

    from gridwords.core.settings import get_settings
    from gridwords.services.codec import get_codec

    get_settings.cache_clear()
    get_codec.cache_clear()
    yield
    get_settings.cache_clear()
    get_codec.cache_clear()


@pytest.fixture()
def codec():
    from gridwords.services.codec import build_codec

    return build_codec()


@pytest.fixture()
def tiny_region():
    from gridwords.utils.region import Region

    # 20 x 20 cells; every constant is exact in binary floating point.
    return Region(
        min_lat=0.0,
        max_lat=0.25,
        min_lng=0.0,
        max_lng=0.25,
        meters_per_degree_lat=80.0,
        meters_per_degree_lng=80.0,
        cell_size_m=1.0,
    )


@pytest.fixture()
def letter_words():
    from gridwords.utils.words import WordList

    # 8 words -> 512 ids, enough for the 400 cells of tiny_region.
    return WordList(string.ascii_lowercase[:8])
