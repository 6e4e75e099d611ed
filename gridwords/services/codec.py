from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from functools import lru_cache

from gridwords.core.errors import (
    CapacityExceededError,
    CodecError,
    InvalidFloorError,
    InvalidWordCountError,
    OutOfRegionError,
    ParseError,
    UnknownWordError,
)
from gridwords.core.settings import Settings, get_settings
from gridwords.models.encoded_location import EncodedLocation, ParsedCode
from gridwords.models.location import Location
from gridwords.models.query import ResolvedQuery
from gridwords.utils.grid import (
    FLOOR_HEIGHT_M,
    altitude_to_floor,
    grid_id_to_cell,
    is_within_region,
    to_grid,
    to_lat_lng,
)
from gridwords.utils.region import DEFAULT_REGION, Region
from gridwords.utils.words import (
    WORDS_PER_CODE,
    WordSource,
    capacity,
    format_encoded_location,
    grid_id_to_word_indices,
    load_word_list,
    parse_encoded_location,
    word_indices_to_grid_id,
)


logger = logging.getLogger(__name__)

DEFAULT_MAX_FLOOR = 999

# "lat, lng" or "lat lng" as typed into a search box.
_COORDINATES_RE = re.compile(
    r"^\s*([-+]?\d+(?:\.\d+)?)\s*(?:,\s*|\s+)([-+]?\d+(?:\.\d+)?)\s*$"
)


class GridWordsCodec:
    """Encode region coordinates as three words and back.

    Stateless after construction: region and word list are read-only, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        *,
        region: Region = DEFAULT_REGION,
        words: WordSource,
        floor_height_m: float = FLOOR_HEIGHT_M,
        max_floor: int = DEFAULT_MAX_FLOOR,
    ) -> None:
        n = len(words)
        # Every in-region grid id must fit in three base-n digits.
        if capacity(n) < region.total_cells:
            raise CapacityExceededError(region.total_cells, capacity(n))

        self._region = region
        self._words = words
        self._n = n
        self._floor_height_m = floor_height_m
        self._max_floor = max_floor

    @property
    def region(self) -> Region:
        return self._region

    @property
    def words(self) -> WordSource:
        return self._words

    def encode(
        self, lat: float, lng: float, altitude: float | None = None
    ) -> EncodedLocation:
        if not is_within_region(lat, lng, region=self._region):
            logger.debug("Rejected out-of-region point lat=%s lng=%s", lat, lng)
            raise OutOfRegionError(
                f"({lat}, {lng}) is outside the covered region", lat=lat, lng=lng
            )

        cell = to_grid(lat, lng, region=self._region)

        floor: int | None = None
        if altitude is not None:
            if not math.isfinite(altitude):
                raise InvalidFloorError(
                    f"altitude must be finite, got {altitude!r}", altitude
                )
            # Below ground counts as the ground floor; codes carry no negative floors.
            floor = max(0, altitude_to_floor(altitude, floor_height_m=self._floor_height_m))

        indices = grid_id_to_word_indices(cell.grid_id, self._n)
        words = tuple(self._word_at(i) for i in indices)

        return EncodedLocation(words=words, floor=floor, grid_id=cell.grid_id)

    def decode(self, words: Sequence[str], floor: int | None = None) -> Location:
        if len(words) != WORDS_PER_CODE:
            logger.debug("Rejected %d-word code", len(words))
            raise InvalidWordCountError(len(words))

        indices: list[int] = []
        for word in words:
            index = self._words.get_index_by_word(word)
            if index is None or not 0 <= index < self._n:
                logger.debug("Rejected unknown word %r", word)
                raise UnknownWordError(word)
            indices.append(index)

        if floor is not None and floor < 0:
            raise InvalidFloorError(f"floor must be >= 0, got {floor}", floor)

        grid_id = word_indices_to_grid_id(indices, self._n)
        if grid_id >= self._region.total_cells:
            # Valid words, but the triple names no cell of this region.
            raise OutOfRegionError(
                f"grid_id {grid_id} is outside the covered region",
                grid_id=grid_id,
                total_cells=self._region.total_cells,
            )

        cell = grid_id_to_cell(grid_id, region=self._region)
        center = to_lat_lng(cell.x, cell.y, region=self._region)
        if floor is None:
            return center
        return center.model_copy(update={"floor": floor})

    def format_code(self, encoded: EncodedLocation) -> str:
        return format_encoded_location(encoded)

    def parse_code(self, text: str) -> ParsedCode:
        parsed = parse_encoded_location(text)
        if parsed is None:
            logger.debug("Rejected malformed code %r", text)
            raise ParseError(text, "expected word.word.word or word.word.word.floor")
        return parsed

    def decode_code(self, text: str) -> Location:
        parsed = self.parse_code(text)
        return self.decode(parsed.words, parsed.floor)

    def try_encode(
        self, lat: float, lng: float, altitude: float | None = None
    ) -> EncodedLocation | None:
        try:
            return self.encode(lat, lng, altitude)
        except CodecError:
            return None

    def try_decode(
        self, words: Sequence[str], floor: int | None = None
    ) -> Location | None:
        try:
            return self.decode(words, floor)
        except CodecError:
            return None

    def try_parse(self, text: str) -> ParsedCode | None:
        return parse_encoded_location(text)

    def resolve_query(self, query: str) -> ResolvedQuery | None:
        """Resolve free text that is either a three-word code or "lat, lng"."""

        parsed = parse_encoded_location(query)
        if parsed is not None and (parsed.floor is None or parsed.floor <= self._max_floor):
            location = self.try_decode(parsed.words, parsed.floor)
            if location is not None:
                encoded = self._encode_center(location)
                return ResolvedQuery(
                    kind="code",
                    location=location,
                    encoded=encoded,
                    code=self.format_code(encoded),
                )

        m = _COORDINATES_RE.match(query)
        if m is None:
            return None
        lat, lng = float(m.group(1)), float(m.group(2))
        encoded = self.try_encode(lat, lng)
        if encoded is None:
            return None
        return ResolvedQuery(
            kind="coordinates",
            location=Location(lat=lat, lng=lng),
            encoded=encoded,
            code=self.format_code(encoded),
        )

    def _encode_center(self, location: Location) -> EncodedLocation:
        encoded = self.encode(location.lat, location.lng)
        return encoded.model_copy(update={"floor": location.floor})

    def _word_at(self, index: int) -> str:
        word = self._words.get_word_by_index(index)
        if word is None:
            raise CapacityExceededError(index, len(self._words))
        return word


def build_codec(settings: Settings | None = None) -> GridWordsCodec:
    settings = settings or get_settings()
    codec = GridWordsCodec(
        region=Region.from_settings(settings),
        words=load_word_list(settings.word_list_path),
        floor_height_m=float(settings.floor_height_m),
        max_floor=int(settings.max_floor),
    )
    logger.info(
        "Built codec: %d x %d cells of %.1f m, %d words",
        codec.region.total_columns,
        codec.region.total_rows,
        codec.region.cell_size_m,
        len(codec.words),
    )
    return codec


@lru_cache
def get_codec() -> GridWordsCodec:
    return build_codec()


def encode(lat: float, lng: float, altitude: float | None = None) -> EncodedLocation:
    return get_codec().encode(lat, lng, altitude)


def decode(words: Sequence[str], floor: int | None = None) -> Location:
    return get_codec().decode(words, floor)


def format_code(encoded: EncodedLocation) -> str:
    return format_encoded_location(encoded)


def parse_code(text: str) -> ParsedCode:
    return get_codec().parse_code(text)
