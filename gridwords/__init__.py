"""Three-word codes for 3 m grid cells inside a fixed geographic region."""

from __future__ import annotations

from gridwords.core.errors import (
    CapacityExceededError,
    CodecError,
    InvalidFloorError,
    InvalidWordCountError,
    OutOfRegionError,
    ParseError,
    UnknownWordError,
    WordListError,
)
from gridwords.models import EncodedLocation, GridCell, Location, ParsedCode, ResolvedQuery
from gridwords.services.codec import (
    GridWordsCodec,
    build_codec,
    decode,
    encode,
    format_code,
    get_codec,
    parse_code,
)
from gridwords.utils.region import DEFAULT_REGION, Region
from gridwords.utils.words import WordList, WordSource, load_word_list

__all__ = [
    "CapacityExceededError",
    "CodecError",
    "DEFAULT_REGION",
    "EncodedLocation",
    "GridCell",
    "GridWordsCodec",
    "InvalidFloorError",
    "InvalidWordCountError",
    "Location",
    "OutOfRegionError",
    "ParseError",
    "ParsedCode",
    "Region",
    "ResolvedQuery",
    "UnknownWordError",
    "WordList",
    "WordListError",
    "WordSource",
    "build_codec",
    "decode",
    "encode",
    "format_code",
    "get_codec",
    "load_word_list",
    "parse_code",
]
