from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True)
class CodecError(Exception):
    """Recoverable codec failure with a machine-readable code."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        return make_error_payload(code=self.code, message=self.message, details=self.details)


class OutOfRegionError(CodecError):
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="OUT_OF_REGION", message=message, details=details or None)


class InvalidWordCountError(CodecError):
    def __init__(self, count: int) -> None:
        super().__init__(
            code="INVALID_WORD_COUNT",
            message=f"Expected 3 words, got {count}",
            details={"count": count},
        )


class UnknownWordError(CodecError):
    def __init__(self, word: str) -> None:
        super().__init__(
            code="UNKNOWN_WORD",
            message=f"Unknown word: {word!r}",
            details={"word": word},
        )


class ParseError(CodecError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(
            code="PARSE_ERROR",
            message=f"Cannot parse {text!r}: {reason}",
            details={"text": text, "reason": reason},
        )


class CapacityExceededError(CodecError):
    def __init__(self, value: int, capacity: int) -> None:
        super().__init__(
            code="CAPACITY_EXCEEDED",
            message=f"{value} does not fit in a three-word code (capacity {capacity})",
            details={"value": value, "capacity": capacity},
        )


class InvalidFloorError(CodecError):
    def __init__(self, message: str, value: Any) -> None:
        super().__init__(
            code="INVALID_FLOOR",
            message=message,
            details={"value": value},
        )


class WordListError(CodecError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(code="WORD_LIST_ERROR", message=message, details=details)


def make_error_payload(*, code: str, message: str, details: Any | None) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
    }
