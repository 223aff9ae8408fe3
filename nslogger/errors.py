"""Errors raised while decoding an NSLogger binary stream."""
from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """
    Base error for stream decoding.

    Attributes:
        offset: Byte offset in the buffer where the problem was detected.
        partial: Text of every message fully decoded before the failure.
    """

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (offset {offset})"
        super().__init__(message)
        self.offset = offset
        self.partial = ""


class TruncatedStreamError(DecodeError):
    def __init__(self, offset: int, needed: int, available: int) -> None:
        super().__init__(f"Stream truncated: need {needed} bytes, {available} available", offset)
        self.needed = needed
        self.available = available


class UnknownPartKeyError(DecodeError):
    def __init__(self, key: int, offset: int) -> None:
        super().__init__(f"Unknown part key {key}", offset)
        self.key = key


class UnknownPartTypeError(DecodeError):
    def __init__(self, part_type: int, key: int, offset: int) -> None:
        super().__init__(f"Unknown part type {part_type} for key {key}", offset)
        self.part_type = part_type
        self.key = key


class InvalidTimestampEncodingError(DecodeError):
    def __init__(self, part_type: int, offset: int) -> None:
        super().__init__(f"Timestamp can't be parsed using part type {part_type}", offset)
        self.part_type = part_type


class FrameSizeMismatchError(DecodeError):
    def __init__(self, offset: int, declared: int, consumed: int) -> None:
        super().__init__(f"Frame declares {declared} bytes but its parts used {consumed}", offset)
        self.declared = declared
        self.consumed = consumed
