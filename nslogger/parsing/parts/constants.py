"""
Wire constants for NSLogger message parts.

A part is a ``key`` byte (semantic meaning), a ``type`` byte (physical
encoding) and a payload. Integer types have an implicit size; strings,
binary blobs and images carry a 4-byte big-endian length before the data.
"""
from __future__ import annotations

from enum import IntEnum


class PartKey(IntEnum):
    MESSAGE_TYPE = 0
    TIMESTAMP_S = 1    # seconds since 1970-01-01 00:00 UTC
    TIMESTAMP_MS = 2   # milliseconds complement of TIMESTAMP_S
    TIMESTAMP_US = 3   # microseconds complement of TIMESTAMP_S
    THREAD_ID = 4
    TAG = 5
    LEVEL = 6
    MESSAGE = 7
    IMAGE_WIDTH = 8
    IMAGE_HEIGHT = 9
    MESSAGE_SEQ = 10
    FILENAME = 11
    LINENUMBER = 12
    FUNCTIONNAME = 13
    # Parts of a CLIENT_INFO message.
    CLIENT_NAME = 20
    CLIENT_VERSION = 21
    OS_NAME = 22
    OS_VERSION = 23
    CLIENT_MODEL = 24
    UNIQUEID = 25


class PartType(IntEnum):
    STRING = 0  # UTF-8
    BINARY = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    IMAGE = 5   # PNG


class LogMessageType(IntEnum):
    """Values carried by a ``PartKey.MESSAGE_TYPE`` part."""
    LOG = 0
    BLOCK_START = 1
    BLOCK_END = 2
    CLIENT_INFO = 3
    DISCONNECT = 4
    MARK = 5


# Keys from here on are reserved for application-defined parts.
USER_DEFINED_KEY_START = 100

# Payload sizes of the fixed-width types.
FIXED_SIZES: dict[int, int] = {
    PartType.INT16: 2,
    PartType.INT32: 4,
    PartType.INT64: 8,
}

# Types whose payload is preceded by a 4-byte length.
SIZED_TYPES: frozenset[int] = frozenset({PartType.STRING, PartType.BINARY, PartType.IMAGE})

# Sized types whose payload is skipped rather than decoded.
UNSUPPORTED_TYPES: frozenset[int] = frozenset({PartType.BINARY, PartType.IMAGE})

LENGTH_FIELD_SIZE = 4
PART_HEADER_SIZE = 2


def part_key_name(key: int) -> str:
    """Human-readable name of a part key; user keys become ``user_<n>``."""
    try:
        return PartKey(key).name.lower()
    except ValueError:
        return f"user_{key}"
