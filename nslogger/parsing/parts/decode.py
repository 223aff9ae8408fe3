"""
Part decoder: reads one key/type/payload unit at a cursor.

The decoder never advances a shared cursor. It reports how many payload
bytes the part occupies after its 2-byte header, and the caller adds the
header itself when moving on to the next part.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Union

from nslogger.core.binary import read_int, read_uint8, read_uint32, require
from nslogger.errors import InvalidTimestampEncodingError, UnknownPartKeyError, UnknownPartTypeError
from nslogger.parsing.parts.constants import (
    FIXED_SIZES,
    LENGTH_FIELD_SIZE,
    PART_HEADER_SIZE,
    SIZED_TYPES,
    UNSUPPORTED_TYPES,
    USER_DEFINED_KEY_START,
    PartKey,
    PartType,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_KNOWN_KEYS: frozenset[int] = frozenset(int(k) for k in PartKey)
_TIMESTAMP_TYPES: frozenset[int] = frozenset({PartType.INT32, PartType.INT64, PartType.STRING})


@dataclass(frozen=True)
class DecodedPart:
    """
    One decoded part.

    Attributes:
        key: The raw part key.
        part_type: The raw part type.
        offset: Offset of the key byte in the buffer.
        consumed: Payload bytes after the 2-byte header, including any
            4-byte length field.
        value: Decoded integer or string; ``None`` for skipped payloads.
        text: Formatted value; empty for skipped payloads.
        hidden: The part is decoded but kept out of rendered output.
        skipped: The payload type is not supported and was not decoded.
    """
    key: int
    part_type: int
    offset: int
    consumed: int
    value: Union[int, str, None]
    text: str
    hidden: bool = False
    skipped: bool = False

    @property
    def total_size(self) -> int:
        return PART_HEADER_SIZE + self.consumed


def is_known_key(key: int, allow_user_keys: bool = False) -> bool:
    if key in _KNOWN_KEYS:
        return True
    return allow_user_keys and key >= USER_DEFINED_KEY_START


def format_timestamp(seconds: int, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Render Unix seconds as UTC text, or as the bare integer when out of range."""
    try:
        moment = dt.datetime.fromtimestamp(seconds, tz=dt.UTC)
    except (OverflowError, OSError, ValueError):
        return str(seconds)
    return moment.strftime(timestamp_format)


def _read_payload(buffer: bytes, payload_at: int, part_type: int) -> tuple[int, Union[int, str, None]]:
    size = FIXED_SIZES.get(part_type)
    if size is not None:
        return size, read_int(buffer, payload_at, size)

    length = read_uint32(buffer, payload_at)
    data_at = payload_at + LENGTH_FIELD_SIZE
    require(buffer, data_at, length)
    if part_type in UNSUPPORTED_TYPES:
        return LENGTH_FIELD_SIZE + length, None
    text = bytes(buffer[data_at: data_at + length]).decode("utf-8", errors="replace")
    return LENGTH_FIELD_SIZE + length, text


def decode_part(
    buffer: bytes,
    cursor: int,
    *,
    allow_user_keys: bool = False,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> DecodedPart:
    """
    Decode the part whose key byte sits at ``cursor``.

    Args:
        buffer: The complete stream.
        cursor: Offset of the part's key byte.
        allow_user_keys: Decode keys >= 100 generically instead of failing.
        timestamp_format: ``strftime`` format for integer ``TIMESTAMP_S`` parts.

    Returns:
        A ``DecodedPart``.

    Raises:
        UnknownPartKeyError, UnknownPartTypeError,
        InvalidTimestampEncodingError, TruncatedStreamError
    """
    key = read_uint8(buffer, cursor)
    if not is_known_key(key, allow_user_keys):
        raise UnknownPartKeyError(key, cursor)
    part_type = read_uint8(buffer, cursor + 1)
    if key == PartKey.TIMESTAMP_S and part_type not in _TIMESTAMP_TYPES:
        raise InvalidTimestampEncodingError(part_type, cursor)
    if part_type not in FIXED_SIZES and part_type not in SIZED_TYPES:
        raise UnknownPartTypeError(part_type, key, cursor)

    consumed, value = _read_payload(buffer, cursor + PART_HEADER_SIZE, part_type)

    if value is None:
        logger.debug("Skipping unsupported payload", extra={"details": {"key": key, "type": part_type}})
        return DecodedPart(key, part_type, cursor, consumed, None, "", skipped=True)

    if key == PartKey.TIMESTAMP_S and isinstance(value, int):
        text = format_timestamp(value, timestamp_format)
    else:
        text = str(value)
    return DecodedPart(key, part_type, cursor, consumed, value, text, hidden=key == PartKey.MESSAGE_SEQ)
