"""
Builder for NSLogger messages.

Constructs complete messages with the structure:
``[totalSize:u32] [partCount:u16] ([key:u8] [type:u8] [payload])*``
where ``totalSize`` excludes its own 4 bytes.
"""
from __future__ import annotations

import time
from typing import Iterable, Optional, Union

from nslogger.parsing.parts.constants import (
    FIXED_SIZES,
    SIZED_TYPES,
    LogMessageType,
    PartKey,
    PartType,
)

PartSpec = tuple[int, int, Union[int, str, bytes]]


def encode_part(key: int, part_type: int, value: Union[int, str, bytes]) -> bytes:
    """
    Encode a single part.

    Args:
        key: The part key.
        part_type: The part type.
        value: An int for integer types, ``str`` or ``bytes`` for sized types.

    Returns:
        The encoded part bytes, header included.
    """
    header = bytes([key & 0xFF, part_type & 0xFF])
    size = FIXED_SIZES.get(part_type)
    if size is not None:
        return header + int(value).to_bytes(size, byteorder="big", signed=True)
    if part_type in SIZED_TYPES:
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        return header + len(data).to_bytes(4, byteorder="big") + data
    raise ValueError(f"Cannot encode part type {part_type}")


def build_message(parts: Iterable[PartSpec]) -> bytes:
    """
    Build one framed message from ``(key, type, value)`` triples.

    Returns:
        The message bytes, starting with its 4-byte total size.
    """
    encoded = [encode_part(key, part_type, value) for key, part_type, value in parts]
    body = len(encoded).to_bytes(2, byteorder="big") + b"".join(encoded)
    return len(body).to_bytes(4, byteorder="big") + body


def build_log_message(
    message: str,
    *,
    timestamp: Optional[int] = None,
    thread_id: Union[int, str] = 1,
    tag: Optional[str] = None,
    level: Optional[int] = None,
    sequence: Optional[int] = None,
    message_type: int = LogMessageType.LOG,
) -> bytes:
    """
    Build a typical text log message.

    Args:
        message: The log text.
        timestamp: Unix seconds (defaults to now), encoded as INT64.
        thread_id: Numeric thread ids are INT32, names are strings.
        tag: Optional tag string.
        level: Optional log level.
        sequence: Optional message sequence number.
        message_type: One of ``LogMessageType``.

    Returns:
        The framed message bytes.
    """
    if timestamp is None:
        timestamp = int(time.time())
    parts: list[PartSpec] = [(PartKey.MESSAGE_TYPE, PartType.INT32, int(message_type))]
    if sequence is not None:
        parts.append((PartKey.MESSAGE_SEQ, PartType.INT32, sequence))
    parts.append((PartKey.TIMESTAMP_S, PartType.INT64, timestamp))
    if isinstance(thread_id, str):
        parts.append((PartKey.THREAD_ID, PartType.STRING, thread_id))
    else:
        parts.append((PartKey.THREAD_ID, PartType.INT32, thread_id))
    if tag is not None:
        parts.append((PartKey.TAG, PartType.STRING, tag))
    if level is not None:
        parts.append((PartKey.LEVEL, PartType.INT16, level))
    parts.append((PartKey.MESSAGE, PartType.STRING, message))
    return build_message(parts)
