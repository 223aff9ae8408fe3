"""
Part codec for the NSLogger binary message format.

Each message part is a key byte, a type byte and a payload whose size is
either implied by the type (16/32/64-bit integers) or given by a 4-byte
big-endian length (strings, binary data, images).
"""
from nslogger.parsing.parts.constants import (
    FIXED_SIZES,
    USER_DEFINED_KEY_START,
    LogMessageType,
    PartKey,
    PartType,
    part_key_name,
)
from nslogger.parsing.parts.decode import (
    DEFAULT_TIMESTAMP_FORMAT,
    DecodedPart,
    decode_part,
    format_timestamp,
    is_known_key,
)

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "DecodedPart",
    "FIXED_SIZES",
    "LogMessageType",
    "PartKey",
    "PartType",
    "USER_DEFINED_KEY_START",
    "decode_part",
    "format_timestamp",
    "is_known_key",
    "part_key_name",
]
