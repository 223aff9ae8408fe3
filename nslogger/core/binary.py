from __future__ import annotations

from nslogger.errors import TruncatedStreamError


def require(buffer: bytes, offset: int, size: int) -> None:
    available = max(len(buffer) - offset, 0)
    if size > available:
        raise TruncatedStreamError(offset, size, available)


def read_uint8(buffer: bytes, offset: int) -> int:
    require(buffer, offset, 1)
    return buffer[offset]


def read_uint16(buffer: bytes, offset: int) -> int:
    require(buffer, offset, 2)
    return (buffer[offset] << 8) | buffer[offset + 1]


def read_uint32(buffer: bytes, offset: int) -> int:
    require(buffer, offset, 4)
    return int.from_bytes(buffer[offset: offset + 4], byteorder="big")


def read_int(buffer: bytes, offset: int, size: int) -> int:
    """Read a signed big-endian integer of ``size`` bytes."""
    if size not in (2, 4, 8):
        raise ValueError("size must be 2, 4 or 8")
    require(buffer, offset, size)
    return int.from_bytes(buffer[offset: offset + size], byteorder="big", signed=True)
