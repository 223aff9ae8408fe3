from __future__ import annotations

from dataclasses import dataclass

from nslogger.core.binary import read_uint16, read_uint32
from nslogger.errors import TruncatedStreamError

SIZE_FIELD_SIZE = 4
COUNT_FIELD_SIZE = 2


@dataclass(frozen=True)
class MessageFrame:
    offset: int
    total_size: int
    part_count: int

    @property
    def parts_offset(self) -> int:
        return self.offset + SIZE_FIELD_SIZE + COUNT_FIELD_SIZE

    @property
    def declared_parts_size(self) -> int:
        return self.total_size - COUNT_FIELD_SIZE

    @classmethod
    def read_total_size(cls, buffer: bytes, offset: int) -> int:
        return read_uint32(buffer, offset)

    @classmethod
    def from_buffer(cls, buffer: bytes, offset: int, total_size: int | None = None) -> "MessageFrame":
        if total_size is None:
            total_size = cls.read_total_size(buffer, offset)
        # The size must at least cover the part count.
        if total_size < COUNT_FIELD_SIZE:
            raise TruncatedStreamError(offset + SIZE_FIELD_SIZE, COUNT_FIELD_SIZE, total_size)
        part_count = read_uint16(buffer, offset + SIZE_FIELD_SIZE)
        return cls(offset=offset, total_size=total_size, part_count=part_count)

    def as_dict(self) -> dict:
        return {
            "offset": self.offset,
            "total_size": self.total_size,
            "part_count": self.part_count,
        }
