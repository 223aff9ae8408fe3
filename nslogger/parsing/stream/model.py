from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from nslogger.errors import DecodeError
from nslogger.parsing.parts.decode import DecodedPart
from nslogger.parsing.stream.frame import MessageFrame


@dataclass
class DecodedMessage:
    frame: MessageFrame
    parts: list[DecodedPart] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def consumed(self) -> int:
        """Bytes used by the parts, headers included."""
        return sum(part.total_size for part in self.parts)

    @property
    def next_offset(self) -> int:
        return self.frame.parts_offset + self.consumed


@dataclass
class DecodeResult:
    """
    Outcome of decoding a whole buffer.

    Attributes:
        text: Rendered lines of every fully decoded message.
        message_count: Number of messages rendered into ``text``.
        warnings: Non-fatal findings (skipped payloads, frame size drift).
        error: The failure that stopped decoding, if any.
    """
    text: str = ""
    message_count: int = 0
    warnings: list[str] = field(default_factory=list)
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
