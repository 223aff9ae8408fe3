from nslogger.parsing.stream.decode import (
    decode_stream,
    decode_stream_result,
    iter_messages,
    render_message,
)
from nslogger.parsing.stream.frame import MessageFrame
from nslogger.parsing.stream.model import DecodedMessage, DecodeResult

__all__ = [
    "DecodeResult",
    "DecodedMessage",
    "MessageFrame",
    "decode_stream",
    "decode_stream_result",
    "iter_messages",
    "render_message",
]
