from nslogger.config import DecoderSettings, get_settings
from nslogger.errors import (
    DecodeError,
    FrameSizeMismatchError,
    InvalidTimestampEncodingError,
    TruncatedStreamError,
    UnknownPartKeyError,
    UnknownPartTypeError,
)
from nslogger.parsing.stream import DecodeResult, decode_stream, decode_stream_result
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "DecodeError",
    "DecodeResult",
    "DecoderSettings",
    "FrameSizeMismatchError",
    "InvalidTimestampEncodingError",
    "TruncatedStreamError",
    "UnknownPartKeyError",
    "UnknownPartTypeError",
    "decode_stream",
    "decode_stream_result",
    "get_settings",
]

try:
    __version__ = version("nslogger-decode")
except PackageNotFoundError:
    __version__ = "0.0.0"
