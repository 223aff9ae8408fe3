"""
Message construction for the NSLogger binary format.

The builder is the producer-side mirror of the decoder and is used to
assemble well-formed streams.
"""
from nslogger.parsing.messages.builder import build_log_message, build_message, encode_part

__all__ = ["build_log_message", "build_message", "encode_part"]
