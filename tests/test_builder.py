"""Tests for the message builder."""
import pytest

from nslogger.parsing.messages import build_log_message, build_message, encode_part
from nslogger.parsing.parts import LogMessageType, PartKey, PartType


def test_encode_fixed_parts():
    assert encode_part(PartKey.LEVEL, PartType.INT16, 3) == bytes([0x06, 0x02, 0x00, 0x03])
    assert encode_part(PartKey.THREAD_ID, PartType.INT32, -1) == bytes([0x04, 0x03, 0xFF, 0xFF, 0xFF, 0xFF])
    assert len(encode_part(PartKey.TIMESTAMP_S, PartType.INT64, 1)) == 10


def test_encode_string_part():
    assert encode_part(PartKey.MESSAGE, PartType.STRING, "hi") == bytes([0x07, 0x00, 0x00, 0x00, 0x00, 0x02]) + b"hi"


def test_encode_unknown_type():
    with pytest.raises(ValueError):
        encode_part(PartKey.MESSAGE, 9, "x")


def test_build_message_sizes():
    msg = build_message([(PartKey.MESSAGE, PartType.STRING, "hello"), (PartKey.LEVEL, PartType.INT16, 1)])
    assert int.from_bytes(msg[:4], "big") == len(msg) - 4
    assert int.from_bytes(msg[4:6], "big") == 2


def test_build_log_message_parts():
    msg = build_log_message("x", timestamp=5, message_type=LogMessageType.MARK)
    # MESSAGE_TYPE, TIMESTAMP_S, THREAD_ID, MESSAGE
    assert int.from_bytes(msg[4:6], "big") == 4
    assert msg[6:12] == bytes([0x00, 0x03, 0x00, 0x00, 0x00, 0x05])
