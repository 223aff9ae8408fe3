"""Tests for settings and the ring-buffer log handler."""
import logging

import pytest
from pydantic import ValidationError

from nslogger.config import DecoderSettings
from nslogger.logging import RingBufferHandler, create_logger, get_ring_buffer
from nslogger.parsing.messages import build_message
from nslogger.parsing.parts import PartKey, PartType
from nslogger.parsing.stream import decode_stream


def test_settings_defaults():
    settings = DecoderSettings()
    assert settings.separator == ","
    assert settings.output_format == "text"
    assert settings.output_suffix == ".txt"
    assert settings.legacy_boundary is False
    assert settings.strict_frame_size is False
    assert settings.allow_user_keys is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("NSLOGGER_SEPARATOR", ";")
    monkeypatch.setenv("NSLOGGER_LEGACY_BOUNDARY", "true")
    monkeypatch.setenv("NSLOGGER_OUTPUT_FORMAT", "json")
    settings = DecoderSettings()
    assert settings.separator == ";"
    assert settings.legacy_boundary is True
    assert settings.output_format == "json"


def test_settings_rejects_unknown_format():
    with pytest.raises(ValidationError):
        DecoderSettings(output_format="xml")


def test_ring_buffer_handler_keeps_last_entries():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("nslogger.tests.ring")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        for i in range(3):
            logger.info("event %d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)
    events = handler.get_events()
    assert [e["event"] for e in events] == ["event 1", "event 2"]
    assert events[-1]["details"] == {"i": 2}
    assert events[-1]["level"] == "INFO"


def test_create_logger_reuses_handlers():
    first = create_logger("nslogger.tests.create", ring_size=5)
    second = create_logger("nslogger.tests.create", ring_size=50)
    assert first is second
    assert get_ring_buffer(first).max_entries == 5
    assert first.propagate is False


def test_skipped_payload_is_logged():
    handler = RingBufferHandler()
    logger = logging.getLogger("nslogger.parsing.stream.decode")
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        decode_stream(build_message([(PartKey.MESSAGE, PartType.BINARY, b"\x00\x01")]), ",", DecoderSettings())
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
    events = [e for e in handler.get_events() if e["level"] == "WARNING"]
    assert events[0]["event"] == "BINARY payload not supported, skipped"
    assert events[0]["details"]["key"] == PartKey.MESSAGE


def test_ring_buffer_format_and_clear():
    handler = RingBufferHandler()
    logger = logging.getLogger("nslogger.tests.format")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        logger.warning("Frame size mismatch", extra={"details": {"offset": 0, "consumed": 17}})
        logger.info("plain")
    finally:
        logger.removeHandler(handler)
    assert handler.format_events() == ["WARNING Frame size mismatch offset=0 consumed=17", "INFO plain"]
    handler.clear()
    assert handler.get_events() == []
