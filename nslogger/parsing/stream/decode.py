"""
Frame walker for NSLogger streams.

A stream is a sequence of messages, each prefixed with a 4-byte big-endian
size that excludes the prefix itself, followed by a 2-byte part count and
the parts.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from nslogger.config import DecoderSettings, get_settings
from nslogger.core.binary import require
from nslogger.errors import DecodeError, FrameSizeMismatchError
from nslogger.parsing.parts.constants import PartKey, PartType, part_key_name
from nslogger.parsing.parts.decode import DecodedPart, decode_part
from nslogger.parsing.stream.frame import SIZE_FIELD_SIZE, MessageFrame
from nslogger.parsing.stream.model import DecodedMessage, DecodeResult
from nslogger.rendering.record import MessageRecord, create_record

logger = logging.getLogger(__name__)


def _check_frame_size(message: DecodedMessage, strict: bool) -> None:
    frame = message.frame
    if message.consumed == frame.declared_parts_size:
        return
    if strict:
        raise FrameSizeMismatchError(frame.offset, frame.declared_parts_size, message.consumed)
    warning = f"frame_size_mismatch: offset={frame.offset} declared={frame.declared_parts_size} consumed={message.consumed}"
    logger.warning("Frame size mismatch", extra={"details": frame.as_dict() | {"consumed": message.consumed}})
    message.warnings.append(warning)


def iter_messages(buffer: bytes, settings: Optional[DecoderSettings] = None) -> Iterator[DecodedMessage]:
    """
    Walk ``buffer`` message by message.

    The cursor follows the bytes the parts actually use; a disagreement with
    the declared frame size is reported as a warning, or raised when
    ``settings.strict_frame_size`` is set.

    Yields:
        One ``DecodedMessage`` per message, in stream order.

    Raises:
        DecodeError: On the first malformed message.
    """
    settings = settings or get_settings()
    end = len(buffer)
    cursor = 0
    while cursor < end:
        total_size = MessageFrame.read_total_size(buffer, cursor)
        if settings.legacy_boundary:
            if cursor + total_size >= end:
                logger.debug("Final message reaches buffer end, not decoded", extra={"details": {"offset": cursor}})
                return
        else:
            require(buffer, cursor + SIZE_FIELD_SIZE, total_size)

        frame = MessageFrame.from_buffer(buffer, cursor, total_size)
        message = DecodedMessage(frame=frame)
        part_cursor = frame.parts_offset
        for _ in range(frame.part_count):
            part = decode_part(
                buffer,
                part_cursor,
                allow_user_keys=settings.allow_user_keys,
                timestamp_format=settings.timestamp_format,
            )
            if part.skipped:
                message.warnings.append(
                    f"unsupported_payload: offset={part.offset} key={part_key_name(part.key)} "
                    f"type={PartType(part.part_type).name} size={part.consumed - 4}"
                )
                logger.warning(
                    "%s payload not supported, skipped",
                    PartType(part.part_type).name,
                    extra={"details": {"offset": part.offset, "key": part.key}},
                )
            message.parts.append(part)
            part_cursor += part.total_size

        _check_frame_size(message, settings.strict_frame_size)
        logger.debug("Decoded message", extra={"details": frame.as_dict()})
        yield message
        cursor = message.next_offset


def render_part(record: MessageRecord, part: DecodedPart) -> None:
    if part.hidden or part.skipped:
        return
    if isinstance(part.value, int) and part.key != PartKey.TIMESTAMP_S:
        if part.part_type == PartType.INT16:
            record.add_int16(part.key, part.value)
        elif part.part_type == PartType.INT32:
            record.add_int32(part.key, part.value)
        else:
            record.add_int64(part.key, part.value)
        return
    record.add_string(part.key, part.text)


def render_message(message: DecodedMessage, record: MessageRecord) -> str:
    for part in message.parts:
        render_part(record, part)
    return record.render()


def _decode(buffer: bytes, separator: str, settings: DecoderSettings, result: DecodeResult) -> None:
    lines: list[str] = []
    try:
        for message in iter_messages(buffer, settings):
            record = create_record(settings.output_format, separator)
            lines.append(render_message(message, record) + "\n")
            result.warnings.extend(message.warnings)
    except DecodeError as exc:
        exc.partial = "".join(lines)
        raise
    finally:
        result.text = "".join(lines)
        result.message_count = len(lines)


def decode_stream(
    buffer: bytes,
    separator: Optional[str] = None,
    settings: Optional[DecoderSettings] = None,
) -> str:
    """
    Decode a whole stream into text, one line per message.

    Args:
        buffer: The raw stream.
        separator: Field separator; defaults to ``settings.separator``.
        settings: Decoder settings; defaults to ``get_settings()``.

    Returns:
        The rendered lines, each terminated by ``\\n``.

    Raises:
        DecodeError: With ``partial`` set to the lines decoded before the failure.
    """
    settings = settings or get_settings()
    result = DecodeResult()
    _decode(buffer, settings.separator if separator is None else separator, settings, result)
    return result.text


def decode_stream_result(
    buffer: bytes,
    separator: Optional[str] = None,
    settings: Optional[DecoderSettings] = None,
) -> DecodeResult:
    """Like ``decode_stream`` but reports a failure in the result instead of raising."""
    settings = settings or get_settings()
    result = DecodeResult()
    try:
        _decode(buffer, settings.separator if separator is None else separator, settings, result)
    except DecodeError as exc:
        logger.error("Decode failed: %s", exc, extra={"details": {"offset": exc.offset}})
        result.error = exc
    return result
