from nslogger.rendering.record import (
    RECORD_FORMATS,
    JsonRecord,
    MessageRecord,
    TextRecord,
    create_record,
)

__all__ = ["RECORD_FORMATS", "JsonRecord", "MessageRecord", "TextRecord", "create_record"]
