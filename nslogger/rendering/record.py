"""
Per-message record renderers.

A record collects the decoded fields of one message and renders them as a
single output line. ``TextRecord`` produces the delimited text format;
``JsonRecord`` produces one JSON object per message.
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from nslogger.parsing.parts.constants import part_key_name


class MessageRecord(ABC):
    @abstractmethod
    def add_string(self, key: int, value: str) -> None:
        ...

    @abstractmethod
    def add_int16(self, key: int, value: int) -> None:
        ...

    @abstractmethod
    def add_int32(self, key: int, value: int) -> None:
        ...

    @abstractmethod
    def add_int64(self, key: int, value: int) -> None:
        ...

    @abstractmethod
    def render(self) -> str:
        """Return the line, without a trailing line terminator."""


class TextRecord(MessageRecord):
    def __init__(self, separator: str = ",") -> None:
        self.separator = separator
        self._value = ""

    def add_field(self, text: str) -> None:
        if text:
            self._value += text + self.separator

    def add_string(self, key: int, value: str) -> None:
        self.add_field(value)

    # Integers are always rendered, zero included.
    def add_int16(self, key: int, value: int) -> None:
        self._value += f"{value}{self.separator}"

    def add_int32(self, key: int, value: int) -> None:
        self._value += f"{value}{self.separator}"

    def add_int64(self, key: int, value: int) -> None:
        self._value += f"{value}{self.separator}"

    def render(self) -> str:
        return self._value


class JsonRecord(MessageRecord):
    def __init__(self) -> None:
        self.fields: dict[str, Any] = {}

    def _put(self, key: int, value: Any) -> None:
        name = part_key_name(key)
        if name not in self.fields:
            self.fields[name] = value
            return
        current = self.fields[name]
        if isinstance(current, list):
            current.append(value)
        else:
            self.fields[name] = [current, value]

    def add_string(self, key: int, value: str) -> None:
        if value:
            self._put(key, value)

    def add_int16(self, key: int, value: int) -> None:
        self._put(key, value)

    def add_int32(self, key: int, value: int) -> None:
        self._put(key, value)

    def add_int64(self, key: int, value: int) -> None:
        self._put(key, value)

    def render(self) -> str:
        return json.dumps(self.fields, separators=(",", ":"), ensure_ascii=False)


RECORD_FORMATS: tuple[str, ...] = ("text", "json")


def create_record(output_format: str = "text", separator: str = ",") -> MessageRecord:
    if output_format == "text":
        return TextRecord(separator)
    if output_format == "json":
        return JsonRecord()
    raise ValueError(f"Unknown output format {output_format!r}, expected one of {RECORD_FORMATS}")
