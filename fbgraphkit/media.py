"""Media payloads for upload requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass
class MediaObject:
    """In-memory media content with its content type and file name."""

    content_type: str | None = None
    file_name: str | None = None
    _value: bytes | None = field(default=None, init=False, repr=False)

    @property
    def value(self) -> bytes | None:
        return self._value

    def set_value(self, value: bytes | bytearray | memoryview) -> MediaObject:
        """Store a copy of ``value`` and return this object for chaining."""
        self._value = bytes(value)
        return self


@dataclass(frozen=True)
class MediaStream:
    """A named binary stream to be uploaded."""

    file_name: str
    stream: BinaryIO