"""Zero-copy message view.

This module provides MessageView, a read-only view over a caller-owned buffer
holding one encoded message. The view records where the address, type tags and
arguments live, and keeps a read cursor that moves forward as arguments are
extracted. Nothing is copied until a value is returned.
"""

from __future__ import annotations

import math
import re
import struct
from functools import lru_cache
from typing import Any, Callable, Iterator, Optional, Union

from ..alignment import align4, padded_string_size
from ..exceptions import (
    DecodeError,
    OutOfBoundsError,
    TruncatedBlobError,
    TruncatedStringError,
    TypeTagMismatchError,
    UnknownTypeTagError,
)

Buffer = Union[bytes, bytearray, memoryview]

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")
_FLOAT32 = struct.Struct(">f")


def find_byte(data: Buffer, value: int, start: int, end: int) -> int:
    """Return the offset of the first ``value`` byte in ``data[start:end]``, or -1.

    bytes and bytearray are searched in place. Other buffers go through the
    regex engine, which scans any contiguous buffer without copying it.
    """
    if isinstance(data, (bytes, bytearray)):
        return data.find(value, start, end)
    match = _byte_pattern(value).search(data, start, end)
    return -1 if match is None else match.start()


@lru_cache(maxsize=None)
def _byte_pattern(value: int) -> re.Pattern[bytes]:
    return re.compile(re.escape(bytes((value,))))


class MessageView:
    """Read-only view over one encoded message.

    A view is created by :func:`oscwire.codec.parse`. It does not own the
    buffer: the buffer must stay alive and unmodified while the view is used.

    Arguments are read in type-tag order, one call per tag. Every read checks
    that it matches the next tag and that it stays inside the buffer before
    touching any byte. A failed read leaves the cursor where it was.

    The arguments form a single forward-only sequence; parse the buffer again
    to read them a second time. A view must not be shared between concurrent
    readers.

    Example:
        >>> view = parse(data)
        >>> view.address, view.type_tags
        ('/mixer/volume', 'if')
        >>> view.read_int32()
        3
        >>> view.read_float32()
        0.5
    """

    def __init__(
        self,
        data: Buffer,
        buffer: memoryview,
        address_end: int,
        type_tags_offset: int,
        type_tags_end: int,
        arguments_offset: int,
    ) -> None:
        self._data = data
        self._buffer = buffer
        self._length = len(buffer)
        self._address_end = address_end
        self._type_tags_offset = type_tags_offset
        self._type_tags_end = type_tags_end
        self._arguments_offset = arguments_offset
        self._type_tags = bytes(buffer[type_tags_offset + 1 : type_tags_end]).decode("latin-1")
        self._cursor = arguments_offset
        self._tag_index = 0

        self._readers: dict[str, Callable[[], Any]] = {
            "i": self.read_int32,
            "f": self.read_float32,
            "s": self.read_string,
            "b": self.read_blob,
            "T": self.read_true,
            "F": self.read_false,
            "N": self.read_nil,
            "I": self.read_infinitum,
        }

    def __repr__(self) -> str:
        return (
            f"MessageView(address={bytes(self.address_bytes)!r}, type_tags={self._type_tags!r}, "
            f"length={self._length}, cursor={self._cursor})"
        )

    @property
    def buffer(self) -> memoryview:
        """Read-only view of the message bytes."""
        return self._buffer

    @property
    def length(self) -> int:
        """Total message length in bytes."""
        return self._length

    @property
    def address_bytes(self) -> memoryview:
        """Address bytes without terminator or padding."""
        return self._buffer[: self._address_end]

    @property
    def address(self) -> str:
        """Address decoded as UTF-8.

        Raises:
            DecodeError: If the address is not valid UTF-8
        """
        try:
            return str(self.address_bytes, "utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Address is not valid UTF-8: {e}") from e

    @property
    def type_tags_offset(self) -> int:
        """Offset of the ``,`` that starts the type-tag section."""
        return self._type_tags_offset

    @property
    def type_tags_bytes(self) -> memoryview:
        """Type-tag bytes without the leading comma or the terminator."""
        return self._buffer[self._type_tags_offset + 1 : self._type_tags_end]

    @property
    def type_tags(self) -> str:
        """Type-tag string, one character per argument."""
        return self._type_tags

    @property
    def arguments_offset(self) -> int:
        """Offset of the first argument byte."""
        return self._arguments_offset

    @property
    def cursor(self) -> int:
        """Offset of the next unread argument byte. Never exceeds ``length``."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Bytes left between the cursor and the end of the message."""
        return self._length - self._cursor

    @property
    def tag_index(self) -> int:
        """Index of the next type tag to be read."""
        return self._tag_index

    @property
    def next_tag(self) -> Optional[str]:
        """Next type tag, or None when every argument has been read."""
        if self._tag_index >= len(self._type_tags):
            return None
        return self._type_tags[self._tag_index]

    @property
    def remaining_tags(self) -> str:
        """Type tags not yet read."""
        return self._type_tags[self._tag_index :]

    def read_int32(self) -> int:
        """Read a big-endian signed 32-bit integer (``i``).

        Raises:
            TypeTagMismatchError: If the next tag is not ``i``
            OutOfBoundsError: If fewer than 4 bytes remain
        """
        return self._read_fixed("i", _INT32)

    def read_float32(self) -> float:
        """Read a big-endian IEEE-754 32-bit float (``f``).

        Raises:
            TypeTagMismatchError: If the next tag is not ``f``
            OutOfBoundsError: If fewer than 4 bytes remain
        """
        return self._read_fixed("f", _FLOAT32)

    def read_string_bytes(self) -> memoryview:
        """Read a string argument (``s``) as raw bytes, without the terminator.

        Raises:
            TypeTagMismatchError: If the next tag is not ``s``
            TruncatedStringError: If there is no terminator before the end
        """
        self._expect("s")
        start, end, next_cursor = self._locate_string()
        self._advance(next_cursor)
        return self._buffer[start:end]

    def read_string(self) -> str:
        """Read a string argument (``s``) decoded as UTF-8.

        Raises:
            TypeTagMismatchError: If the next tag is not ``s``
            TruncatedStringError: If there is no terminator before the end
            DecodeError: If the string is not valid UTF-8
        """
        self._expect("s")
        start, end, next_cursor = self._locate_string()
        try:
            value = str(self._buffer[start:end], "utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"String argument at offset {start} is not valid UTF-8: {e}") from e
        self._advance(next_cursor)
        return value

    def read_blob(self) -> memoryview:
        """Read a blob argument (``b``).

        Returns:
            Zero-copy view of the blob payload

        Raises:
            TypeTagMismatchError: If the next tag is not ``b``
            TruncatedBlobError: If the length prefix or payload runs past the end
        """
        self._expect("b")
        start = self._cursor
        if start + 4 > self._length:
            raise TruncatedBlobError(
                f"Blob length prefix at offset {start} needs 4 bytes, {self.remaining} remain"
            )

        (size,) = _UINT32.unpack_from(self._buffer, start)
        payload = start + 4
        if payload + size > self._length:
            raise TruncatedBlobError(
                f"Blob at offset {start} declares {size} bytes, "
                f"only {self._length - payload} remain"
            )

        self._advance(min(payload + align4(size), self._length))
        return self._buffer[payload : payload + size]

    def read_true(self) -> bool:
        """Consume a ``T`` tag."""
        self._expect("T")
        self._advance(self._cursor)
        return True

    def read_false(self) -> bool:
        """Consume an ``F`` tag."""
        self._expect("F")
        self._advance(self._cursor)
        return False

    def read_nil(self) -> None:
        """Consume an ``N`` tag."""
        self._expect("N")
        self._advance(self._cursor)

    def read_infinitum(self) -> float:
        """Consume an ``I`` tag. Returns ``math.inf``."""
        self._expect("I")
        self._advance(self._cursor)
        return math.inf

    def read_argument(self) -> Any:
        """Read the next argument, whatever its tag.

        Returns:
            int, float, str, memoryview (blob), True, False, None or math.inf

        Raises:
            TypeTagMismatchError: If every argument has been read
            UnknownTypeTagError: If the next tag is not supported
            DecodeError: If the argument is truncated or invalid
        """
        tag = self.next_tag
        if tag is None:
            raise TypeTagMismatchError(
                f"All {len(self._type_tags)} arguments of {self._type_tags!r} have been read"
            )
        reader = self._readers.get(tag)
        if reader is None:
            raise UnknownTypeTagError(
                f"Unknown type tag {tag!r} at index {self._tag_index} of {self._type_tags!r}"
            )
        return reader()

    def arguments(self) -> Iterator[Any]:
        """Lazily read the remaining arguments in type-tag order."""
        while self._tag_index < len(self._type_tags):
            yield self.read_argument()

    def _expect(self, tag: str) -> None:
        actual = self.next_tag
        if actual != tag:
            found = "no more arguments" if actual is None else f"tag {actual!r}"
            raise TypeTagMismatchError(
                f"Expected tag {tag!r} at index {self._tag_index} of {self._type_tags!r}, "
                f"found {found}"
            )

    def _read_fixed(self, tag: str, codec: struct.Struct) -> Any:
        self._expect(tag)
        end = self._cursor + codec.size
        if end > self._length:
            raise OutOfBoundsError(
                f"Argument {tag!r} at offset {self._cursor} needs {codec.size} bytes, "
                f"{self.remaining} remain"
            )
        (value,) = codec.unpack_from(self._buffer, self._cursor)
        self._advance(end)
        return value

    def _locate_string(self) -> tuple[int, int, int]:
        start = self._cursor
        terminator = find_byte(self._data, 0, start, self._length)
        if terminator < 0:
            raise TruncatedStringError(
                f"String at offset {start} has no terminator before offset {self._length}"
            )
        # Missing trailing padding at the very end of the buffer is tolerated.
        next_cursor = min(start + padded_string_size(terminator - start), self._length)
        return start, terminator, next_cursor

    def _advance(self, cursor: int) -> None:
        self._cursor = cursor
        self._tag_index += 1
