"""Message encoder.

This module provides write(), which serializes an address, a type-tag string
and its arguments into a caller-provided buffer, and encode(), which returns
a freshly sized bytes object.
"""

from __future__ import annotations

import struct
from typing import Any, Optional, Union

from ..alignment import padded_string_size
from ..exceptions import (
    AddressTooLongError,
    ArgumentMismatchError,
    BufferTooSmallError,
    TypeTagsTooLongError,
)
from ..models import Argument, Message, bind_arguments
from ..utils.sizing import encoded_size, header_bytes

WritableBuffer = Union[bytearray, memoryview]

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")
_FLOAT32 = struct.Struct(">f")


def write(
    destination: WritableBuffer,
    address: str,
    type_tags: str,
    *arguments: Any,
    capacity: Optional[int] = None,
) -> int:
    """Encode a message into ``destination``.

    Arguments are bound to the type tags first, one argument per tag (``T``,
    ``F``, ``N`` and ``I`` take ``True``, ``False``, ``None`` and ``math.inf``
    or their tagged forms), so tag errors are reported before any byte is
    written. The first ``capacity`` bytes of the destination are then zeroed
    and the fields are written in order. Each field is checked against the
    capacity, padding included, before it is written.

    If an error is raised after writing started, the destination holds a
    partial message and must be discarded.

    Args:
        destination: Writable buffer
        address: Target address
        type_tags: One type-tag character per argument
        *arguments: Plain values or Argument instances
        capacity: Number of bytes of ``destination`` that may be used
            (default: all of it)

    Returns:
        Number of bytes written, padding included

    Raises:
        AddressTooLongError: If the address is missing or does not fit
        TypeTagsTooLongError: If the type tags are missing or do not fit
        BufferTooSmallError: If an argument does not fit
        UnknownTypeTagError: If a tag is not supported
        ArgumentMismatchError: If the arguments disagree with the type tags

    Examples:
        ```python
        from oscwire import write

        buffer = bytearray(64)
        size = write(buffer, "/mixer/volume", "if", 3, 0.5)
        packet = bytes(buffer[:size])
        ```
    """
    address_bytes = header_bytes(address, "address", AddressTooLongError)
    tag_bytes = header_bytes(type_tags, "type tags", TypeTagsTooLongError)
    bound = bind_arguments(type_tags, arguments)

    out = memoryview(destination)
    if out.readonly:
        raise TypeError(f"destination must be writable, got {type(destination).__name__}")
    if out.ndim != 1 or out.format != "B":
        out = out.cast("B")

    if capacity is None:
        capacity = out.nbytes
    elif capacity < 0 or capacity > out.nbytes:
        raise ValueError(f"capacity must be 0-{out.nbytes}, got {capacity}")

    # Zero-fill so every padding byte is deterministic
    out[:capacity] = bytes(capacity)

    # Address
    offset = padded_string_size(len(address_bytes))
    if offset > capacity:
        raise AddressTooLongError(
            f"Address of {len(address_bytes)} bytes needs {offset} bytes, capacity is {capacity}"
        )
    out[: len(address_bytes)] = address_bytes

    # Type tags, with leading comma
    tags_size = padded_string_size(1 + len(tag_bytes))
    if offset + tags_size > capacity:
        raise TypeTagsTooLongError(
            f"Type tags {type_tags!r} need {tags_size} bytes at offset {offset}, "
            f"capacity is {capacity}"
        )
    out[offset] = 0x2C
    out[offset + 1 : offset + 1 + len(tag_bytes)] = tag_bytes
    offset += tags_size

    for index, argument in enumerate(bound):
        offset = _write_argument(out, offset, capacity, index, argument)

    return offset


def encode(address: str, type_tags: str, *arguments: Any) -> bytes:
    """Encode a message into a new bytes object of exactly the right size.

    Raises:
        EncodeError: If the address, type tags or arguments are invalid

    Example:
        >>> encode("/ping", "")
        b'/ping\\x00\\x00\\x00,\\x00\\x00\\x00'
    """
    header_bytes(address, "address", AddressTooLongError)
    header_bytes(type_tags, "type tags", TypeTagsTooLongError)
    bound = bind_arguments(type_tags, arguments)
    buffer = bytearray(encoded_size(address, type_tags, *bound))
    write(buffer, address, type_tags, *bound)
    return bytes(buffer)


def encode_message(message: Message) -> bytes:
    """Encode a Message model."""
    return encode(message.address, message.type_tags, *message.arguments)


def _write_argument(
    out: memoryview, offset: int, capacity: int, index: int, argument: Argument
) -> int:
    size = argument.wire_size
    if offset + size > capacity:
        raise BufferTooSmallError(
            f"Argument {index} ({argument.tag!r}) needs {size} bytes at offset {offset}, "
            f"capacity is {capacity}"
        )

    tag = argument.tag
    if tag == "i":
        _INT32.pack_into(out, offset, argument.value)
    elif tag == "f":
        _FLOAT32.pack_into(out, offset, argument.value)
    elif tag == "s":
        data = argument.value.encode("utf-8")
        out[offset : offset + len(data)] = data
    elif tag == "b":
        data = argument.value
        _UINT32.pack_into(out, offset, len(data))
        out[offset + 4 : offset + 4 + len(data)] = data
    elif size != 0:
        raise ArgumentMismatchError(f"Argument {index}: no wire encoding for tag {tag!r}")

    return offset + size
