"""Message decoder.

This module provides parse(), which reads the header of a raw buffer into a
MessageView without copying, and decode(), which reads every argument eagerly
into a Message model.
"""

from __future__ import annotations

from typing import Optional

from ..alignment import align4
from ..exceptions import MalformedHeaderError, UnterminatedTypeTagsError
from ..models import ARGUMENT_TYPES, Argument, Message
from .view import Buffer, MessageView, find_byte

COMMA = 0x2C
NUL = 0x00


def parse(buffer: Buffer, length: Optional[int] = None, *, strict: bool = False) -> MessageView:
    """Parse the header of one encoded message.

    The address runs from offset 0 to its null terminator. The type tags start
    at the first ``,`` in the buffer and run to the next null terminator. The
    first argument starts at the next 4-byte boundary after that terminator.

    By default the address is not checked: if there is no null terminator
    before the comma, the whole region before the comma is taken as the
    address, and the comma may sit anywhere. ``strict=True`` rejects both.

    Args:
        buffer: Bytes holding exactly one message
        length: Number of bytes of ``buffer`` that belong to the message
            (default: all of it)
        strict: If True, require a null-terminated, 4-byte padded address

    Returns:
        MessageView positioned at the first argument

    Raises:
        ValueError: If length is negative or larger than the buffer
        MalformedHeaderError: If there is no type-tag section (or, in strict
            mode, the address is unterminated or misaligned)
        UnterminatedTypeTagsError: If the type tags have no terminator

    Examples:
        ```python
        from oscwire import encode, parse

        data = encode("/mixer/volume", "if", 3, 0.5)
        view = parse(data)
        channel = view.read_int32()
        level = view.read_float32()
        ```
    """
    view = memoryview(buffer)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")

    if length is None:
        length = view.nbytes
    elif length < 0 or length > view.nbytes:
        raise ValueError(f"length must be 0-{view.nbytes}, got {length}")

    data: Buffer = buffer if isinstance(buffer, (bytes, bytearray)) else view

    # Find the comma that starts the type tags
    comma = find_byte(data, COMMA, 0, length)
    if comma < 0:
        raise MalformedHeaderError(f"No type tags: no ',' found in {length} bytes")

    terminator = find_byte(data, NUL, comma, length)
    if terminator < 0:
        raise UnterminatedTypeTagsError(
            f"Type tags starting at offset {comma} are not null-terminated"
        )

    address_end = find_byte(data, NUL, 0, comma)
    if address_end < 0:
        if strict:
            raise MalformedHeaderError("Address is not null-terminated before the type tags")
        address_end = comma
    elif strict and comma != align4(address_end + 1):
        raise MalformedHeaderError(
            f"Type tags start at offset {comma}, expected {align4(address_end + 1)} "
            f"after a {address_end}-byte address"
        )

    arguments_offset = min((terminator + 4) & ~0x3, length)

    return MessageView(
        data,
        view[:length].toreadonly(),
        address_end=address_end,
        type_tags_offset=comma,
        type_tags_end=terminator,
        arguments_offset=arguments_offset,
    )


def decode(buffer: Buffer, length: Optional[int] = None, *, strict: bool = False) -> Message:
    """Decode one encoded message, reading every argument.

    Blob payloads are copied into ``bytes`` so the result does not depend on
    the buffer.

    Args:
        buffer: Bytes holding exactly one message
        length: Number of bytes of ``buffer`` that belong to the message
        strict: If True, require a null-terminated, 4-byte padded address

    Returns:
        Decoded Message

    Raises:
        DecodeError: If the buffer is malformed or truncated
        UnknownTypeTagError: If an argument has an unsupported tag

    Example:
        >>> decode(encode("/vol", "f", 0.5)).values
        [0.5]
    """
    view = parse(buffer, length, strict=strict)

    arguments: list[Argument] = []
    for tag, value in zip(view.type_tags, view.arguments()):
        if isinstance(value, memoryview):
            value = value.tobytes()
        arguments.append(ARGUMENT_TYPES[tag](value=value))

    return Message(address=view.address, arguments=tuple(arguments))
