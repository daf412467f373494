"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without actually encoding them.
"""

from __future__ import annotations

from typing import Any, Optional

from ..alignment import padded_string_size
from ..exceptions import AddressTooLongError, TypeTagsTooLongError
from ..models import Message, bind_arguments


def header_size(address: str, type_tags: str) -> int:
    """Calculate the size of the address and type-tag sections in bytes.

    Raises:
        AddressTooLongError: If the address is missing or not encodable
        TypeTagsTooLongError: If the type tags are missing or not encodable

    Example:
        >>> header_size("/ping", "")
        12
    """
    address_bytes = header_bytes(address, "address", AddressTooLongError)
    tag_bytes = header_bytes(type_tags, "type tags", TypeTagsTooLongError)
    return padded_string_size(len(address_bytes)) + padded_string_size(1 + len(tag_bytes))


def header_bytes(text: Optional[str], what: str, error: type[Exception]) -> bytes:
    """Encode an address or type-tag string, raising ``error`` if it cannot be written."""
    if text is None:
        raise error(f"The {what} is required")
    if not isinstance(text, str):
        raise error(f"The {what} must be a str, got {type(text).__name__}")
    if "\x00" in text:
        raise error(f"The {what} cannot contain NUL characters")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise error(f"The {what} is not encodable as UTF-8: {e}") from e


def encoded_size(address: str, type_tags: str, *arguments: Any) -> int:
    """Calculate the encoded size of a message in bytes.

    Args:
        address: Target address
        type_tags: One type-tag character per argument
        *arguments: Plain values or Argument instances

    Returns:
        Exact number of bytes encode() would produce

    Raises:
        UnknownTypeTagError: If a tag is not supported
        ArgumentMismatchError: If the arguments disagree with the type tags

    Example:
        >>> encoded_size("/vol", "f", 0.5)
        16  # 8 address + 4 type tags + 4 float
    """
    return header_size(address, type_tags) + sum(field_sizes(type_tags, *arguments))


def field_sizes(type_tags: str, *arguments: Any) -> list[int]:
    """Get the size in bytes of each argument, padding included.

    Example:
        >>> field_sizes("isbT", 1, "abc", b"abcde", True)
        [4, 4, 12, 0]
    """
    return [argument.wire_size for argument in bind_arguments(type_tags, arguments)]


def message_size(message: Message) -> int:
    """Calculate the encoded size of a Message model in bytes."""
    return encoded_size(message.address, message.type_tags, *message.arguments)
