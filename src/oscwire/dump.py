"""One-line text dump of encoded messages.

Built only on the public decode API; useful for logging and debugging.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .codec.decoder import parse
from .codec.view import Buffer
from .exceptions import DecodeError, UnknownTypeTagError


def format_message(buffer: Buffer, length: Optional[int] = None, *, strict: bool = False) -> str:
    """Format one encoded message as a single line.

    Example:
        >>> format_message(encode("/mixer", "ifsbT", 3, 0.5, "on", b"\\x01\\xff", True))
        '[36 bytes] /mixer ifsbT 3 0.5 on [2]01FF true'

    Decode errors are reported in the line instead of being raised. A
    ``length`` outside the buffer is a caller error: the ValueError from
    parse() propagates.
    """
    size = memoryview(buffer).nbytes if length is None else length
    try:
        view = parse(buffer, length, strict=strict)
        address = view.address
    except DecodeError as e:
        return f"Error while reading OSC buffer: {e.code}"

    parts = [f"[{size} bytes]", address, view.type_tags]
    while view.next_tag is not None:
        tag = view.next_tag
        try:
            value = view.read_argument()
        except UnknownTypeTagError:
            parts.append(f"Unknown format: '{tag}'")
            break
        except DecodeError as e:
            parts.append(f"Error while reading argument {view.tag_index}: {e.code}")
            break
        parts.append(_format_value(tag, value))

    return " ".join(parts)


def print_message(
    buffer: Buffer,
    length: Optional[int] = None,
    *,
    file: Optional[TextIO] = None,
    strict: bool = False,
) -> None:
    """Write format_message() output, plus a newline, to ``file`` (default stdout)."""
    print(format_message(buffer, length, strict=strict), file=file or sys.stdout)


def _format_value(tag: str, value: object) -> str:
    if tag == "b":
        data = bytes(value)  # type: ignore[call-overload]
        return f"[{len(data)}]{data.hex().upper()}"
    if tag == "f":
        return f"{value:g}"
    if tag == "T":
        return "true"
    if tag == "F":
        return "false"
    if tag == "N":
        return "nil"
    if tag == "I":
        return "inf"
    return str(value)
