"""Dump and encode CLI commands."""

from __future__ import annotations

import logging
import math
import sys
from pathlib import Path
from typing import Any, Sequence

from ..codec.encoder import encode
from ..dump import format_message
from ..exceptions import ArgumentMismatchError
from ..models import argument_type

logger = logging.getLogger(__name__)

# Tags that carry no wire bytes take no value on the command line
_IMPLIED_VALUES: dict[str, Any] = {"T": True, "F": False, "N": None, "I": math.inf}


def dump_file(file_path: Path, *, strict: bool = False) -> None:
    """Print a one-line dump of the raw message stored in a file."""
    data = file_path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), file_path)
    print(format_message(data, strict=strict))


def dump_hex(text: str, *, strict: bool = False) -> None:
    """Print a one-line dump of a message given as hex (whitespace allowed)."""
    data = bytes.fromhex(text)
    logger.debug("Parsed %d bytes of hex input", len(data))
    print(format_message(data, strict=strict))


def parse_values(type_tags: str, tokens: Sequence[str]) -> list[Any]:
    """Convert command-line tokens into argument values for ``type_tags``.

    ``i`` and ``f`` tokens are numbers, ``s`` tokens are taken verbatim and
    ``b`` tokens are hex. ``T``, ``F``, ``N`` and ``I`` consume no token.

    Raises:
        UnknownTypeTagError: If a tag is not supported
        ArgumentMismatchError: If the tokens do not match the tags
    """
    values: list[Any] = []
    remaining = list(tokens)
    for tag in type_tags:
        argument_type(tag)
        if tag in _IMPLIED_VALUES:
            values.append(_IMPLIED_VALUES[tag])
            continue
        if not remaining:
            raise ArgumentMismatchError(f"Missing value for type tag {tag!r}")
        token = remaining.pop(0)
        try:
            if tag == "i":
                values.append(int(token, 0))
            elif tag == "f":
                values.append(float(token))
            elif tag == "b":
                values.append(bytes.fromhex(token))
            else:
                values.append(token)
        except ValueError as e:
            raise ArgumentMismatchError(f"Invalid value {token!r} for type tag {tag!r}: {e}") from e

    if remaining:
        raise ArgumentMismatchError(f"Unexpected extra values: {' '.join(remaining)}")
    return values


def encode_command(address: str, type_tags: str, tokens: Sequence[str]) -> None:
    """Encode a message from command-line tokens and print it as hex."""
    values = parse_values(type_tags, tokens)
    data = encode(address, type_tags, *values)
    logger.debug("Encoded %s %r into %d bytes", address, type_tags, len(data))
    sys.stdout.write(data.hex() + "\n")
