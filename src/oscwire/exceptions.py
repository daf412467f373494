"""Exception hierarchy for oscwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from OscwireError for easy catching of any oscwire-specific error.

Every exception carries a stable negative integer ``code``. The encode-side codes
match the return values of the classic C implementation of this wire format
(-1 address, -2 type tags, -3 buffer too small, -4 unknown type tag), so tools
that report numeric error codes keep reporting the same numbers.
"""

from __future__ import annotations


class OscwireError(Exception):
    """Base exception for all oscwire errors."""

    code: int = -100


class DecodeError(OscwireError):
    """Raised when decoding binary data fails.

    Examples:
        - Missing type-tag section
        - Truncated data (insufficient bytes for an argument)
        - Argument read that does not match the type tags
        - Invalid UTF-8 in a string argument
    """

    code = -10


class EncodeError(OscwireError):
    """Raised when encoding a message fails.

    Examples:
        - Address or type tags do not fit in the destination
        - Argument would overflow the destination
        - Argument does not match its type tag
    """

    code = -20


class MalformedHeaderError(DecodeError):
    """No ``,`` delimiter was found, so the buffer has no type-tag section.

    Also raised by strict parsing when the address is not null-terminated
    or is not padded to a 4-byte boundary.
    """

    code = -1


class UnterminatedTypeTagsError(DecodeError):
    """The type-tag string has no null terminator within the buffer."""

    code = -2


class OutOfBoundsError(DecodeError):
    """A fixed-size argument would be read past the end of the buffer."""

    code = -5


class TruncatedStringError(DecodeError):
    """A string argument has no null terminator before the end of the buffer."""

    code = -6


class TruncatedBlobError(DecodeError):
    """A blob's length prefix or payload runs past the end of the buffer."""

    code = -7


class TypeTagMismatchError(DecodeError):
    """An argument read does not match the next type tag, or no tags remain."""

    code = -8


class AddressTooLongError(EncodeError):
    """The address is missing or does not fit in the destination."""

    code = -1


class TypeTagsTooLongError(EncodeError):
    """The type-tag string is missing or does not fit in the destination."""

    code = -2


class BufferTooSmallError(EncodeError):
    """An argument would overflow the destination capacity."""

    code = -3


FieldTooLargeError = BufferTooSmallError


class ArgumentMismatchError(EncodeError):
    """Argument count or type disagrees with the type-tag string.

    Examples:
        - Two tags but three arguments
        - ``"abc"`` given for an ``i`` tag
        - Integer outside the signed 32-bit range
    """

    code = -9


class UnknownTypeTagError(EncodeError, DecodeError):
    """A type-tag character is not one the codec understands.

    Raised by the encoder before any byte is written, and by the decoder
    when the next argument has a tag whose wire size is unknown.
    """

    code = -4
