"""4-byte wire alignment helpers.

Every field on the wire starts on a 4-byte boundary. One rule is used for
both encoding and decoding: a payload of ``n`` bytes occupies ``align4(n)``
bytes, the extra bytes being zero.
"""

from __future__ import annotations

WORD_SIZE = 4


def align4(size: int) -> int:
    """Round ``size`` up to the next multiple of 4.

    Example:
        >>> align4(5)
        8
        >>> align4(8)
        8
    """
    return (size + 3) & ~0x3


def padded_string_size(size: int) -> int:
    """Return the bytes used by a string of ``size`` bytes.

    Includes the null terminator, so there is always at least one zero byte.

    Example:
        >>> padded_string_size(3)
        4
        >>> padded_string_size(4)
        8
    """
    return align4(size + 1)


def padded_blob_size(size: int) -> int:
    """Return the bytes used by a blob of ``size`` bytes, length prefix included."""
    return WORD_SIZE + align4(size)
