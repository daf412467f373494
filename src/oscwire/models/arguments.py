"""Tagged argument types.

Each argument type corresponds to one type-tag character and validates its
value with Pydantic. The encoder binds plain Python values to these types
using the type-tag string before a single byte is written.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..alignment import padded_blob_size, padded_string_size
from ..exceptions import ArgumentMismatchError, UnknownTypeTagError

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1
FLOAT32_MAX = 3.4028234663852886e38


class Argument(BaseModel):
    """Base class for all tagged argument values.

    Subclasses set ``tag`` to their type-tag character and define a ``value``
    field. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: ClassVar[str] = ""

    @property
    def wire_size(self) -> int:
        """Number of bytes this argument occupies on the wire."""
        return 0


class Int32(Argument):
    """Signed 32-bit integer (``i``)."""

    tag: ClassVar[str] = "i"

    value: int = Field(strict=True, ge=INT32_MIN, le=INT32_MAX)

    @property
    def wire_size(self) -> int:
        return 4


class Float32(Argument):
    """IEEE-754 single precision float (``f``).

    The value is stored as a Python float; encoding rounds it to the nearest
    float32. Infinities and NaN are allowed, finite values must fit in float32.
    """

    tag: ClassVar[str] = "f"

    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected float, got {type(value).__name__}")
        return value

    @field_validator("value")
    @classmethod
    def _check_range(cls, value: float) -> float:
        if math.isfinite(value) and abs(value) > FLOAT32_MAX:
            raise ValueError(f"{value} does not fit in a 32-bit float")
        return value

    @property
    def wire_size(self) -> int:
        return 4


class String(Argument):
    """Null-terminated UTF-8 string (``s``)."""

    tag: ClassVar[str] = "s"

    value: str = Field(strict=True)

    @field_validator("value")
    @classmethod
    def _check_text(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("string arguments cannot contain NUL characters")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"string is not encodable as UTF-8: {e.reason}") from e
        return value

    @property
    def wire_size(self) -> int:
        return padded_string_size(len(self.value.encode("utf-8")))


class Blob(Argument):
    """Length-prefixed opaque bytes (``b``)."""

    tag: ClassVar[str] = "b"

    value: bytes

    @field_validator("value", mode="before")
    @classmethod
    def _require_bytes(cls, value: Any) -> Any:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise ValueError(f"expected bytes, got {type(value).__name__}")
        return bytes(value)

    @field_validator("value")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) > UINT32_MAX:
            raise ValueError(f"blob of {len(value)} bytes exceeds the 32-bit length prefix")
        return value

    @property
    def wire_size(self) -> int:
        return padded_blob_size(len(self.value))


class TrueValue(Argument):
    """Boolean true (``T``), no bytes on the wire."""

    tag: ClassVar[str] = "T"

    value: bool = True

    @field_validator("value", mode="before")
    @classmethod
    def _require_true(cls, value: Any) -> Any:
        if value is not True:
            raise ValueError(f"expected True, got {value!r}")
        return value


class FalseValue(Argument):
    """Boolean false (``F``), no bytes on the wire."""

    tag: ClassVar[str] = "F"

    value: bool = False

    @field_validator("value", mode="before")
    @classmethod
    def _require_false(cls, value: Any) -> Any:
        if value is not False:
            raise ValueError(f"expected False, got {value!r}")
        return value


class Nil(Argument):
    """Nil (``N``), no bytes on the wire."""

    tag: ClassVar[str] = "N"

    value: None = None


class Infinitum(Argument):
    """Infinitum (``I``), no bytes on the wire. Its value is ``math.inf``."""

    tag: ClassVar[str] = "I"

    value: float = math.inf

    @field_validator("value", mode="before")
    @classmethod
    def _require_inf(cls, value: Any) -> Any:
        if isinstance(value, bool) or value != math.inf:
            raise ValueError(f"expected math.inf, got {value!r}")
        return value


ARGUMENT_TYPES: dict[str, type[Argument]] = {
    cls.tag: cls
    for cls in (Int32, Float32, String, Blob, TrueValue, FalseValue, Nil, Infinitum)
}

SUPPORTED_TAGS = frozenset(ARGUMENT_TYPES)


def argument_type(tag: str) -> type[Argument]:
    """Return the argument class for a type tag.

    Raises:
        UnknownTypeTagError: If the tag is not supported
    """
    try:
        return ARGUMENT_TYPES[tag]
    except KeyError:
        raise UnknownTypeTagError(f"Unknown type tag {tag!r}") from None


def to_argument(tag: str, value: Any) -> Argument:
    """Bind one value to a type tag.

    Plain Python values are wrapped in the argument class for the tag.
    Values that are already tagged are checked against the tag.

    Args:
        tag: Type-tag character
        value: Plain value or Argument instance

    Returns:
        Validated Argument instance

    Raises:
        UnknownTypeTagError: If the tag is not supported
        ArgumentMismatchError: If the value does not fit the tag

    Example:
        >>> to_argument("i", 42)
        Int32(value=42)
    """
    cls = argument_type(tag)
    if isinstance(value, Argument):
        if value.tag != tag:
            raise ArgumentMismatchError(
                f"Type tag {tag!r} does not match {type(value).__name__} argument "
                f"(tag {value.tag!r})"
            )
        return value

    try:
        return cls(value=value)
    except ValidationError as e:
        raise ArgumentMismatchError(
            f"Type tag {tag!r}: invalid value {value!r}: {e.errors()[0]['msg']}"
        ) from e


def bind_arguments(type_tags: str, arguments: Iterable[Any]) -> list[Argument]:
    """Bind a sequence of values to a type-tag string.

    Every tag, including ``T``, ``F``, ``N`` and ``I``, takes exactly one value.
    All tags are checked before any value is bound, so an unknown tag is
    reported ahead of a count mismatch.

    Raises:
        UnknownTypeTagError: If any tag is not supported
        ArgumentMismatchError: If the count or any value disagrees with the tags
    """
    for tag in type_tags:
        argument_type(tag)

    values = list(arguments)
    if len(values) != len(type_tags):
        raise ArgumentMismatchError(
            f"Type tags {type_tags!r} need {len(type_tags)} arguments, got {len(values)}"
        )

    return [to_argument(tag, value) for tag, value in zip(type_tags, values)]
