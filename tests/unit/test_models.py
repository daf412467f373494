"""Unit tests for tagged arguments and the Message model."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from oscwire import (
    ArgumentMismatchError,
    Blob,
    FalseValue,
    Float32,
    Infinitum,
    Int32,
    Message,
    Nil,
    String,
    TrueValue,
    UnknownTypeTagError,
    bind_arguments,
    to_argument,
)
from oscwire.models import ARGUMENT_TYPES, SUPPORTED_TAGS


class TestArgumentTypes:
    """Test argument classes."""

    def test_tags(self) -> None:
        """Test every supported tag has a class."""
        assert SUPPORTED_TAGS == set("ifsbTFNI")
        assert ARGUMENT_TYPES["i"] is Int32
        assert ARGUMENT_TYPES["I"] is Infinitum

    def test_default_values(self) -> None:
        """Test zero-width arguments need no value."""
        assert TrueValue().value is True
        assert FalseValue().value is False
        assert Nil().value is None
        assert Infinitum().value == math.inf

    def test_wire_sizes(self) -> None:
        """Test wire sizes include padding."""
        assert Int32(value=1).wire_size == 4
        assert Float32(value=1.0).wire_size == 4
        assert String(value="abc").wire_size == 4
        assert String(value="abcd").wire_size == 8
        assert Blob(value=b"abcd").wire_size == 8
        assert Blob(value=b"abcde").wire_size == 12
        assert TrueValue().wire_size == 0

    def test_blob_accepts_buffers(self) -> None:
        """Test bytearray and memoryview are stored as bytes."""
        assert Blob(value=bytearray(b"ab")).value == b"ab"
        assert Blob(value=memoryview(b"ab")).value == b"ab"

    def test_frozen(self) -> None:
        """Test arguments are immutable."""
        argument = Int32(value=1)
        with pytest.raises(ValidationError):
            argument.value = 2  # type: ignore[misc]

    def test_int32_range(self) -> None:
        """Test int32 bounds."""
        assert Int32(value=-(1 << 31)).value == -(1 << 31)
        assert Int32(value=(1 << 31) - 1).value == (1 << 31) - 1
        with pytest.raises(ValidationError):
            Int32(value=-(1 << 31) - 1)

    def test_float_special_values(self) -> None:
        """Test infinities and NaN are allowed."""
        assert Float32(value=math.inf).value == math.inf
        assert math.isnan(Float32(value=math.nan).value)


class TestBinding:
    """Test binding values to type tags."""

    def test_to_argument(self) -> None:
        """Test plain values are wrapped."""
        assert to_argument("i", 42) == Int32(value=42)
        assert to_argument("s", "hi") == String(value="hi")
        assert to_argument("N", None) == Nil()

    def test_to_argument_passthrough(self) -> None:
        """Test matching Argument instances are returned as-is."""
        argument = Float32(value=0.25)
        assert to_argument("f", argument) is argument

    def test_to_argument_unknown(self) -> None:
        """Test unknown tag."""
        with pytest.raises(UnknownTypeTagError):
            to_argument("z", 1)

    def test_bind_arguments(self) -> None:
        """Test binding a full type-tag string."""
        bound = bind_arguments("ifTI", [1, 2.0, True, math.inf])
        assert [type(argument) for argument in bound] == [Int32, Float32, TrueValue, Infinitum]

    def test_unknown_tag_reported_before_count(self) -> None:
        """Test unknown tags win over count mismatches."""
        with pytest.raises(UnknownTypeTagError):
            bind_arguments("iz", [])

    def test_string_must_be_utf8_encodable(self) -> None:
        """Test strings with lone surrogates fail while binding."""
        with pytest.raises(ArgumentMismatchError, match="UTF-8"):
            to_argument("s", "a\udc80b")

    def test_mismatch_message(self) -> None:
        """Test mismatch errors name the tag and value."""
        with pytest.raises(ArgumentMismatchError, match="Type tag 'i': invalid value 'x'"):
            bind_arguments("i", ["x"])


class TestMessage:
    """Test the Message model."""

    def test_build(self) -> None:
        """Test building from tags and values."""
        message = Message.build("/mixer/volume", "if", 3, 0.5)

        assert message.type_tags == "if"
        assert message.values == [3, 0.5]
        assert message.arguments == (Int32(value=3), Float32(value=0.5))

    def test_empty(self) -> None:
        """Test message without arguments."""
        message = Message(address="/ping")
        assert message.type_tags == ""
        assert message.values == []

    def test_equality(self) -> None:
        """Test messages compare by value."""
        assert Message.build("/a", "s", "x") == Message.build("/a", "s", "x")
        assert Message.build("/a", "s", "x") != Message.build("/a", "s", "y")

    def test_address_with_nul(self) -> None:
        """Test address validation."""
        with pytest.raises(ValidationError):
            Message(address="/a\x00")

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Message(address="/a", type_tags="i")  # type: ignore[call-arg]
