"""Unit tests for the one-line message dump."""

from __future__ import annotations

import io

import pytest

from oscwire import encode, format_message, print_message


def test_format_mixed(mixed_packet: bytes) -> None:
    """Test every wire-carrying type is formatted."""
    assert format_message(mixed_packet) == "[36 bytes] /mixer ifsbT 3 0.5 on [2]01FF true"


def test_format_zero_width_tags() -> None:
    """Test T, F, N and I."""
    data = encode("/t", "TFNI", True, False, None, float("inf"))
    assert format_message(data) == "[12 bytes] /t TFNI true false nil inf"


def test_format_float_uses_g() -> None:
    """Test floats are printed in %g style."""
    data = encode("/f", "f", 1.5e-7)
    assert format_message(data).endswith(" 1.5e-07")


def test_format_no_arguments(ping_packet: bytes) -> None:
    """Test message without arguments."""
    assert format_message(ping_packet) == "[12 bytes] /ping "


def test_format_header_error() -> None:
    """Test decode error code is reported."""
    assert format_message(b"/ping\x00\x00\x00") == "Error while reading OSC buffer: -1"
    assert format_message(b"/x\x00\x00,ii") == "Error while reading OSC buffer: -2"


def test_format_unknown_tag() -> None:
    """Test unknown tags stop the dump."""
    data = b"/x\x00\x00,Tzi\x00\x00\x00\x00\x00\x00\x00\x01"
    assert format_message(data) == "[16 bytes] /x Tzi true Unknown format: 'z'"


def test_format_truncated_argument() -> None:
    """Test truncated arguments are reported with their index."""
    data = b"/x\x00\x00,ii\x00\x00\x00\x00\x01"
    assert format_message(data) == "[12 bytes] /x ii 1 Error while reading argument 1: -5"


def test_format_with_length(ping_packet: bytes) -> None:
    """Test explicit length is reported."""
    assert format_message(ping_packet + b"\x00" * 4, 12).startswith("[12 bytes]")


def test_format_length_past_end(ping_packet: bytes) -> None:
    """Test a length beyond the buffer is a caller error, not a dump line."""
    with pytest.raises(ValueError, match="length must be"):
        format_message(ping_packet, 99)


def test_print_message(mixed_packet: bytes) -> None:
    """Test output goes to the given stream with a newline."""
    stream = io.StringIO()
    print_message(mixed_packet, file=stream)
    assert stream.getvalue() == "[36 bytes] /mixer ifsbT 3 0.5 on [2]01FF true\n"
