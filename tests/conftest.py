"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def ping_packet() -> bytes:
    """Encoded /ping message with no arguments."""
    return b"/ping\x00\x00\x00,\x00\x00\x00"


@pytest.fixture
def mixed_packet() -> bytes:
    """Encoded /mixer message with one argument of every wire-carrying type."""
    return (
        b"/mixer\x00\x00"
        b",ifsbT\x00\x00"
        b"\x00\x00\x00\x03"  # i: 3
        b"\x3f\x00\x00\x00"  # f: 0.5
        b"on\x00\x00"  # s: "on"
        b"\x00\x00\x00\x02\x01\xff\x00\x00"  # b: 01 ff
    )
