"""Property-based tests using hypothesis."""

from __future__ import annotations

import math

from hypothesis import given
from hypothesis import strategies as st

from oscwire import (
    Blob,
    DecodeError,
    EncodeError,
    FalseValue,
    Float32,
    Infinitum,
    Int32,
    Message,
    Nil,
    String,
    TrueValue,
    decode,
    encode,
    encode_message,
    encoded_size,
    parse,
    write,
)

addresses = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789_-/", min_size=0, max_size=24
).map(lambda s: "/" + s)

arguments = st.one_of(
    st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1).map(lambda v: Int32(value=v)),
    st.floats(width=32, allow_nan=False).map(lambda v: Float32(value=v)),
    st.text(max_size=20).map(lambda s: String(value=s.replace("\x00", ""))),
    st.binary(max_size=20).map(lambda b: Blob(value=b)),
    st.sampled_from([TrueValue(), FalseValue(), Nil(), Infinitum()]),
)

messages = st.builds(
    lambda address, args: Message(address=address, arguments=tuple(args)),
    addresses,
    st.lists(arguments, max_size=8),
)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(message=messages)
    def test_encode_decode_roundtrip(self, message: Message) -> None:
        """Test decode(encode(m)) gives back m."""
        assert decode(encode_message(message)) == message

    @given(message=messages)
    def test_offsets_aligned(self, message: Message) -> None:
        """Test type tags and first argument are 4-byte aligned."""
        data = encode_message(message)
        view = parse(data, strict=True)

        assert len(data) % 4 == 0
        assert view.type_tags_offset % 4 == 0
        assert view.arguments_offset % 4 == 0

    @given(message=messages)
    def test_cursor_monotonic(self, message: Message) -> None:
        """Test the cursor never moves backwards or past the end."""
        view = parse(encode_message(message))
        previous = view.cursor
        for _ in view.arguments():
            assert previous <= view.cursor <= view.length
            previous = view.cursor
        assert view.cursor == view.length

    @given(message=messages)
    def test_one_byte_short_fails(self, message: Message) -> None:
        """Test a destination one byte too small is rejected."""
        size = encoded_size(message.address, message.type_tags, *message.arguments)
        buffer = bytearray(size - 1)
        try:
            write(buffer, message.address, message.type_tags, *message.arguments)
        except EncodeError:
            pass
        else:
            raise AssertionError("write succeeded with too little capacity")

    @given(message=messages, cut=st.integers(min_value=1, max_value=64))
    def test_truncated_buffers_fail_cleanly(self, message: Message, cut: int) -> None:
        """Test truncated messages raise DecodeError or decode a prefix safely."""
        data = encode_message(message)
        truncated = data[: max(0, len(data) - cut)]
        try:
            decoded = decode(truncated)
        except DecodeError:
            return
        # Only zero-width arguments and trailing padding can be cut without error
        assert decoded.address == message.address
        assert decoded.type_tags == message.type_tags

    @given(value=st.floats(width=32))
    def test_float_bit_exact(self, value: float) -> None:
        """Test float32 values survive the big-endian round trip bit for bit."""
        decoded = decode(encode("/f", "f", value)).values[0]
        if math.isnan(value):
            assert math.isnan(decoded)
        else:
            assert decoded == value

    @given(data=st.binary(max_size=64))
    def test_arbitrary_bytes_never_crash(self, data: bytes) -> None:
        """Test random input only ever raises codec errors."""
        try:
            decode(data)
        except DecodeError:
            pass
