#!/usr/bin/env python3
"""Basic usage example for oscwire.

This example demonstrates:
1. Encoding a message into a reusable send buffer
2. Parsing it without copying and walking the type tags
3. Decoding eagerly into a Message model
4. Dumping messages as one-line text
"""

from __future__ import annotations

from oscwire import (
    DecodeError,
    Message,
    decode,
    encode_message,
    field_sizes,
    format_message,
    parse,
    write,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("oscwire Basic Usage Example")
    print("=" * 60)
    print()

    # Encode into a caller-owned buffer
    print("1. Encoding a fader move into a send buffer...")
    send_buffer = bytearray(128)
    size = write(send_buffer, "/mixer/channel/3/fader", "ifsT", 3, 0.75, "main", True)
    packet = bytes(send_buffer[:size])

    print(f"   Encoded size: {size} bytes")
    print(f"   Argument sizes: {field_sizes('ifsT', 3, 0.75, 'main', True)}")
    print(f"   Hex: {packet.hex()}")
    print()

    # Parse without copying
    print("2. Parsing and walking the type tags...")
    view = parse(packet)
    print(f"   Address: {view.address}")
    print(f"   Type tags: {view.type_tags}")
    for tag in view.type_tags:
        offset = view.cursor
        value = view.read_argument()
        print(f"   [{tag}] at offset {offset}: {value!r}")
    print()

    # Decode eagerly
    print("3. Decoding into a Message model...")
    message = decode(packet)
    print(f"   {message.address} {message.type_tags} {message.values}")

    rebuilt = Message.build("/mixer/channel/3/fader", "ifsT", 3, 0.75, "main", True)
    if encode_message(rebuilt) == packet:
        print("   ✓ Round-trip successful! Encodings match.")
    else:
        print("   ✗ Round-trip failed! Encodings don't match.")
    print()

    # Dump
    print("4. One-line dumps...")
    print(f"   {format_message(packet)}")
    print(f"   {format_message(packet[:10])}")
    print()

    # Truncated input
    print("5. Handling a truncated packet...")
    try:
        decode(packet[:-6])
    except DecodeError as e:
        print(f"   Rejected ({type(e).__name__}, code {e.code}): {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
