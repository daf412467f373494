"""oscwire: Open Sound Control message codec

A Python library for reading and writing single Open Sound Control messages:
an address, a type-tag string and a list of 4-byte aligned, big-endian
arguments. Designed for real-time control traffic where messages arrive as
raw buffers from some transport.

Key Features:
- Zero-copy decoding with a lazy, forward-only argument cursor
- Bounds-checked reads for every argument type
- Encoding into caller-provided buffers with exact capacity checks
- Pydantic-based tagged argument and message models

Supported type tags: i (int32), f (float32), s (string), b (blob),
T (true), F (false), N (nil), I (infinitum).

Quick Start:
    >>> from oscwire import encode, parse
    >>>
    >>> data = encode("/mixer/volume", "if", 3, 0.5)
    >>> view = parse(data)
    >>> view.address, view.type_tags
    ('/mixer/volume', 'if')
    >>> view.read_int32(), view.read_float32()
    (3, 0.5)

Transport I/O, bundles and address pattern matching are out of scope.
"""

from __future__ import annotations

from .alignment import align4, padded_blob_size, padded_string_size
from .codec import MessageView, decode, encode, encode_message, parse, write
from .dump import format_message, print_message
from .exceptions import (
    AddressTooLongError,
    ArgumentMismatchError,
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    FieldTooLargeError,
    MalformedHeaderError,
    OscwireError,
    OutOfBoundsError,
    TruncatedBlobError,
    TruncatedStringError,
    TypeTagMismatchError,
    TypeTagsTooLongError,
    UnknownTypeTagError,
    UnterminatedTypeTagsError,
)
from .models import (
    Argument,
    Blob,
    FalseValue,
    Float32,
    Infinitum,
    Int32,
    Message,
    Nil,
    String,
    TrueValue,
    bind_arguments,
    to_argument,
)
from .utils import encoded_size, field_sizes, header_size, message_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "parse",
    "decode",
    "MessageView",
    "write",
    "encode",
    "encode_message",
    # Models
    "Message",
    "Argument",
    "Int32",
    "Float32",
    "String",
    "Blob",
    "TrueValue",
    "FalseValue",
    "Nil",
    "Infinitum",
    "bind_arguments",
    "to_argument",
    # Exceptions
    "OscwireError",
    "DecodeError",
    "EncodeError",
    "MalformedHeaderError",
    "UnterminatedTypeTagsError",
    "OutOfBoundsError",
    "TruncatedStringError",
    "TruncatedBlobError",
    "TypeTagMismatchError",
    "AddressTooLongError",
    "TypeTagsTooLongError",
    "BufferTooSmallError",
    "FieldTooLargeError",
    "UnknownTypeTagError",
    "ArgumentMismatchError",
    # Alignment
    "align4",
    "padded_string_size",
    "padded_blob_size",
    # Sizing
    "encoded_size",
    "field_sizes",
    "header_size",
    "message_size",
    # Dump
    "format_message",
    "print_message",
    # Version
    "__version__",
]
