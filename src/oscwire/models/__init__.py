"""Message modeling for oscwire.

This module provides the tagged argument types and the Message model.
"""

from __future__ import annotations

from .arguments import (
    ARGUMENT_TYPES,
    SUPPORTED_TAGS,
    Argument,
    Blob,
    FalseValue,
    Float32,
    Infinitum,
    Int32,
    Nil,
    String,
    TrueValue,
    argument_type,
    bind_arguments,
    to_argument,
)
from .message import Message

__all__ = [
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
    "ARGUMENT_TYPES",
    "SUPPORTED_TAGS",
    "argument_type",
    "to_argument",
    "bind_arguments",
]
