"""Wire codec for oscwire.

This module provides the zero-copy decoder (parse, MessageView) and the
encoder (write, encode) for single messages.
"""

from __future__ import annotations

from .decoder import decode, parse
from .encoder import encode, encode_message, write
from .view import MessageView

__all__ = [
    "parse",
    "decode",
    "MessageView",
    "write",
    "encode",
    "encode_message",
]
