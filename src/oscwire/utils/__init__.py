"""Utility functions for oscwire.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, field_sizes, header_size, message_size

__all__ = [
    "encoded_size",
    "field_sizes",
    "header_size",
    "message_size",
]
