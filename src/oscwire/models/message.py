"""Message model.

This module provides the Message class: an address plus an ordered tuple of
tagged arguments. The type-tag string is derived from the arguments, so a
Message can never disagree with its own type tags.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .arguments import Argument, bind_arguments


class Message(BaseModel):
    """One decoded or to-be-encoded message.

    Example:
        >>> msg = Message.build("/mixer/volume", "if", 3, 0.5)
        >>> msg.type_tags
        'if'
        >>> msg.values
        [3, 0.5]

    Attributes:
        address: Target address, e.g. ``"/mixer/volume"``. Not pattern matched.
        arguments: Tagged arguments in wire order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: str
    arguments: tuple[Argument, ...] = ()

    @field_validator("address")
    @classmethod
    def _reject_nul(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("address cannot contain NUL characters")
        return value

    @classmethod
    def build(cls, address: str, type_tags: str, *values: Any) -> Message:
        """Create a message from a type-tag string and plain values.

        Raises:
            UnknownTypeTagError: If a tag is not supported
            ArgumentMismatchError: If the values disagree with the tags
        """
        return cls(address=address, arguments=tuple(bind_arguments(type_tags, values)))

    @property
    def type_tags(self) -> str:
        """Type-tag string, one character per argument."""
        return "".join(argument.tag for argument in self.arguments)

    @property
    def values(self) -> list[Any]:
        """Plain Python values of the arguments."""
        return [argument.value for argument in self.arguments]
