"""Outgoing protocol messages: success acknowledgements and errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from irsol.protocol.in_messages import Assignment, Command, InMessageKind, Inquiry
from irsol.protocol.utils import ProtocolValue, validate_identifier

InMessage = Union[Assignment, Inquiry, Command]


def _check_value(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Invalid protocol value type: {type(value).__name__}")


def _describe_value(value: ProtocolValue) -> str:
    if isinstance(value, int):
        return f"<int> {value}"
    if isinstance(value, float):
        return f"<double> {value:g}"
    return f'<string> "{value}"'


_KIND_OF = {
    Assignment: InMessageKind.ASSIGNMENT,
    Inquiry: InMessageKind.INQUIRY,
    Command: InMessageKind.COMMAND,
}


@dataclass(frozen=True)
class Error:
    """Reports that an incoming message could not be handled."""

    identifier: str
    source: InMessageKind
    description: str

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)
        if not isinstance(self.source, InMessageKind):
            raise TypeError(f"Invalid message kind: {self.source!r}")

    def to_string(self) -> str:
        return (
            f"Error{{identifier: '{self.identifier}', source: {self.source.value}, "
            f"description: '{self.description}'}}"
        )

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_message(cls, msg: InMessage, description: str) -> "Error":
        """Build an error for the incoming message ``msg``."""
        kind = _KIND_OF.get(type(msg))
        if kind is None:
            raise TypeError(f"Not an incoming message: {msg!r}")
        return cls(msg.identifier, kind, description)


@dataclass(frozen=True)
class Success:
    """Acknowledges an incoming message, optionally carrying a value."""

    identifier: str
    source: InMessageKind
    body: Optional[ProtocolValue] = None

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)
        if not isinstance(self.source, InMessageKind):
            raise TypeError(f"Invalid message kind: {self.source!r}")
        if self.body is not None:
            _check_value(self.body)

    def to_string(self) -> str:
        text = f"Success{{identifier: '{self.identifier}', source: {self.source.value}"
        if self.has_body():
            text += f", body: {_describe_value(self.body)}"
        return text + "}"

    def __str__(self) -> str:
        return self.to_string()

    def has_body(self) -> bool:
        return self.body is not None

    def has_int(self) -> bool:
        return self.has_body() and isinstance(self.body, int)

    def has_double(self) -> bool:
        return self.has_body() and isinstance(self.body, float)

    def has_string(self) -> bool:
        return self.has_body() and isinstance(self.body, str)

    @classmethod
    def from_assignment(
        cls, msg: Assignment, override_value: Optional[ProtocolValue] = None
    ) -> "Success":
        """Acknowledge ``msg``, reporting ``override_value`` instead of its value if given."""
        value = override_value if override_value is not None else msg.value
        return cls(msg.identifier, InMessageKind.ASSIGNMENT, value)

    @classmethod
    def from_command(cls, msg: Command) -> "Success":
        return cls(msg.identifier, InMessageKind.COMMAND)

    @classmethod
    def from_inquiry(cls, msg: Inquiry, result: ProtocolValue) -> "Success":
        return cls(msg.identifier, InMessageKind.INQUIRY, result)

    @classmethod
    def as_status(cls, identifier: str, value: ProtocolValue) -> "Success":
        """A status report not tied to any incoming message."""
        return cls(identifier, InMessageKind.INQUIRY, value)