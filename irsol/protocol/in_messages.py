"""Incoming protocol messages: assignments, inquiries and commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from irsol.protocol.utils import ProtocolValue, validate_identifier


class InMessageKind(Enum):
    """Kind of an incoming message."""

    ASSIGNMENT = "ASSIGNMENT"
    INQUIRY = "INQUIRY"
    COMMAND = "COMMAND"

    def __str__(self) -> str:
        return self.value


def _check_value(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Invalid protocol value type: {type(value).__name__}")


def _describe_value(value: ProtocolValue) -> str:
    if isinstance(value, int):
        return f"<int> {value}"
    if isinstance(value, float):
        return f"<double> {value:g}"
    return f'<string> "{value}"'


@dataclass(frozen=True)
class Assignment:
    """Assigns ``value`` to ``identifier``, as in ``x=42``."""

    identifier: str
    value: ProtocolValue
    kind: ClassVar[InMessageKind] = InMessageKind.ASSIGNMENT

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)
        _check_value(self.value)

    def to_string(self) -> str:
        return f"Assignment{{identifier: '{self.identifier}', value: {_describe_value(self.value)}}}"

    def __str__(self) -> str:
        return self.to_string()

    def has_int(self) -> bool:
        return isinstance(self.value, int)

    def has_double(self) -> bool:
        return isinstance(self.value, float)

    def has_string(self) -> bool:
        return isinstance(self.value, str)


@dataclass(frozen=True)
class Inquiry:
    """Asks for the current value of ``identifier``, as in ``x?``."""

    identifier: str
    kind: ClassVar[InMessageKind] = InMessageKind.INQUIRY

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)

    def to_string(self) -> str:
        return f"Inquiry{{identifier: '{self.identifier}'}}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Command:
    """Triggers the action named ``identifier``, as in ``reset``."""

    identifier: str
    kind: ClassVar[InMessageKind] = InMessageKind.COMMAND

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)

    def to_string(self) -> str:
        return f"Command{{identifier: '{self.identifier}'}}"

    def __str__(self) -> str:
        return self.to_string()