"""Parsing of raw protocol lines into assignments, inquiries and commands."""

from __future__ import annotations

import logging
import re
from typing import Generic, Optional, TypeVar, Union

from irsol.protocol.in_messages import Assignment, Command, Inquiry
from irsol.protocol.utils import ProtocolValue, from_string, trim

InMessage = Union[Assignment, Inquiry, Command]
T = TypeVar("T", Assignment, Inquiry, Command)

_log = logging.getLogger(__name__)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ASSIGNMENT_RE = re.compile(r"([a-zA-Z]+[a-zA-Z0-9_]*(?:\[[0-9]+\])*)=(.+)")
_INQUIRY_RE = re.compile(r"([a-zA-Z]+[a-zA-Z0-9_]*(?:\[[0-9]+\])*)\?")
_COMMAND_RE = re.compile(r"([a-zA-Z]+[a-zA-Z0-9_]*)")

_DELIMITERS = (('"', '"'), ("'", "'"), ("{", "}"))


class ParserResult(Generic[T]):
    """Outcome of one parsing attempt: either a parsed message or an error text."""

    __slots__ = ("_value",)

    def __init__(self, message_or_error: Union[T, str]) -> None:
        self._value = message_or_error

    def __bool__(self) -> bool:
        return self.is_message()

    def is_message(self) -> bool:
        return not isinstance(self._value, str)

    def is_error(self) -> bool:
        return isinstance(self._value, str)

    def message(self) -> T:
        """The parsed message; raises ValueError if parsing failed."""
        if self.is_error():
            raise ValueError(f"ParserResult holds an error: {self._value}")
        return self._value  # type: ignore[return-value]

    def error(self) -> str:
        """The error text; raises ValueError if parsing succeeded."""
        if not self.is_error():
            raise ValueError("ParserResult holds a message, not an error")
        return self._value  # type: ignore[return-value]

    def to_string(self) -> str:
        if self.is_message():
            return f"ParserResult<Message>('{self.message().to_string()}')"
        return f"ParserResult<Error>('{self.error()}')"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return self.to_string()


def parse_value(value_string: str) -> ProtocolValue:
    """Interpret the right-hand side of an assignment as int, float or string.

    Numbers containing '.', 'e' or 'E' become floats; other numbers within the
    32-bit integer range become ints. Quotes or braces around strings are stripped.
    """
    try:
        number = from_string(value_string, float)
    except (ValueError, OverflowError):
        pass
    else:
        if any(ch in value_string for ch in ".eE"):
            return number
        if _INT_MIN <= number <= _INT_MAX:
            return int(number)
        return number

    if value_string and any(
        value_string[0] == opening and value_string[-1] == closing
        for opening, closing in _DELIMITERS
    ):
        return value_string[1:-1]
    return value_string


def parse_assignment(line: str) -> ParserResult[Assignment]:
    """Parse ``identifier=value``."""
    match = _ASSIGNMENT_RE.fullmatch(line)
    if match is None:
        return ParserResult("Regex pattern for Assignment did not match")
    try:
        return ParserResult(Assignment(trim(match[1]), parse_value(trim(match[2]))))
    except ValueError as exc:
        return ParserResult(str(exc))


def parse_inquiry(line: str) -> ParserResult[Inquiry]:
    """Parse ``identifier?``."""
    match = _INQUIRY_RE.fullmatch(line)
    if match is None:
        return ParserResult("Regex pattern for Inquiry did not match")
    try:
        return ParserResult(Inquiry(trim(match[1])))
    except ValueError as exc:
        return ParserResult(str(exc))


def parse_command(line: str) -> ParserResult[Command]:
    """Parse a bare ``identifier``."""
    match = _COMMAND_RE.fullmatch(line)
    if match is None:
        return ParserResult("Regex pattern for Command did not match")
    try:
        return ParserResult(Command(trim(match[1])))
    except ValueError as exc:
        return ParserResult(str(exc))


def parse(line: str) -> Optional[InMessage]:
    """Parse one protocol line as an assignment, inquiry or command, in that order.

    Returns None (and logs a warning) if the line matches none of them.
    """
    text = trim(line)
    errors = []
    for attempt in (parse_assignment, parse_inquiry, parse_command):
        result = attempt(text)
        if result:
            message = result.message()
            _log.debug("String %r parsed as %s", line, message.to_string())
            return message
        errors.append(result.error())

    _log.warning(
        "String '%s' could not be parsed as any known message type. %s",
        line,
        "".join(f"{err}; " for err in errors),
    )
    return None