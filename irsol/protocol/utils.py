"""String helpers for protocol parsing: identifier validation, typed conversion, trimming."""

from __future__ import annotations

import math
import re
from typing import Union

ProtocolValue = Union[int, float, str]

_IDENTIFIER_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*(?:\[[0-9]+\])*")

_TRIM_CHARS = " \t\r\n"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_RE = re.compile(r"[ \t\n\v\f\r]*(?P<num>[+-]?[0-9]+)")

_FLOAT_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<num>
        (?P<sign>[+-]?)
        (?:
            0[xX](?P<hex>(?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)
          | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
          | (?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)
          | (?P<nan>[nN][aA][nN](?:\([0-9A-Za-z_]*\))?)
        )
    )
    """,
    re.VERBOSE,
)


def validate_identifier(identifier: str) -> str:
    """Return ``identifier`` if it is a valid protocol identifier, else raise ValueError.

    A valid identifier starts with a letter or underscore, continues with letters,
    digits or underscores, and may end with indexing suffixes such as ``[0][3]``.
    """
    if not isinstance(identifier, str) or _IDENTIFIER_RE.fullmatch(identifier) is None:
        raise ValueError("Invalid identifier")
    return identifier


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"Cannot convert {text!r} to an integer")
    value = int(match.group("num"))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"Integer {text!r} is out of range")
    if match.end() != len(text):
        raise ValueError("Extra characters after integer")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"Cannot convert {text!r} to a double")
    negative = match.group("sign") == "-"

    if match.group("inf") is not None:
        value = -math.inf if negative else math.inf
    elif match.group("nan") is not None:
        value = math.nan
    elif match.group("hex") is not None:
        literal = ("-" if negative else "") + "0x" + match.group("hex")
        try:
            value = float.fromhex(literal)
        except OverflowError as exc:
            raise OverflowError(f"Double {text!r} is out of range") from exc
    else:
        digits = match.group("dec")
        value = float(match.group("num"))
        mantissa = re.split(r"[eE]", digits, maxsplit=1)[0]
        if math.isinf(value):
            raise OverflowError(f"Double {text!r} is out of range")
        if value == 0.0 and any(ch in "123456789" for ch in mantissa):
            raise OverflowError(f"Double {text!r} is out of range")

    if match.end() != len(text):
        raise ValueError("Extra characters after double")
    return value


def from_string(text: str, kind: type) -> ProtocolValue:
    """Convert ``text`` to ``kind`` (``int``, ``float`` or ``str``).

    Leading whitespace is accepted for numbers; anything left over after the number
    raises ValueError. Numbers outside the representable range raise OverflowError.
    """
    if kind is str:
        return text
    if kind is int:
        return _parse_int(text)
    if kind is float:
        return _parse_float(text)
    raise TypeError(f"Unsupported conversion target: {kind!r}")


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_TRIM_CHARS)