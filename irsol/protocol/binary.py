"""Binary payloads sent by the server: attributes and n-dimensional data buffers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Sequence

from irsol.protocol.utils import ProtocolValue, validate_identifier

_BUFFER_NAMES = {
    1: "BinaryDataBuffer",
    2: "BinaryDataBuffer2D",
    3: "BinaryDataBuffer3D",
}


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
class BinaryDataAttribute:
    """A named value attached to a binary payload."""

    identifier: str
    value: ProtocolValue

    def __post_init__(self) -> None:
        validate_identifier(self.identifier)
        _check_value(self.value)

    def to_string(self) -> str:
        return (
            f"BinaryDataAttribute{{identifier: '{self.identifier}', "
            f"value: {_describe_value(self.value)}}}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def has_int(self) -> bool:
        return isinstance(self.value, int)

    def has_double(self) -> bool:
        return isinstance(self.value, float)

    def has_string(self) -> bool:
        return isinstance(self.value, str)


class BinaryData:
    """A block of fixed-width elements with a shape and optional attributes.

    Concrete buffer types set ``BYTES_PER_ELEMENT`` (1 or 2) and ``DIM`` (at least 1).
    """

    BYTES_PER_ELEMENT: ClassVar[Optional[int]] = None
    DIM: ClassVar[Optional[int]] = None

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        shape: Sequence[int],
        attributes: Iterable[BinaryDataAttribute] = (),
    ) -> None:
        if self.BYTES_PER_ELEMENT is None or self.DIM is None:
            raise TypeError(f"{type(self).__name__} has no element size or dimensionality")
        if self.BYTES_PER_ELEMENT not in (1, 2):
            raise TypeError("Binary data element byte size must be 1 or 2")
        if self.DIM < 1:
            raise TypeError("Binary data dimensionality must be at least 1")

        shape = tuple(shape)
        if len(shape) != self.DIM:
            raise ValueError(
                f"Shape {shape} does not have the expected dimensionality {self.DIM}"
            )
        for extent in shape:
            if isinstance(extent, bool) or not isinstance(extent, int) or extent < 0:
                raise ValueError(f"Invalid shape extent: {extent!r}")

        self.data = bytes(data)
        self.shape = shape
        self.num_elements = math.prod(shape)
        self.num_bytes = self.num_elements * self.BYTES_PER_ELEMENT
        self.attributes = list(attributes)
        for att in self.attributes:
            if not isinstance(att, BinaryDataAttribute):
                raise TypeError(f"Invalid binary data attribute: {att!r}")

        if len(self.data) != self.num_bytes:
            raise ValueError(
                f"Data size ({len(self.data)}) does not match the number of elements "
                f"({self.num_elements}) multiplied by bytes per element "
                f"({self.BYTES_PER_ELEMENT})."
            )

    def to_string(self) -> str:
        """Summary with dimensionality, element width, shape and byte size."""
        name = _BUFFER_NAMES.get(self.DIM, f"BinaryDataBuffer{self.DIM}D")
        bits = "8" if self.BYTES_PER_ELEMENT == 1 else "16"
        dims = "x".join(str(extent) for extent in self.shape)
        return f"{name}u{bits}[shape=({dims})]({self.num_bytes} bytes)"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_string()}>"


class BinaryDataBuffer(BinaryData):
    """One-dimensional buffer of 16-bit elements."""

    BYTES_PER_ELEMENT = 2
    DIM = 1


class ImageBinaryData(BinaryData):
    """Two-dimensional buffer of 16-bit elements, such as a grayscale image."""

    BYTES_PER_ELEMENT = 2
    DIM = 2


class ColorImageBinaryData(BinaryData):
    """Three-dimensional buffer of 16-bit elements, such as a colour image."""

    BYTES_PER_ELEMENT = 2
    DIM = 3