"""Serialization of outgoing protocol messages into wire headers and binary payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from irsol.protocol.binary import (
    BinaryDataAttribute,
    BinaryDataBuffer,
    ColorImageBinaryData,
    ImageBinaryData,
)
from irsol.protocol.in_messages import InMessageKind
from irsol.protocol.out_messages import Error, Success
from irsol.protocol.utils import ProtocolValue

OutMessage = Union[Success, BinaryDataBuffer, ImageBinaryData, ColorImageBinaryData, Error]

SOH = b"\x01"
"""Start of header byte."""
STX = b"\x02"
"""Start of text byte."""
ETX = b"\x03"
"""End of text byte."""

MESSAGE_TERMINATION = "\n"
"""Sequence that closes a serialized text message."""


@dataclass(frozen=True)
class SerializedMessage:
    """A serialized message: a text header and a binary payload."""

    header: str
    payload: bytes = b""

    def has_header(self) -> bool:
        return len(self.header) > 0

    def has_payload(self) -> bool:
        return self.payload_size() > 0

    def payload_size(self) -> int:
        return len(self.payload)

    def to_string(self) -> str:
        text = f"SerializedMessage{{header: '{self.header}'"
        if self.has_payload():
            text += f", payload size: {self.payload_size()}bytes"
        else:
            text += ", no payload"
        return text + "}"

    def __str__(self) -> str:
        return self.to_string()


def serialize_value(value: ProtocolValue) -> str:
    """Render a protocol value: ints as digits, floats with six decimals, strings in braces."""
    if isinstance(value, bool):
        raise TypeError("Invalid protocol value type: bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return "{" + value + "}"
    raise TypeError(f"Invalid protocol value type: {type(value).__name__}")


def serialize_binary_data_attribute(att: BinaryDataAttribute) -> str:
    """Render an attribute as ``identifier=value``."""
    return f"{att.identifier}={serialize_value(att.value)}"


def _swap_pixel_bytes(data: bytes) -> bytes:
    """Swap the two bytes of every 16-bit element."""
    swapped = bytearray(len(data))
    swapped[0::2] = data[1::2]
    swapped[1::2] = data[0::2]
    return bytes(swapped)


def _serialize_success(msg: Success) -> SerializedMessage:
    result = msg.identifier
    if msg.source is InMessageKind.ASSIGNMENT:
        if not msg.has_body():
            raise ValueError(
                "Body is not present in 'Success' message, created from 'Assignment'."
            )
        result += "=" + serialize_value(msg.body) + MESSAGE_TERMINATION
    elif msg.source is InMessageKind.INQUIRY:
        if msg.has_body():
            result += "=" + serialize_value(msg.body) + MESSAGE_TERMINATION
        else:
            result += MESSAGE_TERMINATION
    elif msg.source is InMessageKind.COMMAND:
        result += ";\n"
    return SerializedMessage(result)


def _serialize_image(msg: ImageBinaryData) -> SerializedMessage:
    meta = f"u{msg.BYTES_PER_ELEMENT * 8}[{msg.shape[0]},{msg.shape[1]}]"
    meta += "".join(" " + serialize_binary_data_attribute(att) for att in msg.attributes)
    payload = b"".join(
        (
            b"img=",
            SOH,
            meta.encode("utf-8"),
            STX,
            _swap_pixel_bytes(msg.data),
            ETX,
        )
    )
    return SerializedMessage("", payload)


def _serialize_error(msg: Error) -> SerializedMessage:
    return SerializedMessage(
        f"{msg.identifier}: Error: {msg.description}{MESSAGE_TERMINATION}"
    )


def serialize(msg: OutMessage) -> SerializedMessage:
    """Serialize an outgoing message.

    One-dimensional buffers and colour images have no wire format and raise RuntimeError;
    anything that is not an outgoing message raises TypeError.
    """
    if isinstance(msg, Success):
        return _serialize_success(msg)
    if isinstance(msg, Error):
        return _serialize_error(msg)
    if isinstance(msg, ImageBinaryData):
        return _serialize_image(msg)
    if isinstance(msg, (BinaryDataBuffer, ColorImageBinaryData)):
        raise RuntimeError("Binary data serialization not supported")
    raise TypeError(f"Unknown out message type: {type(msg).__name__}")