"""Kinds of incoming and outgoing messages, with helpers to identify and describe them."""

from __future__ import annotations

from enum import Enum
from typing import Union

from irsol.protocol.binary import (
    BinaryDataBuffer,
    ColorImageBinaryData,
    ImageBinaryData,
)
from irsol.protocol.in_messages import Assignment, Command, InMessageKind, Inquiry
from irsol.protocol.out_messages import Error, Success

InMessage = Union[Assignment, Inquiry, Command]
OutMessage = Union[Success, BinaryDataBuffer, ImageBinaryData, ColorImageBinaryData, Error]


class OutMessageKind(Enum):
    """Kind of an outgoing message."""

    SUCCESS = "SUCCESS"
    BINARY_BUFFER = "BINARY_BUFFER"
    BW_IMAGE = "BW_IMAGE"
    COLOR_IMAGE = "COLOR_IMAGE"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


_IN_KINDS: tuple[tuple[type, InMessageKind], ...] = (
    (Assignment, InMessageKind.ASSIGNMENT),
    (Inquiry, InMessageKind.INQUIRY),
    (Command, InMessageKind.COMMAND),
)

_OUT_KINDS: tuple[tuple[type, OutMessageKind], ...] = (
    (Success, OutMessageKind.SUCCESS),
    (Error, OutMessageKind.ERROR),
    (BinaryDataBuffer, OutMessageKind.BINARY_BUFFER),
    (ImageBinaryData, OutMessageKind.BW_IMAGE),
    (ColorImageBinaryData, OutMessageKind.COLOR_IMAGE),
)


def get_in_message_kind(msg: InMessage) -> InMessageKind:
    """Return the kind of the incoming message ``msg``; raise TypeError otherwise."""
    for cls, kind in _IN_KINDS:
        if isinstance(msg, cls):
            return kind
    raise TypeError(f"Unknown in message type: {type(msg).__name__}")


def get_out_message_kind(msg: OutMessage) -> OutMessageKind:
    """Return the kind of the outgoing message ``msg``; raise TypeError otherwise."""
    for cls, kind in _OUT_KINDS:
        if isinstance(msg, cls):
            return kind
    raise TypeError(f"Unknown out message type: {type(msg).__name__}")


def to_string(msg: Union[InMessage, OutMessage]) -> str:
    """Human-readable description of any incoming or outgoing message."""
    known = tuple(cls for cls, _ in _IN_KINDS) + tuple(cls for cls, _ in _OUT_KINDS)
    if not isinstance(msg, known):
        raise TypeError(f"Unknown message type: {type(msg).__name__}")
    return msg.to_string()


def is_assignment(msg: InMessage) -> bool:
    return get_in_message_kind(msg) is InMessageKind.ASSIGNMENT


def is_inquiry(msg: InMessage) -> bool:
    return get_in_message_kind(msg) is InMessageKind.INQUIRY


def is_command(msg: InMessage) -> bool:
    return get_in_message_kind(msg) is InMessageKind.COMMAND


def is_success(msg: OutMessage) -> bool:
    return get_out_message_kind(msg) is OutMessageKind.SUCCESS


def is_binary_data_buffer(msg: OutMessage) -> bool:
    return get_out_message_kind(msg) is OutMessageKind.BINARY_BUFFER


def is_image_binary_data(msg: OutMessage) -> bool:
    return get_out_message_kind(msg) is OutMessageKind.BW_IMAGE


def is_color_image_binary_data(msg: OutMessage) -> bool:
    return get_out_message_kind(msg) is OutMessageKind.COLOR_IMAGE


def is_error(msg: OutMessage) -> bool:
    return get_out_message_kind(msg) is OutMessageKind.ERROR