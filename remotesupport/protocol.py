"""Framing for the client/server wire protocol.

A frame is laid out as::

    [uint32 length][uint16 type][uint32 json_size][json bytes][binary...]

All integers are big-endian. ``length`` counts every byte from ``type`` to
the end of the frame. The JSON part is a compact UTF-8 object and the binary
tail (JPEG frames, PCM audio and so on) may be empty.
"""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

_LENGTH = struct.Struct(">I")
_HEADER = struct.Struct(">HI")
_LEN_FIELD_SIZE = _LENGTH.size
_MIN_LENGTH = _HEADER.size


class MsgType(IntEnum):
    """Message types. New types only ever add values."""

    REGISTER = 1
    LOGIN = 2
    CREATE_WORKORDER = 3
    JOIN_WORKORDER = 4
    TEXT = 10
    DEVICE_DATA = 20
    VIDEO_FRAME = 30
    AUDIO_FRAME = 40
    CONTROL = 50
    SERVER_EVENT = 90


@dataclass
class Packet:
    """One complete decoded message."""

    msg_type: int = 0
    data: dict[str, Any] = field(default_factory=dict)
    binary: bytes = b""


def to_json_bytes(obj: dict[str, Any]) -> bytes:
    """Encode a JSON object compactly as UTF-8."""
    return json.dumps(
        obj, separators=(",", ":"), ensure_ascii=False, sort_keys=True
    ).encode("utf-8")


def from_json_bytes(data: bytes) -> dict[str, Any]:
    """Decode a JSON object; anything that is not an object yields ``{}``."""
    try:
        decoded = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return {}
    return decoded if isinstance(decoded, dict) else {}


def build_packet(
    msg_type: int,
    json_obj: dict[str, Any] | None = None,
    binary: bytes = b"",
) -> bytes:
    """Build one frame ready to be written to a socket."""
    json_bytes = to_json_bytes(json_obj if json_obj is not None else {})
    binary = bytes(binary)
    length = _HEADER.size + len(json_bytes) + len(binary)
    try:
        header = _LENGTH.pack(length) + _HEADER.pack(int(msg_type), len(json_bytes))
    except struct.error as exc:
        raise ValueError(f"cannot frame message: {exc}") from None
    return header + json_bytes + binary


def _as_type(value: int) -> int:
    try:
        return MsgType(value)
    except ValueError:
        return value


def drain_packets(buffer: bytearray) -> list[Packet]:
    """Take every complete frame out of ``buffer`` and return them.

    The buffer is consumed in place; a trailing partial frame stays in it
    until more bytes arrive. A frame that declares a length too small to hold
    its header makes the whole buffer unusable, so it is cleared. A frame
    whose JSON size exceeds its payload is dropped.
    """
    packets: list[Packet] = []
    while len(buffer) >= _LEN_FIELD_SIZE:
        (length,) = _LENGTH.unpack_from(buffer, 0)
        if length < _MIN_LENGTH:
            buffer.clear()
            break

        total = _LEN_FIELD_SIZE + length
        if len(buffer) < total:
            break

        block = bytes(buffer[:total])
        del buffer[:total]

        msg_type, json_size = _HEADER.unpack_from(block, _LEN_FIELD_SIZE)
        payload_start = _LEN_FIELD_SIZE + _HEADER.size
        payload_size = total - payload_start
        if json_size > payload_size:
            continue

        json_end = payload_start + json_size
        packets.append(
            Packet(
                msg_type=_as_type(msg_type),
                data=from_json_bytes(block[payload_start:json_end]),
                binary=block[json_end:],
            )
        )
    return packets