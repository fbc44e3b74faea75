"""Diameter messages: header fields, AVPs and wire encoding."""

from __future__ import annotations

import enum
import struct

from .avp import Avp
from .command_codes import CommandCode

DIAMETER_VERSION = 1
DEFAULT_MESSAGE_LENGTH = 32
HEADER_LENGTH = 20
_MASK_24 = 0xFFFFFF
_MASK_32 = 0xFFFFFFFF


class CommandFlags(enum.IntEnum):
    """Command flag bits of the Diameter header."""

    REQUEST = 0x80
    PROXYABLE = 0x40
    ERROR = 0x20
    RETRANSMIT = 0x10


class ApplicationId(enum.IntEnum):
    """Known Diameter application identifiers."""

    Gx = 16777238
    Gy = 4


def _check_u32(name: str, value: int) -> int:
    if not 0 <= value <= _MASK_32:
        raise ValueError(f"{name} {value} does not fit in 32 bits")
    return value


class DiameterMessage:
    """A Diameter message made of a fixed header followed by AVPs."""

    def __init__(
        self,
        command_flags: CommandFlags,
        command_code: CommandCode,
        application_id: ApplicationId,
        hop_by_hop: int,
        end_to_end: int,
    ) -> None:
        self.version = DIAMETER_VERSION
        self.message_length = DEFAULT_MESSAGE_LENGTH
        self.command_flags = command_flags
        self.command_code = command_code
        self.application_id = application_id
        self.hop_by_hop = _check_u32("hop-by-hop identifier", hop_by_hop)
        self.end_to_end = _check_u32("end-to-end identifier", end_to_end)
        self.avps: list[Avp] = []

    def add_avp(self, avp: Avp) -> None:
        """Append an AVP, encoding it on the way in."""
        avp.encode()
        self.avps.append(avp)

    def encode(self) -> bytes:
        """Return the message as it goes on the wire."""
        header = b"".join(
            [
                struct.pack(">B", self.version),
                (self.message_length & _MASK_24).to_bytes(3, "big"),
                struct.pack(">B", int(self.command_flags)),
                (self.command_code.code & _MASK_24).to_bytes(3, "big"),
                struct.pack(
                    ">III",
                    int(self.application_id),
                    self.hop_by_hop,
                    self.end_to_end,
                ),
            ]
        )
        return header + b"".join(avp.encode() for avp in self.avps)

    def __repr__(self) -> str:
        return (
            f"DiameterMessage(command_flags={self.command_flags.name}, "
            f"command_code={self.command_code.name!r}, "
            f"application_id={self.application_id.name}, "
            f"hop_by_hop={self.hop_by_hop}, end_to_end={self.end_to_end}, "
            f"avps={len(self.avps)})"
        )