"""Attribute-value pairs and grouped AVP payloads."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable

from .avp_data import AvpData

VENDOR_FLAG_BIT = 0x80
_MAX_LENGTH = 0xFFFFFF


class AvpFlags(enum.Enum):
    """Flag presets for an AVP header."""

    M = "mandatory"
    O = "optional"

    @property
    def bits(self) -> int:
        return 0x40

    def with_vendor_bit(self) -> int:
        return self.bits | VENDOR_FLAG_BIT


class Avp:
    """A single AVP: header, optional vendor id and payload."""

    def __init__(
        self,
        code: int,
        flags: AvpFlags,
        vendor_id: int | None,
        value: AvpData,
    ) -> None:
        self.code = code
        self.vendor_id = vendor_id
        self.raw_data = value.encode()
        if vendor_id is None:
            header_length, self.flags = 8, flags.bits
        else:
            header_length, self.flags = 12, flags.with_vendor_bit()
        self.length = header_length + len(self.raw_data)
        if self.length > _MAX_LENGTH:
            raise ValueError(f"AVP length {self.length} exceeds 24 bits")
        self._encoded: bytes | None = None

    def encode(self) -> bytes:
        """Return the AVP on the wire, padded to a multiple of four octets."""
        if self._encoded is None:
            parts = [
                struct.pack(">IB", self.code, self.flags),
                self.length.to_bytes(3, "big"),
            ]
            if self.vendor_id is not None:
                parts.append(struct.pack(">I", self.vendor_id))
            parts.append(self.raw_data)
            parts.append(bytes(-len(self.raw_data) % 4))
            self._encoded = b"".join(parts)
        return self._encoded

    def __repr__(self) -> str:
        return (
            f"Avp(code={self.code}, flags={self.flags:#04x}, "
            f"length={self.length}, vendor_id={self.vendor_id})"
        )


class Grouped(AvpData):
    """A payload made of other AVPs, one after another."""

    def __init__(self, value: Iterable[Avp]) -> None:
        super().__init__(list(value))

    def _encode_value(self) -> bytes:
        return b"".join(avp.encode() for avp in self._value)

    def encode(self) -> bytes:
        """Return the encodings of the child AVPs, concatenated."""
        return super().encode()