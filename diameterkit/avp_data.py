"""Typed AVP payloads and their wire encodings."""

from __future__ import annotations

import ipaddress
import struct
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any

RFC868_OFFSET = 2208988800  # seconds between 1900-01-01 and 1970-01-01

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class AvpData(ABC):
    """An AVP payload value; its encoding is computed once and cached."""

    def __init__(self, value: Any) -> None:
        self._value = value
        self._encoded: bytes | None = None

    @property
    def value(self) -> Any:
        return self._value

    def encode(self) -> bytes:
        """Return the payload bytes in network order."""
        if self._encoded is None:
            self._encoded = self._encode_value()
        return self._encoded

    @abstractmethod
    def _encode_value(self) -> bytes:
        """Encode the raw value."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), repr(self._value)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class _Packed(AvpData):
    _format: str

    def _encode_value(self) -> bytes:
        try:
            return struct.pack(self._format, self._value)
        except struct.error as exc:
            raise ValueError(
                f"{self._value!r} cannot be encoded as {type(self).__name__}"
            ) from exc


class Unsigned8(_Packed):
    _format = ">B"


class Integer32(_Packed):
    _format = ">i"


class Integer64(_Packed):
    _format = ">q"


class Unsigned32(_Packed):
    _format = ">I"


class Unsigned64(_Packed):
    _format = ">Q"


class Float32(_Packed):
    _format = ">f"


class Float64(_Packed):
    _format = ">d"


Enumerated = Integer32


class OctetString(AvpData):
    """Arbitrary bytes, carried verbatim."""

    def __init__(self, value: bytes | bytearray) -> None:
        super().__init__(bytes(value))

    def _encode_value(self) -> bytes:
        return self._value


DiameterURI = OctetString


class UTF8String(AvpData):
    """Text carried as UTF-8."""

    def _encode_value(self) -> bytes:
        return self._value.encode("utf-8")


Identity = UTF8String


class Time(AvpData):
    """A point in time, encoded as seconds since 1900 in 32 bits."""

    def _encode_value(self) -> bytes:
        moment: datetime = self._value
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        unix_seconds = (moment - _UNIX_EPOCH) // timedelta(seconds=1)
        ntp_seconds = (unix_seconds + RFC868_OFFSET) & 0xFFFFFFFF
        return struct.pack(">I", ntp_seconds)


class AddressIPv4(AvpData):
    """An IPv4 address, encoded as its four octets."""

    def __init__(self, value: str | int | ipaddress.IPv4Address) -> None:
        super().__init__(ipaddress.IPv4Address(value))

    def _encode_value(self) -> bytes:
        return self._value.packed


class AddressIPv6(AvpData):
    """An IPv6 address, encoded as its sixteen octets."""

    def __init__(self, value: str | int | ipaddress.IPv6Address) -> None:
        super().__init__(ipaddress.IPv6Address(value))

    def _encode_value(self) -> bytes:
        return self._value.packed