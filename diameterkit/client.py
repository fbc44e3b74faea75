"""A minimal TCP client that sends Diameter messages to a peer."""

from __future__ import annotations

import socket
from types import TracebackType

from .errors import ClientError, TransportError
from .message import DiameterMessage

_NOT_CONNECTED = "Connection not established yet!"


def _parse_address(address: str | tuple[str, int]) -> tuple[str, int]:
    if isinstance(address, tuple):
        host, port = address
        return host, int(port)
    host, sep, port_text = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"address {address!r} is not of the form host:port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in address {address!r}") from None
    return host, port


class DiameterClient:
    """Sends encoded Diameter messages over a TCP connection."""

    def __init__(self, address: str | tuple[str, int]) -> None:
        self.address = address
        self._endpoint = _parse_address(address)
        self._stream: socket.socket | None = None

    @property
    def connected(self) -> bool:
        return self._stream is not None

    def connect(self) -> None:
        """Open the TCP connection to the peer."""
        try:
            self._stream = socket.create_connection(self._endpoint)
        except OSError as exc:
            raise TransportError(exc) from exc

    def close(self) -> None:
        """Shut the connection down in both directions."""
        stream = self._require_stream()
        try:
            stream.shutdown(socket.SHUT_RDWR)
        except OSError as exc:
            raise TransportError(exc) from exc
        finally:
            stream.close()
            self._stream = None

    def write(self, message: DiameterMessage) -> None:
        """Send one message to the peer."""
        stream = self._require_stream()
        try:
            stream.sendall(message.encode())
        except OSError as exc:
            raise TransportError(exc) from exc

    def _require_stream(self) -> socket.socket:
        if self._stream is None:
            raise ClientError(_NOT_CONNECTED)
        return self._stream

    def __enter__(self) -> DiameterClient:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._stream is not None:
            self.close()