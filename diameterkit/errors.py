"""Exceptions raised by the Diameter transport layer."""

from __future__ import annotations


class DiameterError(Exception):
    """Base class for every error reported by this package."""


class ClientError(DiameterError):
    """The client was used in a state that does not allow the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TransportError(DiameterError):
    """An operating-system level I/O failure while talking to a peer."""

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error
        self.__cause__ = error

    def __str__(self) -> str:
        return str(self.error)