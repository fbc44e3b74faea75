"""Diameter messages, AVP encoding and a TCP client for sending them."""

__version__ = "0.1.0"

__all__ = ["avp", "avp_data", "client", "command_codes", "errors", "message"]