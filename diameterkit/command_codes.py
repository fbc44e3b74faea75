"""Base-protocol Diameter command codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandCode:
    """A named 24-bit Diameter command code."""

    name: str
    code: int


ASR = CommandCode("Abort-Session-Request", 274)
ASA = CommandCode("Abort-Session-Answer", 274)
ACR = CommandCode("Accounting-Request", 271)
ACA = CommandCode("Accounting-Response", 271)
CER = CommandCode("Capabilities-Exchange-Request", 257)
CEA = CommandCode("Capabilities-Exchange-Answer", 257)
DWR = CommandCode("Device-Watchdog-Request", 280)
DWA = CommandCode("Device-Watchdog-Answer", 280)
DPR = CommandCode("Disconnect-Peer-Request", 282)
DPA = CommandCode("Disconnect-Peer-Answer", 282)
RAR = CommandCode("Re-Auth-Request", 258)
RAA = CommandCode("Re-Auth-Answer", 258)
STR = CommandCode("Session-Termination-Request", 275)
STA = CommandCode("Session-Termination-Answer", 275)