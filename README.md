# diameterkit

Build Diameter protocol messages and their AVPs, encode them to wire format
and send them to a peer over TCP. The package has no dependencies beyond the
Python standard library.

## Installation

```
pip install diameterkit
```

## Building a message

```python
from diameterkit.avp import Avp, AvpFlags
from diameterkit.avp_data import UTF8String, Unsigned32
from diameterkit.command_codes import CER
from diameterkit.message import ApplicationId, CommandFlags, DiameterMessage

message = DiameterMessage(
    CommandFlags.REQUEST,
    CER,
    ApplicationId.Gx,
    hop_by_hop=1,
    end_to_end=1,
)
message.add_avp(Avp(264, AvpFlags.M, None, UTF8String("host.example.com")))
message.add_avp(Avp(266, AvpFlags.M, None, Unsigned32(10415)))

wire = message.encode()
```

`DiameterMessage.encode()` returns the 20-byte header (version 1, message
length, command flags, 24-bit command code, application ID, hop-by-hop and
end-to-end identifiers) followed by the encoded AVPs in the order they were
added. The message length field is always written as 32; it is not
recomputed from the AVPs. The hop-by-hop and end-to-end identifiers must fit
in 32 bits, otherwise `ValueError` is raised.

`CommandFlags` has the members `REQUEST`, `PROXYABLE`, `ERROR` and
`RETRANSMIT`; `ApplicationId` has `Gx` (16777238) and `Gy` (4).

### Command codes

`diameterkit.command_codes` defines `CommandCode`, a frozen dataclass with
`name` and `code`, and the base-protocol constants `ASR`, `ASA`, `ACR`,
`ACA`, `CER`, `CEA`, `DWR`, `DWA`, `DPR`, `DPA`, `RAR`, `RAA`, `STR` and
`STA`.

### AVPs

`Avp(code, flags, vendor_id, value)` takes an `AvpFlags` member (`M` or
`O`; both set the mandatory bit) and an optional vendor ID. When a vendor ID
is given the vendor bit is set and the header grows from 8 to 12 bytes.
`Avp.encode()` returns code, flags, 24-bit length, the vendor ID when there
is one, and the data padded with zero bytes to a four-byte boundary. The
length field counts the header and the data but not the padding. An AVP
whose length would not fit in 24 bits raises `ValueError`.

```python
from diameterkit.avp import Avp, AvpFlags, Grouped
from diameterkit.avp_data import Unsigned32

child = Avp(266, AvpFlags.M, None, Unsigned32(10415))
parent = Avp(260, AvpFlags.M, None, Grouped([child]))
```

### AVP data types

`diameterkit.avp_data` provides `Unsigned8`, `Integer32`, `Integer64`,
`Unsigned32`, `Unsigned64`, `Float32`, `Float64`, `OctetString`,
`UTF8String`, `Time`, `AddressIPv4` and `AddressIPv6`, with the aliases
`Enumerated` (`Integer32`), `DiameterURI` (`OctetString`) and `Identity`
(`UTF8String`). Each has `value` and `encode()`; the encoding is computed
once and cached.

- Numbers are encoded big-endian; a value out of range for its type raises
  `ValueError`.
- `Time` takes a `datetime` (naive values are taken as UTC) and encodes it
  as 32-bit seconds since 1900.
- `AddressIPv4` and `AddressIPv6` accept a string, an integer or an
  `ipaddress` address, and encode its packed octets.

AVPs that contain other AVPs use `diameterkit.avp.Grouped`, whose encoding
is the child AVPs' encodings concatenated.

## Sending a message

```python
from diameterkit.client import DiameterClient
from diameterkit.errors import DiameterError

try:
    with DiameterClient("127.0.0.1:3868") as client:
        client.write(message)
except DiameterError as exc:
    print(f"diameter error: {exc}")
```

The address is a `"host:port"` string (IPv6 hosts may be bracketed) or a
`(host, port)` tuple. `connect()` opens the connection, `write(message)`
sends one encoded message, and `close()` shuts the connection down; the
`connected` property tells whether a connection is open. Used as a context
manager, the client connects on entry and closes on exit.

Calling `write` or `close` before `connect` raises `ClientError`. Socket
failures are raised as `TransportError`, which keeps the original `OSError`
in its `error` attribute. Both are subclasses of `DiameterError`.

## What the package does not do

It only builds and sends messages. It does not read or decode messages or
AVPs from the wire, does not wait for answers, does not run a Diameter
server or peer state machine, and has no command-line tool.