import socket

import pytest

from diameterkit.avp import Avp, AvpFlags
from diameterkit.avp_data import UTF8String
from diameterkit.client import DiameterClient
from diameterkit.command_codes import CER
from diameterkit.errors import ClientError, DiameterError, TransportError
from diameterkit.message import ApplicationId, CommandFlags, DiameterMessage


@pytest.fixture
def server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    yield listener
    listener.close()


def _message():
    msg = DiameterMessage(CommandFlags.REQUEST, CER, ApplicationId.Gx, 7, 9)
    msg.add_avp(Avp(264, AvpFlags.M, None, UTF8String("peer.example.com")))
    return msg


def _recv_exact(conn, size):
    data = b""
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def test_write_sends_encoded_message(server):
    port = server.getsockname()[1]
    client = DiameterClient(f"127.0.0.1:{port}")
    client.connect()
    conn, _ = server.accept()
    try:
        msg = _message()
        client.write(msg)
        expected = msg.encode()
        assert _recv_exact(conn, len(expected)) == expected
        client.close()
        assert conn.recv(1) == b""
    finally:
        conn.close()


def test_context_manager_connects_and_closes(server):
    port = server.getsockname()[1]
    with DiameterClient(("127.0.0.1", port)) as client:
        conn, _ = server.accept()
        assert client.connected is True
    assert client.connected is False
    conn.close()


def test_write_before_connect_raises():
    client = DiameterClient("127.0.0.1:3868")
    with pytest.raises(ClientError) as info:
        client.write(_message())
    assert str(info.value) == "Connection not established yet!"


def test_close_before_connect_raises():
    client = DiameterClient("127.0.0.1:3868")
    with pytest.raises(ClientError) as info:
        client.close()
    assert str(info.value) == "Connection not established yet!"
    assert isinstance(info.value, DiameterError)


def test_connect_refused_raises_transport_error():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = DiameterClient(f"127.0.0.1:{port}")
    with pytest.raises(TransportError) as info:
        client.connect()
    assert isinstance(info.value.error, OSError)
    assert client.connected is False


@pytest.mark.parametrize("address", ["no-port", ":3868", "host:abc"])
def test_bad_address_rejected(address):
    with pytest.raises(ValueError):
        DiameterClient(address)