import pytest

from diameterkit.errors import ClientError, DiameterError, TransportError


def test_client_error_message_is_its_text():
    err = ClientError("Connection not established yet!")
    assert str(err) == "Connection not established yet!"
    assert err.message == "Connection not established yet!"


def test_client_error_is_diameter_error():
    err = ClientError("Connection not established yet!")
    assert isinstance(err, DiameterError)
    assert not isinstance(err, TransportError)
    assert str(err) == "Connection not established yet!"
    assert err.message == "Connection not established yet!"


def test_transport_error_wraps_os_error():
    original = ConnectionRefusedError(111, "refused")
    err = TransportError(original)
    assert err.error is original
    assert str(err) == str(original)
    assert err.__cause__ is original


def test_transport_error_caught_as_base():
    original = OSError("boom")
    with pytest.raises(DiameterError) as info:
        raise TransportError(original)
    assert str(info.value) == "boom"
    assert info.value.error is original
    assert not isinstance(info.value, ClientError)