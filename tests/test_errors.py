"""Tests for the internal error hierarchy."""

from feed_auth.errors.internal import (
    AuthorizationError,
    ConfigurationError,
    InternalError,
    NetworkError,
    ProtocolError,
)


def test_all_errors_share_base():
    for cls in (AuthorizationError, ConfigurationError, NetworkError):
        assert issubclass(cls, InternalError)
    assert issubclass(ProtocolError, InternalError)


def test_internal_error_copies_data():
    source = {"endpoint": "https://e"}
    err = InternalError("boom", data=source)
    source["endpoint"] = "changed"
    assert err.data == {"endpoint": "https://e"}
    assert InternalError("plain").data == {}


def test_protocol_error_carries_body():
    err = ProtocolError(body="<html/>", status=500)
    assert str(err) == "malformed response body:\n<html/>"
    assert err.body == "<html/>"
    assert err.status == 500
    assert err.data == {"body": "<html/>", "status": 500}
