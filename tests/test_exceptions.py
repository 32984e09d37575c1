"""Tests for EngramError."""
import pytest

from engram_client.exceptions import EngramError, ErrorKind


@pytest.mark.parametrize(
    ("kind", "predicate"),
    [
        (ErrorKind.TRANSPORT, "is_transport"),
        (ErrorKind.APPLICATION, "is_application"),
        (ErrorKind.TIMEOUT, "is_timeout"),
        (ErrorKind.DECODE, "is_decode"),
    ],
)
def test_exactly_one_predicate(kind, predicate):
    error = EngramError(kind, "boom")
    flags = {
        name: getattr(error, name)
        for name in ("is_transport", "is_application", "is_timeout", "is_decode")
    }
    assert flags.pop(predicate) is True
    assert not any(flags.values())


def test_message_and_details():
    error = EngramError(ErrorKind.TRANSPORT, "HTTP 503: Service Unavailable", status_code=503)
    assert str(error) == "HTTP 503: Service Unavailable"
    assert error.status_code == 503
    assert error.code is None
    assert error.data is None
    assert repr(error) == (
        "EngramError(kind='transport', message='HTTP 503: Service Unavailable')"
    )
