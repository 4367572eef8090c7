#!/usr/bin/env python3
"""
Testes do transporte HTTP (sessão requests simulada).
"""

import sys
from pathlib import Path

import pytest
import requests

sys.path.insert(0, str(Path(__file__).parent))

from joa.protocol.errors import ErrorCode, TransportError
from joa.transport.http_transport import HttpTransport


class FakeResponse:
    def __init__(self, status_code, text="", reason=""):
        self.status_code = status_code
        self.text = text
        self.reason = reason


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def test_post_ok_returns_body():
    session = FakeSession(FakeResponse(200, text="OK"))
    transport = HttpTransport(timeout=5, session=session)

    assert transport.post("http://backoffice/", "MuniRPCv2:0.0.0.0,vendor=é\n") == "OK"

    call = session.calls[0]
    assert call["url"] == "http://backoffice/"
    assert call["data"] == "MuniRPCv2:0.0.0.0,vendor=é\n".encode("utf-8")
    assert call["headers"]["Content-Type"].startswith("text/plain")
    assert call["timeout"] == 5


def test_non_200_status_is_passed_through():
    transport = HttpTransport(session=FakeSession(FakeResponse(403, reason="Forbidden")))

    with pytest.raises(TransportError) as exc:
        transport.post("http://backoffice/", "payload")

    assert exc.value.status == 403
    assert exc.value.text == "Forbidden"
    assert exc.value.code == ErrorCode.TRANSPORT_ERROR


def test_network_failure_is_passed_through():
    error = requests.ConnectionError("connection refused")
    transport = HttpTransport(session=FakeSession(error=error))

    with pytest.raises(TransportError) as exc:
        transport.post("http://backoffice/", "payload")

    assert exc.value.status is None
    assert "connection refused" in exc.value.text
    assert exc.value.__cause__ is error


def test_close():
    session = FakeSession()
    HttpTransport(session=session).close()
    assert session.closed
