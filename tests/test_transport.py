"""Unit tests for the requests-based HTTP transport"""

import json

import pytest
import requests

from paystation import HttpTransport, NetworkError, WireRequest


def make_response(status_code=200, body=b"", content_type="application/json", reason="OK"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body
    response.headers["Content-Type"] = content_type
    return response


class StubSession:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


@pytest.fixture
def wire_request() -> WireRequest:
    return WireRequest(
        url="https://sandbox.paystation.com.bd/api/transaction-status",
        method="POST",
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        },
        body={"merchant_id": "m", "password": "p", "invoice_number": "INV 1"},
    )


def test_send_decodes_json(wire_request):
    payload = {"statusCode": "200", "status": "success", "message": "ok"}
    session = StubSession(make_response(body=json.dumps(payload).encode()))
    transport = HttpTransport(session, timeout=5)

    response = transport.send(wire_request)

    assert response.status_code == 200
    assert response.status_text == "OK"
    assert response.body == payload
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url == wire_request.url
    assert kwargs["data"] == "merchant_id=m&password=p&invoice_number=INV+1"
    assert kwargs["headers"] == wire_request.headers
    assert kwargs["timeout"] == 5


def test_send_returns_text_for_non_json(wire_request):
    session = StubSession(
        make_response(502, b"Bad gateway", content_type="text/html", reason="Bad Gateway")
    )

    response = HttpTransport(session).send(wire_request)

    assert response.status_code == 502
    assert response.status_text == "Bad Gateway"
    assert response.body == "Bad gateway"
    assert not response.ok


def test_invalid_json_raises_network_error(wire_request):
    session = StubSession(make_response(body=b"{not json"))
    with pytest.raises(NetworkError, match="Failed to parse JSON response") as exc_info:
        HttpTransport(session).send(wire_request)
    assert exc_info.value.original_error is not None


@pytest.mark.parametrize(
    "exc, message",
    [
        (requests.Timeout("slow"), "Request timeout"),
        (requests.ConnectTimeout("slow"), "Request timeout"),
        (requests.ConnectionError("refused"), "Network request failed"),
        (requests.TooManyRedirects("loop"), "An unexpected network error occurred"),
    ],
)
def test_request_failures_raise_network_error(wire_request, exc, message):
    with pytest.raises(NetworkError, match=message) as exc_info:
        HttpTransport(StubSession(exc)).send(wire_request)
    assert exc_info.value.original_error is exc
    assert exc_info.value.__cause__ is exc
