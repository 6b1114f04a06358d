"""Tests for the client facade: build -> send -> parse"""

import pytest
import requests

from paystation import (
    AuthenticationError,
    ClientConfig,
    Environment,
    NetworkError,
    PayStationClient,
    PayStationError,
    ValidationError,
    WireResponse,
    create_client,
)

from conftest import FakeTransport, ok


@pytest.fixture
def client(config, transport) -> PayStationClient:
    return PayStationClient(config, transport=transport)


def test_initiate_payment(client, transport, params):
    transport.queue(
        ok(
            {
                "statusCode": "200",
                "status": "success",
                "message": "Payment initiated successfully",
                "paymentAmount": "100.00",
                "invoiceNumber": "INV-001",
                "paymentUrl": "https://sandbox.paystation.com.bd/checkout/payment-url",
            }
        )
    )

    result = client.initiate_payment(params)

    assert result.status == "success"
    assert result.invoice_number == "INV-001"
    assert result.payment_amount == "100.00"
    assert "paystation.com.bd" in result.payment_url
    sent = transport.requests[0]
    assert sent.url.endswith("/initiate-payment")
    assert sent.body["invoice_number"] == "INV-001"


def test_get_transaction_status(client, transport, transaction_body):
    transport.queue(ok(transaction_body))

    result = client.get_transaction_status("INV-001")

    assert result.data.transaction_id == "TXN123456789"
    assert transport.requests[0].url.endswith("/api/transaction-status")


def test_get_transaction_status_by_id(client, transport, transaction_body):
    transaction_body["data"]["transactionAmount"] = 100
    transport.queue(ok(transaction_body))

    result = client.get_transaction_status_by_id("TXN123456789")

    assert result.data.transaction_amount == 100.0
    sent = transport.requests[0]
    assert sent.url.endswith("/v2/transaction-status")
    assert sent.body["trx_id"] == "TXN123456789"


def test_validation_error_skips_transport(client, transport, params):
    with pytest.raises(ValidationError):
        client.get_transaction_status("  ")
    assert transport.requests == []


def test_http_error_statuses_are_mapped(client, transport):
    transport.queue(WireResponse(401, "Unauthorized", {"message": "bad creds"}))
    with pytest.raises(AuthenticationError, match="bad creds"):
        client.get_transaction_status("INV-001")

    transport.queue(WireResponse(500, "Internal Server Error", "oops"))
    with pytest.raises(PayStationError, match="HTTP 500: Internal Server Error"):
        client.get_transaction_status("INV-001")


def test_provider_failure_status(client, transport):
    transport.queue(ok({"statusCode": "1002", "status": "failed", "message": "Not found"}))
    with pytest.raises(PayStationError) as exc_info:
        client.get_transaction_status_by_id("TXN1")
    assert exc_info.value.status_code == "1002"


def test_network_error_propagates_unchanged(client, transport):
    error = NetworkError("Network request failed", requests.ConnectionError("refused"))
    transport.queue(error)
    with pytest.raises(NetworkError) as exc_info:
        client.get_transaction_status("INV-001")
    assert exc_info.value is error


def test_unexpected_errors_are_wrapped(client, transport, params):
    """A transport that breaks its contract surfaces as PayStationError"""
    boom = RuntimeError("boom")
    transport.queue(boom)

    with pytest.raises(PayStationError) as exc_info:
        client.initiate_payment(params)

    error = exc_info.value
    assert type(error) is PayStationError
    assert error.message == "An unexpected error occurred during payment initiation"
    assert error.original_error is boom
    assert error.__cause__ is boom


def test_malformed_transport_response_is_wrapped(client, transport):
    transport.queue(object())
    with pytest.raises(PayStationError, match="transaction status check by ID"):
        client.get_transaction_status_by_id("TXN1")


def test_transport_and_session_are_exclusive(config):
    with pytest.raises(ValueError):
        PayStationClient(config, transport=FakeTransport(), session=requests.Session())


def test_create_client_from_settings():
    client = create_client(
        env_file=None,
        base={},
        merchant_id="m",
        password="p",
        environment="live",
        transport=FakeTransport(),
    )
    assert client.config == ClientConfig("m", "p", Environment.LIVE)


def test_create_client_rejects_mixed_arguments(config):
    with pytest.raises(ValueError):
        create_client(config=config, merchant_id="other")


def test_create_client_default_transport(config):
    session = requests.Session()
    client = create_client(config=config, session=session, timeout=3)
    assert client.transport.session is session
    assert client.transport.timeout == 3
