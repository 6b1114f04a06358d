"""Pytest fixtures for testing"""

from collections import deque
from typing import List, Union

import pytest

from paystation import ClientConfig, Environment, PaymentInitiationParams
from paystation.core.models import WireRequest, WireResponse


class FakeTransport:
    """Transport double that replays queued responses and records requests"""

    def __init__(self, *responses: Union[WireResponse, BaseException]):
        self.responses = deque(responses)
        self.requests: List[WireRequest] = []

    def queue(self, response: Union[WireResponse, BaseException]) -> None:
        self.responses.append(response)

    def send(self, request: WireRequest) -> WireResponse:
        self.requests.append(request)
        response = self.responses.popleft()
        if isinstance(response, BaseException):
            raise response
        return response


def ok(body) -> WireResponse:
    return WireResponse(status_code=200, status_text="OK", body=body)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        merchant_id="test-merchant",
        password="test-password",
        environment=Environment.SANDBOX,
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def params() -> PaymentInitiationParams:
    """Minimal valid payment initiation parameters"""
    return PaymentInitiationParams(
        invoice_number="INV-001",
        payment_amount=100.5,
        customer_name="John Doe",
        customer_phone="+8801234567890",
        customer_email="john@example.com",
        callback_url="https://example.com/callback",
    )


@pytest.fixture
def transaction_body() -> dict:
    return {
        "statusCode": "200",
        "status": "success",
        "message": "Transaction found",
        "data": {
            "invoiceNumber": "INV-001",
            "transactionStatus": "success",
            "transactionId": "TXN123456789",
            "paymentAmount": "100.00",
            "orderDateTime": "2024-01-01 12:00:00",
            "paymentMethod": "bKash",
        },
    }
