"""
Validation and decoding of PayStation API responses.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Mapping, NoReturn, Optional, Tuple

from .errors import AuthenticationError, PayStationError, ValidationError
from .models import (
    PaymentInitiationResult,
    TransactionRecord,
    TransactionStatusResult,
    WireResponse,
    stringify,
)

__all__ = ["ResponseParser"]

_ENVELOPE_FIELDS = ("statusCode", "status", "message")
_TRANSACTION_REQUIRED_FIELDS = ("invoiceNumber", "transactionStatus", "transactionId")

_INITIATION_OPTIONAL_FIELDS = (
    ("paymentAmount", "payment_amount"),
    ("invoiceNumber", "invoice_number"),
    ("paymentUrl", "payment_url"),
)
_TRANSACTION_OPTIONAL_FIELDS = (
    ("payerMobileNumber", "payer_mobile_number"),
    ("paymentMethod", "payment_method"),
    ("reference", "reference"),
    ("checkoutItems", "checkout_items"),
    ("transactionDate", "transaction_date"),
    ("requestAmount", "request_amount"),
)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _validate_structure(response: Optional[WireResponse]) -> Mapping[str, Any]:
    if response is None:
        raise ValidationError("Response is null or undefined")
    if response.body is None:
        raise ValidationError("Response data is null or undefined")
    if not isinstance(response.body, Mapping):
        raise ValidationError("Response data is not an object")
    return response.body


def _validate_envelope(payload: Mapping[str, Any]) -> None:
    """Check the common ``statusCode``/``status``/``message`` envelope."""
    if any(_is_blank(payload.get(name)) for name in _ENVELOPE_FIELDS):
        raise ValidationError(
            "Invalid response format: missing required fields (statusCode, status, message)"
        )
    # PayStation reports business failures with HTTP 200 and status "failed".
    if payload["status"] == "failed":
        raise PayStationError(stringify(payload["message"]), stringify(payload["statusCode"]))


def _copy_present(
    payload: Mapping[str, Any],
    mapping: Iterable[Tuple[str, str]],
) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for wire_name, attr_name in mapping:
        if payload.get(wire_name) is not None:
            values[attr_name] = stringify(payload[wire_name])
    return values


def _parse_transaction_record(data: Any) -> TransactionRecord:
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid transaction data format", "data")
    if any(_is_blank(data.get(name)) for name in _TRANSACTION_REQUIRED_FIELDS):
        raise ValidationError("Invalid transaction data: missing required fields", "data")

    extras: Dict[str, Any] = _copy_present(data, _TRANSACTION_OPTIONAL_FIELDS)
    if data.get("transactionAmount") is not None:
        try:
            extras["transaction_amount"] = float(data["transactionAmount"])
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Invalid transaction data: transactionAmount is not a number "
                f"({data['transactionAmount']!r})",
                "transactionAmount",
            ) from exc

    payment_amount = data.get("paymentAmount")
    order_date_time = data.get("orderDateTime")
    return TransactionRecord(
        invoice_number=stringify(data["invoiceNumber"]),
        transaction_status=data["transactionStatus"],
        transaction_id=stringify(data["transactionId"]),
        payment_amount="" if payment_amount is None else stringify(payment_amount),
        order_date_time="" if order_date_time is None else stringify(order_date_time),
        **extras,
    )


def _extract_error_message(body: Any) -> Optional[str]:
    if isinstance(body, Mapping) and body.get("message"):
        return stringify(body["message"])
    return None


class ResponseParser:
    """
    Turns :class:`WireResponse` objects into typed results or raises.

    The parser holds no state; the same response always yields an equal
    result.
    """

    def parse_initiate_payment_response(
        self, response: Optional[WireResponse]
    ) -> PaymentInitiationResult:
        payload = _validate_structure(response)
        _validate_envelope(payload)
        return PaymentInitiationResult(
            status_code=stringify(payload["statusCode"]),
            status=payload["status"],
            message=stringify(payload["message"]),
            raw=copy.deepcopy(dict(payload)),
            **_copy_present(payload, _INITIATION_OPTIONAL_FIELDS),
        )

    def parse_transaction_status_response(
        self, response: Optional[WireResponse]
    ) -> TransactionStatusResult:
        """
        Parse a status lookup from either the v1 or the v2 endpoint.

        The v2-only fields of the transaction record are filled whenever the
        body carries them.
        """
        payload = _validate_structure(response)
        _validate_envelope(payload)
        data = payload.get("data")
        return TransactionStatusResult(
            status_code=stringify(payload["statusCode"]),
            status=payload["status"],
            message=stringify(payload["message"]),
            data=None if data is None else _parse_transaction_record(data),
            raw=copy.deepcopy(dict(payload)),
        )

    def raise_for_error(self, response: WireResponse) -> NoReturn:
        """Map an HTTP error response (status >= 400) onto the error hierarchy."""
        status = response.status_code
        message = _extract_error_message(response.body)

        if status in (401, 403):
            raise AuthenticationError(message or "Authentication failed", str(status))

        if status == 400:
            raise ValidationError(message or "Invalid request parameters")

        raise PayStationError(
            message or f"HTTP {status}: {response.status_text}",
            str(status),
        )
