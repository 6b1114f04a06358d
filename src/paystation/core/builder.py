"""
Helpers for constructing the form-encoded requests sent to PayStation.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlsplit

from .config import ClientConfig
from .errors import ValidationError
from .models import PaymentInitiationParams, WireRequest, is_number, stringify

__all__ = ["RequestBuilder"]

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Registered names (IDN letters allowed) or the inside of an IPv6 literal.
_HOST_PATTERN = re.compile(r"[\w.~%!$&'()*+,;=-]+|[0-9A-Fa-f:.]+")

_FORM_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}

_REQUIRED_STRING_FIELDS = (
    "invoice_number",
    "customer_name",
    "customer_phone",
    "customer_email",
    "callback_url",
)

# Optional parameters in wire order, with their form keys.
_OPTIONAL_FIELDS = (
    ("currency", "currency"),
    ("pay_with_charge", "pay_with_charge"),
    ("reference", "reference"),
    ("customer_address", "customer_address"),
    ("checkout_items", "checkout_items"),
    ("opt_a", "opt_a"),
    ("opt_b", "opt_b"),
    ("opt_c", "opt_c"),
    ("emi", "emi"),
)
_OPTIONAL_NUMBER_FIELDS = frozenset({"pay_with_charge", "emi"})


def _validate_required_string(value: Any, field_name: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} is required and must be a string", field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} cannot be empty or whitespace only", field_name)


def _validate_non_negative(value: Any, field_name: str) -> None:
    if value is None:
        return
    if not is_number(value):
        raise ValidationError(f"{field_name} must be a number", field_name)
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative", field_name)


def _is_valid_email(email: str) -> bool:
    return _EMAIL_PATTERN.fullmatch(email) is not None


def _is_valid_callback_url(url: str) -> bool:
    if any(ch.isspace() or ord(ch) < 0x20 for ch in url):
        return False
    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        return False
    if parts.scheme not in ("http", "https") or not host:
        return False
    return _HOST_PATTERN.fullmatch(host) is not None


def _coerce_params(
    params: Union[PaymentInitiationParams, Mapping[str, Any], None],
) -> PaymentInitiationParams:
    if params is None:
        raise ValidationError("Payment parameters are required")
    if isinstance(params, PaymentInitiationParams):
        return params
    if isinstance(params, Mapping):
        return PaymentInitiationParams.from_mapping(params)
    raise ValidationError(
        "Payment parameters must be a PaymentInitiationParams instance or a mapping"
    )


def _validate_initiate_payment_params(params: PaymentInitiationParams) -> None:
    for field_name in _REQUIRED_STRING_FIELDS:
        _validate_required_string(getattr(params, field_name), field_name)

    if not is_number(params.payment_amount):
        raise ValidationError("payment_amount must be a number", "payment_amount")
    if params.payment_amount <= 0:
        raise ValidationError("payment_amount must be greater than 0", "payment_amount")

    _validate_non_negative(params.pay_with_charge, "pay_with_charge")
    _validate_non_negative(params.emi, "emi")

    if not _is_valid_email(params.customer_email):
        raise ValidationError(
            "customer_email must be a valid email address", "customer_email"
        )

    if not _is_valid_callback_url(params.callback_url):
        raise ValidationError("callback_url must be a valid URL", "callback_url")

    for field_name, _ in _OPTIONAL_FIELDS:
        if field_name in _OPTIONAL_NUMBER_FIELDS:
            continue
        value = getattr(params, field_name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string", field_name)


class RequestBuilder:
    """
    Validates call parameters and turns them into :class:`WireRequest` objects.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def _credentials(self) -> Dict[str, str]:
        return {
            "merchant_id": self.config.merchant_id,
            "password": self.config.password,
        }

    def _post(self, path: str, body: Dict[str, str]) -> WireRequest:
        return WireRequest(
            url=f"{self.config.base_url}{path}",
            method="POST",
            headers=dict(_FORM_HEADERS),
            body=body,
        )

    def build_initiate_payment_request(
        self,
        params: Union[PaymentInitiationParams, Mapping[str, Any], None],
    ) -> WireRequest:
        """
        Build the ``/initiate-payment`` request.

        Optional parameters are only sent when provided; ``None`` and empty
        strings are left out of the body entirely.
        """
        params = _coerce_params(params)
        _validate_initiate_payment_params(params)

        body = self._credentials()
        body.update(
            {
                "invoice_number": params.invoice_number,
                "payment_amount": stringify(params.payment_amount),
                "customer_name": params.customer_name,
                "customer_phone": params.customer_phone,
                "customer_email": params.customer_email,
                "callback_url": params.callback_url,
            }
        )
        for field_name, form_key in _OPTIONAL_FIELDS:
            value = getattr(params, field_name)
            if value is None or value == "":
                continue
            body[form_key] = stringify(value)

        return self._post("/initiate-payment", body)

    def build_transaction_status_request(self, invoice_number: str) -> WireRequest:
        _validate_required_string(invoice_number, "invoice_number")
        body = self._credentials()
        body["invoice_number"] = invoice_number
        return self._post("/transaction-status", body)

    def build_transaction_status_by_id_request(self, transaction_id: str) -> WireRequest:
        """Build the v2 status lookup, keyed by the PayStation ``trx_id``."""
        _validate_required_string(transaction_id, "transaction_id")
        body = self._credentials()
        body["trx_id"] = transaction_id
        return self._post("/v2/transaction-status", body)
