"""
Value objects exchanged with the PayStation API.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

from .errors import ValidationError

__all__ = [
    "PaymentInitiationParams",
    "PaymentInitiationResult",
    "PaymentMethod",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionStatusResult",
    "WireRequest",
    "WireResponse",
    "is_number",
    "stringify",
]

Number = Union[int, float, Decimal]


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def stringify(value: Any) -> str:
    """Render ``value`` the way PayStation expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


class PaymentMethod(str, Enum):
    BKASH = "bKash"
    NAGAD = "Nagad"
    ROCKET = "Rocket"
    UPAY = "Upay"
    MASTERCARD = "Mastercard"
    VISA = "Visa"


class TransactionStatus(str, Enum):
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"
    REFUND = "refund"


@dataclass(frozen=True)
class WireRequest:
    url: str
    method: str
    headers: Dict[str, str]
    body: Optional[Dict[str, str]] = None

    def encoded_body(self) -> Optional[str]:
        if self.body is None:
            return None
        return urlencode(self.body)


@dataclass(frozen=True)
class WireResponse:
    status_code: int
    status_text: str
    body: Any

    @property
    def ok(self) -> bool:
        return self.status_code < 400


# camelCase names used by the PayStation documentation, accepted as aliases.
_PARAM_ALIASES = {
    "invoiceNumber": "invoice_number",
    "paymentAmount": "payment_amount",
    "customerName": "customer_name",
    "customerPhone": "customer_phone",
    "customerEmail": "customer_email",
    "callbackUrl": "callback_url",
    "payWithCharge": "pay_with_charge",
    "customerAddress": "customer_address",
    "checkoutItems": "checkout_items",
    "optA": "opt_a",
    "optB": "opt_b",
    "optC": "opt_c",
}


@dataclass(frozen=True)
class PaymentInitiationParams:
    """
    Parameters for ``POST /initiate-payment``.

    Every field defaults to ``None`` so that incomplete input reaches the
    request builder, which reports the first missing field by name.
    """

    invoice_number: Optional[str] = None
    payment_amount: Optional[Number] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    callback_url: Optional[str] = None
    currency: Optional[str] = None
    pay_with_charge: Optional[Number] = None
    reference: Optional[str] = None
    customer_address: Optional[str] = None
    checkout_items: Optional[str] = None
    opt_a: Optional[str] = None
    opt_b: Optional[str] = None
    opt_c: Optional[str] = None
    emi: Optional[Number] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PaymentInitiationParams":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _PARAM_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown payment parameter '{key}'", key)
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class PaymentInitiationResult:
    status_code: str
    status: str
    message: str
    payment_amount: Optional[str] = None
    invoice_number: Optional[str] = None
    payment_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class TransactionRecord:
    invoice_number: str
    transaction_status: str
    transaction_id: str
    payment_amount: str
    order_date_time: str
    payer_mobile_number: Optional[str] = None
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    checkout_items: Optional[str] = None
    # Only returned by the v2 status endpoint.
    transaction_amount: Optional[float] = None
    transaction_date: Optional[str] = None
    request_amount: Optional[str] = None


@dataclass(frozen=True)
class TransactionStatusResult:
    status_code: str
    status: str
    message: str
    data: Optional[TransactionRecord] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)
