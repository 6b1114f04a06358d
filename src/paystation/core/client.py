"""
High-level client for the PayStation hosted checkout API.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

import requests

from .builder import RequestBuilder
from .config import ClientConfig
from .errors import PayStationError
from .models import (
    PaymentInitiationParams,
    PaymentInitiationResult,
    TransactionStatusResult,
    WireRequest,
    WireResponse,
)
from .parser import ResponseParser
from .transport import DEFAULT_TIMEOUT_SECONDS, HttpTransport, Transport

__all__ = ["PayStationClient"]

_T = TypeVar("_T")


class PayStationClient:
    """
    Builds, sends and parses PayStation API calls.

    Errors from the :mod:`paystation.core.errors` hierarchy propagate
    unchanged; anything else is wrapped in :class:`PayStationError` with the
    original exception attached.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[Transport] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if transport is not None and session is not None:
            raise ValueError("Provide either a transport or a session, not both.")
        self.config = config
        self.transport = transport or HttpTransport(session, timeout=timeout)
        self.request_builder = RequestBuilder(config)
        self.response_parser = ResponseParser()

    def _execute(
        self,
        description: str,
        build: Callable[[], WireRequest],
        parse: Callable[[WireResponse], _T],
    ) -> _T:
        try:
            request = build()
            response = self.transport.send(request)
            if response.status_code >= 400:
                logging.warning(
                    "PayStation returned HTTP %s for %s", response.status_code, request.url
                )
                self.response_parser.raise_for_error(response)
            return parse(response)
        except PayStationError:
            raise
        except Exception as exc:
            raise PayStationError(
                f"An unexpected error occurred during {description}", None, exc
            ) from exc

    def initiate_payment(
        self,
        params: Union[PaymentInitiationParams, Mapping[str, Any]],
    ) -> PaymentInitiationResult:
        """
        Create a hosted checkout session.

        The returned ``payment_url`` is where the customer completes payment.
        """
        result = self._execute(
            "payment initiation",
            lambda: self.request_builder.build_initiate_payment_request(params),
            self.response_parser.parse_initiate_payment_response,
        )
        logging.info("Payment initiated for invoice %s", result.invoice_number)
        return result

    def get_transaction_status(self, invoice_number: str) -> TransactionStatusResult:
        return self._execute(
            "transaction status check",
            lambda: self.request_builder.build_transaction_status_request(invoice_number),
            self.response_parser.parse_transaction_status_response,
        )

    def get_transaction_status_by_id(self, transaction_id: str) -> TransactionStatusResult:
        """Look up a transaction by PayStation ``trx_id`` using the v2 endpoint."""
        return self._execute(
            "transaction status check by ID",
            lambda: self.request_builder.build_transaction_status_by_id_request(
                transaction_id
            ),
            self.response_parser.parse_transaction_status_response,
        )
