"""
HTTP transport used by the PayStation client.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests

from .errors import NetworkError
from .models import WireRequest, WireResponse

__all__ = ["HttpTransport", "Transport"]

DEFAULT_TIMEOUT_SECONDS = 30


class Transport(Protocol):
    def send(self, request: WireRequest) -> WireResponse:
        ...


def _decode_body(response: requests.Response) -> Any:
    content_type = response.headers.get("Content-Type", "")
    if "application/json" not in content_type:
        return response.text
    try:
        return response.json()
    except ValueError as exc:
        raise NetworkError("Failed to parse JSON response", exc) from exc


class HttpTransport:
    """
    Sends :class:`WireRequest` objects with a :class:`requests.Session`.

    Every failure of the HTTP exchange surfaces as :class:`NetworkError`; HTTP
    error statuses are returned untouched for the response parser.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: WireRequest) -> WireResponse:
        logging.info("Sending %s request to %s", request.method, request.url)
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.encoded_body(),
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise NetworkError(
                "Request timeout - the server took too long to respond", exc
            ) from exc
        except requests.ConnectionError as exc:
            raise NetworkError(
                "Network request failed - please check your internet connection", exc
            ) from exc
        except requests.RequestException as exc:
            raise NetworkError("An unexpected network error occurred", exc) from exc

        logging.debug("PayStation responded with %s for %s", response.status_code, request.url)
        return WireResponse(
            status_code=response.status_code,
            status_text=response.reason or "",
            body=_decode_body(response),
        )
