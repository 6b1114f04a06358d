"""
Python client for the PayStation hosted checkout API.

The most useful pieces are re-exported here so integrators can
``from paystation import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
    AuthenticationError,
    ClientConfig,
    ConfigurationError,
    Environment,
    HttpTransport,
    NetworkError,
    PayStationClient,
    PayStationError,
    PaymentInitiationParams,
    PaymentInitiationResult,
    PaymentMethod,
    RequestBuilder,
    ResponseParser,
    TransactionRecord,
    TransactionStatus,
    TransactionStatusResult,
    ValidationError,
    WireRequest,
    WireResponse,
    load_client_config,
    load_env_file,
)

__all__ = (
    "AuthenticationError",
    "ClientConfig",
    "ConfigurationError",
    "Environment",
    "HttpTransport",
    "LIVE_BASE_URL",
    "NetworkError",
    "PayStationClient",
    "PayStationError",
    "PaymentInitiationParams",
    "PaymentInitiationResult",
    "PaymentMethod",
    "RequestBuilder",
    "ResponseParser",
    "SANDBOX_BASE_URL",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionStatusResult",
    "ValidationError",
    "WireRequest",
    "WireResponse",
    "create_client",
    "load_client_config",
    "load_env_file",
)
