"""
Core primitives that implement PayStation request building and response parsing.
"""

from .builder import RequestBuilder
from .client import PayStationClient
from .config import (
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
    ClientConfig,
    Environment,
    load_client_config,
)
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    PayStationError,
    ValidationError,
)
from .models import (
    PaymentInitiationParams,
    PaymentInitiationResult,
    PaymentMethod,
    TransactionRecord,
    TransactionStatus,
    TransactionStatusResult,
    WireRequest,
    WireResponse,
)
from .parser import ResponseParser
from .transport import HttpTransport, Transport

__all__ = [
    "AuthenticationError",
    "ClientConfig",
    "ClientEnvironment",
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
    "Transport",
    "ValidationError",
    "WireRequest",
    "WireResponse",
    "build_environment",
    "load_client_config",
    "load_env_file",
]
