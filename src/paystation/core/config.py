"""
Merchant credentials and environment selection for the PayStation client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .environment import build_environment
from .errors import ConfigurationError

__all__ = [
    "ClientConfig",
    "Environment",
    "LIVE_BASE_URL",
    "SANDBOX_BASE_URL",
    "load_client_config",
]

SANDBOX_BASE_URL = "https://sandbox.paystation.com.bd/api"
LIVE_BASE_URL = "https://api.paystation.com.bd"

_PARAMETER_TO_ENV_KEY = {
    "merchant_id": "PAYSTATION_MERCHANT_ID",
    "password": "PAYSTATION_PASSWORD",
    "environment": "PAYSTATION_ENVIRONMENT",
}


class Environment(str, Enum):
    SANDBOX = "sandbox"
    LIVE = "live"


_BASE_URLS = {
    Environment.SANDBOX: SANDBOX_BASE_URL,
    Environment.LIVE: LIVE_BASE_URL,
}


def _require_credential(value: Any, field_name: str) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(
            f"{field_name} is required and must be a non-empty string", field_name
        )
    if not value.strip():
        raise ConfigurationError(
            f"{field_name} cannot be empty or whitespace only", field_name
        )


def _resolve_environment(value: Any) -> Environment:
    if value is None or value == "":
        raise ConfigurationError("environment is required", "environment")
    if isinstance(value, Environment):
        return value
    try:
        return Environment(value)
    except ValueError:
        choices = ", ".join(member.value for member in Environment)
        raise ConfigurationError(
            f"Invalid environment: {value}. Must be one of: {choices}",
            "environment",
        ) from None


@dataclass(frozen=True)
class ClientConfig:
    """
    Validated merchant credentials bound to one PayStation environment.

    Instances are immutable and can be shared between any number of clients.
    """

    merchant_id: str
    password: str = field(repr=False)
    environment: Union[Environment, str]

    def __post_init__(self) -> None:
        _require_credential(self.merchant_id, "merchant_id")
        _require_credential(self.password, "password")
        object.__setattr__(self, "environment", _resolve_environment(self.environment))

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self.environment]

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        return cls(
            merchant_id=values.get("PAYSTATION_MERCHANT_ID"),
            password=values.get("PAYSTATION_PASSWORD"),
            environment=values.get("PAYSTATION_ENVIRONMENT"),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        merchant_id: Optional[str] = None,
        password: Optional[str] = None,
        environment: Optional[Union[Environment, str]] = None,
    ) -> "ClientConfig":
        explicit = {
            "merchant_id": merchant_id,
            "password": password,
            "environment": environment,
        }
        merged_overrides: Dict[str, str] = dict(overrides or {})
        for key, value in explicit.items():
            if value is None:
                continue
            if isinstance(value, Environment):
                value = value.value
            merged_overrides[_PARAMETER_TO_ENV_KEY[key]] = value

        resolved = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(resolved.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[str] = None,
    password: Optional[str] = None,
    environment: Optional[Union[Environment, str]] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from ``PAYSTATION_*`` environment variables, a ``.env``
    file, explicit keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        merchant_id=merchant_id,
        password=password,
        environment=environment,
    )
