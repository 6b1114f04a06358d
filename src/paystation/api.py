"""
Public, high-level helpers for talking to PayStation.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.client import PayStationClient
from .core.config import ClientConfig, Environment, load_client_config
from .core.transport import DEFAULT_TIMEOUT_SECONDS, Transport

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    transport: Optional[Transport] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[str] = None,
    password: Optional[str] = None,
    environment: Optional[Union[Environment, str]] = None,
) -> PayStationClient:
    """
    Construct a :class:`PayStationClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from ``PAYSTATION_*`` environment data and keyword
    arguments.
    """
    if config is not None:
        extras = (overrides, base, merchant_id, password, environment)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual settings, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            merchant_id=merchant_id,
            password=password,
            environment=environment,
        )
    return PayStationClient(cfg, transport=transport, session=session, timeout=timeout)
