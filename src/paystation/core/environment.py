"""
Helpers for assembling the variables used to configure the PayStation client.

Values can come from the process environment, a ``.env`` file and explicit
overrides. The result is an immutable :class:`ClientEnvironment` consumed by
:class:`paystation.core.config.ClientConfig`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

__all__ = [
    "ClientEnvironment",
    "build_environment",
    "load_env_file",
]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = _unquote(value.strip())
    return values


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge the variables found in ``path`` into ``environ`` (default: ``os.environ``).

    Keys that are already set are left untouched. Returns a copy of the merged
    mapping.
    """
    target: MutableMapping[str, str] = environ if environ is not None else os.environ
    for key, value in _parse_env_file(Path(path)).items():
        target.setdefault(key, value)
    return dict(target)


@dataclass(frozen=True)
class ClientEnvironment:
    """Resolved configuration variables."""

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ClientEnvironment:
    """
    Layer ``base``, ``env_file`` and ``overrides`` into a :class:`ClientEnvironment`.

    ``base`` defaults to :data:`os.environ`; the file only fills keys missing
    from ``base``; ``overrides`` always win. Pass ``env_file=None`` to skip the
    file.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return ClientEnvironment(variables=merged)
