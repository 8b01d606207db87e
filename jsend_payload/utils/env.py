"""Common environment helpers."""

from __future__ import annotations

import os

from jsend_payload.exceptions import ConfigurationError

__all__ = ["get_env", "get_flag", "get_node_env"]

_TRUTHY = {"1", "true", "yes", "on"}


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_flag(key: str, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean toggle."""

    raw = get_env(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_node_env() -> str:
    """Return the current runtime environment label."""

    return (get_env("NODE_ENV", default="local") or "local").strip()
