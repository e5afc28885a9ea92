"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_RECORD_TTL = 60
_DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class AppConfig:
    """DNS provider configuration loaded from environment variables."""

    dns_provider: str
    record_ttl: int = _DEFAULT_RECORD_TTL
    http_timeout: float = _DEFAULT_HTTP_TIMEOUT
    cloudflare_api_token: str | None = None
    azure_subscription_id: str | None = None
    azure_dns_resource_group: str | None = None
    azure_client_id: str | None = None


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got: {value}")
    return value


def _positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name, str(default))
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be a positive number, got: {value}")
    return value


def load_config() -> AppConfig:
    """Load and validate DNS provider configuration from environment variables."""
    return AppConfig(
        dns_provider=_require_env("DNS_PROVIDER"),
        record_ttl=_positive_int("DNS_RECORD_TTL", _DEFAULT_RECORD_TTL),
        http_timeout=_positive_float("DNS_HTTP_TIMEOUT", _DEFAULT_HTTP_TIMEOUT),
        cloudflare_api_token=os.environ.get("CLOUDFLARE_API_TOKEN"),
        azure_subscription_id=os.environ.get("AZURE_SUBSCRIPTION_ID"),
        azure_dns_resource_group=os.environ.get("AZURE_DNS_RESOURCE_GROUP"),
        azure_client_id=os.environ.get("AZURE_CLIENT_ID"),
    )
