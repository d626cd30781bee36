"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from alidns_acme.errors import ConfigError

_DEFAULT_REGION_ID = "cn-hangzhou"
_DEFAULT_ENDPOINT = "alidns.aliyuncs.com"
_DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    access_key_id: str
    access_key_secret: str
    region_id: str = _DEFAULT_REGION_ID
    dns_endpoint: str = _DEFAULT_ENDPOINT
    http_timeout: float = _DEFAULT_HTTP_TIMEOUT


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigError(f"Required environment variable {name} is not set")
    return value


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables."""
    access_key_id = _require_env("ALICLOUD_ACCESS_KEY_ID")
    access_key_secret = _require_env("ALICLOUD_ACCESS_KEY_SECRET")
    region_id = os.environ.get("ALICLOUD_REGION_ID") or _DEFAULT_REGION_ID
    dns_endpoint = os.environ.get("ALICLOUD_DNS_ENDPOINT") or _DEFAULT_ENDPOINT

    raw_timeout = os.environ.get("ALICLOUD_HTTP_TIMEOUT", str(_DEFAULT_HTTP_TIMEOUT))
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ConfigError(f"ALICLOUD_HTTP_TIMEOUT must be a number, got: {raw_timeout!r}")
    if http_timeout <= 0:
        raise ConfigError(f"ALICLOUD_HTTP_TIMEOUT must be positive, got: {http_timeout}")

    return AppConfig(
        access_key_id=access_key_id,
        access_key_secret=access_key_secret,
        region_id=region_id,
        dns_endpoint=dns_endpoint,
        http_timeout=http_timeout,
    )
