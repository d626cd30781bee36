"""DNS provider factory — build the AliDNS provider from configuration."""

from __future__ import annotations

from alidns_acme.config import AppConfig
from alidns_acme.dns.alidns import AliDnsProvider
from alidns_acme.dns.base import DnsProvider
from alidns_acme.errors import ConfigError


def get_dns_provider(config: AppConfig) -> DnsProvider:
    """Instantiate the DNS provider described by ``config``.

    Args:
        config: Application configuration.

    Returns:
        A configured DnsProvider instance. No API call is made here.
    """
    if not config.access_key_id:
        raise ConfigError("ALICLOUD_ACCESS_KEY_ID is required for AliDNS")
    if not config.access_key_secret:
        raise ConfigError("ALICLOUD_ACCESS_KEY_SECRET is required for AliDNS")
    return AliDnsProvider(
        region_id=config.region_id,
        access_key_id=config.access_key_id,
        access_key_secret=config.access_key_secret,
        endpoint=config.dns_endpoint,
        timeout=config.http_timeout,
    )
