"""DNS provider factory — resolve provider name to concrete implementation."""

from __future__ import annotations

from acme_dns01.auth import get_credential as _get_credential
from acme_dns01.config import AppConfig
from acme_dns01.dns.azure_dns import AzureDnsProvider
from acme_dns01.dns.base import DnsProvider, RecordStore, ZoneInventory
from acme_dns01.dns.cloudflare import CloudflareDnsProvider

__all__ = ["DnsProvider", "RecordStore", "ZoneInventory", "get_dns_provider"]


def get_dns_provider(config: AppConfig, provider_name: str | None = None) -> DnsProvider:
    """Instantiate a DNS provider by name.

    The returned object serves as both the zone inventory and the record store
    for :func:`acme_dns01.challenge.present` and :func:`acme_dns01.challenge.cleanup`.

    Args:
        config: Provider configuration.
        provider_name: Override the default provider from config.

    Returns:
        A configured DnsProvider instance.
    """
    name = (provider_name or config.dns_provider).lower()

    if name == "azure":
        if not config.azure_subscription_id:
            raise ValueError("AZURE_SUBSCRIPTION_ID is required when DNS_PROVIDER=azure")
        if not config.azure_dns_resource_group:
            raise ValueError("AZURE_DNS_RESOURCE_GROUP is required when DNS_PROVIDER=azure")
        return AzureDnsProvider(
            credential=_get_credential(config.azure_client_id),
            subscription_id=config.azure_subscription_id,
            resource_group=config.azure_dns_resource_group,
            default_ttl=config.record_ttl,
            timeout=config.http_timeout,
        )

    if name == "cloudflare":
        if not config.cloudflare_api_token:
            raise ValueError("CLOUDFLARE_API_TOKEN is required when DNS_PROVIDER=cloudflare")
        return CloudflareDnsProvider(
            api_token=config.cloudflare_api_token,
            timeout=config.http_timeout,
            default_ttl=config.record_ttl,
        )

    raise ValueError(f"Unknown DNS provider: '{name}'")
