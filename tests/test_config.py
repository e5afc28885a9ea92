"""Tests for acme_dns01.config."""

import pytest

_OPTIONAL_VARS = (
    "DNS_RECORD_TTL",
    "DNS_HTTP_TIMEOUT",
    "CLOUDFLARE_API_TOKEN",
    "AZURE_SUBSCRIPTION_ID",
    "AZURE_DNS_RESOURCE_GROUP",
    "AZURE_CLIENT_ID",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _OPTIONAL_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_config_required_vars(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")

    cfg = load_config()
    assert cfg.dns_provider == "azure"


def test_load_config_defaults(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")

    cfg = load_config()
    assert cfg.record_ttl == 60
    assert cfg.http_timeout == 30.0
    assert cfg.cloudflare_api_token is None
    assert cfg.azure_subscription_id is None
    assert cfg.azure_dns_resource_group is None
    assert cfg.azure_client_id is None


def test_load_config_custom_optionals(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "cloudflare")
    monkeypatch.setenv("DNS_RECORD_TTL", "120")
    monkeypatch.setenv("DNS_HTTP_TIMEOUT", "7.5")
    monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "cf-token-123")

    cfg = load_config()
    assert cfg.record_ttl == 120
    assert cfg.http_timeout == 7.5
    assert cfg.cloudflare_api_token == "cf-token-123"


def test_load_config_azure_fields(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")
    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("AZURE_DNS_RESOURCE_GROUP", "rg-dns")
    monkeypatch.setenv("AZURE_CLIENT_ID", "mi-client")

    cfg = load_config()
    assert cfg.azure_subscription_id == "sub-123"
    assert cfg.azure_dns_resource_group == "rg-dns"
    assert cfg.azure_client_id == "mi-client"


def test_load_config_missing_dns_provider(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.delenv("DNS_PROVIDER", raising=False)

    with pytest.raises(ValueError, match="DNS_PROVIDER"):
        load_config()


def test_load_config_invalid_ttl(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")
    monkeypatch.setenv("DNS_RECORD_TTL", "not-a-number")

    with pytest.raises(ValueError, match="DNS_RECORD_TTL must be an integer"):
        load_config()


def test_load_config_zero_ttl(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")
    monkeypatch.setenv("DNS_RECORD_TTL", "0")

    with pytest.raises(ValueError, match="DNS_RECORD_TTL must be a positive integer"):
        load_config()


def test_load_config_invalid_timeout(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")
    monkeypatch.setenv("DNS_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="DNS_HTTP_TIMEOUT must be a number"):
        load_config()


def test_load_config_negative_timeout(monkeypatch):
    from acme_dns01.config import load_config

    monkeypatch.setenv("DNS_PROVIDER", "azure")
    monkeypatch.setenv("DNS_HTTP_TIMEOUT", "-1")

    with pytest.raises(ValueError, match="DNS_HTTP_TIMEOUT must be a positive number"):
        load_config()
