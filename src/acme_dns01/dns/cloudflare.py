"""Cloudflare DNS provider — list zones and manage TXT records via the Cloudflare REST API."""

from __future__ import annotations

import logging

import httpx

from acme_dns01.dns.base import DnsProvider
from acme_dns01.models import Record, Zone

logger = logging.getLogger(__name__)

_API_BASE = "https://api.cloudflare.com/client/v4"
_PAGE_SIZE = 50
_ACTIVE_STATUS = "active"
_DEFAULT_TTL = 60


class CloudflareDnsProvider(DnsProvider):
    """DNS provider backed by the Cloudflare API.

    Cloudflare addresses records by absolute name, so relative names are
    expanded against the zone on the way in.
    """

    def __init__(
        self,
        api_token: str,
        timeout: float = 30,
        default_ttl: int = _DEFAULT_TTL,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._default_ttl = default_ttl
        self._client = _http_client or httpx.Client(
            headers={"Authorization": f"Bearer {api_token}"},
            timeout=timeout,
        )

    def _get_paged(self, url: str, params: dict | None = None) -> list[dict]:
        """GET every page of a list endpoint and return the combined ``result`` items."""
        items: list[dict] = []
        page = 1
        while True:
            resp = self._client.get(url, params={**(params or {}), "page": page, "per_page": _PAGE_SIZE})
            resp.raise_for_status()
            body = resp.json()
            items.extend(body["result"])
            total_pages = (body.get("result_info") or {}).get("total_pages", 1)
            if page >= total_pages:
                return items
            page += 1

    def list_zones(self) -> list[Zone]:
        zones = [
            Zone(
                name=item["name"],
                eligible=item.get("status") == _ACTIVE_STATUS,
                zone_id=item["id"],
            )
            for item in self._get_paged(f"{_API_BASE}/zones")
        ]
        logger.debug("Listed %d Cloudflare zone(s)", len(zones))
        return zones

    def _get_zone_id(self, zone: Zone) -> str:
        """Return the zone ID, looking it up by name when the inventory did not supply one."""
        if zone.zone_id:
            return zone.zone_id
        resp = self._client.get(f"{_API_BASE}/zones", params={"name": zone.name})
        resp.raise_for_status()
        results = resp.json()["result"]
        if not results:
            raise ValueError(f"No Cloudflare zone found for '{zone.name}'")
        return results[0]["id"]

    def _absolute_name(self, zone: Zone, name: str) -> str:
        zone_name = zone.name.removesuffix(".")
        if name in ("", self.apex_name):
            return zone_name
        return f"{name}.{zone_name}"

    def list_records(self, zone: Zone, name: str, record_type: str = "TXT") -> list[Record]:
        zone_id = self._get_zone_id(zone)
        items = self._get_paged(
            f"{_API_BASE}/zones/{zone_id}/dns_records",
            {"type": record_type, "name": self._absolute_name(zone, name)},
        )
        return [
            Record(
                name=name,
                value=item["content"],
                type=item.get("type", record_type),
                ttl=item.get("ttl"),
                record_id=item["id"],
            )
            for item in items
        ]

    def create_record(self, zone: Zone, record: Record) -> Record:
        zone_id = self._get_zone_id(zone)
        fqdn = self._absolute_name(zone, record.name)
        payload = {
            "type": record.type,
            "name": fqdn,
            "content": record.value,
            "ttl": record.ttl or self._default_ttl,
        }
        resp = self._client.post(f"{_API_BASE}/zones/{zone_id}/dns_records", json=payload)
        resp.raise_for_status()
        created = resp.json()["result"]
        logger.info("Created %s record %s in Cloudflare zone %s", record.type, fqdn, zone.name)
        return Record(
            name=record.name,
            value=record.value,
            type=record.type,
            ttl=created.get("ttl", payload["ttl"]),
            record_id=created["id"],
        )

    def delete_record(self, zone: Zone, record: Record) -> None:
        zone_id = self._get_zone_id(zone)
        record_ids = [record.record_id] if record.record_id else self._find_record_ids(zone, record)
        for record_id in record_ids:
            self._client.delete(
                f"{_API_BASE}/zones/{zone_id}/dns_records/{record_id}",
            ).raise_for_status()
            logger.info(
                "Deleted %s record %s from Cloudflare zone %s",
                record.type,
                self._absolute_name(zone, record.name),
                zone.name,
            )

    def _find_record_ids(self, zone: Zone, record: Record) -> list[str]:
        return [
            r.record_id
            for r in self.list_records(zone, record.name, record.type)
            if r.value == record.value and r.record_id
        ]

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
