"""Azure DNS provider — list zones and manage TXT values via azure-mgmt-dns."""

from __future__ import annotations

import logging

from azure.core.exceptions import (
    HttpResponseError,
    ResourceExistsError,
    ResourceModifiedError,
    ResourceNotFoundError,
)
from azure.mgmt.dns import DnsManagementClient
from azure.mgmt.dns.models import RecordSet, TxtRecord

from acme_dns01.dns.base import DnsProvider
from acme_dns01.models import Record, Zone

logger = logging.getLogger(__name__)

_DEFAULT_TTL = 60
_MAX_ATTEMPTS = 5
_CONFLICT_STATUS_CODES = (409, 412)


def _is_public(zone_type: object) -> bool:
    # zone_type may be the ZoneType enum, a plain string or unset on older API versions
    if zone_type is None:
        return True
    return str(getattr(zone_type, "value", zone_type)).lower() == "public"


def _is_conflict(exc: HttpResponseError) -> bool:
    """True when an ETag precondition failed because someone else changed the set."""
    if isinstance(exc, (ResourceModifiedError, ResourceExistsError)):
        return True
    return exc.status_code in _CONFLICT_STATUS_CODES


def _txt_value(txt: TxtRecord) -> str:
    return "".join(txt.value or [])


class AzureDnsProvider(DnsProvider):
    """DNS provider backed by Azure DNS zones.

    Azure keeps every TXT value for a name in one record set, so adding or
    removing a single value is a read-modify-write guarded by the set's ETag.
    When another writer wins the race the set is re-read and the change is
    applied again, up to a bounded number of attempts.
    """

    def __init__(
        self,
        credential,
        subscription_id: str,
        resource_group: str,
        default_ttl: int = _DEFAULT_TTL,
        timeout: float | None = None,
        _dns_client: DnsManagementClient | None = None,
    ) -> None:
        self._resource_group = resource_group
        self._default_ttl = default_ttl
        if _dns_client is None:
            transport_kwargs = {}
            if timeout is not None:
                transport_kwargs = {"connection_timeout": timeout, "read_timeout": timeout}
            _dns_client = DnsManagementClient(credential, subscription_id, **transport_kwargs)
        self._dns_client = _dns_client

    def list_zones(self) -> list[Zone]:
        return [
            Zone(name=z.name, eligible=_is_public(z.zone_type), zone_id=z.id)
            for z in self._dns_client.zones.list_by_resource_group(self._resource_group)
        ]

    def _get_record_set(self, zone: Zone, name: str, record_type: str) -> RecordSet | None:
        try:
            return self._dns_client.record_sets.get(
                resource_group_name=self._resource_group,
                zone_name=zone.name,
                relative_record_set_name=name,
                record_type=record_type,
            )
        except ResourceNotFoundError:
            return None

    def list_records(self, zone: Zone, name: str, record_type: str = "TXT") -> list[Record]:
        record_set = self._get_record_set(zone, name, record_type)
        if record_set is None:
            return []
        return [
            Record(name=name, value=_txt_value(txt), type=record_type, ttl=record_set.ttl)
            for txt in record_set.txt_records or []
        ]

    def _write(self, zone: Zone, record: Record, parameters: RecordSet, **conditions) -> None:
        self._dns_client.record_sets.create_or_update(
            resource_group_name=self._resource_group,
            zone_name=zone.name,
            relative_record_set_name=record.name,
            record_type=record.type,
            parameters=parameters,
            **conditions,
        )

    def _try_add(self, zone: Zone, record: Record) -> int:
        """Apply one append attempt. Returns the TTL the value was published with."""
        record_set = self._get_record_set(zone, record.name, record.type)
        if record_set is None:
            ttl = record.ttl or self._default_ttl
            self._write(
                zone,
                record,
                RecordSet(ttl=ttl, txt_records=[TxtRecord(value=[record.value])]),
                if_none_match="*",
            )
            return ttl

        values = list(record_set.txt_records or [])
        ttl = record_set.ttl or record.ttl or self._default_ttl
        if any(_txt_value(txt) == record.value for txt in values):
            logger.debug("TXT value already in record set %s.%s", record.name, zone.name)
            return ttl
        values.append(TxtRecord(value=[record.value]))
        self._write(zone, record, RecordSet(ttl=ttl, txt_records=values), if_match=record_set.etag)
        return ttl

    def create_record(self, zone: Zone, record: Record) -> Record:
        for attempt in range(1, _MAX_ATTEMPTS + 1):
            try:
                ttl = self._try_add(zone, record)
                break
            except HttpResponseError as exc:
                if not _is_conflict(exc) or attempt == _MAX_ATTEMPTS:
                    raise
                logger.debug(
                    "Record set %s.%s changed concurrently; retrying (%d/%d)",
                    record.name,
                    zone.name,
                    attempt,
                    _MAX_ATTEMPTS,
                )
        logger.info("Created TXT record %s.%s", record.name, zone.name)
        return Record(name=record.name, value=record.value, type=record.type, ttl=ttl)

    def _try_remove(self, zone: Zone, record: Record) -> None:
        record_set = self._get_record_set(zone, record.name, record.type)
        if record_set is None:
            logger.warning("TXT record set %s.%s not found — skipping delete", record.name, zone.name)
            return

        values = list(record_set.txt_records or [])
        remaining = [txt for txt in values if _txt_value(txt) != record.value]
        if len(remaining) == len(values):
            logger.debug("TXT value already absent from %s.%s", record.name, zone.name)
            return
        if remaining:
            self._write(
                zone,
                record,
                RecordSet(ttl=record_set.ttl, txt_records=remaining),
                if_match=record_set.etag,
            )
        else:
            self._dns_client.record_sets.delete(
                resource_group_name=self._resource_group,
                zone_name=zone.name,
                relative_record_set_name=record.name,
                record_type=record.type,
                if_match=record_set.etag,
            )
        logger.info("Deleted TXT record %s.%s", record.name, zone.name)

    def delete_record(self, zone: Zone, record: Record) -> None:
        for attempt in range(1, _MAX_ATTEMPTS + 1):
            try:
                self._try_remove(zone, record)
                return
            except HttpResponseError as exc:
                if not _is_conflict(exc) or attempt == _MAX_ATTEMPTS:
                    raise
                logger.debug(
                    "Record set %s.%s changed concurrently; retrying (%d/%d)",
                    record.name,
                    zone.name,
                    attempt,
                    _MAX_ATTEMPTS,
                )
