"""DNS-01 challenge operations — publish and remove the ``_acme-challenge`` TXT record."""

from __future__ import annotations

import base64
import hashlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from acme_dns01.dns.base import RecordStore, ZoneInventory
from acme_dns01.errors import Dns01Error, StoreError
from acme_dns01.models import Action, ChallengeInfo, ChallengeState, Match, Record
from acme_dns01.names import DnsName, normalize
from acme_dns01.reconcile import matching_records, reconcile, reconcile_delete
from acme_dns01.zones import resolve

logger = logging.getLogger(__name__)

_CHALLENGE_LABEL = "_acme-challenge"


def get_challenge_info(domain: str, key_authorization: str) -> ChallengeInfo:
    """Compute the record name and value that answer a DNS-01 challenge.

    RFC 8555 §8.4: the value is the unpadded base64url SHA-256 digest of the
    key authorization. A wildcard identifier ``*.example.com`` is validated at
    ``_acme-challenge.example.com``.
    """
    base_domain = domain.removeprefix("*.")
    digest = hashlib.sha256(key_authorization.encode()).digest()
    value = base64.urlsafe_b64encode(digest).decode().rstrip("=")
    fqdn = normalize(f"{_CHALLENGE_LABEL}.{base_domain}").fqdn
    return ChallengeInfo(domain=domain, fqdn=fqdn, value=value)


@contextmanager
def _store_call(operation: str, fqdn: str, zone: str | None = None) -> Iterator[None]:
    """Wrap collaborator failures in StoreError with the FQDN and zone attached."""
    try:
        yield
    except Dns01Error:
        raise
    except Exception as exc:
        raise StoreError(operation, fqdn, zone) from exc


def _resolve(name: DnsName, zones: ZoneInventory) -> Match:
    with _store_call("list_zones", name.fqdn):
        inventory = zones.list_zones()
    return resolve(name, inventory)


def present(
    fqdn: str,
    value: str,
    zones: ZoneInventory,
    store: RecordStore,
    *,
    ttl: int | None = None,
) -> ChallengeState:
    """Publish ``value`` as a TXT record at ``fqdn``.

    The zone inventory is fetched fresh on every call. Calling this twice with
    the same value leaves a single record; a different value at the same name
    is added alongside any existing one rather than replacing it.

    Returns:
        A ChallengeState describing the zone and record, for the paired cleanup.

    Raises:
        InvalidNameError: ``fqdn`` is malformed.
        ZoneNotFoundError: no eligible zone owns ``fqdn``.
        StoreError: the inventory or record store failed.
    """
    name = normalize(fqdn)
    match = _resolve(name, zones)
    zone = match.zone
    relative = match.relative_name(store.apex_name)
    stored_value = store.encode_txt_value(value)

    with _store_call("list_records", name.fqdn, zone.name):
        existing = store.list_records(zone, relative, "TXT")

    action = reconcile(relative, stored_value, existing)

    if action is Action.ALREADY_PRESENT:
        record = matching_records(relative, stored_value, existing)[0]
        logger.info("TXT record %s already present in zone %s, nothing to do", name.display, zone.name)
    else:
        with _store_call("create_record", name.fqdn, zone.name):
            record = store.create_record(zone, Record(name=relative, value=stored_value, ttl=ttl))
        logger.info(
            "Created TXT record %s in zone %s (%s)",
            relative,
            zone.name,
            action.value,
        )

    return ChallengeState(fqdn=name.fqdn, match=match, record=record, action=action)


def cleanup(fqdn: str, value: str, zones: ZoneInventory, store: RecordStore) -> Action:
    """Remove the TXT record at ``fqdn`` whose value is exactly ``value``.

    Other TXT values at the same name are left in place. A record that is
    already gone is not an error.

    Raises:
        InvalidNameError: ``fqdn`` is malformed.
        ZoneNotFoundError: the zone disappeared since the record was presented.
        StoreError: the inventory or record store failed.
    """
    name = normalize(fqdn)
    match = _resolve(name, zones)
    zone = match.zone
    relative = match.relative_name(store.apex_name)
    stored_value = store.encode_txt_value(value)

    with _store_call("list_records", name.fqdn, zone.name):
        existing = store.list_records(zone, relative, "TXT")

    action, doomed = reconcile_delete(relative, stored_value, existing)
    if action is Action.NOTHING_TO_DELETE:
        logger.warning("TXT record %s not found in zone %s — skipping delete", name.display, zone.name)
        return action

    for record in doomed:
        with _store_call("delete_record", name.fqdn, zone.name):
            store.delete_record(zone, record)
    logger.info("Deleted %d TXT record(s) %s from zone %s", len(doomed), relative, zone.name)
    return action
