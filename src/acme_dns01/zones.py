"""Zone matching — pick the zone that owns an FQDN and the record name within it."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from acme_dns01.errors import InvalidNameError, NotUnderZoneError, ZoneNotFoundError
from acme_dns01.models import Match, Zone
from acme_dns01.names import DnsName, normalize

logger = logging.getLogger(__name__)


def find_zone(target: str | DnsName, zones: Iterable[Zone]) -> Zone:
    """Return the most specific eligible zone that ``target`` falls under.

    Zone names are compared label by label, so ``notexample.com`` never
    matches ``example.com``. Ineligible zones are skipped even when they would
    be the longest match. When two eligible zones share the same name the
    first one in ``zones`` wins.

    Args:
        target: The FQDN to place (e.g. "_acme-challenge.sub.example.com.").
        zones: Point-in-time zone inventory for the account.

    Raises:
        InvalidNameError: ``target`` is not a valid domain name.
        ZoneNotFoundError: no eligible zone is an ancestor of ``target``.
    """
    name = normalize(target)
    best: Zone | None = None
    best_size = -1

    for zone in zones:
        if not zone.eligible:
            logger.debug("Skipping ineligible zone %s", zone.name)
            continue
        try:
            zone_name = normalize(zone.name)
        except InvalidNameError:
            logger.warning("Ignoring zone with malformed name %r", zone.name)
            continue
        if name.is_subdomain_of(zone_name) and len(zone_name) > best_size:
            best = zone
            best_size = len(zone_name)

    if best is None:
        raise ZoneNotFoundError(name.fqdn)
    logger.debug("Resolved %s to zone %s", name.fqdn, best.name)
    return best


def relative_name(target: str | DnsName, zone: Zone | str | DnsName) -> tuple[str, ...]:
    """Return the labels of ``target`` that sit in front of ``zone``.

    An FQDN equal to the zone yields an empty tuple.

    Raises:
        InvalidNameError: either name is malformed.
        NotUnderZoneError: ``zone`` is not a label-wise suffix of ``target``.
    """
    name = normalize(target)
    zone_name = normalize(zone.name if isinstance(zone, Zone) else zone)
    if not name.is_subdomain_of(zone_name):
        raise NotUnderZoneError(name.fqdn, zone_name.display)
    return name.labels[: len(name) - len(zone_name)]


def record_name(labels: Iterable[str], apex: str = "@") -> str:
    """Join relative labels into a provider-facing record name.

    Vendors disagree on how the zone apex is spelled, so the caller supplies it.
    """
    return ".".join(labels) or apex


def resolve(target: str | DnsName, zones: Iterable[Zone]) -> Match:
    """Find the owning zone for ``target`` and split off the relative labels."""
    name = normalize(target)
    zone = find_zone(name, zones)
    return Match(zone=zone, relative_labels=relative_name(name, zone))
