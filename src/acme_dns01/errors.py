"""Exception types raised while resolving zones and reconciling challenge records."""

from __future__ import annotations


class Dns01Error(Exception):
    """Base class for all errors raised by acme_dns01."""


class InvalidNameError(Dns01Error, ValueError):
    """A domain name could not be parsed into DNS labels."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid DNS name {name!r}: {reason}")


class ZoneNotFoundError(Dns01Error):
    """No eligible zone in the account inventory is an ancestor of the FQDN."""

    def __init__(self, fqdn: str) -> None:
        self.fqdn = fqdn
        super().__init__(f"No eligible zone found for '{fqdn}'")


class NotUnderZoneError(Dns01Error, ValueError):
    """The FQDN does not fall under the zone it was paired with."""

    def __init__(self, fqdn: str, zone: str) -> None:
        self.fqdn = fqdn
        self.zone = zone
        super().__init__(f"Record '{fqdn}' is not under zone '{zone}'")


class StoreError(Dns01Error):
    """A zone inventory or record store call failed.

    The original exception is chained as ``__cause__``. Retrying is left to the
    caller, who knows the vendor's rate limits.
    """

    retryable = True

    def __init__(self, operation: str, fqdn: str, zone: str | None = None) -> None:
        self.operation = operation
        self.fqdn = fqdn
        self.zone = zone
        where = f" in zone '{zone}'" if zone else ""
        super().__init__(f"DNS store operation '{operation}' failed for '{fqdn}'{where}")
