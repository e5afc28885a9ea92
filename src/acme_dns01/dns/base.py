"""Abstract contracts that DNS providers implement for the challenge core."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from acme_dns01.models import Record, Zone


class _Closable:
    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class ZoneInventory(_Closable, ABC):
    """Lists the zones an account can manage."""

    @abstractmethod
    def list_zones(self) -> list[Zone]:
        """Return every zone on the account, with pagination fully resolved."""


class RecordStore(_Closable, ABC):
    """Minimal record API for a single vendor.

    Record names passed in and returned are relative to ``zone``. Implementations
    must be safe to call from several threads at once.
    """

    #: How the vendor spells the zone apex as a relative name.
    apex_name = "@"

    def encode_txt_value(self, value: str) -> str:
        """Return ``value`` in the form the vendor stores and lists it.

        Override for vendors that keep TXT data wrapped in literal quotes.
        """
        return value

    @abstractmethod
    def list_records(self, zone: Zone, name: str, record_type: str = "TXT") -> list[Record]:
        """List records of ``record_type`` at ``name`` in ``zone``.

        Args:
            zone: Zone returned by the inventory (e.g. "example.com").
            name: Relative record name within the zone (e.g. "_acme-challenge").
            record_type: DNS record type.
        """

    @abstractmethod
    def create_record(self, zone: Zone, record: Record) -> Record:
        """Publish ``record`` in ``zone`` without touching other values at the same name.

        Returns:
            The published record, carrying the vendor's record ID where it has one.
        """

    @abstractmethod
    def delete_record(self, zone: Zone, record: Record) -> None:
        """Remove exactly ``record`` (matched by id or value) from ``zone``."""


class DnsProvider(ZoneInventory, RecordStore):
    """A vendor integration that provides both the zone inventory and the record store."""
