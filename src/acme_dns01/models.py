"""Data classes shared between the zone resolver, the reconciler and DNS providers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    """Outcome of reconciling the desired challenge record against a zone."""

    CREATE = "create"
    CREATE_ADDITIONAL = "create_additional"
    ALREADY_PRESENT = "already_present"
    DELETE_ONE = "delete_one"
    NOTHING_TO_DELETE = "nothing_to_delete"


@dataclass(frozen=True)
class Zone:
    """A DNS zone the account can administer.

    ``eligible`` folds together whatever the vendor calls "active", "delegated"
    or "not pending deletion". ``zone_id`` is opaque to the resolver.
    """

    name: str
    eligible: bool = True
    zone_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "eligible": self.eligible,
            "zone_id": self.zone_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(
            name=data["name"],
            eligible=data.get("eligible", True),
            zone_id=data.get("zone_id"),
        )


@dataclass(frozen=True)
class Match:
    """The zone an FQDN resolved to and the labels left over in front of it."""

    zone: Zone
    relative_labels: tuple[str, ...] = ()

    def relative_name(self, apex: str = "@") -> str:
        """Join the relative labels, or return ``apex`` for the zone itself."""
        return ".".join(self.relative_labels) or apex

    def to_dict(self) -> dict:
        return {
            "zone": self.zone.to_dict(),
            "relative_labels": list(self.relative_labels),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Match:
        return cls(
            zone=Zone.from_dict(data["zone"]),
            relative_labels=tuple(data.get("relative_labels", ())),
        )


@dataclass(frozen=True)
class Record:
    """A DNS record within a zone. ``name`` is relative to the zone."""

    name: str
    value: str
    type: str = "TXT"
    ttl: int | None = None
    record_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "value": self.value,
            "type": self.type,
            "ttl": self.ttl,
            "record_id": self.record_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            name=data["name"],
            value=data["value"],
            type=data.get("type", "TXT"),
            ttl=data.get("ttl"),
            record_id=data.get("record_id"),
        )


@dataclass(frozen=True)
class ChallengeInfo:
    """DNS-01 challenge details for a single domain."""

    domain: str
    fqdn: str
    value: str

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "fqdn": self.fqdn,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeInfo:
        return cls(
            domain=data["domain"],
            fqdn=data["fqdn"],
            value=data["value"],
        )


@dataclass(frozen=True)
class ChallengeState:
    """What ``present`` did, handed back to the caller for the paired cleanup."""

    fqdn: str
    match: Match
    record: Record
    action: Action

    def to_dict(self) -> dict:
        return {
            "fqdn": self.fqdn,
            "match": self.match.to_dict(),
            "record": self.record.to_dict(),
            "action": self.action.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeState:
        return cls(
            fqdn=data["fqdn"],
            match=Match.from_dict(data["match"]),
            record=Record.from_dict(data["record"]),
            action=Action(data["action"]),
        )
