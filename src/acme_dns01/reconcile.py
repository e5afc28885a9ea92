"""Decide which record mutation brings a zone to the desired challenge state.

Everything here is a pure function over a snapshot of records. Matching is by
exact value so that a cleanup never removes a TXT record that belongs to a
concurrent validation or to something else entirely.
"""

from __future__ import annotations

from collections.abc import Iterable

from acme_dns01.models import Action, Record

__all__ = ["Action", "matching_records", "reconcile", "reconcile_delete", "same_name"]

_APEX_NAMES = frozenset({"", "@"})


def _canonical_name(name: str) -> str:
    name = name.strip().lower().removesuffix(".")
    return "" if name in _APEX_NAMES else name


def same_name(left: str, right: str) -> bool:
    """Compare two relative record names, treating ``""`` and ``"@"`` as the apex."""
    return _canonical_name(left) == _canonical_name(right)


def _at_name(name: str, existing: Iterable[Record], record_type: str) -> list[Record]:
    return [r for r in existing if r.type.upper() == record_type.upper() and same_name(r.name, name)]


def matching_records(
    name: str,
    value: str,
    existing: Iterable[Record],
    record_type: str = "TXT",
) -> list[Record]:
    """Return the records at ``name`` whose value is exactly ``value``."""
    return [r for r in _at_name(name, existing, record_type) if r.value == value]


def reconcile(name: str, desired_value: str, existing: Iterable[Record]) -> Action:
    """Decide how to publish ``desired_value`` at ``name``.

    Returns:
        ``ALREADY_PRESENT`` if the exact value is already published,
        ``CREATE_ADDITIONAL`` if other TXT values live at the name (they are
        left alone), otherwise ``CREATE``.
    """
    at_name = _at_name(name, existing, "TXT")
    if any(r.value == desired_value for r in at_name):
        return Action.ALREADY_PRESENT
    if at_name:
        return Action.CREATE_ADDITIONAL
    return Action.CREATE


def reconcile_delete(
    name: str,
    desired_value: str,
    existing: Iterable[Record],
) -> tuple[Action, list[Record]]:
    """Select the records to delete for ``desired_value`` at ``name``.

    Returns:
        ``(DELETE_ONE, matches)`` when the value is published, or
        ``(NOTHING_TO_DELETE, [])`` when it is already gone.
    """
    matches = matching_records(name, desired_value, existing)
    if not matches:
        return Action.NOTHING_TO_DELETE, []
    return Action.DELETE_ONE, matches
