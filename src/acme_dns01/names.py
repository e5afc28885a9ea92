"""Domain name normalization — trailing dots, case folding, label splitting."""

from __future__ import annotations

from dataclasses import dataclass

from acme_dns01.errors import InvalidNameError

_MAX_LABEL_LENGTH = 63
_MAX_NAME_LENGTH = 253


@dataclass(frozen=True)
class DnsName:
    """A normalized domain name held as lower-case labels, most specific first.

    Two names compare equal when their label sequences match, so
    ``example.com`` and ``Example.COM.`` are the same name.
    """

    labels: tuple[str, ...]

    @property
    def fqdn(self) -> str:
        """Absolute form with exactly one trailing dot."""
        return ".".join(self.labels) + "."

    @property
    def display(self) -> str:
        """Form without the trailing dot, as most DNS APIs expect it."""
        return ".".join(self.labels)

    def __str__(self) -> str:
        return self.display

    def __len__(self) -> int:
        return len(self.labels)

    def is_subdomain_of(self, other: DnsName) -> bool:
        """True if ``other`` is a label-wise suffix of this name (or equal to it)."""
        count = len(other.labels)
        if count > len(self.labels):
            return False
        return self.labels[len(self.labels) - count :] == other.labels


def normalize(name: str | DnsName) -> DnsName:
    """Parse a domain name into a :class:`DnsName`.

    Surrounding whitespace is ignored and a single trailing dot is accepted.
    Anything else that would produce an empty label is rejected.

    Raises:
        InvalidNameError: the name is empty or contains an empty or oversized label.
    """
    if isinstance(name, DnsName):
        return name

    cleaned = name.strip().lower()
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    if not cleaned:
        raise InvalidNameError(name, "name is empty")
    if len(cleaned.encode()) > _MAX_NAME_LENGTH:
        raise InvalidNameError(name, f"name exceeds {_MAX_NAME_LENGTH} octets")

    parts = tuple(cleaned.split("."))
    for part in parts:
        if not part:
            raise InvalidNameError(name, "name contains an empty label")
        if len(part.encode()) > _MAX_LABEL_LENGTH:
            raise InvalidNameError(name, f"label {part!r} exceeds {_MAX_LABEL_LENGTH} octets")
    return DnsName(parts)


def labels(name: str | DnsName) -> tuple[str, ...]:
    """Return the labels of ``name`` in left-to-right order."""
    return normalize(name).labels


def to_fqdn(name: str) -> str:
    """Append a trailing dot unless one is already present."""
    if not name or name.endswith("."):
        return name
    return name + "."


def un_fqdn(name: str) -> str:
    """Strip a single trailing dot, if any."""
    return name.removesuffix(".")
