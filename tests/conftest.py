"""Shared test fixtures for acme-dns01."""

import threading

import pytest

import acme_dns01.auth as _auth
from acme_dns01.dns.base import DnsProvider
from acme_dns01.models import Record, Zone


def pytest_runtest_setup(item):
    """Reset module-level caches between tests."""
    _auth._credentials.clear()


class InMemoryDnsProvider(DnsProvider):
    """Thread-safe fake that keeps zones and records in dictionaries."""

    def __init__(self, zones, apex_name="@", quote_values=False):
        self.zones = list(zones)
        self.apex_name = apex_name
        self.quote_values = quote_values
        self.records: dict[str, list[Record]] = {}
        self.list_zones_calls = 0
        self.closed = False
        self._lock = threading.Lock()
        self._next_id = 1

    def encode_txt_value(self, value):
        return f'"{value}"' if self.quote_values else value

    def list_zones(self):
        with self._lock:
            self.list_zones_calls += 1
            return list(self.zones)

    def list_records(self, zone, name, record_type="TXT"):
        with self._lock:
            return [r for r in self.records.get(zone.name, []) if r.name == name and r.type == record_type]

    def create_record(self, zone, record):
        with self._lock:
            stored = Record(
                name=record.name,
                value=record.value,
                type=record.type,
                ttl=record.ttl,
                record_id=str(self._next_id),
            )
            self._next_id += 1
            self.records.setdefault(zone.name, []).append(stored)
        return stored

    def delete_record(self, zone, record):
        with self._lock:
            self.records[zone.name] = [
                r for r in self.records.get(zone.name, []) if r.record_id != record.record_id
            ]

    def close(self):
        self.closed = True

    def values(self, zone_name, name):
        return sorted(r.value for r in self.records.get(zone_name, []) if r.name == name)


@pytest.fixture
def make_provider():
    return InMemoryDnsProvider


@pytest.fixture
def provider():
    return InMemoryDnsProvider(
        [
            Zone("example.com", zone_id="z1"),
            Zone("sub.example.com", zone_id="z2"),
            Zone("other.org", eligible=False, zone_id="z3"),
        ]
    )
