"""Shared fixtures and helpers for flight key tests."""

from __future__ import annotations

import fakeredis
import pytest

from flight_keys.airports import AirportNormalizer
from flight_keys.key_factory import FlightKeyFactory
from flight_keys.reconciliation import ReconciliationStore
from flight_keys.schemas import FlightSignature
from flight_keys.storage import InMemoryTable, RedisTable

NAMESPACE = "test.flightkeys"


@pytest.fixture
def normalizer() -> AirportNormalizer:
    return AirportNormalizer({"HKG": "VHHH", "TPE": "RCTP", "NRT": "RJAA"})


@pytest.fixture
def key_factory(normalizer: AirportNormalizer) -> FlightKeyFactory:
    return FlightKeyFactory(normalizer, "CX")


@pytest.fixture
def make_signature():
    """Factory fixture for creating FlightSignature instances."""

    def _make(
        date: str = "01/03/2025",
        flight_number: str = "CX450",
        origin: str = "HKG",
        destination: str = "TPE",
    ) -> FlightSignature:
        return FlightSignature(
            date=date,
            flight_number=flight_number,
            origin=origin,
            destination=destination,
        )

    return _make


@pytest.fixture
def namespace() -> str:
    return NAMESPACE


@pytest.fixture
def store(key_factory: FlightKeyFactory, namespace: str) -> ReconciliationStore:
    return ReconciliationStore(InMemoryTable(), key_factory, namespace)


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest.fixture
def make_redis_table(redis_server: fakeredis.FakeServer):
    """Factory fixture: every table built here talks to the same fake server."""

    def _make() -> RedisTable:
        client = fakeredis.FakeRedis(server=redis_server, decode_responses=True)
        return RedisTable(client)

    return _make
