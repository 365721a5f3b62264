"""Explicit construction of the store and its collaborators."""

from __future__ import annotations

import logging

from .airports import AirportNormalizer
from .config import FlightKeysSettings
from .config import settings as default_settings
from .key_factory import FlightKeyFactory
from .reconciliation import ReconciliationStore
from .storage import InMemoryTable, KeyValueTable, RedisTable

logger = logging.getLogger(__name__)


def open_table(settings: FlightKeysSettings) -> KeyValueTable:
    """Return the shared table, or a process-local one if it is unreachable.

    The fallback keeps each process correct on its own but loses cross-process
    convergence, so it is logged at WARNING rather than raised.
    """
    if settings.backend == "memory":
        logger.info("Using process-local flight key table")
        return InMemoryTable()

    table = RedisTable.from_url(settings.redis_url, settings.socket_timeout)
    if table.ping():
        logger.info("Shared flight key table: %s", settings.redis_url)
        return table

    table.close()
    logger.warning(
        "Shared table %s unreachable; falling back to process-local storage. "
        "Flight keys will not be shared with other apps.",
        settings.redis_url,
    )
    return InMemoryTable()


def build_key_factory(settings: FlightKeysSettings) -> FlightKeyFactory:
    normalizer = AirportNormalizer.from_dataset(settings.dataset_dir)
    return FlightKeyFactory(normalizer, settings.airline_prefix)


def build_store(
    settings: FlightKeysSettings | None = None,
    table: KeyValueTable | None = None,
) -> ReconciliationStore:
    """Wire settings -> normalizer -> key factory -> table -> store."""
    settings = settings or default_settings
    key_factory = build_key_factory(settings)
    if table is None:
        table = open_table(settings)
    return ReconciliationStore(table, key_factory, settings.namespace)
