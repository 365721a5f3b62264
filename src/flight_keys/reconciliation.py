"""Shared flight key store so two producers agree on one identifier per flight.

Consistency model: within one process every operation runs under a lock,
so reads observe earlier writes and the two-table upsert in
:meth:`ReconciliationStore.save_mapping` is never interleaved. Across
processes the only guarantee is that each single table write is atomic.
There is no cross-process lock; two producers that both write before either
reads can still mint two keys for the same flight. The created-set bias in
:meth:`ReconciliationStore.existing_mapping` narrows that window, it does not
close it.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .matching import find_existing_mapping
from .storage.keys import composite_map_key, created_keys_key, roster_map_key

if TYPE_CHECKING:
    from .key_factory import FlightKeyFactory
    from .schemas import ExistingMapping, FlightSignature
    from .storage import KeyValueTable

logger = logging.getLogger(__name__)


class ReconciliationStore:
    """Composite, roster UID and created-set tables over a shared backend."""

    def __init__(
        self,
        table: KeyValueTable,
        key_factory: FlightKeyFactory,
        namespace: str,
    ) -> None:
        self._table = table
        self._keys = key_factory
        self._composite_map = composite_map_key(namespace)
        self._roster_map = roster_map_key(namespace)
        self._created = created_keys_key(namespace)
        self._lock = threading.RLock()

    @property
    def key_factory(self) -> FlightKeyFactory:
        return self._keys

    def _composite(self, signature: FlightSignature, airline_prefix: str | None) -> str:
        return self._keys.normalized_composite_key(
            signature.date,
            signature.flight_number,
            signature.origin,
            signature.destination,
            airline_prefix,
        )

    # -- Composite and roster tables ------------------------------------

    def save_mapping(
        self,
        flight_key: str,
        signature: FlightSignature,
        roster_uid: str | None = None,
        airline_prefix: str | None = None,
    ) -> None:
        """Persist signature -> flight key, optionally tying a roster UID to it."""
        composite = self._composite(signature, airline_prefix)
        with self._lock:
            self._table.hset(self._composite_map, composite, flight_key)
            if roster_uid is not None:
                self._table.hset(self._roster_map, roster_uid, flight_key)
        logger.debug(
            "save_mapping composite=%s flight_key=%s roster_uid=%s",
            composite,
            flight_key,
            roster_uid,
        )

    def flight_key(
        self, signature: FlightSignature, airline_prefix: str | None = None
    ) -> str | None:
        """Return the stored flight key for an exact signature, if any."""
        composite = self._composite(signature, airline_prefix)
        with self._lock:
            found = self._table.hget(self._composite_map, composite)
        logger.debug("lookup composite=%s -> %s", composite, found)
        return found

    def flight_key_for_roster_uid(self, roster_uid: str) -> str | None:
        """Return the flight key saved for a roster UID, if any."""
        with self._lock:
            found = self._table.hget(self._roster_map, roster_uid)
        logger.debug("lookup roster_uid=%s -> %s", roster_uid, found)
        return found

    def existing_mapping(
        self,
        date: str,
        flight_number: str,
        airline_prefix: str | None = None,
    ) -> ExistingMapping | None:
        """Find a stored key for date + flight number regardless of route.

        See :mod:`flight_keys.matching` for the priority rules.
        """
        normalized = self._keys.normalize_flight_number(flight_number, airline_prefix)
        with self._lock:
            entries = self._table.hgetall(self._composite_map)
            if not entries:
                return None
            created = self._table.smembers(self._created)
        return find_existing_mapping(entries, date, normalized, created)

    def remove_roster_mapping(self, roster_uid: str) -> None:
        """Drop a roster UID without touching the composite map."""
        with self._lock:
            self._table.hdel(self._roster_map, roster_uid)
        logger.debug("remove_roster_mapping roster_uid=%s", roster_uid)

    # -- Created set -----------------------------------------------------

    def mark_created(self, flight_key: str) -> None:
        """Record that this producer created or updated the flight."""
        with self._lock:
            self._table.sadd(self._created, flight_key)
        logger.debug("mark_created flight_key=%s", flight_key)

    def is_created(self, flight_key: str) -> bool:
        with self._lock:
            return self._table.sismember(self._created, flight_key)

    def created_keys(self) -> set[str]:
        with self._lock:
            return self._table.smembers(self._created)

    def reset_created(self) -> None:
        with self._lock:
            self._table.delete(self._created)
        logger.debug("reset_created")

    def reset(self) -> None:
        """Remove all stored flight data. Intended for debugging or tests."""
        with self._lock:
            self._table.delete(self._composite_map, self._roster_map, self._created)
        logger.info("Reset all stored flight key mappings")
