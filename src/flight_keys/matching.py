"""Approximate lookup of an existing flight key by date and flight number.

One producer often knows a flight only by date and flight number, or carries
route codes that disagree with what the other producer stored. The matcher
ignores the route entirely and tolerates a one day skew between the stored
and requested dates.

Records this producer created itself (the *created* set) are deprioritised
so that both sides converge on the key the counterpart minted first rather
than each preferring its own output:

1. the first exact-date match not in the created set is returned at once;
2. otherwise the closest (at most one day away) match not in the created
   set, falling back to the first such match that is in the created set;
3. otherwise the first exact-date match in the created set.

Entries are scanned in composite key order so the result never depends on
how the backend happens to enumerate a hash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_cls
from datetime import datetime
from typing import TYPE_CHECKING

from .key_factory import parse_composite_key
from .schemas import ExistingMapping

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d/%m/%Y"
MAX_DATE_DELTA_DAYS = 1


@dataclass(frozen=True)
class _Candidate:
    composite: str
    flight_key: str
    origin: str
    destination: str
    delta: int = 0

    def to_mapping(self) -> ExistingMapping:
        return ExistingMapping(
            flight_key=self.flight_key,
            origin=self.origin,
            destination=self.destination,
        )


def parse_date(value: str) -> date_cls | None:
    """Parse a ``DD/MM/YYYY`` string, returning None when it does not fit."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def find_existing_mapping(
    entries: Mapping[str, str],
    date: str,
    normalized_number: str,
    created: Collection[str] = (),
) -> ExistingMapping | None:
    """Pick the stored flight key that best matches *date* and flight number.

    *entries* maps composite keys to flight keys; *normalized_number* must
    already carry the airline prefix. Malformed composites are skipped.
    """
    target_date = parse_date(date)
    exact_created: _Candidate | None = None
    proximity: _Candidate | None = None
    proximity_created: _Candidate | None = None

    for composite in sorted(entries):
        parts = parse_composite_key(composite)
        if parts is None:
            logger.debug("Skipping malformed composite %r", composite)
            continue

        stored_date, stored_number, stored_from, stored_to = parts
        if stored_number != normalized_number:
            continue

        flight_key = entries[composite]
        is_created = flight_key in created

        if stored_date == date:
            if not is_created:
                logger.debug(
                    "existing_mapping matched composite=%s flight_key=%s",
                    composite,
                    flight_key,
                )
                return ExistingMapping(
                    flight_key=flight_key, origin=stored_from, destination=stored_to
                )
            if exact_created is None:
                exact_created = _Candidate(composite, flight_key, stored_from, stored_to)

        stored = parse_date(stored_date)
        if target_date is None or stored is None:
            logger.debug(
                "existing_mapping could not parse dates stored=%s target=%s",
                stored_date,
                date,
            )
            continue

        delta = abs((target_date - stored).days)
        if delta > MAX_DATE_DELTA_DAYS:
            continue

        candidate = _Candidate(composite, flight_key, stored_from, stored_to, delta)
        if not is_created:
            if proximity is None or delta < proximity.delta:
                proximity = candidate
        elif proximity_created is None:
            proximity_created = candidate

    best = proximity or proximity_created
    if best is not None:
        logger.debug(
            "existing_mapping fallback matched flight_key=%s date_delta=%d",
            best.flight_key,
            best.delta,
        )
        return best.to_mapping()

    if exact_created is not None:
        logger.debug(
            "existing_mapping returning created flight_key=%s",
            exact_created.flight_key,
        )
        return exact_created.to_mapping()

    return None
