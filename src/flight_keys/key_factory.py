"""Deterministic flight identifiers shared by every producer."""

from __future__ import annotations

import hashlib
import re
from typing import Protocol

from .schemas import DELIMITER

DEFAULT_AIRLINE_PREFIX = "CX"
FLIGHT_KEY_LENGTH = 16

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_FROM_FIRST_DIGIT = re.compile(r"[0-9].*")


class AirportCodeNormalizer(Protocol):
    def normalize(self, raw_code: str) -> str: ...


def normalize_flight_number(
    raw_value: str, airline_prefix: str = DEFAULT_AIRLINE_PREFIX
) -> str:
    """Normalise a raw flight number into the canonical form used for hashing.

    Removes non-alphanumeric characters, uppercases, and makes sure the
    airline prefix is present. ``"cx 123"`` and ``"123"`` both become
    ``"CX123"``; an empty value becomes the bare prefix.
    """
    cleaned = _NON_ALNUM.sub("", raw_value.strip().upper())
    if not cleaned:
        return airline_prefix

    if cleaned.startswith(airline_prefix):
        return cleaned

    match = _FROM_FIRST_DIGIT.search(cleaned)
    if match:
        return airline_prefix + match.group(0)
    return airline_prefix + cleaned


def composite_key(date: str, flight_number: str, origin: str, destination: str) -> str:
    """Join four already-normalised fields into the persisted lookup key."""
    return DELIMITER.join([date, flight_number, origin, destination])


def parse_composite_key(composite: str) -> tuple[str, str, str, str] | None:
    """Split a composite key back into its fields, or None if malformed.

    Empty fields are kept, so an entry saved without a route still parses.
    """
    parts = composite.split(DELIMITER)
    if len(parts) != 4:
        return None
    return parts[0], parts[1], parts[2], parts[3]


def hash_composite(composite: str) -> str:
    digest = hashlib.sha256(composite.encode("utf-8")).hexdigest()
    return digest[:FLIGHT_KEY_LENGTH]


class FlightKeyFactory:
    """Generate flight keys with an injected airport normalizer."""

    def __init__(
        self,
        airport_normalizer: AirportCodeNormalizer,
        airline_prefix: str = DEFAULT_AIRLINE_PREFIX,
    ) -> None:
        self._airports = airport_normalizer
        self.airline_prefix = airline_prefix

    def normalize_flight_number(
        self, raw_value: str, airline_prefix: str | None = None
    ) -> str:
        if airline_prefix is None:
            airline_prefix = self.airline_prefix
        return normalize_flight_number(raw_value, airline_prefix)

    def normalize_airport_code(self, code: str) -> str:
        return self._airports.normalize(code)

    def normalized_composite_key(
        self,
        date: str,
        flight_number: str,
        origin: str,
        destination: str,
        airline_prefix: str | None = None,
    ) -> str:
        """Normalise every field, then build the composite key."""
        return composite_key(
            date,
            self.normalize_flight_number(flight_number, airline_prefix),
            self.normalize_airport_code(origin),
            self.normalize_airport_code(destination),
        )

    def flight_key(
        self,
        date: str,
        flight_number: str,
        origin: str,
        destination: str,
        airline_prefix: str | None = None,
    ) -> str:
        """Return the 16 hex character identifier used by both apps."""
        return hash_composite(
            self.normalized_composite_key(
                date, flight_number, origin, destination, airline_prefix
            )
        )
