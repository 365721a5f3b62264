"""Airport metadata lookups: ICAO to IATA and time zone resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .datasets import AIRPORTS_FILE, TIMEZONES_FILE, load_json

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


class AirportDirectory:
    """Resolve time zones for ICAO or IATA airport codes."""

    def __init__(
        self,
        icao_to_iata: Mapping[str, str] | None = None,
        iata_to_timezone: Mapping[str, ZoneInfo] | None = None,
    ) -> None:
        self._icao_to_iata = {
            k.upper(): v.upper() for k, v in (icao_to_iata or {}).items()
        }
        self._iata_to_timezone = {
            k.upper(): v for k, v in (iata_to_timezone or {}).items()
        }

    @classmethod
    def from_dataset(cls, dataset_dir: str | Path | None = None) -> AirportDirectory:
        """Load ``airports.json`` and ``timezones.json``.

        ``airports.json`` is keyed by IATA code with an ``icao`` attribute per
        entry; ``timezones.json`` holds an ``airports`` object of IATA code to
        IANA zone name. Entries that do not fit either shape are skipped.
        """
        icao_to_iata: dict[str, str] = {}
        raw_airports = load_json(AIRPORTS_FILE, dataset_dir)
        if isinstance(raw_airports, dict):
            for iata, value in raw_airports.items():
                if not isinstance(value, dict):
                    continue
                icao = value.get("icao")
                if isinstance(icao, str) and icao:
                    icao_to_iata[icao.upper()] = iata.upper()

        iata_to_timezone: dict[str, ZoneInfo] = {}
        raw_zones = load_json(TIMEZONES_FILE, dataset_dir)
        zones = raw_zones.get("airports") if isinstance(raw_zones, dict) else None
        if isinstance(zones, dict):
            for iata, identifier in zones.items():
                try:
                    iata_to_timezone[iata.upper()] = ZoneInfo(identifier)
                except (ZoneInfoNotFoundError, ValueError, TypeError):
                    logger.debug("Unknown time zone %r for %s", identifier, iata)

        logger.info(
            "Airport directory: %d ICAO codes, %d time zones",
            len(icao_to_iata),
            len(iata_to_timezone),
        )
        return cls(icao_to_iata, iata_to_timezone)

    def time_zone(self, airport_code: str) -> ZoneInfo | None:
        """Return the time zone for an ICAO or IATA code, if known."""
        code = airport_code.strip().upper()
        tz = self._iata_to_timezone.get(code)
        if tz is not None:
            return tz

        iata = self._icao_to_iata.get(code)
        if iata is not None:
            return self._iata_to_timezone.get(iata)
        return None

    def iata_code(self, icao: str) -> str | None:
        """Return the IATA code for an ICAO code, if known."""
        return self._icao_to_iata.get(icao.strip().upper())
