"""Map IATA codes and other airport aliases onto one canonical code."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .datasets import ALIASES_FILE, load_json

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


class AirportNormalizer:
    """Normalize airport strings into the canonical code used for hashing.

    The alias table maps cleaned codes (``HKG``, ``CHEK LAP KOK``...) to the
    canonical identifier (usually ICAO). Codes missing from the table pass
    through cleaned but otherwise unchanged.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: dict[str, str] = {
            _clean(k): v.upper() for k, v in (aliases or {}).items() if _clean(k)
        }

    @classmethod
    def from_dataset(cls, dataset_dir: str | Path | None = None) -> AirportNormalizer:
        """Build a normalizer from ``airportAliases.json``.

        Falls back to an identity mapping when the dataset is unavailable.
        """
        raw = load_json(ALIASES_FILE, dataset_dir)
        if not isinstance(raw, dict):
            logger.warning(
                "%s unavailable; falling back to identity mapping", ALIASES_FILE
            )
            return cls()

        aliases = {
            k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)
        }
        logger.info("Loaded %d airport aliases", len(aliases))
        return cls(aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def normalize(self, raw_code: str) -> str:
        cleaned = _clean(raw_code)
        if not cleaned:
            return raw_code.upper()
        return self._aliases.get(cleaned, cleaned)


def _clean(code: str) -> str:
    return _NON_ALNUM.sub("", code.strip().upper())
