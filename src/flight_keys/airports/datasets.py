"""Locate and read the static airport datasets."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ALIASES_FILE = "airportAliases.json"
AIRPORTS_FILE = "airports.json"
TIMEZONES_FILE = "timezones.json"


def load_json(name: str, dataset_dir: str | Path | None = None) -> Any | None:
    """Return the parsed dataset *name*, or None if it is missing or broken.

    An explicit *dataset_dir* wins over the copies bundled with the package.
    """
    if dataset_dir:
        source = Path(dataset_dir) / name
    else:
        source = resources.files("flight_keys.airports").joinpath("data", name)

    try:
        raw = source.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Dataset %s not found at %s", name, source)
        return None
    except OSError as exc:
        logger.warning("Failed to read dataset %s at %s: %s", name, source, exc)
        return None
    except UnicodeDecodeError as exc:
        logger.warning("Failed to parse dataset %s: %s", name, exc)
        return None

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Failed to parse dataset %s: %s", name, exc)
        return None
