"""Shared flight identifiers for cooperating roster and capture apps."""

from .bootstrap import build_key_factory, build_store, open_table
from .key_factory import (
    DEFAULT_AIRLINE_PREFIX,
    FlightKeyFactory,
    composite_key,
    normalize_flight_number,
)
from .reconciliation import ReconciliationStore
from .schemas import ExistingMapping, FlightSignature

__all__ = [
    "DEFAULT_AIRLINE_PREFIX",
    "ExistingMapping",
    "FlightKeyFactory",
    "FlightSignature",
    "ReconciliationStore",
    "build_key_factory",
    "build_store",
    "composite_key",
    "normalize_flight_number",
    "open_table",
]
