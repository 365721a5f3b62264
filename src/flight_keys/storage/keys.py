"""Table key builders for consistent namespacing."""

from __future__ import annotations


def composite_map_key(namespace: str) -> str:
    """Build key for the composite signature -> flight key map."""
    return f"{namespace}:flight_key_composite_map:v1"


def roster_map_key(namespace: str) -> str:
    """Build key for the roster UID -> flight key map."""
    return f"{namespace}:flight_key_roster_map:v1"


def created_keys_key(namespace: str) -> str:
    """Build key for the set of flight keys the producer already exported."""
    return f"{namespace}:created_keys:v1"
