"""Hourly contractor wages for data center markets.

Wages are USD per hour, keyed Country -> State/Province -> City.
Declaration order is significant: resolution scans countries, states
and cities in the order they appear here, and the first match wins.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

WageTable = Mapping[str, Mapping[str, Mapping[str, float]]]

_RAW_WAGES: dict[str, dict[str, dict[str, float]]] = {
    "US": {
        "California": {
            "San Francisco": 45.50,
            "San Jose": 44.75,
            "Los Angeles": 38.25,
        },
        "Texas": {
            "Austin": 37.50,
            "Dallas": 36.75,
            "Houston": 35.90,
        },
        "Virginia": {
            "Northern VA": 42.00,
            "Ashburn": 41.50,
        },
        "Oregon": {
            "Portland": 39.25,
        },
        "Washington": {
            "Seattle": 43.75,
        },
    },
    "CA": {
        "Ontario": {
            "Toronto": 35.60,
            "Montreal": 34.25,
        },
    },
    "EU": {
        "Germany": {
            "Frankfurt": 35.20,
            "Berlin": 33.75,
        },
        "Netherlands": {
            "Amsterdam": 36.50,
        },
        "UK": {
            "London": 38.90,
            "Manchester": 35.40,
        },
    },
}


def freeze_table(raw: Mapping[str, Mapping[str, Mapping[str, float]]]) -> WageTable:
    """Return a read-only copy of a nested wage mapping.

    Raises ValueError if any leaf wage is negative or not finite.
    """
    frozen: dict[str, Mapping[str, Mapping[str, float]]] = {}
    for country, states in raw.items():
        frozen_states: dict[str, Mapping[str, float]] = {}
        for state, cities in states.items():
            for city, wage in cities.items():
                if not (0.0 <= wage < float("inf")):
                    msg = f"Invalid wage {wage!r} for {city}, {state}, {country}"
                    raise ValueError(msg)
            frozen_states[state] = MappingProxyType(dict(cities))
        frozen[country] = MappingProxyType(frozen_states)
    return MappingProxyType(frozen)


def iter_leaf_wages(node: Mapping[str, object]) -> Iterator[float]:
    """Yield every city wage below a state or country node."""
    for value in node.values():
        if isinstance(value, Mapping):
            yield from iter_leaf_wages(value)
        else:
            yield float(value)  # type: ignore[arg-type]


WAGE_TABLE: WageTable = freeze_table(_RAW_WAGES)

CURRENCY = "USD"
