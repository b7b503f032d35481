"""Wage data repository for looking up wage figures by location name."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from dcwage.data.wage_table import WAGE_TABLE, iter_leaf_wages
from dcwage.models.enums import MatchLevel

if TYPE_CHECKING:
    from dcwage.data.wage_table import WageTable


class WageMatch(NamedTuple):
    """The table node a location token matched and the wages beneath it."""

    level: MatchLevel
    name: str
    wages: list[float]


class WageRepository:
    """Repository for looking up wage data.

    Wraps a read-only wage table and finds the node a location name
    refers to. Matching is case-insensitive and follows the table's
    declaration order.
    """

    def __init__(self, table: WageTable = WAGE_TABLE) -> None:
        self._table = table

    @property
    def table(self) -> WageTable:
        return self._table

    def find(self, name: str) -> WageMatch | None:
        """Find the table node named ``name``.

        Scan order, country by country in declaration order:
        1. Each state's cities, then the state's own name
        2. The country's own name, once none of its states matched

        The first hit wins, so a city shadows a state or country with the
        same name further along in the scan. Returns None if nothing
        matches.
        """
        needle = name.strip().lower()

        for country, states in self._table.items():
            for state, cities in states.items():
                for city, wage in cities.items():
                    if city.lower() == needle:
                        return WageMatch(MatchLevel.CITY, city, [wage])

                if state.lower() == needle:
                    return WageMatch(
                        MatchLevel.STATE, state, list(iter_leaf_wages(cities))
                    )

            if country.lower() == needle:
                return WageMatch(
                    MatchLevel.COUNTRY, country, list(iter_leaf_wages(states))
                )

        return None

    def list_locations(self) -> list[tuple[str, str, str]]:
        """Return every (country, state, city) triple in scan order."""
        return [
            (country, state, city)
            for country, states in self._table.items()
            for state, cities in states.items()
            for city in cities
        ]
