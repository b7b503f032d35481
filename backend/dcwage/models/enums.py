"""Enums for the dcwage domain models."""

from enum import StrEnum


class MatchLevel(StrEnum):
    """Level of the wage table a location token resolved against."""

    CITY = "city"
    STATE = "state"
    COUNTRY = "country"
