"""Wage data layer for the dcwage service."""

from dcwage.data.repository import WageMatch, WageRepository
from dcwage.data.wage_table import CURRENCY, WAGE_TABLE, WageTable

__all__ = [
    "CURRENCY",
    "WAGE_TABLE",
    "WageMatch",
    "WageRepository",
    "WageTable",
]
