"""Data center contractor wage estimator.

Usage::

    from dcwage import create_default_engine

    engine = create_default_engine()
    estimate = engine.estimate("Austin, TX")
"""

from dcwage.data.repository import WageMatch, WageRepository
from dcwage.data.wage_table import CURRENCY, WAGE_TABLE
from dcwage.engine import WageEngine, location_token
from dcwage.factory import create_default_engine
from dcwage.models.enums import MatchLevel
from dcwage.models.wage import ErrorResponse, WageEstimate, WageQuery, WageResponse

__all__ = [
    "CURRENCY",
    "ErrorResponse",
    "MatchLevel",
    "WAGE_TABLE",
    "WageEngine",
    "WageEstimate",
    "WageMatch",
    "WageQuery",
    "WageRepository",
    "WageResponse",
    "create_default_engine",
    "location_token",
]
