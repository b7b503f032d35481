"""Domain models for the dcwage service."""

from dcwage.models.enums import MatchLevel
from dcwage.models.wage import ErrorResponse, WageEstimate, WageQuery, WageResponse

__all__ = [
    "ErrorResponse",
    "MatchLevel",
    "WageEstimate",
    "WageQuery",
    "WageResponse",
]
