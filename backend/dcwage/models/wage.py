"""Wage lookup models: resolution results and the HTTP wire shapes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dcwage.data.wage_table import CURRENCY
from dcwage.models.enums import MatchLevel


class WageEstimate(BaseModel):
    """Outcome of resolving a location against the wage table.

    ``hourly_wage`` is the city's own wage for a city match, and the
    arithmetic mean of every city wage below the node for a state or
    country match. ``sample_size`` counts the city wages behind it.
    """

    location: str
    hourly_wage: float = Field(ge=0)
    level: MatchLevel
    matched_name: str
    sample_size: int = Field(default=1, ge=1)


class WageQuery(BaseModel):
    """JSON body accepted by ``POST /api/wage``."""

    model_config = ConfigDict(extra="ignore")

    location: str | None = None


class WageResponse(BaseModel):
    """Successful ``/api/wage`` payload."""

    model_config = ConfigDict(populate_by_name=True)

    location: str
    hourly_wage: float = Field(alias="hourlyWage")
    currency: str = CURRENCY

    @classmethod
    def from_estimate(cls, estimate: WageEstimate) -> WageResponse:
        return cls(location=estimate.location, hourly_wage=estimate.hourly_wage)


class ErrorResponse(BaseModel):
    """Error payload shared by the 400, 404 and 500 responses."""

    error: str
    message: str
