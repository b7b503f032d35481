"""Tests for wage models and their wire shapes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dcwage.models.enums import MatchLevel
from dcwage.models.wage import ErrorResponse, WageEstimate, WageQuery, WageResponse


def _estimate(**overrides: object) -> WageEstimate:
    fields: dict[str, object] = {
        "location": "Austin, Texas",
        "hourly_wage": 37.5,
        "level": MatchLevel.CITY,
        "matched_name": "Austin",
    }
    fields.update(overrides)
    return WageEstimate(**fields)  # type: ignore[arg-type]


class TestWageEstimate:
    def test_defaults_to_single_sample(self) -> None:
        assert _estimate().sample_size == 1

    def test_rejects_negative_wage(self) -> None:
        with pytest.raises(ValidationError):
            _estimate(hourly_wage=-1.0)

    def test_rejects_zero_sample_size(self) -> None:
        with pytest.raises(ValidationError):
            _estimate(sample_size=0)

    def test_level_serializes_as_string(self) -> None:
        assert _estimate().model_dump(mode="json")["level"] == "city"


class TestWageResponse:
    def test_camel_case_on_the_wire(self) -> None:
        response = WageResponse.from_estimate(_estimate())
        assert response.model_dump(mode="json", by_alias=True) == {
            "location": "Austin, Texas",
            "hourlyWage": 37.5,
            "currency": "USD",
        }

    def test_accepts_alias_on_input(self) -> None:
        response = WageResponse.model_validate(
            {"location": "Berlin", "hourlyWage": 33.75}
        )
        assert response.hourly_wage == 33.75
        assert response.currency == "USD"


class TestWageQuery:
    def test_location_optional(self) -> None:
        assert WageQuery().location is None

    def test_rejects_numeric_location(self) -> None:
        with pytest.raises(ValidationError):
            WageQuery.model_validate({"location": 12})


class TestErrorResponse:
    def test_shape(self) -> None:
        error = ErrorResponse(error="Location not found", message="nope")
        assert error.model_dump() == {"error": "Location not found", "message": "nope"}
