"""Formatting helpers for wage output.

Wages are quoted the way contractor rate cards show them: dollars with
cents and the currency code (e.g., '$45.50 USD').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dcwage.data.wage_table import CURRENCY
from dcwage.models.enums import MatchLevel

if TYPE_CHECKING:
    from dcwage.models.wage import WageEstimate


def format_hourly_wage(amount: float, currency: str = CURRENCY) -> str:
    """Format an hourly wage as '$X.XX USD'."""
    return f"${amount:,.2f} {currency}"


def describe_estimate(estimate: WageEstimate) -> str:
    """One-line summary of where a wage figure came from.

    - City match: 'Austin: $37.50 USD (city)'
    - State/country match: 'Texas: $36.72 USD (state average of 3)'
    """
    wage = format_hourly_wage(estimate.hourly_wage)
    if estimate.level is MatchLevel.CITY:
        return f"{estimate.matched_name}: {wage} (city)"
    return (
        f"{estimate.matched_name}: {wage} "
        f"({estimate.level} average of {estimate.sample_size})"
    )
