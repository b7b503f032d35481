"""Wage estimation engine for the dcwage service.

The WageEngine turns a free-text location into an hourly wage:

1. **Token extraction** — Only the first comma-separated segment of the
   input is used; ``"Austin, Texas"`` is looked up as ``"Austin"``.
2. **Table lookup** — The repository scans the wage table in declaration
   order and returns the first city, state, or country whose name matches
   the token case-insensitively.
3. **Aggregation** — A city match yields its own wage. A state or country
   match yields the arithmetic mean of every city wage beneath it. A
   matched node with no city wages counts as not found.
"""

from __future__ import annotations

import logging
import statistics
from typing import TYPE_CHECKING

from dcwage.formatting import describe_estimate
from dcwage.models.wage import WageEstimate

if TYPE_CHECKING:
    from dcwage.data.repository import WageRepository

logger = logging.getLogger(__name__)


def location_token(location: str) -> str:
    """Return the trimmed first comma-separated segment of ``location``."""
    return location.split(",", 1)[0].strip()


class WageEngine:
    """Resolves locations to hourly wages.

    Args:
        repository: The wage data repository to look names up in.

    Example::

        from dcwage.data.repository import WageRepository

        engine = WageEngine(WageRepository())
        estimate = engine.estimate("Austin, TX")
    """

    def __init__(self, repository: WageRepository) -> None:
        self._repository = repository

    def estimate(self, location: str) -> WageEstimate | None:
        """Estimate the hourly wage for a location string.

        Args:
            location: Caller-supplied location. Surrounding whitespace is
                trimmed; the trimmed string is echoed back on the result.

        Returns:
            A WageEstimate, or None if the location is blank or has no
            wage data.
        """
        location = location.strip()
        token = location_token(location)
        if not token:
            return None

        match = self._repository.find(token)
        if match is None:
            logger.info("No wage data for %r", token)
            return None

        if not match.wages:
            logger.warning(
                "Matched %s %r but it has no city wages", match.level, match.name
            )
            return None

        estimate = WageEstimate(
            location=location,
            hourly_wage=statistics.fmean(match.wages),
            level=match.level,
            matched_name=match.name,
            sample_size=len(match.wages),
        )
        logger.info("Resolved %r -> %s", token, describe_estimate(estimate))
        return estimate
