"""Factory functions for creating pre-configured WageEngine instances."""

from __future__ import annotations

from dcwage.data.repository import WageRepository
from dcwage.data.wage_table import WAGE_TABLE
from dcwage.engine import WageEngine


def create_default_engine() -> WageEngine:
    """Create a WageEngine wired up with the built-in wage table.

    Example::

        from dcwage import create_default_engine

        engine = create_default_engine()
        estimate = engine.estimate("Seattle")
    """
    repository = WageRepository(WAGE_TABLE)
    return WageEngine(repository)
