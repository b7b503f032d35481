"""HTTP layer for the dcwage service."""
