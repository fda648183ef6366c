"""Statsview exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Absence of data is never an error; these types mark broken contracts
and invalid configuration only.
"""

from __future__ import annotations


class StatsViewError(Exception):
    """Base exception for all statsview failures."""


class StatsViewContractError(StatsViewError):
    """Raised when a view invariant is broken by the caller or the data."""


class StatsViewConfigError(StatsViewError):
    """Raised for invalid runtime configuration."""
