"""Custom exception hierarchy for the BuildCalc calculator."""

from __future__ import annotations


class BuildCalcError(Exception):
    """Base exception for all BuildCalc errors."""


class InvalidArgumentError(BuildCalcError, ValueError):
    """Raised when a calculation input is missing or out of range."""


class InvalidPhaseError(BuildCalcError, ValueError):
    """Raised when a phase cost is requested for an unknown phase."""


class CalculationError(BuildCalcError):
    """Raised when a full calculation fails for an unexpected reason."""
