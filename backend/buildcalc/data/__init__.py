"""Constant rate and phase tables for the BuildCalc calculator."""

from buildcalc.data.phases import PHASE_DEFINITIONS, PhaseDefinition
from buildcalc.data.rates import (
    CONSTRUCTION_RATES,
    PHASE_RATES,
    QUALITY_MULTIPLIERS,
)

__all__ = [
    "CONSTRUCTION_RATES",
    "PHASE_DEFINITIONS",
    "PHASE_RATES",
    "QUALITY_MULTIPLIERS",
    "PhaseDefinition",
]
