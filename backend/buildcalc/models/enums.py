"""Enums for the BuildCalc domain models.

These enums are the choices a visitor can make in the website's cost
calculator, plus the fixed categories used by the rate and phase tables.
"""

from enum import StrEnum


class QualityTier(StrEnum):
    """Finish quality levels; each maps to a materials/labor multiplier."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class ProjectType(StrEnum):
    """Kinds of project the timeline generator can schedule."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    VILLA = "villa"
    RENOVATION = "renovation"


class CostCategory(StrEnum):
    """Top-level groups of the construction rate table."""

    MATERIALS = "materials"
    LABOR = "labor"
    OTHER = "other"


class ConstructionPhase(StrEnum):
    """Phases that carry a flat per-square-foot phase rate."""

    FOUNDATION = "foundation"
    STRUCTURE = "structure"
    ROOFING = "roofing"
    MASONRY = "masonry"
    FINISHING = "finishing"


class PhaseCategory(StrEnum):
    """Work category of a scheduled phase (drives resources and colours)."""

    FOUNDATION = "foundation"
    STRUCTURE = "structure"
    ROOFING = "roofing"
    MEP = "MEP"
    FINISHING = "finishing"
