"""Construction rate tables.

Rates are per square foot of plinth area in Nepalese rupees, based on
2024 Nepalese construction market rates.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from buildcalc.models.enums import ConstructionPhase, CostCategory, QualityTier

if TYPE_CHECKING:
    from collections.abc import Mapping

CURRENCY = "NPR"
AREA_UNIT = "per sq ft"

# Category -> line item -> NPR per sq ft
CONSTRUCTION_RATES: Mapping[CostCategory, Mapping[str, int]] = MappingProxyType({
    CostCategory.MATERIALS: MappingProxyType({
        "cement": 180,
        "steel": 220,
        "bricks": 120,
        "sand": 45,
        "aggregate": 55,
        "tiles": 180,
        "finishing": 250,  # paint, electrical and plumbing fixtures
    }),
    CostCategory.LABOR: MappingProxyType({
        "masonry": 150,
        "carpentry": 120,
        "electrical": 80,
        "plumbing": 70,
        "painting": 40,
        "finishing": 90,
    }),
    CostCategory.OTHER: MappingProxyType({
        "design": 50,
        "supervision": 40,
        "permits": 25,
        "contingency": 100,
    }),
})

# Applied to materials and labor only; "other" costs do not scale with finish.
QUALITY_MULTIPLIERS: Mapping[QualityTier, float] = MappingProxyType({
    QualityTier.BASIC: 0.8,
    QualityTier.STANDARD: 1.0,
    QualityTier.PREMIUM: 1.3,
    QualityTier.LUXURY: 1.8,
})

QUALITY_SCALED_CATEGORIES: frozenset[CostCategory] = frozenset(
    {CostCategory.MATERIALS, CostCategory.LABOR}
)

PHASE_RATES: Mapping[ConstructionPhase, int] = MappingProxyType({
    ConstructionPhase.FOUNDATION: 400,
    ConstructionPhase.STRUCTURE: 600,
    ConstructionPhase.ROOFING: 300,
    ConstructionPhase.MASONRY: 350,
    ConstructionPhase.FINISHING: 450,
})

# Published headline rates shown on the calculator page
BASE_RATES: Mapping[QualityTier, int] = MappingProxyType({
    QualityTier.BASIC: 1800,
    QualityTier.STANDARD: 2200,
    QualityTier.PREMIUM: 2800,
    QualityTier.LUXURY: 3500,
})
BASE_RATES_LAST_UPDATED = "2024-07-26"
BASE_RATES_NOTE = "Rates may vary based on location, materials, and market conditions"

# Rough standard-construction band used for the timeline's cost summary
ROUGH_COST_RATES: Mapping[str, int] = MappingProxyType({
    "min": 2000,
    "expected": 2200,
    "max": 2500,
})

PIE_SLICE_STYLES: Mapping[CostCategory, tuple[str, str]] = MappingProxyType({
    CostCategory.MATERIALS: ("Materials", "#8884d8"),
    CostCategory.LABOR: ("Labor", "#82ca9d"),
    CostCategory.OTHER: ("Design & Others", "#ffc658"),
})
