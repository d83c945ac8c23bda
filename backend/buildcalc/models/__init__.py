"""Domain models for the BuildCalc calculator."""

from buildcalc.models.calculation import (
    CalculationRequest,
    CalculationResult,
    CompareOptionsRequest,
    RequestDetails,
)
from buildcalc.models.enums import (
    ConstructionPhase,
    CostCategory,
    PhaseCategory,
    ProjectType,
    QualityTier,
)
from buildcalc.models.estimate import (
    AreaComparison,
    AreaOption,
    CategoryBreakdown,
    CostBreakdown,
    CostEstimate,
    LineItemDetail,
    PhaseCost,
    PieSlice,
    QualityComparison,
    QualitySummary,
)
from buildcalc.models.timeline import (
    CostBand,
    ProjectCostEstimate,
    ProjectInfo,
    ResourceUsage,
    ScheduledPhase,
    Timeline,
    TimelineSummary,
)

__all__ = [
    "AreaComparison",
    "AreaOption",
    "CalculationRequest",
    "CalculationResult",
    "CategoryBreakdown",
    "CompareOptionsRequest",
    "ConstructionPhase",
    "CostBand",
    "CostBreakdown",
    "CostCategory",
    "CostEstimate",
    "LineItemDetail",
    "PhaseCategory",
    "PhaseCost",
    "PieSlice",
    "ProjectCostEstimate",
    "ProjectInfo",
    "ProjectType",
    "QualityComparison",
    "QualitySummary",
    "QualityTier",
    "RequestDetails",
    "ResourceUsage",
    "ScheduledPhase",
    "Timeline",
    "TimelineSummary",
]
