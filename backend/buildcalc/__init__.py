"""BuildCalc construction cost and timeline calculator.

Usage::

    from buildcalc import CostEstimator, QualityTier, TimelineGenerator

    estimate = CostEstimator().estimate(1500, QualityTier.PREMIUM)
    timeline = TimelineGenerator().generate(1500, "villa", floors=2)
"""

from buildcalc.estimator import CostEstimator
from buildcalc.exceptions import (
    BuildCalcError,
    CalculationError,
    InvalidArgumentError,
    InvalidPhaseError,
)
from buildcalc.factory import create_default_calculator
from buildcalc.models.calculation import (
    CalculationRequest,
    CalculationResult,
)
from buildcalc.models.enums import (
    ConstructionPhase,
    ProjectType,
    QualityTier,
)
from buildcalc.models.estimate import (
    CostEstimate,
    PhaseCost,
    QualityComparison,
)
from buildcalc.models.timeline import ScheduledPhase, Timeline
from buildcalc.services.calculator import Calculator
from buildcalc.timeline import TimelineGenerator

__version__ = "0.1.0"

__all__ = [
    "BuildCalcError",
    "CalculationError",
    "CalculationRequest",
    "CalculationResult",
    "Calculator",
    "ConstructionPhase",
    "CostEstimate",
    "CostEstimator",
    "InvalidArgumentError",
    "InvalidPhaseError",
    "PhaseCost",
    "ProjectType",
    "QualityComparison",
    "QualityTier",
    "ScheduledPhase",
    "Timeline",
    "TimelineGenerator",
    "__version__",
    "create_default_calculator",
]
