"""Factory functions for creating pre-configured calculator components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcalc.config import get_settings
from buildcalc.estimator import CostEstimator
from buildcalc.services.calculator import Calculator
from buildcalc.timeline import TimelineGenerator

if TYPE_CHECKING:
    from buildcalc.config import Settings


def create_default_calculator(settings: Settings | None = None) -> Calculator:
    """Create a Calculator wired up from application settings.

    This is the recommended way to create a Calculator for typical usage.
    It reads the comparison limit and the timeline overlap factor from
    ``settings`` (the environment by default) so callers don't need to
    understand the internal wiring.

    Example::

        from buildcalc import CalculationRequest, create_default_calculator

        calculator = create_default_calculator()
        result = calculator.calculate(CalculationRequest(plinth_area=1500))
    """
    settings = settings or get_settings()
    estimator = CostEstimator(max_compare_options=settings.max_compare_options)
    timeline_generator = TimelineGenerator(
        overlap_factor=settings.timeline_overlap_factor,
    )
    return Calculator(estimator, timeline_generator)
