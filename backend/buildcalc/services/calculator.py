"""Calculator service: runs the estimator and timeline generator for one request."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from buildcalc.exceptions import BuildCalcError, CalculationError
from buildcalc.models.calculation import CalculationResult, RequestDetails

if TYPE_CHECKING:
    from buildcalc.estimator import CostEstimator
    from buildcalc.models.calculation import CalculationRequest
    from buildcalc.timeline import TimelineGenerator

logger = logging.getLogger(__name__)


class Calculator:
    """Combines a cost estimate, a timeline and a quality comparison.

    Costs and durations are computed on the total built-up area
    (plinth area x floors); the floor count additionally stretches the
    schedule through the timeline's floor multiplier.
    """

    def __init__(
        self,
        estimator: CostEstimator,
        timeline_generator: TimelineGenerator,
    ) -> None:
        self._estimator = estimator
        self._timeline_generator = timeline_generator

    @property
    def estimator(self) -> CostEstimator:
        return self._estimator

    @property
    def timeline_generator(self) -> TimelineGenerator:
        return self._timeline_generator

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """Run a full calculation.

        Raises
        ------
        InvalidArgumentError
            If the request carries an unusable area.
        CalculationError
            If anything else goes wrong while computing.
        """
        start = time.monotonic()
        total_area = request.total_area

        logger.info(
            "Cost calculation started: plinth_area=%s floors=%s quality=%s project_type=%s",
            request.plinth_area,
            request.floors,
            request.quality,
            request.project_type,
        )

        try:
            cost_estimation = self._estimator.estimate(total_area, request.quality)
            timeline = self._timeline_generator.generate(
                total_area,
                request.project_type,
                request.floors,
            )
            quality_comparison = self._estimator.compare_quality_tiers(total_area)
        except BuildCalcError:
            raise
        except Exception as exc:
            msg = f"Cost calculation failed: {exc}"
            raise CalculationError(msg) from exc

        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "Cost calculation completed in %.1f ms: total_area=%s total_cost=%d",
            elapsed_ms,
            total_area,
            cost_estimation.total_cost,
        )

        return CalculationResult(
            cost_estimation=cost_estimation,
            timeline=timeline,
            quality_comparison=quality_comparison,
            request_details=RequestDetails(
                plinth_area=request.plinth_area,
                floors=request.floors,
                total_area=total_area,
                quality=request.quality,
                project_type=request.project_type,
            ),
        )
