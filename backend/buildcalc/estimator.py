"""Cost estimator for the BuildCalc calculator.

The CostEstimator implements a plinth-area rate methodology:

1. **Line items**: Every rate-table line is priced as rate x area, scaled by
   the quality multiplier for materials and labor (never for "other"), and
   rounded on its own.
2. **Category totals**: Materials, labor and other totals are sums of the
   rounded lines; the grand total is the sum of the category totals.
3. **Rate per sq ft**: Grand total divided by area, rounded.
4. **Pie chart**: Each category's share of the total, rounded to a whole
   percent independently (so the three values may sum to 99 or 101).

All rounding is half-up, matching what the website has always displayed.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from buildcalc.data.rates import (
    CONSTRUCTION_RATES,
    CURRENCY,
    PHASE_RATES,
    PIE_SLICE_STYLES,
    QUALITY_MULTIPLIERS,
    QUALITY_SCALED_CATEGORIES,
)
from buildcalc.exceptions import InvalidArgumentError, InvalidPhaseError
from buildcalc.models.enums import ConstructionPhase, CostCategory, QualityTier
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

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_MAX_COMPARE_OPTIONS = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def validate_area(area: float | None) -> float:
    """Return ``area`` as a float or raise InvalidArgumentError.

    Only positivity is checked here; upper limits belong to the request layer.
    """
    if area is None:
        msg = "Valid plinth area is required"
        raise InvalidArgumentError(msg)
    try:
        value = float(area)
    except (TypeError, ValueError) as exc:
        msg = f"Valid plinth area is required, got {area!r}"
        raise InvalidArgumentError(msg) from exc
    if not math.isfinite(value) or value <= 0:
        msg = f"Valid plinth area is required, got {area!r}"
        raise InvalidArgumentError(msg)
    return value


def _coerce_quality(quality: QualityTier | str) -> QualityTier:
    try:
        return QualityTier(quality)
    except ValueError as exc:
        valid = ", ".join(q.value for q in QualityTier)
        msg = f"Quality must be one of: {valid}"
        raise InvalidArgumentError(msg) from exc


class CostEstimator:
    """Converts a plinth area and quality tier into an itemised CostEstimate.

    Args:
        max_compare_options: Upper limit on the number of areas accepted by
            ``compare_areas``.

    Example::

        estimator = CostEstimator()
        estimate = estimator.estimate(1500, QualityTier.PREMIUM)
        print(estimate.total_cost, estimate.rate_per_sqft)
    """

    def __init__(self, max_compare_options: int = DEFAULT_MAX_COMPARE_OPTIONS) -> None:
        self._max_compare_options = max_compare_options

    def estimate(
        self,
        area: float,
        quality: QualityTier | str = QualityTier.STANDARD,
    ) -> CostEstimate:
        """Produce an itemised cost estimate.

        Args:
            area: Plinth area in square feet. Must be positive.
            quality: Finish quality tier.

        Returns:
            A CostEstimate with the total, the rate per sq ft, the three-way
            breakdown and pie-chart data.

        Raises:
            InvalidArgumentError: If the area is missing or not positive, or
                the quality tier is unknown.
        """
        plinth_area = validate_area(area)
        tier = _coerce_quality(quality)
        multiplier = QUALITY_MULTIPLIERS[tier]

        # 1. Price each line item (rounded individually)
        items: dict[CostCategory, dict[str, int]] = {}
        for category, rates in CONSTRUCTION_RATES.items():
            factor = multiplier if category in QUALITY_SCALED_CATEGORIES else 1.0
            items[category] = {
                name: round_half_up(rate * plinth_area * factor)
                for name, rate in rates.items()
            }

        # 2. Sum of rounded parts, not rounded sum
        totals = {category: sum(lines.values()) for category, lines in items.items()}
        grand_total = sum(totals.values())

        # 3. Pie chart
        pie_chart_data = [
            PieSlice(
                name=PIE_SLICE_STYLES[category][0],
                value=round_half_up(totals[category] / grand_total * 100),
                amount=totals[category],
                color=PIE_SLICE_STYLES[category][1],
            )
            for category in (CostCategory.MATERIALS, CostCategory.LABOR, CostCategory.OTHER)
        ]

        materials_total = totals[CostCategory.MATERIALS]
        detailed = [
            LineItemDetail(
                item=name.capitalize(),
                cost=cost,
                percentage=round_half_up(cost / materials_total * 100),
            )
            for name, cost in items[CostCategory.MATERIALS].items()
        ]

        breakdown = CostBreakdown(
            materials=CategoryBreakdown(
                total=materials_total,
                items=items[CostCategory.MATERIALS],
                detailed=detailed,
            ),
            labor=CategoryBreakdown(
                total=totals[CostCategory.LABOR],
                items=items[CostCategory.LABOR],
            ),
            other=CategoryBreakdown(
                total=totals[CostCategory.OTHER],
                items=items[CostCategory.OTHER],
            ),
        )

        logger.debug(
            "Estimated %.1f sq ft at %s quality: total=%d",
            plinth_area,
            tier,
            grand_total,
        )

        return CostEstimate(
            plinth_area=plinth_area,
            quality=tier,
            total_cost=grand_total,
            rate_per_sqft=round_half_up(grand_total / plinth_area),
            breakdown=breakdown,
            pie_chart_data=pie_chart_data,
            currency=CURRENCY,
        )

    def compare_quality_tiers(self, area: float) -> QualityComparison:
        """Estimate the same area at every quality tier, cheapest first."""
        plinth_area = validate_area(area)
        estimates: dict[QualityTier, QualitySummary] = {}
        for tier in QUALITY_MULTIPLIERS:
            est = self.estimate(plinth_area, tier)
            estimates[tier] = QualitySummary(
                total_cost=est.total_cost,
                rate_per_sqft=est.rate_per_sqft,
                quality=tier.value.capitalize(),
            )
        return QualityComparison(
            plinth_area=plinth_area,
            estimates=estimates,
            currency=CURRENCY,
        )

    def phase_cost(self, area: float, phase: ConstructionPhase | str) -> PhaseCost:
        """Cost of a single construction phase at its flat per-sq-ft rate.

        Raises:
            InvalidArgumentError: If the area is missing or not positive.
            InvalidPhaseError: If ``phase`` is not one of the rated phases.
        """
        plinth_area = validate_area(area)
        try:
            known_phase = ConstructionPhase(phase)
        except ValueError as exc:
            valid = ", ".join(p.value for p in ConstructionPhase)
            msg = f"Invalid construction phase '{phase}'. Valid phases: {valid}"
            raise InvalidPhaseError(msg) from exc

        rate = PHASE_RATES[known_phase]
        return PhaseCost(
            phase=known_phase.value.capitalize(),
            cost=round_half_up(rate * plinth_area),
            rate_per_sqft=rate,
            plinth_area=plinth_area,
            currency=CURRENCY,
        )

    def compare_areas(
        self,
        areas: Sequence[float],
        quality: QualityTier | str = QualityTier.STANDARD,
    ) -> AreaComparison:
        """Price several candidate areas at one quality tier.

        Raises:
            InvalidArgumentError: If more than ``max_compare_options`` areas are
                given, or any of them is not a positive number.
        """
        if len(areas) > self._max_compare_options:
            msg = (
                f"Cannot compare more than {self._max_compare_options} "
                f"options at once"
            )
            raise InvalidArgumentError(msg)

        tier = _coerce_quality(quality)
        comparisons: list[AreaOption] = []
        for area in areas:
            est = self.estimate(area, tier)
            comparisons.append(AreaOption(
                area=est.plinth_area,
                total_cost=est.total_cost,
                rate_per_sqft=est.rate_per_sqft,
                breakdown={
                    "materials": est.breakdown.materials.total,
                    "labor": est.breakdown.labor.total,
                    "other": est.breakdown.other.total,
                },
            ))

        return AreaComparison(quality=tier, comparisons=comparisons, currency=CURRENCY)
