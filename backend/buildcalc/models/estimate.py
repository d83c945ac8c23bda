"""Cost estimate output models for the BuildCalc cost estimator."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from buildcalc.models.enums import QualityTier


class LineItemDetail(BaseModel):
    """One material line with its share of the materials total."""

    item: str
    cost: int
    percentage: int


class CategoryBreakdown(BaseModel):
    """Rounded line-item costs of one rate-table category and their sum."""

    total: int
    items: dict[str, int]
    detailed: list[LineItemDetail] | None = None


class CostBreakdown(BaseModel):
    """Materials / labor / other split of an estimate."""

    materials: CategoryBreakdown
    labor: CategoryBreakdown
    other: CategoryBreakdown


class PieSlice(BaseModel):
    """A single pie-chart slice, ``value`` is a whole-number percentage."""

    name: str
    value: int
    amount: int
    color: str


class CostEstimate(BaseModel):
    """Complete cost estimate for a plinth area at one quality tier.

    ``total_cost`` is the sum of the three category totals, each of which
    is itself a sum of individually rounded line items. The pie-chart
    percentages are rounded independently and need not add up to 100.
    """

    plinth_area: float
    quality: QualityTier
    total_cost: int
    rate_per_sqft: int
    breakdown: CostBreakdown
    pie_chart_data: list[PieSlice]
    currency: str = "NPR"
    generated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def category_totals_match_total(self) -> CostEstimate:
        category_sum = (
            self.breakdown.materials.total
            + self.breakdown.labor.total
            + self.breakdown.other.total
        )
        if category_sum != self.total_cost:
            msg = (
                f"Category totals must add up to total_cost, "
                f"got {category_sum} != {self.total_cost}"
            )
            raise ValueError(msg)
        return self

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from buildcalc.formatting import format_area, format_currency, format_rate

        return {
            "plinth_area_formatted": format_area(self.plinth_area),
            "quality": self.quality.value.capitalize(),
            "total_cost_formatted": format_currency(self.total_cost),
            "rate_formatted": format_rate(self.rate_per_sqft),
            "materials_formatted": format_currency(self.breakdown.materials.total),
            "labor_formatted": format_currency(self.breakdown.labor.total),
            "other_formatted": format_currency(self.breakdown.other.total),
            "pie_chart": [
                {"name": s.name, "percent": f"{s.value}%"}
                for s in self.pie_chart_data
            ],
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }


class QualitySummary(BaseModel):
    """Headline numbers of one tier in a quality comparison."""

    total_cost: int
    rate_per_sqft: int
    quality: str


class QualityComparison(BaseModel):
    """Estimates for the same area at every quality tier."""

    plinth_area: float
    estimates: dict[QualityTier, QualitySummary]
    currency: str = "NPR"


class PhaseCost(BaseModel):
    """Flat-rate cost of a single construction phase."""

    phase: str
    cost: int
    rate_per_sqft: int
    plinth_area: float
    currency: str = "NPR"


class AreaOption(BaseModel):
    """One row of an area-by-area comparison."""

    area: float
    total_cost: int
    rate_per_sqft: int
    breakdown: dict[str, int]


class AreaComparison(BaseModel):
    """Several candidate areas priced at the same quality tier."""

    quality: QualityTier
    comparisons: list[AreaOption]
    currency: str = "NPR"
