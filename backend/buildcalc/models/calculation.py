"""Request and response models for a full calculator run."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from buildcalc.models.enums import ProjectType, QualityTier
from buildcalc.models.estimate import CostEstimate, QualityComparison  # noqa: TCH001
from buildcalc.models.timeline import Timeline  # noqa: TCH001

# Whole and half floors up to five
VALID_FLOORS: tuple[float, ...] = (1, 1.5, 2, 2.5, 3, 3.5, 4, 4.5, 5)


class CalculationRequest(BaseModel):
    """Input submitted by the website's cost calculator form.

    The configurable upper bound on ``plinth_area`` is enforced by the API
    layer, which holds the application settings.
    """

    plinth_area: float = Field(gt=0)
    floors: float = 1
    quality: QualityTier = QualityTier.STANDARD
    project_type: ProjectType = ProjectType.RESIDENTIAL

    @field_validator("floors")
    @classmethod
    def floors_must_be_whole_or_half(cls, v: float) -> float:
        if v not in VALID_FLOORS:
            allowed = ", ".join(f"{f:g}" for f in VALID_FLOORS)
            msg = f"Invalid floor number. Allowed values: {allowed}"
            raise ValueError(msg)
        return v

    @property
    def total_area(self) -> float:
        """Built-up area across all floors."""
        return self.plinth_area * self.floors


class CompareOptionsRequest(BaseModel):
    """Several candidate plinth areas to price side by side."""

    areas: list[float]
    quality: QualityTier = QualityTier.STANDARD


class RequestDetails(BaseModel):
    plinth_area: float
    floors: float
    total_area: float
    quality: QualityTier
    project_type: ProjectType
    calculated_at: datetime = Field(default_factory=datetime.now)


class CalculationResult(BaseModel):
    """Everything the calculator page renders for one submission."""

    cost_estimation: CostEstimate
    timeline: Timeline
    quality_comparison: QualityComparison
    request_details: RequestDetails
