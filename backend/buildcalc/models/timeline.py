"""Timeline (Gantt chart) output models."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from buildcalc.models.enums import PhaseCategory, ProjectType


class ScheduledPhase(BaseModel):
    """A phase placed on the calendar."""

    id: int
    name: str
    description: str
    start: date
    end: date
    duration: int
    progress: int = 0
    category: PhaseCategory
    dependencies: list[int]
    resources: list[str]
    milestones: list[str]
    color: str


class ProjectInfo(BaseModel):
    """Headline facts about a scheduled project.

    ``working_days`` is the computed total project duration before it is
    split across phases; ``total_duration`` is the calendar span (or, for
    the renovation and villa variants, the sum of adjusted phase durations).
    """

    name: str
    plinth_area: float
    project_type: ProjectType
    total_duration: int
    working_days: int
    start_date: date
    end_date: date
    status: str = "planned"


class CostBand(BaseModel):
    min: int
    max: int


class ProjectCostEstimate(BaseModel):
    """Rough whole-project cost shown next to the timeline."""

    estimated: int
    range: CostBand
    currency: str = "NPR"


class ResourceUsage(BaseModel):
    resource: str
    utilization_count: int
    utilization_percentage: int


class TimelineSummary(BaseModel):
    total_phases: int
    estimated_cost: ProjectCostEstimate
    critical_path: list[int]
    resource_utilization: list[ResourceUsage]


class Timeline(BaseModel):
    """Complete Gantt chart data for a project."""

    project_info: ProjectInfo
    phases: list[ScheduledPhase]
    summary: TimelineSummary
    generated_at: datetime = Field(default_factory=datetime.now)
