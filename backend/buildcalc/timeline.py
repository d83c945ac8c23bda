"""Gantt-style construction timeline generator.

A project's total working days are derived from its area, type and floor
count, then split across the fixed ten-phase list by percentage. Phases are
laid onto the calendar one after another, counting only Monday to Friday as
working days. A phase that depends on earlier work lets the next phase start
once ``overlap_factor`` (0.7 by default) of its duration has elapsed, which
compresses the schedule by overlapping neighbouring phases.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

from buildcalc.data.phases import (
    BASE_DAYS_PER_SQFT,
    DEFAULT_DAYS_PER_SQFT,
    DEFAULT_MILESTONES,
    DEFAULT_PHASE_COLOR,
    DEFAULT_RESOURCES,
    FLOOR_MULTIPLIER_STEPS,
    MAX_FLOOR_MULTIPLIER,
    PHASE_COLORS,
    PHASE_DEFINITIONS,
    PHASE_MILESTONES,
    PHASE_RESOURCES,
    RENOVATION_SKIPPED_PHASES,
)
from buildcalc.data.rates import CURRENCY, ROUGH_COST_RATES
from buildcalc.estimator import round_half_up, validate_area
from buildcalc.exceptions import InvalidArgumentError
from buildcalc.models.enums import PhaseCategory, ProjectType
from buildcalc.models.timeline import (
    CostBand,
    ProjectCostEstimate,
    ProjectInfo,
    ResourceUsage,
    ScheduledPhase,
    Timeline,
    TimelineSummary,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from buildcalc.data.phases import PhaseDefinition

logger = logging.getLogger(__name__)

DEFAULT_OVERLAP_FACTOR = 0.7

_RENOVATION_DURATION_FACTOR = 0.6
_VILLA_DURATION_FACTOR = 1.3
_VILLA_DESCRIPTION_SUFFIX = " (Premium Quality)"


def _coerce_project_type(project_type: ProjectType | str) -> ProjectType:
    try:
        return ProjectType(project_type)
    except ValueError as exc:
        valid = ", ".join(t.value for t in ProjectType)
        msg = f"Project type must be one of: {valid}"
        raise InvalidArgumentError(msg) from exc


def add_working_days(start: datetime, working_days: int) -> datetime:
    """Step forward from ``start`` until ``working_days`` weekdays have been counted.

    The start day itself is never counted; the returned day is always a
    weekday when ``working_days`` is at least one.
    """
    end = start
    counted = 0
    while counted < working_days:
        end += timedelta(days=1)
        if end.weekday() < 5:
            counted += 1
    return end


class TimelineGenerator:
    """Builds construction timelines from the fixed phase list.

    Args:
        overlap_factor: Fraction of a dependent phase's duration after which
            the following phase may start.
        phases: Phase definitions to schedule, in order. Defaults to the
            standard ten-phase list.
    """

    def __init__(
        self,
        overlap_factor: float = DEFAULT_OVERLAP_FACTOR,
        phases: Sequence[PhaseDefinition] = PHASE_DEFINITIONS,
    ) -> None:
        self._overlap_factor = overlap_factor
        self._phases = tuple(phases)

    @property
    def overlap_factor(self) -> float:
        return self._overlap_factor

    @staticmethod
    def floor_multiplier(floors: float) -> float:
        """Schedule multiplier for the number of floors (coarse step function)."""
        for max_floors, multiplier in FLOOR_MULTIPLIER_STEPS:
            if floors <= max_floors:
                return multiplier
        return MAX_FLOOR_MULTIPLIER

    def generate(
        self,
        area: float,
        project_type: ProjectType | str = ProjectType.RESIDENTIAL,
        floors: float = 1,
        start_date: date | None = None,
    ) -> Timeline:
        """Generate the timeline for a project type.

        Renovation and villa projects are post-processed versions of the
        residential schedule; commercial projects use a slower base pace.

        Raises:
            InvalidArgumentError: If the area is missing or not positive, or
                the project type is unknown, or the schedule would run past
                the last representable date.
        """
        kind = _coerce_project_type(project_type)
        multiplier = self.floor_multiplier(floors)

        if kind == ProjectType.RENOVATION:
            return self.renovation_timeline(area, multiplier, start_date)
        if kind == ProjectType.VILLA:
            return self.villa_timeline(area, multiplier, start_date)
        if kind == ProjectType.COMMERCIAL:
            return self.commercial_timeline(area, multiplier, start_date)
        return self.build_timeline(area, ProjectType.RESIDENTIAL, multiplier, start_date)

    def build_timeline(
        self,
        area: float,
        project_type: ProjectType | str = ProjectType.RESIDENTIAL,
        floor_multiplier: float = 1.0,
        start_date: date | None = None,
    ) -> Timeline:
        """Lay the phase list onto the calendar starting at ``start_date`` (default today)."""
        plinth_area = validate_area(area)
        kind = _coerce_project_type(project_type)

        days_per_sqft = BASE_DAYS_PER_SQFT.get(kind, DEFAULT_DAYS_PER_SQFT)
        total_days = math.ceil(plinth_area * days_per_sqft * floor_multiplier)

        cursor = datetime.combine(start_date or date.today(), time.min)
        scheduled: list[ScheduledPhase] = []

        for index, phase in enumerate(self._phases):
            duration = math.ceil(phase.percentage / 100 * total_days)
            start = cursor
            try:
                end = add_working_days(start, duration)
                if phase.dependencies and index > 0:
                    cursor = start + timedelta(days=duration * self._overlap_factor)
                else:
                    cursor = end
            except OverflowError as exc:
                msg = (
                    f"Schedule for {plinth_area:,.0f} sq ft runs past the last "
                    f"representable date"
                )
                raise InvalidArgumentError(msg) from exc

            scheduled.append(ScheduledPhase(
                id=phase.id,
                name=phase.name,
                description=phase.description,
                start=start.date(),
                end=end.date(),
                duration=duration,
                category=phase.category,
                dependencies=list(phase.dependencies),
                resources=self.get_phase_resources(phase.category),
                milestones=self.get_phase_milestones(phase.name),
                color=self.get_phase_color(phase.category),
            ))

        project_start = scheduled[0].start
        project_end = scheduled[-1].end

        logger.debug(
            "Scheduled %d phases for %.1f sq ft %s project: %d working days",
            len(scheduled),
            plinth_area,
            kind,
            total_days,
        )

        return Timeline(
            project_info=ProjectInfo(
                name=f"{kind.value.capitalize()} Construction Project",
                plinth_area=plinth_area,
                project_type=kind,
                total_duration=(project_end - project_start).days,
                working_days=total_days,
                start_date=project_start,
                end_date=project_end,
            ),
            phases=scheduled,
            summary=self._summarize(plinth_area, scheduled),
        )

    def commercial_timeline(
        self,
        area: float,
        floor_multiplier: float = 1.0,
        start_date: date | None = None,
    ) -> Timeline:
        return self.build_timeline(area, ProjectType.COMMERCIAL, floor_multiplier, start_date)

    def renovation_timeline(
        self,
        area: float,
        floor_multiplier: float = 1.0,
        start_date: date | None = None,
    ) -> Timeline:
        """Residential schedule without site prep and foundation, at 60% durations.

        Phase dates are those of the underlying residential schedule.
        """
        base = self.build_timeline(area, ProjectType.RESIDENTIAL, floor_multiplier, start_date)

        phases = [
            phase.model_copy(update={
                "duration": math.ceil(phase.duration * _RENOVATION_DURATION_FACTOR),
                "name": phase.name.replace("Construction", "Renovation"),
            })
            for phase in base.phases
            if phase.name not in RENOVATION_SKIPPED_PHASES
        ]

        return self._with_adjusted_phases(
            base,
            phases,
            name="Renovation Project",
            project_type=ProjectType.RENOVATION,
        )

    def villa_timeline(
        self,
        area: float,
        floor_multiplier: float = 1.0,
        start_date: date | None = None,
    ) -> Timeline:
        """Residential schedule with every phase 30% longer for premium detailing."""
        base = self.build_timeline(area, ProjectType.RESIDENTIAL, floor_multiplier, start_date)

        phases = [
            phase.model_copy(update={
                "duration": math.ceil(phase.duration * _VILLA_DURATION_FACTOR),
                "description": phase.description + _VILLA_DESCRIPTION_SUFFIX,
            })
            for phase in base.phases
        ]

        return self._with_adjusted_phases(
            base,
            phases,
            name="Villa Construction Project",
            project_type=ProjectType.VILLA,
        )

    def _with_adjusted_phases(
        self,
        base: Timeline,
        phases: list[ScheduledPhase],
        name: str,
        project_type: ProjectType,
    ) -> Timeline:
        # Summary and project_type describe the adjusted phases, not the base schedule
        project_info = base.project_info.model_copy(update={
            "name": name,
            "project_type": project_type,
            "total_duration": sum(p.duration for p in phases),
        })
        return Timeline(
            project_info=project_info,
            phases=phases,
            summary=self._summarize(base.project_info.plinth_area, phases),
            generated_at=base.generated_at,
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @staticmethod
    def get_phase_resources(category: PhaseCategory | str) -> list[str]:
        return list(PHASE_RESOURCES.get(category, DEFAULT_RESOURCES))

    @staticmethod
    def get_phase_milestones(phase_name: str) -> list[str]:
        return list(PHASE_MILESTONES.get(phase_name, DEFAULT_MILESTONES))

    @staticmethod
    def get_phase_color(category: PhaseCategory | str) -> str:
        return PHASE_COLORS.get(category, DEFAULT_PHASE_COLOR)

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def _summarize(
        self,
        plinth_area: float,
        phases: list[ScheduledPhase],
    ) -> TimelineSummary:
        return TimelineSummary(
            total_phases=len(phases),
            estimated_cost=self.estimate_project_cost(plinth_area),
            critical_path=self.get_critical_path(phases),
            resource_utilization=self.get_resource_utilization(phases),
        )

    @staticmethod
    def estimate_project_cost(plinth_area: float) -> ProjectCostEstimate:
        """Rough whole-project cost from the standard-construction rate band."""
        return ProjectCostEstimate(
            estimated=round_half_up(plinth_area * ROUGH_COST_RATES["expected"]),
            range=CostBand(
                min=round_half_up(plinth_area * ROUGH_COST_RATES["min"]),
                max=round_half_up(plinth_area * ROUGH_COST_RATES["max"]),
            ),
            currency=CURRENCY,
        )

    @staticmethod
    def get_critical_path(phases: list[ScheduledPhase]) -> list[int]:
        """Ids of the phases on the sequential chain (at most one dependency)."""
        return [p.id for p in phases if len(p.dependencies) <= 1]

    @staticmethod
    def get_resource_utilization(phases: list[ScheduledPhase]) -> list[ResourceUsage]:
        """How many phases use each resource, busiest first."""
        counts: Counter[str] = Counter()
        for phase in phases:
            counts.update(phase.resources)

        # Counter keeps first-seen order, and sorted() is stable for ties
        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        return [
            ResourceUsage(
                resource=resource,
                utilization_count=count,
                utilization_percentage=round_half_up(count / len(phases) * 100),
            )
            for resource, count in ranked
        ]
