"""Construction phase definitions and their lookup tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from buildcalc.models.enums import PhaseCategory, ProjectType

if TYPE_CHECKING:
    from collections.abc import Mapping


class PhaseDefinition(BaseModel):
    """A construction phase and its fixed share of the project duration."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    percentage: int
    dependencies: tuple[int, ...]
    category: PhaseCategory


PHASE_DEFINITIONS: tuple[PhaseDefinition, ...] = (
    PhaseDefinition(
        id=1,
        name="Site Preparation & Excavation",
        description="Land clearing, excavation, and site setup",
        percentage=8,
        dependencies=(),
        category=PhaseCategory.FOUNDATION,
    ),
    PhaseDefinition(
        id=2,
        name="Foundation Work",
        description="Foundation laying, concrete work, and curing",
        percentage=15,
        dependencies=(1,),
        category=PhaseCategory.FOUNDATION,
    ),
    PhaseDefinition(
        id=3,
        name="Plinth & Column Construction",
        description="Plinth beam and column construction",
        percentage=12,
        dependencies=(2,),
        category=PhaseCategory.STRUCTURE,
    ),
    PhaseDefinition(
        id=4,
        name="Wall Construction",
        description="Brick/block masonry and structural walls",
        percentage=18,
        dependencies=(3,),
        category=PhaseCategory.STRUCTURE,
    ),
    PhaseDefinition(
        id=5,
        name="Roof Structure",
        description="Roof beam, slab, and waterproofing",
        percentage=12,
        dependencies=(4,),
        category=PhaseCategory.ROOFING,
    ),
    PhaseDefinition(
        id=6,
        name="Electrical & Plumbing Rough-in",
        description="Electrical wiring and plumbing installation",
        percentage=10,
        dependencies=(4,),
        category=PhaseCategory.MEP,
    ),
    PhaseDefinition(
        id=7,
        name="Plastering & Rendering",
        description="Internal and external plastering",
        percentage=8,
        dependencies=(5, 6),
        category=PhaseCategory.FINISHING,
    ),
    PhaseDefinition(
        id=8,
        name="Flooring & Tiling",
        description="Floor installation and bathroom tiling",
        percentage=7,
        dependencies=(7,),
        category=PhaseCategory.FINISHING,
    ),
    PhaseDefinition(
        id=9,
        name="Door & Window Installation",
        description="Installing doors, windows, and fixtures",
        percentage=5,
        dependencies=(7,),
        category=PhaseCategory.FINISHING,
    ),
    PhaseDefinition(
        id=10,
        name="Painting & Final Finishing",
        description="Interior/exterior painting and final touches",
        percentage=5,
        dependencies=(8, 9),
        category=PhaseCategory.FINISHING,
    ),
)

# Dropped from renovation schedules
RENOVATION_SKIPPED_PHASES: frozenset[str] = frozenset(
    {"Site Preparation & Excavation", "Foundation Work"}
)

# Days of work per sq ft of area, before the floor multiplier
BASE_DAYS_PER_SQFT: Mapping[ProjectType, float] = MappingProxyType({
    ProjectType.COMMERCIAL: 0.8,
})
DEFAULT_DAYS_PER_SQFT = 0.6

# (max floors, multiplier); anything above the last step gets the top value
FLOOR_MULTIPLIER_STEPS: tuple[tuple[float, float], ...] = (
    (1, 1.0),
    (2, 1.3),
    (3, 1.6),
    (4, 1.8),
)
MAX_FLOOR_MULTIPLIER = 2.0

PHASE_RESOURCES: Mapping[PhaseCategory, tuple[str, ...]] = MappingProxyType({
    PhaseCategory.FOUNDATION: ("Excavator", "Concrete Mixer", "Mason", "Helper"),
    PhaseCategory.STRUCTURE: ("Crane", "Mason", "Steel Fixer", "Carpenter"),
    PhaseCategory.ROOFING: ("Crane", "Carpenter", "Waterproofing Specialist"),
    PhaseCategory.MEP: ("Electrician", "Plumber", "Helper"),
    PhaseCategory.FINISHING: ("Painter", "Tiler", "Carpenter", "Helper"),
})
DEFAULT_RESOURCES: tuple[str, ...] = ("General Worker",)

PHASE_MILESTONES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Site Preparation & Excavation": ("Site clearance complete", "Excavation complete"),
    "Foundation Work": ("Foundation laid", "Concrete cured"),
    "Plinth & Column Construction": ("Plinth complete", "Columns erected"),
    "Wall Construction": ("Wall masonry complete",),
    "Roof Structure": ("Roof slab complete", "Waterproofing done"),
    "Electrical & Plumbing Rough-in": ("Wiring complete", "Plumbing rough-in done"),
    "Plastering & Rendering": ("Internal plastering done", "External rendering complete"),
    "Flooring & Tiling": ("Flooring complete", "Bathroom tiling done"),
    "Door & Window Installation": ("All fixtures installed",),
    "Painting & Final Finishing": ("Painting complete", "Final inspection"),
})
DEFAULT_MILESTONES: tuple[str, ...] = ("Phase complete",)

PHASE_COLORS: Mapping[PhaseCategory, str] = MappingProxyType({
    PhaseCategory.FOUNDATION: "#8B4513",
    PhaseCategory.STRUCTURE: "#4682B4",
    PhaseCategory.ROOFING: "#32CD32",
    PhaseCategory.MEP: "#FFD700",
    PhaseCategory.FINISHING: "#FF6347",
})
DEFAULT_PHASE_COLOR = "#808080"
