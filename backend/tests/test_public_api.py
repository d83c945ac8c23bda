"""Tests for the public API surface of the buildcalc package.

Verifies that consumers can import everything they need from the top-level
``buildcalc`` package, use ``create_default_calculator`` for quick setup, and
round-trip results through JSON serialization.
"""

from __future__ import annotations

import json
from datetime import date

from buildcalc import (
    BuildCalcError,
    CalculationError,
    CalculationRequest,
    CalculationResult,
    Calculator,
    ConstructionPhase,
    CostEstimate,
    CostEstimator,
    InvalidArgumentError,
    InvalidPhaseError,
    ProjectType,
    QualityTier,
    Timeline,
    TimelineGenerator,
    __version__,
    create_default_calculator,
)

# ---------------------------------------------------------------------------
# Import tests
# ---------------------------------------------------------------------------


class TestPublicImports:
    """All expected symbols are importable from the top-level package."""

    def test_version(self) -> None:
        assert __version__ == "0.1.0"

    def test_import_components(self) -> None:
        assert CostEstimator is not None
        assert TimelineGenerator is not None
        assert callable(create_default_calculator)

    def test_import_enums(self) -> None:
        assert QualityTier.LUXURY == "luxury"
        assert ProjectType.VILLA == "villa"
        assert ConstructionPhase.MASONRY == "masonry"

    def test_exception_hierarchy(self) -> None:
        assert issubclass(InvalidArgumentError, BuildCalcError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidPhaseError, BuildCalcError)
        assert issubclass(CalculationError, BuildCalcError)


# ---------------------------------------------------------------------------
# Factory tests
# ---------------------------------------------------------------------------


class TestCreateDefaultCalculator:
    """create_default_calculator() returns a working Calculator."""

    def test_returns_calculator(self) -> None:
        assert isinstance(create_default_calculator(), Calculator)

    def test_calculator_produces_result(self) -> None:
        result = create_default_calculator().calculate(
            CalculationRequest(plinth_area=1500, quality=QualityTier.PREMIUM)
        )
        assert isinstance(result, CalculationResult)
        assert isinstance(result.cost_estimation, CostEstimate)
        assert isinstance(result.timeline, Timeline)
        assert result.cost_estimation.total_cost > 0


# ---------------------------------------------------------------------------
# JSON round-trip tests
# ---------------------------------------------------------------------------


class TestJsonRoundTrip:
    """Results serialize to JSON and deserialize back correctly."""

    def test_result_round_trip(self) -> None:
        original = create_default_calculator().calculate(
            CalculationRequest(plinth_area=1200, floors=2, project_type="commercial")
        )
        restored = CalculationResult.model_validate_json(original.model_dump_json())

        assert restored.cost_estimation.total_cost == original.cost_estimation.total_cost
        assert restored.timeline.project_info == original.timeline.project_info
        assert len(restored.timeline.phases) == len(original.timeline.phases)
        assert restored.request_details == original.request_details

    def test_json_output_is_consumable(self) -> None:
        """JSON output has a structure suitable for frontend consumption."""
        timeline = TimelineGenerator().generate(1000, start_date=date(2024, 1, 1))
        data = json.loads(timeline.model_dump_json())

        assert set(data) == {"project_info", "phases", "summary", "generated_at"}
        assert data["project_info"]["start_date"] == "2024-01-01"
        first = data["phases"][0]
        for key in (
            "id", "name", "description", "start", "end", "duration",
            "progress", "category", "dependencies", "resources",
            "milestones", "color",
        ):
            assert key in first
        assert first["progress"] == 0
        assert data["summary"]["estimated_cost"]["currency"] == "NPR"
