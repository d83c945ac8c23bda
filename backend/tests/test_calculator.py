"""Tests for the Calculator service and its factory."""

from __future__ import annotations

import logging
import math
from unittest.mock import MagicMock

import pytest

from buildcalc.config import Settings
from buildcalc.estimator import CostEstimator
from buildcalc.exceptions import CalculationError, InvalidArgumentError
from buildcalc.factory import create_default_calculator
from buildcalc.models.calculation import CalculationRequest
from buildcalc.models.enums import ProjectType, QualityTier
from buildcalc.services.calculator import Calculator
from buildcalc.timeline import TimelineGenerator


@pytest.fixture()
def calculator() -> Calculator:
    return Calculator(CostEstimator(), TimelineGenerator())


class TestCalculate:
    def test_uses_total_area(self, calculator: Calculator) -> None:
        request = CalculationRequest(
            plinth_area=1000,
            floors=2,
            quality=QualityTier.PREMIUM,
            project_type=ProjectType.VILLA,
        )
        result = calculator.calculate(request)

        assert result.request_details.total_area == 2000
        assert result.cost_estimation.plinth_area == 2000
        assert result.cost_estimation.total_cost == 4_590_000
        assert result.quality_comparison.plinth_area == 2000
        assert len(result.quality_comparison.estimates) == 4

    def test_timeline_uses_floor_multiplier(self, calculator: Calculator) -> None:
        request = CalculationRequest(plinth_area=1000, floors=2)
        timeline = calculator.calculate(request).timeline
        assert timeline.project_info.working_days == math.ceil(2000 * 0.6 * 1.3)

    def test_project_type_dispatch(self, calculator: Calculator) -> None:
        request = CalculationRequest(plinth_area=800, project_type=ProjectType.RENOVATION)
        timeline = calculator.calculate(request).timeline
        assert len(timeline.phases) == 8
        assert timeline.project_info.name == "Renovation Project"

    def test_request_details(self, calculator: Calculator) -> None:
        request = CalculationRequest(plinth_area=1000, floors=1.5, quality="basic")
        details = calculator.calculate(request).request_details
        assert details.plinth_area == 1000
        assert details.floors == 1.5
        assert details.quality == QualityTier.BASIC
        assert details.project_type == ProjectType.RESIDENTIAL

    def test_logs_start_and_completion(
        self, calculator: Calculator, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="buildcalc")
        calculator.calculate(CalculationRequest(plinth_area=1000))
        assert "Cost calculation started" in caplog.text
        assert "Cost calculation completed" in caplog.text


class TestErrorWrapping:
    def test_domain_errors_propagate(self) -> None:
        estimator = MagicMock(spec=CostEstimator)
        estimator.estimate.side_effect = InvalidArgumentError("Valid plinth area is required")
        calculator = Calculator(estimator, TimelineGenerator())

        with pytest.raises(InvalidArgumentError):
            calculator.calculate(CalculationRequest(plinth_area=1000))

    def test_unexpected_errors_wrapped(self) -> None:
        generator = MagicMock(spec=TimelineGenerator)
        generator.generate.side_effect = RuntimeError("boom")
        calculator = Calculator(CostEstimator(), generator)

        with pytest.raises(CalculationError, match="boom") as exc_info:
            calculator.calculate(CalculationRequest(plinth_area=1000))
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestFactory:
    def test_wires_from_settings(self) -> None:
        settings = Settings(max_compare_options=2, timeline_overlap_factor=0.9)
        calculator = create_default_calculator(settings)

        assert calculator.timeline_generator.overlap_factor == 0.9
        with pytest.raises(InvalidArgumentError):
            calculator.estimator.compare_areas([1, 2, 3])

    def test_default_settings(self) -> None:
        calculator = create_default_calculator()
        assert isinstance(calculator.estimator, CostEstimator)
        assert calculator.timeline_generator.overlap_factor == 0.7
