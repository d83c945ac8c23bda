"""Tests for formatting helpers and CostEstimate.to_summary_dict."""

from __future__ import annotations

from datetime import datetime

from buildcalc.estimator import CostEstimator
from buildcalc.formatting import format_area, format_currency, format_rate


class TestFormatCurrency:
    def test_large_amount_no_decimals(self) -> None:
        assert format_currency(1_815_000) == "NPR 1,815,000"

    def test_exact_threshold(self) -> None:
        assert format_currency(10_000.0) == "NPR 10,000"

    def test_below_threshold_with_decimals(self) -> None:
        assert format_currency(9_876.54) == "NPR 9,876.54"

    def test_zero(self) -> None:
        assert format_currency(0) == "NPR 0.00"


class TestFormatRate:
    def test_rate(self) -> None:
        assert format_rate(1815) == "NPR 1,815 / sq ft"


class TestFormatArea:
    def test_whole_area(self) -> None:
        assert format_area(1000) == "1,000 sq ft"

    def test_fractional_area(self) -> None:
        assert format_area(1234.5) == "1,234.5 sq ft"


class TestToSummaryDict:
    def test_summary(self) -> None:
        est = CostEstimator().estimate(1000, "premium")
        est = est.model_copy(update={"generated_at": datetime(2024, 7, 26, 9, 30)})
        summary = est.to_summary_dict()

        assert summary["plinth_area_formatted"] == "1,000 sq ft"
        assert summary["quality"] == "Premium"
        assert summary["total_cost_formatted"] == "NPR 2,295,000"
        assert summary["rate_formatted"] == "NPR 2,295 / sq ft"
        assert summary["other_formatted"] == "NPR 215,000"
        assert summary["pie_chart"][0] == {"name": "Materials", "percent": "59%"}
        assert summary["generated_at_formatted"] == "2024-07-26 09:30"
