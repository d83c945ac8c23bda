"""FastAPI application: create_app factory with /api/calculator endpoints."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from buildcalc import __version__
from buildcalc.config import get_settings
from buildcalc.data.rates import (
    AREA_UNIT,
    BASE_RATES,
    BASE_RATES_LAST_UPDATED,
    BASE_RATES_NOTE,
    CURRENCY,
)
from buildcalc.exceptions import CalculationError, InvalidArgumentError, InvalidPhaseError
from buildcalc.models.calculation import (  # noqa: TCH001 (FastAPI resolves at runtime)
    CalculationRequest,
    CompareOptionsRequest,
)
from buildcalc.models.enums import ConstructionPhase, ProjectType, QualityTier

if TYPE_CHECKING:
    from buildcalc.config import Settings
    from buildcalc.services.calculator import Calculator

logger = logging.getLogger(__name__)

_INVALID_AREA = "Invalid area value"


def create_app(
    *,
    calculator: Calculator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    calculator
        Optional pre-built calculator for dependency injection (e.g. tests).
        If not provided, one is created via create_default_calculator on
        first request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or get_settings()
    logging.getLogger("buildcalc").setLevel(settings.log_level.upper())

    app = FastAPI(title=settings.app_name, version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.calculator = calculator
    app.state.settings = settings

    def _get_calculator() -> Calculator:
        calc: Calculator | None = app.state.calculator
        if calc is not None:
            return calc
        from buildcalc.factory import create_default_calculator

        calc = create_default_calculator(app.state.settings)
        app.state.calculator = calc
        return calc

    def _check_area_limit(area: float, status_code: int) -> None:
        limit = app.state.settings.max_plinth_area
        if area > limit:
            raise HTTPException(
                status_code=status_code,
                detail=f"Plinth area cannot exceed {limit:,.0f} sq ft",
            )

    def _error_detail(exc: Exception, fallback: str) -> str:
        # Internal messages are only exposed while developing
        return str(exc) if settings.is_development else fallback

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    # ------------------------------------------------------------------
    # POST /api/calculator/calculate
    # ------------------------------------------------------------------

    @app.post("/api/calculator/calculate")
    def calculate(request: CalculationRequest) -> dict[str, Any]:
        _check_area_limit(request.plinth_area, 422)
        calc = _get_calculator()
        try:
            result = calc.calculate(request)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CalculationError as exc:
            logger.exception("Cost calculation failed")
            raise HTTPException(
                status_code=500,
                detail=_error_detail(exc, "Cost calculation failed"),
            ) from exc
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/calculator/quick-estimate/{area}
    # ------------------------------------------------------------------

    @app.get("/api/calculator/quick-estimate/{area}")
    def quick_estimate(area: float) -> dict[str, Any]:
        _check_area_limit(area, 400)
        calc = _get_calculator()
        try:
            est = calc.estimator.estimate(area, QualityTier.STANDARD)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=_INVALID_AREA) from exc
        return {
            "area": est.plinth_area,
            "estimated_cost": est.total_cost,
            "rate_per_sqft": est.rate_per_sqft,
            "pie_chart": [s.model_dump(mode="json") for s in est.pie_chart_data],
            "summary": est.to_summary_dict(),
            "currency": est.currency,
        }

    # ------------------------------------------------------------------
    # GET /api/calculator/phase-cost/{area}/{phase}
    # ------------------------------------------------------------------

    @app.get("/api/calculator/phase-cost/{area}/{phase}")
    def phase_cost(area: float, phase: str) -> dict[str, Any]:
        _check_area_limit(area, 400)
        calc = _get_calculator()
        try:
            result = calc.estimator.phase_cost(area, phase)
        except InvalidPhaseError as exc:
            valid = ", ".join(p.value for p in ConstructionPhase)
            raise HTTPException(
                status_code=400,
                detail=f"Invalid construction phase. Valid phases: {valid}",
            ) from exc
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=_INVALID_AREA) from exc
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/calculator/timeline/{area}[/{project_type}]
    # ------------------------------------------------------------------

    @app.get("/api/calculator/timeline/{area}")
    @app.get("/api/calculator/timeline/{area}/{project_type}")
    def timeline(
        area: float,
        project_type: ProjectType = ProjectType.RESIDENTIAL,
    ) -> dict[str, Any]:
        _check_area_limit(area, 400)
        calc = _get_calculator()
        try:
            result = calc.timeline_generator.generate(area, project_type)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=_INVALID_AREA) from exc
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/calculator/rates
    # ------------------------------------------------------------------

    @app.get("/api/calculator/rates")
    def rates() -> dict[str, Any]:
        return {
            "base_rates": {tier.value: rate for tier, rate in BASE_RATES.items()},
            "last_updated": BASE_RATES_LAST_UPDATED,
            "currency": CURRENCY,
            "unit": AREA_UNIT,
            "note": BASE_RATES_NOTE,
        }

    # ------------------------------------------------------------------
    # POST /api/calculator/compare-options
    # ------------------------------------------------------------------

    @app.post("/api/calculator/compare-options")
    def compare_options(body: CompareOptionsRequest) -> dict[str, Any]:
        for area in body.areas:
            _check_area_limit(area, 400)
        calc = _get_calculator()
        try:
            result = calc.estimator.compare_areas(body.areas, body.quality)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/calculator/health
    # ------------------------------------------------------------------

    @app.get("/api/calculator/health")
    def calculator_health() -> Any:
        start = time.monotonic()
        try:
            calc = _get_calculator()
            calc.estimator.estimate(1000, QualityTier.STANDARD)
            calc.timeline_generator.generate(1000, ProjectType.RESIDENTIAL, 1)
        except Exception as exc:
            logger.exception("Calculator health check failed")
            return JSONResponse(
                status_code=500,
                content={
                    "service": "Calculator API",
                    "status": "unhealthy",
                    "error": _error_detail(exc, "Internal server error"),
                },
            )

        response_ms = (time.monotonic() - start) * 1000
        return {
            "service": "Calculator API",
            "status": "healthy",
            "response_time_ms": round(response_ms, 2),
            "capabilities": {
                "cost_calculation": True,
                "timeline_generation": True,
                "quality_comparison": True,
            },
            "supported_qualities": [q.value for q in QualityTier],
            "supported_project_types": [t.value for t in ProjectType],
        }

    return app
