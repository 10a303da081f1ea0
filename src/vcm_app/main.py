from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .core.logging import configure_logging, get_logger
from .models.common import SECTOR_PRESETS, Sector, ThemePreference, get_sector
from .models.valuation import DEFAULT_RATE_GRID, VCMInput
from .sample_data import build_sample_input
from .schemas import SensitivityRequest, ThemeUpdateRequest
from .services.calculator import VCMCalculator, compute_results, compute_sensitivity
from .services.preferences import init_theme
from .utils import sanitize_for_json


logger = get_logger("vcm_app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(title=settings.APP_NAME, version="0.1.0")
    calculator = VCMCalculator(currency_symbol=settings.CURRENCY_SYMBOL)
    theme = init_theme(settings)
    application.state.settings = settings
    application.state.theme = theme

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("Incoming request: %s %s", request.method, request.url.path)
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            logger.info(
                "Request completed: %s %s Status: %s Time: %.4fs",
                request.method,
                request.url.path,
                response.status_code,
                process_time,
            )
            return response
        except Exception as e:
            logger.error("Request failed: %s %s Error: %s", request.method, request.url.path, e)
            return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    @application.get("/health")
    def healthcheck() -> Dict[str, str]:
        return {"status": "ok"}

    @application.get("/sectors", response_model=List[Sector])
    def list_sectors() -> List[Sector]:
        return SECTOR_PRESETS

    @application.get("/defaults")
    def get_defaults() -> Dict[str, Any]:
        return build_sample_input().model_dump(mode="json")

    @application.post("/results")
    def run_results(payload: VCMInput) -> Dict[str, Any]:
        return sanitize_for_json(compute_results(payload).model_dump())

    @application.post("/sensitivity")
    def run_sensitivity(payload: SensitivityRequest) -> List[Dict[str, Any]]:
        rate_grid = DEFAULT_RATE_GRID if payload.rate_grid is None else payload.rate_grid
        points = compute_sensitivity(payload.inputs, rate_grid)
        return sanitize_for_json([point.model_dump() for point in points])

    @application.post("/analysis")
    def run_analysis(payload: VCMInput) -> Dict[str, Any]:
        return sanitize_for_json(calculator.run(payload).model_dump(mode="json"))

    @application.post("/analysis/sector/{sector_name}")
    def run_sector_analysis(sector_name: str, payload: VCMInput) -> Dict[str, Any]:
        try:
            sector = get_sector(sector_name)
        except KeyError:
            logger.warning("Unknown sector requested: %s", sector_name)
            raise HTTPException(status_code=404, detail=f"Sector {sector_name} not found")
        return sanitize_for_json(calculator.run(payload.with_sector(sector)).model_dump(mode="json"))

    @application.get("/preferences/theme", response_model=ThemePreference)
    def get_theme() -> ThemePreference:
        return theme.preference

    @application.put("/preferences/theme", response_model=ThemePreference)
    def update_theme(payload: ThemeUpdateRequest) -> ThemePreference:
        return theme.set_dark_mode(payload.dark_mode)

    @application.post("/preferences/theme/toggle", response_model=ThemePreference)
    def toggle_theme() -> ThemePreference:
        return theme.toggle()

    return application


app = create_app()
