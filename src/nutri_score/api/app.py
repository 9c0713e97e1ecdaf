"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from nutri_score.api.models import ScoreRequest, ScoreResponse
from nutri_score.app_logging import configure_logging
from nutri_score.containers import AppContainer
from nutri_score.domain.nutrition import DEFAULT_CATEGORY, Category
from nutri_score.domain.scores import ScoreResult
from nutri_score.domain.thresholds import resolve_tables
from nutri_score.errors import DegenerateNutritionError
from nutri_score.services.report import render_report


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutri-Score")
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report validation errors without echoing rejected input values."""
        errors = [
            {"loc": error["loc"], "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": errors})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/categories")
    async def categories() -> dict[str, object]:
        """List categories accepted by the score endpoints."""
        return {
            "categories": [
                {"value": category.value, "label": category.label}
                for category in Category
            ],
            "default": DEFAULT_CATEGORY.value,
        }

    @app.post("/score")
    async def score(payload: ScoreRequest, request: Request) -> ScoreResponse:
        """Score a product and return its grade with point counts."""
        result = _evaluate(request.app.state.container, payload)
        return ScoreResponse.from_result(result)

    @app.post("/score/report", response_class=PlainTextResponse)
    async def score_report(payload: ScoreRequest, request: Request) -> str:
        """Score a product and return a plain text report."""
        result = _evaluate(request.app.state.container, payload)
        return render_report(result, resolve_tables(payload.category))

    def _evaluate(state_container: AppContainer, payload: ScoreRequest) -> ScoreResult:
        try:
            return state_container.scoring_service.evaluate(
                payload.category,
                payload.nutrition.to_domain(),
                payload.fruits_percentage,
                is_water=payload.is_water,
            )
        except DegenerateNutritionError as exc:
            logger.warning("Rejected nutrition payload: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app
