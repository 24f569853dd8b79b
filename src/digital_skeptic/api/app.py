"""FastAPI app exposing the analysis pipeline."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from digital_skeptic import errors
from digital_skeptic.config import Settings, load_settings
from digital_skeptic.logging import configure_logging, get_logger, log_exception
from digital_skeptic.models.report import StructuredReport
from digital_skeptic.orchestrator.runner import run_analysis_async
from digital_skeptic.utils.ids import new_request_id

GENERIC_FAILURE = "Failed to analyze article"


class AnalyzeRequest(BaseModel):
    """Analyze request."""

    url: Any = None


class AnalyzeResponse(BaseModel):
    """Analyze response."""

    title: str
    content: str
    analysis: str
    report: StructuredReport


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    app = FastAPI(title="Digital Skeptic", version="0.1.0")

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request body", extra={"path": request.url.path})
        return _error(400, "Request body must be a JSON object with a url")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/analyze", response_model=AnalyzeResponse)
    async def analyze(req: AnalyzeRequest) -> AnalyzeResponse | JSONResponse:
        request_id = new_request_id()
        logger.info("API analysis requested (request_id=%s)", request_id)
        try:
            result = await run_analysis_async(req.url, settings=settings, request_id=request_id)
        except errors.ValidationError as e:
            return _error(400, str(e))
        except Exception:
            log_exception(logger, "Analysis error", request_id=request_id, url=str(req.url))
            return _error(500, GENERIC_FAILURE)

        return AnalyzeResponse(
            title=result.title,
            content=result.content,
            analysis=result.analysis,
            report=result.report,
        )

    return app
