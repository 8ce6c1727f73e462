"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog import load_catalog
from .config import settings
from .errors import AssessmentError
from .llm_client import AnthropicClient
from .models import AnalyzeResponse, ContactResponse, HealthResponse, SubmitResponse
from .service import AssessmentService

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Print Assessment API",
    description="Assessment intake -> AI analysis -> catalog-hydrated report",
    version="0.1.0",
    lifespan=lifespan,
)


@lru_cache
def get_service() -> AssessmentService:
    catalog = load_catalog(settings.catalog_path)
    client = AnthropicClient(
        api_key=settings.anthropic_api_key,
        base_url=settings.anthropic_base_url,
        model=settings.anthropic_model,
        max_tokens=settings.anthropic_max_tokens,
        timeout=settings.anthropic_timeout,
        api_version=settings.anthropic_version,
    )
    return AssessmentService(catalog=catalog, client=client)


ServiceDep = Annotated[AssessmentService, Depends(get_service)]


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(AssessmentError)
async def handle_assessment_error(request: Request, exc: AssessmentError) -> JSONResponse:
    return _failure(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOGGER.info("Rejected unreadable body on %s: %s", request.url.path, exc.errors())
    return _failure(400, "Invalid request body")


@app.get("/health", response_model=HealthResponse)
def health(service: ServiceDep) -> HealthResponse:
    return HealthResponse(**service.health())


@app.post("/assessment/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
def analyze(service: ServiceDep, payload: Any = Body(None)) -> Any:
    try:
        analysis = service.analyze(payload)
    except AssessmentError:
        raise
    except Exception as exc:
        LOGGER.exception("Assessment analysis error")
        return _failure(500, str(exc) or "Analysis failed")
    return AnalyzeResponse(success=True, analysis=analysis)


@app.post("/assessment/submit", response_model=SubmitResponse, response_model_exclude_none=True)
def submit(service: ServiceDep, payload: Any = Body(None)) -> Any:
    try:
        assessment_id = service.submit(payload)
    except AssessmentError:
        raise
    except Exception:
        LOGGER.exception("Assessment submission error")
        return _failure(500, "Failed to submit assessment")
    return SubmitResponse(success=True, assessment_id=assessment_id)


@app.post("/contact", response_model=ContactResponse, response_model_exclude_none=True)
def contact(service: ServiceDep, payload: Any = Body(None)) -> Any:
    try:
        service.contact(payload)
    except AssessmentError:
        raise
    except Exception:
        LOGGER.exception("Contact form error")
        return _failure(500, "Failed to send message")
    return ContactResponse(success=True)
