from __future__ import annotations

import logging
import uuid
from typing import Annotated

from dotenv import load_dotenv

load_dotenv(override=False)

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, Response

from apps.api.config import Settings, get_settings
from apps.api.pages import render_error_page
from packages.finding_chart.application.chart_service import build_finding_chart
from packages.finding_chart.domain.errors import FindingChartError
from packages.finding_chart.domain.models import ImageGenerator, NameResolver, RawRequest
from packages.finding_chart.infrastructure.chart_generator import SubprocessChartGenerator
from packages.finding_chart.infrastructure.sesame_client import SesameResolver
from packages.finding_chart.logging_utils import setup_logging

app = FastAPI(title="Finding Chart API", version="0.1.0")
logger = logging.getLogger(__name__)

# Three months.
COOKIE_MAX_AGE_SECONDS = 90 * 24 * 60 * 60
CHART_MEDIA_TYPE = "image/jpg"


def get_resolver(settings: Annotated[Settings, Depends(get_settings)]) -> NameResolver:
    return SesameResolver(
        base_url=settings.sesame_url,
        timeout_seconds=settings.sesame_timeout,
        verify_ssl=settings.verify_ssl,
    )


def get_generator(settings: Annotated[Settings, Depends(get_settings)]) -> ImageGenerator:
    return SubprocessChartGenerator(
        executable=settings.chart_generator,
        output_dir=settings.chart_output_dir,
        timeout_seconds=settings.chart_timeout,
    )


@app.on_event("startup")
def on_startup() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("api_started", extra={"event": "startup"})


@app.exception_handler(FindingChartError)
async def finding_chart_error_handler(request: Request, exc: FindingChartError) -> HTMLResponse:
    logger.info(
        "chart_request_failed",
        extra={"event": exc.kind, "request_id": getattr(request.state, "request_id", None)},
    )
    settings = get_settings()
    return HTMLResponse(
        render_error_page(exc, settings.contact_email),
        status_code=exc.status_code,
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/finding_chart")
def finding_chart(
    request: Request,
    resolver: Annotated[NameResolver, Depends(get_resolver)],
    generator: Annotated[ImageGenerator, Depends(get_generator)],
    ra: str | None = None,
    dec: str | None = None,
    target: str | None = None,
    field_width: str | None = None,
    field_height: str | None = None,
    show_detector: str | None = None,
    detector_width: str | None = None,
    detector_height: str | None = None,
    invert: str | None = None,
) -> Response:
    raw = RawRequest(
        ra=ra,
        dec=dec,
        target_name=target,
        field_width=field_width,
        field_height=field_height,
        show_detector=show_detector,
        detector_width=detector_width,
        detector_height=detector_height,
        invert=invert,
    )
    request_id = uuid.uuid4().hex
    request.state.request_id = request_id
    result = build_finding_chart(raw, resolver, generator, request_id=request_id)

    response = Response(content=result.image, media_type=CHART_MEDIA_TYPE)
    for directive in result.directives:
        response.set_cookie(
            key=directive.name,
            value=directive.value,
            max_age=COOKIE_MAX_AGE_SECONDS,
            expires=COOKIE_MAX_AGE_SECONDS,
        )
    return response
