"""
API routes for the Moment Preview service.
"""

import time
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from moment_preview.config import config
from moment_preview.core.normalizer import analyze_moment
from moment_preview.core.validator import validate_payload
from moment_preview.models.schemas import AnalysisResponse, EchoResponse, ErrorResponse
from moment_preview.utils.error_handling import log_diagnostic_info, redact_payload
from moment_preview.utils.helpers import utc_timestamp
from moment_preview.utils.logger import logging

router = APIRouter(tags=["moments"])


async def read_json_body(request: Request) -> Any:
    """Decode the JSON request body; an empty body yields an empty object."""
    raw = await request.body()
    if not raw.strip():
        return {}
    return await request.json()


@router.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "Validates a video moment and returns a compact preview of it",
    }


@router.post("/", response_model=EchoResponse, response_model_by_alias=True)
async def echo(request: Request):
    """Echo back whatever JSON was sent."""
    body = await read_json_body(request)
    logging.info(f"POST / payload: {redact_payload(body)}")
    return EchoResponse(you_sent=body)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}},
)
async def analyze(request: Request):
    """
    Validate a moment payload and return its summary.

    - Returns 400 with every validation error when the payload is invalid
    - Never echoes frame images; only their MIME type and size
    """
    started = time.perf_counter()
    received_at = utc_timestamp()

    body = await read_json_body(request)
    log_diagnostic_info({"route": "/analyze", "payload": redact_payload(body)})

    errors = validate_payload(body)
    if errors:
        logging.info(f"Rejected /analyze payload with {len(errors)} validation error(s)")
        return JSONResponse(status_code=400, content=ErrorResponse(errors=errors).to_wire())

    response = analyze_moment(body, started=started, received_at=received_at)
    logging.info(
        f"Analyzed moment with {response.summary.frames.count} frame(s) "
        f"in {response.meta.duration_ms} ms"
    )
    return response
