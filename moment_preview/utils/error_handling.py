"""
Centralized error handling for the application.
"""

import json
import traceback
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from moment_preview.config import config
from moment_preview.utils.logger import logging


def redact_payload(body: Any) -> Any:
    """
    Build a log-safe copy of an incoming payload.

    Frame images are replaced by their length so that base64 data never
    ends up in the logs.

    Args:
        body: The decoded JSON body

    Returns:
        A copy of the body with ``frames[*].imageBase64`` redacted
    """
    if not isinstance(body, dict) or not isinstance(body.get("frames"), list):
        return body

    frames = []
    for frame in body["frames"]:
        if isinstance(frame, dict) and isinstance(frame.get("imageBase64"), str):
            frame = {**frame, "imageBase64": f"<{len(frame['imageBase64'])} chars>"}
        frames.append(frame)
    return {**body, "frames": frames}


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    logging.debug(f"Diagnostic info: {json.dumps(context, default=str)}")


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    logging.error(traceback.format_exc())
    return JSONResponse(
        status_code=500,
        content={"detail": f"An unexpected error occurred: {str(exc)}"},
    )
