"""
FastAPI application for the Moment Preview service.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from moment_preview.config import config
from moment_preview.api.routes import router
from moment_preview.utils.error_handling import global_exception_handler
from moment_preview.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for validating and previewing questions about a moment in a video",
)

# CORS middleware; any origin by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.add_exception_handler(Exception, global_exception_handler)

# Include API router
app.include_router(router)

logging.info(f"{config.APP_NAME} v{config.APP_VERSION} initialized")
