"""
Configuration settings for the Moment Preview service.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _split_origins(value: str) -> List[str]:
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Moment Preview API"
    APP_VERSION = "0.1.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOGS_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT") or 8000)
    CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    # Frame window: one frame per second from -5..+5 around "now"
    MAX_FRAMES = 11
    MIN_SECOND_OFFSET = -5
    MAX_SECOND_OFFSET = 5

    # Preview lengths used in the summary
    QUESTION_PREVIEW_CHARS = 140
    TITLE_PREVIEW_CHARS = 80
    DESCRIPTION_PREVIEW_CHARS = 120
    TRANSCRIPT_PREVIEW_CHARS = 140


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
