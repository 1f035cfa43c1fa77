"""
Moment Preview service.

Accepts a question about a moment in a video together with the surrounding
transcript and image frames, validates it, and returns a compact preview of
the normalized payload.
"""

from moment_preview.config import config

__version__ = config.APP_VERSION
