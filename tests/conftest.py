"""
Configuration for pytest tests.
"""

import os
import tempfile
import pytest

# Must be set before the application modules read their configuration
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "momentpreview-test-logs"))

from fastapi.testclient import TestClient

from moment_preview.api.app import app


PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgo="
JPEG_DATA_URL = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


@pytest.fixture(scope="session")
def client():
    """Return a test client for the FastAPI app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def frame():
    """Return a factory for frame objects."""
    def make_frame(second_offset, image=JPEG_DATA_URL):
        return {"secondOffset": second_offset, "imageBase64": image}
    return make_frame


@pytest.fixture
def valid_payload(frame):
    """Return a complete, valid moment payload."""
    return {
        "question": "  What is the speaker pointing at?  ",
        "transcriptLast30": "So if you look at the chart on the left you can see the trend.",
        "transcriptNext10": "And that is why the numbers dropped.",
        "videoTitle": "Quarterly results explained",
        "videoDescription": "A walkthrough of the Q3 numbers.",
        "frames": [frame(2), frame(-1, PNG_DATA_URL), frame(0)],
    }
