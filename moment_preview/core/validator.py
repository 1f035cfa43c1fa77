"""
Validation of incoming moment payloads.

Every check runs and every failure is recorded, so a client sees all of
its mistakes in a single response.
"""

from typing import Any, Dict, List

from moment_preview.config import config
from moment_preview.utils.helpers import is_image_data_url, is_integer_value, trim


OPTIONAL_TEXT_FIELDS = ("transcriptLast30", "transcriptNext10", "videoTitle", "videoDescription")

QUESTION_REQUIRED = "`question` (non-empty string) is required."
FRAMES_NOT_ARRAY = "`frames` must be an array if provided."
FRAMES_TOO_MANY = (
    f"`frames` should contain at most {config.MAX_FRAMES} images "
    f"(one per second from {config.MIN_SECOND_OFFSET}..+{config.MAX_SECOND_OFFSET})."
)
FRAME_NOT_OBJECT = "Each frame must be an object with { secondOffset, imageBase64 }."
SECOND_OFFSET_INVALID = (
    f"`secondOffset` must be an integer between "
    f"{config.MIN_SECOND_OFFSET} and {config.MAX_SECOND_OFFSET}."
)
IMAGE_INVALID = "`imageBase64` must be a data URL like data:image/jpeg;base64,...."
CONTEXT_REQUIRED = "Provide some context: `transcriptLast30` or `transcriptNext10` or `frames`."


def must_be_string(field: str) -> str:
    return f"`{field}` must be a string if provided."


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and len(trim(value)) > 0


def _validate_frame(frame: Any) -> List[str]:
    # arrays are objects without the expected keys
    if isinstance(frame, list):
        frame = {}
    if not isinstance(frame, dict):
        return [FRAME_NOT_OBJECT]

    errors = []
    second_offset = frame.get("secondOffset")
    if (
        not is_integer_value(second_offset)
        or second_offset < config.MIN_SECOND_OFFSET
        or second_offset > config.MAX_SECOND_OFFSET
    ):
        errors.append(SECOND_OFFSET_INVALID)
    if not is_image_data_url(frame.get("imageBase64")):
        errors.append(IMAGE_INVALID)
    return errors


def validate_payload(body: Any) -> List[str]:
    """
    Validate an incoming payload.

    Args:
        body: The decoded JSON body; anything that is not an object is
            validated as if it had no fields

    Returns:
        A list of human-readable error strings, empty if the payload is valid
    """
    fields: Dict[str, Any] = body if isinstance(body, dict) else {}
    errors = []

    if not _has_text(fields.get("question")):
        errors.append(QUESTION_REQUIRED)

    for field in OPTIONAL_TEXT_FIELDS:
        value = fields.get(field)
        if value is not None and not isinstance(value, str):
            errors.append(must_be_string(field))

    frames = fields.get("frames")
    if frames is not None:
        if not isinstance(frames, list):
            errors.append(FRAMES_NOT_ARRAY)
        else:
            if len(frames) > config.MAX_FRAMES:
                errors.append(FRAMES_TOO_MANY)
            for frame in frames:
                errors.extend(_validate_frame(frame))

    has_some_context = (
        _has_text(fields.get("transcriptLast30"))
        or _has_text(fields.get("transcriptNext10"))
        or (isinstance(frames, list) and len(frames) > 0)
    )
    if not has_some_context:
        errors.append(CONTEXT_REQUIRED)

    return errors
