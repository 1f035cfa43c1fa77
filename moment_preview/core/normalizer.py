"""
Normalization and summarization of validated moment payloads.
"""

import time
from typing import Any, Dict, List, Optional

from moment_preview.config import config
from moment_preview.models.schemas import (
    AnalysisMeta,
    AnalysisResponse,
    FrameSummary,
    FramesSummary,
    MomentSummary,
    NormalizedPayload,
    TranscriptSummary,
    TranscriptWindow,
    VideoInfo,
    VideoSummary,
)
from moment_preview.utils.helpers import extract_mime, preview, trim, utc_timestamp


def _text(body: Dict[str, Any], field: str) -> str:
    value = body.get(field)
    return value if isinstance(value, str) else ""


def summarize_frames(frames: Optional[List[Dict[str, Any]]]) -> List[FrameSummary]:
    """
    Sort frames by ``secondOffset`` and describe each one without its image.

    Args:
        frames: Validated frame objects, or None

    Returns:
        Frame summaries in ascending ``secondOffset`` order
    """
    ordered = sorted(frames or [], key=lambda frame: frame["secondOffset"])
    return [
        FrameSummary(
            second_offset=int(frame["secondOffset"]),
            mime=extract_mime(frame["imageBase64"]),
            approx_chars=len(frame["imageBase64"]),
        )
        for frame in ordered
    ]


def normalize_payload(body: Dict[str, Any]) -> NormalizedPayload:
    """
    Build the normalized payload from a body that passed validation.

    Missing or null text fields default to empty strings and the question
    is trimmed.
    """
    return NormalizedPayload(
        question=trim(body["question"]),
        video=VideoInfo(
            title=_text(body, "videoTitle"),
            description=_text(body, "videoDescription"),
        ),
        transcript=TranscriptWindow(
            last30=_text(body, "transcriptLast30"),
            next10=_text(body, "transcriptNext10"),
        ),
        frames=summarize_frames(body.get("frames")),
    )


def summarize(normalized: NormalizedPayload) -> MomentSummary:
    """Build the human-readable summary of a normalized payload."""
    video = normalized.video
    transcript = normalized.transcript
    frames = normalized.frames

    return MomentSummary(
        question=preview(normalized.question, config.QUESTION_PREVIEW_CHARS),
        video=VideoSummary(
            has_title=bool(video.title),
            has_description=bool(video.description),
            title_preview=preview(video.title, config.TITLE_PREVIEW_CHARS),
            description_preview=preview(video.description, config.DESCRIPTION_PREVIEW_CHARS),
        ),
        transcript=TranscriptSummary(
            last30_preview=preview(transcript.last30, config.TRANSCRIPT_PREVIEW_CHARS),
            next10_preview=preview(transcript.next10, config.TRANSCRIPT_PREVIEW_CHARS),
            # lengths and previews count code points
            last30_length=len(transcript.last30),
            next10_length=len(transcript.next10),
        ),
        frames=FramesSummary(
            count=len(frames),
            offsets=[frame.second_offset for frame in frames],
            # unique, in order of first appearance
            mimes=list(dict.fromkeys(frame.mime for frame in frames)),
        ),
    )


def analyze_moment(
    body: Dict[str, Any],
    started: Optional[float] = None,
    received_at: Optional[str] = None,
) -> AnalysisResponse:
    """
    Normalize and summarize a validated payload.

    Args:
        body: A payload for which ``validate_payload`` returned no errors
        started: ``time.perf_counter()`` value taken when the request arrived
        received_at: ISO-8601 timestamp of receipt

    Returns:
        The full success response including timing metadata
    """
    if started is None:
        started = time.perf_counter()
    if received_at is None:
        received_at = utc_timestamp()

    normalized = normalize_payload(body)
    summary = summarize(normalized)

    return AnalysisResponse(
        summary=summary,
        normalized=normalized,
        meta=AnalysisMeta(
            duration_ms=int((time.perf_counter() - started) * 1000),
            received_at=received_at,
        ),
    )
