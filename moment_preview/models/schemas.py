"""
Data models for the Moment Preview service.

Field names are snake_case in Python; the JSON wire format uses the
camelCase aliases declared on each field.
"""
from typing import List, Any
from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base model that serializes with camelCase aliases."""
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class FrameSummary(WireModel):
    """Light description of one frame; the image data itself is never kept."""
    second_offset: int = Field(alias="secondOffset")
    mime: str
    approx_chars: int = Field(alias="approxChars")


class VideoInfo(WireModel):
    title: str = ""
    description: str = ""


class TranscriptWindow(WireModel):
    last30: str = ""
    next10: str = ""


class NormalizedPayload(WireModel):
    """Validated and defaulted request, in the shape handed to a downstream consumer."""
    question: str
    video: VideoInfo = Field(default_factory=VideoInfo)
    transcript: TranscriptWindow = Field(default_factory=TranscriptWindow)
    frames: List[FrameSummary] = []


class VideoSummary(WireModel):
    has_title: bool = Field(alias="hasTitle")
    has_description: bool = Field(alias="hasDescription")
    title_preview: str = Field(alias="titlePreview")
    description_preview: str = Field(alias="descriptionPreview")


class TranscriptSummary(WireModel):
    last30_preview: str = Field(alias="last30Preview")
    next10_preview: str = Field(alias="next10Preview")
    last30_length: int = Field(alias="last30Length")
    next10_length: int = Field(alias="next10Length")


class FramesSummary(WireModel):
    count: int
    offsets: List[int]
    mimes: List[str]


class MomentSummary(WireModel):
    """Compact, human-readable preview of a normalized payload."""
    question: str
    video: VideoSummary
    transcript: TranscriptSummary
    frames: FramesSummary


class AnalysisMeta(WireModel):
    duration_ms: int = Field(alias="durationMs")
    received_at: str = Field(alias="receivedAt")


class AnalysisResponse(WireModel):
    """Successful response of ``POST /analyze``."""
    ok: bool = True
    summary: MomentSummary
    normalized: NormalizedPayload
    meta: AnalysisMeta


class ErrorResponse(WireModel):
    """Validation failure response."""
    ok: bool = False
    errors: List[str]


class EchoResponse(WireModel):
    """Response of ``POST /``."""
    ok: bool = True
    you_sent: Any = Field(default=None, alias="youSent")
