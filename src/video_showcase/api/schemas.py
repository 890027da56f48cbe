from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from video_showcase.models import ContentDescriptor


class VideoInfoResponse(BaseModel):
    """GET /stream/video-info/{filename} — metadata without a stream."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    size: int
    content_type: str = Field(alias="contentType")
    last_modified_epoch_millis: int = Field(alias="lastModifiedEpochMillis")

    @classmethod
    def from_descriptor(cls, descriptor: ContentDescriptor) -> VideoInfoResponse:
        return cls(
            filename=descriptor.filename,
            size=descriptor.total_length,
            content_type=descriptor.mime_type,
            last_modified_epoch_millis=descriptor.last_modified_epoch_millis,
        )


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    storage: str = "up"
