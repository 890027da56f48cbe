from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Header
from starlette.concurrency import run_in_threadpool
from starlette.responses import StreamingResponse

from video_showcase.api.dependencies import get_settings, get_storage
from video_showcase.api.schemas import VideoInfoResponse
from video_showcase.config import StreamSettings
from video_showcase.core.ports.storage import VideoStorage
from video_showcase.core.streaming import describe_video, plan_stream

router = APIRouter(prefix="/stream", tags=["stream"])


@router.get(
    "/video/{filename:path}",
    response_class=StreamingResponse,
    responses={
        200: {"description": "Whole file"},
        206: {"description": "Requested byte range"},
        404: {"description": "Unknown file"},
        416: {"description": "Range not satisfiable"},
    },
)
async def stream_video(
    filename: str,
    range_header: Annotated[str | None, Header(alias="range")] = None,
    storage: VideoStorage = Depends(get_storage),
    settings: StreamSettings = Depends(get_settings),
) -> StreamingResponse:
    """Stream a stored video, honouring a single ``Range: bytes=start-end`` header."""
    plan = await run_in_threadpool(plan_stream, storage, filename, range_header, settings.cache_max_age)
    # sync iterators are drained in the threadpool, one bounded chunk per send
    return StreamingResponse(
        plan.body,
        status_code=plan.status_code,
        headers=plan.headers,
        media_type=plan.media_type,
    )


@router.get("/video-info/{filename:path}", response_model=VideoInfoResponse)
async def video_info(
    filename: str,
    storage: VideoStorage = Depends(get_storage),
) -> VideoInfoResponse:
    descriptor = await run_in_threadpool(describe_video, storage, filename)
    return VideoInfoResponse.from_descriptor(descriptor)
