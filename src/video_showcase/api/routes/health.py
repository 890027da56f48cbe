from fastapi import APIRouter, Depends, Response, status
from starlette.concurrency import run_in_threadpool

from video_showcase.api.dependencies import get_storage
from video_showcase.api.schemas import HealthResponse, ReadinessResponse
from video_showcase.core.ports.storage import VideoStorage

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe — is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    storage: VideoStorage = Depends(get_storage),
) -> ReadinessResponse:
    """Readiness probe — checks the storage directory is readable."""
    if await run_in_threadpool(storage.ping):
        return ReadinessResponse(status="ok", storage="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", storage="down")
