from __future__ import annotations

from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from video_showcase.api.errors import register_error_handlers
from video_showcase.api.lifespan import lifespan
from video_showcase.api.routes.health import router as health_router
from video_showcase.api.routes.root import router as root_router
from video_showcase.api.routes.stream import router as stream_router
from video_showcase.config import StreamSettings, load_settings
from video_showcase.core.ports.storage import VideoStorage
from video_showcase.storage import FilesystemVideoStorage


def create_app(settings: StreamSettings | None = None, storage: VideoStorage | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(
        title="Video Showcase Streaming API",
        description="Range-aware streaming of stored videos.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else FilesystemVideoStorage(settings)

    register_error_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(stream_router)

    # Plain static access to everything under the storage root (thumbnails included)
    app.mount("/files", StaticFiles(directory=settings.storage_path, check_dir=False), name="files")

    return app
