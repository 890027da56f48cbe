from __future__ import annotations

from fastapi import Request

from video_showcase.config import StreamSettings
from video_showcase.core.ports.storage import VideoStorage


def get_storage(request: Request) -> VideoStorage:
    """Return the storage adapter built by ``create_app``."""
    storage: VideoStorage = request.app.state.storage
    return storage


def get_settings(request: Request) -> StreamSettings:
    settings: StreamSettings = request.app.state.settings
    return settings
