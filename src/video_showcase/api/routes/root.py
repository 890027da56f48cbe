from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint — API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Video Showcase Streaming API",
            "description": "Range-aware streaming of stored videos.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "stream": "/stream/video/{filename}",
            "video-info": "/stream/video-info/{filename}",
            "files": "/files/{path}",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
