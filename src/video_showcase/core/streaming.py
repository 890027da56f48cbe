"""Decide status, headers and body for a stored-video request.

Framework independent: the API layer turns a ``StreamPlan`` into a response
and maps the errors raised here to status codes.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import quote

from video_showcase.config import DEFAULT_CACHE_MAX_AGE
from video_showcase.core.ports.storage import VideoStorage
from video_showcase.core.ranges import resolve_range
from video_showcase.models import ContentDescriptor, ResolvedInterval

logger = logging.getLogger(__name__)


@dataclass
class StreamPlan:
    status_code: int
    media_type: str
    headers: dict[str, str]
    body: Iterator[bytes]
    interval: ResolvedInterval | None = None


def content_disposition(filename: str) -> str:
    name = PurePosixPath(filename).name
    quoted = quote(name)
    if quoted != name:
        return f"inline; filename*=utf-8''{quoted}"
    return f'inline; filename="{name}"'


def _base_headers(descriptor: ContentDescriptor, cache_max_age: int) -> dict[str, str]:
    return {
        "Accept-Ranges": "bytes",
        "Cache-Control": f"public, max-age={cache_max_age}",
        "Content-Disposition": content_disposition(descriptor.filename),
    }


def plan_stream(
    storage: VideoStorage,
    filename: str,
    range_header: str | None,
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE,
) -> StreamPlan:
    """Validate the request and open the byte window to serve.

    Raises ``ResourceNotFoundError``, ``UnsatisfiableRangeError`` or
    ``StorageIOError`` before any byte is produced.
    """
    locator = storage.locate(filename)
    descriptor = storage.stat(locator)
    total = descriptor.total_length
    interval = resolve_range(range_header, total)
    headers = _base_headers(descriptor, cache_max_age)

    if interval is None:
        headers["Content-Length"] = str(total)
        logger.debug("Serving %s in full (%d bytes)", filename, total)
        return StreamPlan(
            status_code=200,
            media_type=descriptor.mime_type,
            headers=headers,
            body=storage.read_range(locator, 0, total - 1),
        )

    headers["Content-Length"] = str(interval.length)
    headers["Content-Range"] = interval.content_range
    logger.debug("Serving %s %s", filename, interval.content_range)
    return StreamPlan(
        status_code=206,
        media_type=descriptor.mime_type,
        headers=headers,
        body=storage.read_range(locator, interval.start, interval.end),
        interval=interval,
    )


def describe_video(storage: VideoStorage, filename: str) -> ContentDescriptor:
    """Metadata for ``filename`` without opening a stream."""
    return storage.stat(storage.locate(filename))
