from __future__ import annotations

import posixpath
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePosixPath

from video_showcase.config import DEFAULT_CHUNK_SIZE
from video_showcase.core.errors import ResourceNotFoundError, StorageIOError
from video_showcase.core.mime import guess_mime_type
from video_showcase.models import ContentDescriptor, ResourceLocator

_ROOT = PurePosixPath("/memory")


@dataclass(frozen=True)
class InMemoryVideo:
    content: bytes
    last_modified: datetime


@dataclass
class InMemoryVideoStorage:
    """Dict-backed ``VideoStorage`` for tests and local experiments."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    videos: dict[str, InMemoryVideo] = field(default_factory=dict)
    reads: list[tuple[str, int, int]] = field(default_factory=list)

    def add(self, filename: str, content: bytes, last_modified: datetime | None = None) -> None:
        self.videos[filename] = InMemoryVideo(content, last_modified or datetime.now(timezone.utc))

    def locate(self, filename: str) -> ResourceLocator:
        if not filename or "\x00" in filename or filename.startswith("/"):
            raise ResourceNotFoundError(filename)
        normalized = posixpath.normpath(filename)
        if normalized == "." or normalized == ".." or normalized.startswith("../"):
            raise ResourceNotFoundError(filename)
        return ResourceLocator(filename=filename, path=_ROOT / normalized)

    def _key(self, locator: ResourceLocator) -> str:
        return str(locator.path.relative_to(_ROOT))

    def stat(self, locator: ResourceLocator) -> ContentDescriptor:
        video = self.videos.get(self._key(locator))
        if video is None:
            raise ResourceNotFoundError(locator.filename)
        return ContentDescriptor(
            filename=locator.path.name,
            mime_type=guess_mime_type(locator.path),
            total_length=len(video.content),
            last_modified=video.last_modified,
        )

    def read_range(self, locator: ResourceLocator, start: int, end: int) -> Iterator[bytes]:
        key = self._key(locator)
        video = self.videos.get(key)
        if video is None:
            raise StorageIOError(str(locator.path), start, "removed after stat")
        self.reads.append((key, start, end))
        # copy the window now so later add() calls do not affect this read
        window = video.content[start : end + 1]
        return (window[i : i + self.chunk_size] for i in range(0, len(window), self.chunk_size))

    def ensure_ready(self) -> None:
        return None

    def ping(self) -> bool:
        return True
