from collections.abc import Iterator
from typing import Protocol

from video_showcase.models import ContentDescriptor, ResourceLocator


class VideoStorage(Protocol):
    chunk_size: int

    def locate(self, filename: str) -> ResourceLocator: ...

    def stat(self, locator: ResourceLocator) -> ContentDescriptor: ...

    def read_range(self, locator: ResourceLocator, start: int, end: int) -> Iterator[bytes]: ...

    def ensure_ready(self) -> None: ...

    def ping(self) -> bool: ...
