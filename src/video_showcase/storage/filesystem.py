"""Local filesystem adapter for the ``VideoStorage`` port."""

from __future__ import annotations

import errno
import logging
import os
import stat as stat_module
from collections.abc import Iterator
from datetime import datetime, timezone
from io import FileIO

from video_showcase.config import StreamSettings
from video_showcase.core.errors import ResourceNotFoundError, StorageIOError
from video_showcase.core.mime import guess_mime_type
from video_showcase.core.paths import resolve_locator
from video_showcase.models import ContentDescriptor, ResourceLocator

logger = logging.getLogger(__name__)

# the identifier cannot name a regular file: name too long, symlink loop
_NOT_A_FILE_ERRNOS = frozenset({errno.ENAMETOOLONG, errno.ELOOP})


class FilesystemVideoStorage:
    """Serve files stored under ``settings.video_root``.

    Every ``read_range`` call opens its own handle, so concurrent requests
    against the same file never share a read cursor.
    """

    def __init__(self, settings: StreamSettings) -> None:
        self.root = settings.video_root
        self.chunk_size = settings.chunk_size

    def locate(self, filename: str) -> ResourceLocator:
        return resolve_locator(self.root, filename)

    def stat(self, locator: ResourceLocator) -> ContentDescriptor:
        try:
            st = os.stat(locator.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise ResourceNotFoundError(locator.filename) from exc
        except OSError as exc:
            if exc.errno in _NOT_A_FILE_ERRNOS:
                raise ResourceNotFoundError(locator.filename) from exc
            raise StorageIOError(str(locator.path), reason=str(exc)) from exc
        if not stat_module.S_ISREG(st.st_mode):
            raise ResourceNotFoundError(locator.filename)
        return ContentDescriptor(
            filename=locator.path.name,
            mime_type=guess_mime_type(locator.path),
            total_length=st.st_size,
            last_modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    def read_range(self, locator: ResourceLocator, start: int, end: int) -> Iterator[bytes]:
        """Open the file now and return an iterator over bytes ``[start, end]``.

        Opening eagerly means a file that vanished after ``stat`` fails before
        any response header is sent.
        """
        if start < 0 or end < start - 1:
            raise ValueError(f"invalid byte window {start}-{end}")
        path = str(locator.path)
        try:
            handle = open(path, "rb", buffering=0)  # noqa: SIM115 - closed by _iter_window
        except OSError as exc:
            raise StorageIOError(path, start, str(exc)) from exc
        try:
            handle.seek(start)
        except OSError as exc:
            handle.close()
            raise StorageIOError(path, start, str(exc)) from exc
        return self._iter_window(handle, path, start, end - start + 1)

    def _iter_window(self, handle: FileIO, path: str, start: int, length: int) -> Iterator[bytes]:
        offset = start
        remaining = length
        try:
            while remaining > 0:
                try:
                    chunk = handle.read(min(self.chunk_size, remaining))
                except OSError as exc:
                    logger.exception("Read failed for %s at offset %d", path, offset)
                    raise StorageIOError(path, offset, str(exc)) from exc
                if not chunk:
                    logger.error("File %s ended at offset %d, %d bytes short", path, offset, remaining)
                    raise StorageIOError(path, offset, "unexpected end of file")
                offset += len(chunk)
                remaining -= len(chunk)
                yield chunk
        finally:
            handle.close()

    def ensure_ready(self) -> None:
        if not self.root.exists():
            self.root.mkdir(parents=True, exist_ok=True)
            logger.info("Created storage directory %s", self.root)

    def ping(self) -> bool:
        return self.root.is_dir() and os.access(self.root, os.R_OK | os.X_OK)
