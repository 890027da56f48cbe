from __future__ import annotations


class StreamError(Exception):
    """Base class for errors raised while serving a stored video."""


class ConfigurationError(StreamError):
    pass


class ResourceNotFoundError(StreamError):
    """The identifier is missing, not a regular file, or escapes the storage root.

    All three cases share one error so responses never reveal which one applied.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(f"Resource not found: {filename!r}")
        self.filename = filename


class UnsatisfiableRangeError(StreamError):
    def __init__(self, total_length: int, header: str | None = None) -> None:
        super().__init__(f"Range {header!r} not satisfiable for length {total_length}")
        self.total_length = total_length
        self.header = header

    @property
    def content_range(self) -> str:
        return f"bytes */{self.total_length}"


class StorageIOError(StreamError):
    """Read, seek or stat failure after the request was validated."""

    def __init__(self, path: str, offset: int | None = None, reason: str = "") -> None:
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"I/O failure on {path}{where}: {reason}" if reason else f"I/O failure on {path}{where}")
        self.path = path
        self.offset = offset
