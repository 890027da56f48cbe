"""Per-request value objects shared by the core, the storage adapters and the API.

None of these outlive the request that built them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePath


@dataclass(frozen=True)
class ResourceLocator:
    filename: str
    path: PurePath


@dataclass(frozen=True)
class RangeSpec:
    """A single ``start-end`` expression; either bound may be missing, both are inclusive."""

    start: int | None
    end: int | None

    @property
    def is_suffix(self) -> bool:
        return self.start is None


@dataclass(frozen=True)
class ResolvedInterval:
    start: int
    end: int
    total_length: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def content_range(self) -> str:
        return f"bytes {self.start}-{self.end}/{self.total_length}"


@dataclass(frozen=True)
class ContentDescriptor:
    filename: str
    mime_type: str
    total_length: int
    last_modified: datetime

    @property
    def last_modified_epoch_millis(self) -> int:
        return int(self.last_modified.timestamp() * 1000)
