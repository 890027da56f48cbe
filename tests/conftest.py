"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from video_showcase.config import StreamSettings
from video_showcase.storage import FilesystemVideoStorage, InMemoryVideoStorage

_TESTS_ROOT = Path(__file__).parent

VIDEO_LENGTH = 10_000


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        parts = test_path.relative_to(_TESTS_ROOT).parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def video_bytes() -> bytes:
    """10,000 bytes with no repeating 256-byte period, so misplaced windows are detectable."""
    return bytes((i * 7 + i // 256) % 256 for i in range(VIDEO_LENGTH))


@pytest.fixture
def settings(tmp_path: Path) -> StreamSettings:
    return StreamSettings(storage_path=tmp_path / "storage", chunk_size=4096)


@pytest.fixture
def video_file(settings: StreamSettings, video_bytes: bytes) -> Path:
    settings.video_root.mkdir(parents=True, exist_ok=True)
    path = settings.video_root / "clip.mp4"
    path.write_bytes(video_bytes)
    return path


@pytest.fixture
def fs_storage(settings: StreamSettings) -> FilesystemVideoStorage:
    return FilesystemVideoStorage(settings)


@pytest.fixture
def in_memory_storage(video_bytes: bytes) -> InMemoryVideoStorage:
    storage = InMemoryVideoStorage(chunk_size=1000)
    storage.add("clip.mp4", video_bytes)
    return storage
