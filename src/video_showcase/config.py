import os
from dataclasses import dataclass
from pathlib import Path

from video_showcase.core.errors import ConfigurationError

DEFAULT_STORAGE_PATH = "/data/videos"
DEFAULT_VIDEO_SUBDIRECTORY = "videos"
DEFAULT_CHUNK_SIZE = 1024 * 1024
DEFAULT_CACHE_MAX_AGE = 86400


@dataclass(frozen=True)
class StreamSettings:
    storage_path: Path = Path(DEFAULT_STORAGE_PATH)
    video_subdirectory: str = DEFAULT_VIDEO_SUBDIRECTORY
    chunk_size: int = DEFAULT_CHUNK_SIZE
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.cache_max_age < 0:
            raise ConfigurationError(f"cache_max_age must not be negative, got {self.cache_max_age}")

    @property
    def video_root(self) -> Path:
        return self.storage_path / self.video_subdirectory


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(storage_path: str | Path | None = None) -> StreamSettings:
    """Build settings from the environment; an explicit ``storage_path`` wins over ``VIDEO_STORAGE_PATH``."""
    path = storage_path if storage_path is not None else os.getenv("VIDEO_STORAGE_PATH", DEFAULT_STORAGE_PATH)
    return StreamSettings(
        storage_path=Path(path),
        video_subdirectory=os.getenv("VIDEO_SUBDIRECTORY", DEFAULT_VIDEO_SUBDIRECTORY),
        chunk_size=_int_env("STREAM_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        cache_max_age=_int_env("STREAM_CACHE_MAX_AGE", DEFAULT_CACHE_MAX_AGE),
    )
