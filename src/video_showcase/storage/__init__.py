from video_showcase.storage.filesystem import FilesystemVideoStorage
from video_showcase.storage.memory import InMemoryVideo, InMemoryVideoStorage

__all__ = [
    "FilesystemVideoStorage",
    "InMemoryVideo",
    "InMemoryVideoStorage",
]
