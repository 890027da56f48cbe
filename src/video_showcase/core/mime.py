import mimetypes
from pathlib import PurePath

DEFAULT_VIDEO_MIME_TYPE = "video/mp4"


def guess_mime_type(path: PurePath | str) -> str:
    """Guess from the file extension, falling back to ``video/mp4``."""
    mime_type, _ = mimetypes.guess_type(str(path), strict=False)
    return mime_type or DEFAULT_VIDEO_MIME_TYPE
