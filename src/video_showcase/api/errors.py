"""Map core errors to bare HTTP responses.

Bodies stay empty so a 404 never tells a caller whether a path was missing
or rejected by the storage-root guard.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from starlette.responses import Response

from video_showcase.core.errors import ResourceNotFoundError, StorageIOError, UnsatisfiableRangeError

logger = logging.getLogger(__name__)


async def _not_found(_request: Request, _exc: Exception) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _unsatisfiable(_request: Request, exc: Exception) -> Response:
    assert isinstance(exc, UnsatisfiableRangeError)
    return Response(
        status_code=status.HTTP_416_REQUESTED_RANGE_NOT_SATISFIABLE,
        headers={"Content-Range": exc.content_range, "Accept-Ranges": "bytes"},
    )


async def _storage_failure(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, StorageIOError)
    logger.error("Storage failure serving %s: %s", request.url.path, exc, exc_info=exc.__cause__ or exc)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, _not_found)
    app.add_exception_handler(UnsatisfiableRangeError, _unsatisfiable)
    app.add_exception_handler(StorageIOError, _storage_failure)
