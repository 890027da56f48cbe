import logging
from pathlib import Path

from video_showcase.core.errors import ResourceNotFoundError
from video_showcase.models import ResourceLocator

logger = logging.getLogger(__name__)


def resolve_locator(root: Path, filename: str) -> ResourceLocator:
    """Resolve ``filename`` beneath ``root`` and reject anything that escapes it.

    Symlinks are followed before the containment check, so a link pointing
    outside the root is rejected as well. Must run before any existence
    check or read.
    """
    if not filename or "\x00" in filename or Path(filename).is_absolute():
        logger.warning("Rejected resource identifier %r", filename)
        raise ResourceNotFoundError(filename)

    canonical_root = root.resolve()
    try:
        candidate = (canonical_root / filename).resolve()
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on older interpreters
        logger.warning("Could not canonicalise %r: %s", filename, exc)
        raise ResourceNotFoundError(filename) from exc

    if candidate == canonical_root or not candidate.is_relative_to(canonical_root):
        logger.warning("Rejected path outside storage root: %r", filename)
        raise ResourceNotFoundError(filename)
    return ResourceLocator(filename=filename, path=candidate)
