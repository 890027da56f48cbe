"""Parse and resolve single-range ``Range`` headers (RFC 9110 section 14.1.2).

Only the ``bytes`` unit and a single range expression are supported. Every
function here is pure: the caller supplies the resource length.
"""

import re

from video_showcase.core.errors import UnsatisfiableRangeError
from video_showcase.models import RangeSpec, ResolvedInterval

RANGE_UNIT = "bytes"

_RANGE_EXPRESSION = re.compile(r"^([0-9]*)-([0-9]*)$")


def parse_range_header(header: str | None, total_length: int = 0) -> RangeSpec | None:
    """Return the requested range, or ``None`` when the header asks for no range.

    A header that uses the ``bytes`` unit but cannot be parsed raises
    ``UnsatisfiableRangeError`` carrying ``total_length`` for the 416 response.
    """
    if header is None or not header.strip():
        return None
    unit, sep, expression = header.strip().partition("=")
    if not sep or unit.strip().lower() != RANGE_UNIT:
        return None

    expression = expression.strip()
    # multipart/byteranges responses are not produced
    if "," in expression:
        raise UnsatisfiableRangeError(total_length, header)
    match = _RANGE_EXPRESSION.match(expression)
    if match is None:
        raise UnsatisfiableRangeError(total_length, header)

    start_text, end_text = match.groups()
    if not start_text and not end_text:
        raise UnsatisfiableRangeError(total_length, header)
    try:
        return RangeSpec(
            start=int(start_text) if start_text else None,
            end=int(end_text) if end_text else None,
        )
    except ValueError as exc:
        # more digits than int() accepts from a string
        raise UnsatisfiableRangeError(total_length, header) from exc


def resolve_interval(spec: RangeSpec, total_length: int, header: str | None = None) -> ResolvedInterval:
    if total_length < 0:
        raise ValueError(f"total_length must not be negative, got {total_length}")
    last = total_length - 1

    if spec.is_suffix:
        # the last N bytes
        assert spec.end is not None
        if spec.end == 0 or total_length == 0:
            raise UnsatisfiableRangeError(total_length, header)
        return ResolvedInterval(start=max(0, total_length - spec.end), end=last, total_length=total_length)

    if spec.start >= total_length:
        raise UnsatisfiableRangeError(total_length, header)
    if spec.end is None:
        return ResolvedInterval(start=spec.start, end=last, total_length=total_length)
    if spec.start > spec.end:
        raise UnsatisfiableRangeError(total_length, header)
    return ResolvedInterval(start=spec.start, end=min(spec.end, last), total_length=total_length)


def resolve_range(header: str | None, total_length: int) -> ResolvedInterval | None:
    """Resolve a raw ``Range`` header against ``total_length``.

    Returns ``None`` when no range was requested (serve the whole resource),
    a ``ResolvedInterval`` for a satisfiable range, and raises
    ``UnsatisfiableRangeError`` otherwise.
    """
    if total_length < 0:
        raise ValueError(f"total_length must not be negative, got {total_length}")
    spec = parse_range_header(header, total_length)
    if spec is None:
        return None
    return resolve_interval(spec, total_length, header)
