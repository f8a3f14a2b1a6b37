"""Build terminal lines from the segments of one highlighted line."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .errors import UnknownEmphasisError
from .terminal import Line, Span
from .translate import Segment, build_span

logger = logging.getLogger(__name__)


def build_line(segments: Iterable[Segment], *, skip_errors: bool = True) -> Line:
    """Translate ``segments`` in order into a ``Line``.

    With ``skip_errors`` a segment whose font style cannot be translated is
    left out of the line. Otherwise the first ``UnknownEmphasisError`` is
    raised and no line is returned.
    """
    spans: list[Span] = []
    for style, text in segments:
        try:
            spans.append(build_span(style, text))
        except UnknownEmphasisError as exc:
            if not skip_errors:
                raise
            logger.debug("Skipping segment %r: unsupported font style bits %d", text, exc.bits)
    return Line(tuple(spans))


def build_lines(lines: Iterable[Iterable[Segment]], *, skip_errors: bool = True) -> list[Line]:
    """Apply ``build_line`` to each highlighted line."""
    return [build_line(segments, skip_errors=skip_errors) for segments in lines]
