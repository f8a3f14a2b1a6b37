"""Convert syntax-highlighter styles into terminal spans."""

from .errors import HighlightSpansError, UnknownEmphasisError
from .line import build_line, build_lines
from .source import TRANSPARENT, FontStyle, SourceColor, SourceStyle
from .terminal import NO_MODIFIER, Line, Modifier, RgbColor, Span, TerminalStyle
from .translate import Segment, build_span, into_span, translate_color, translate_emphasis, translate_style

__all__ = [
    "FontStyle",
    "HighlightSpansError",
    "Line",
    "Modifier",
    "NO_MODIFIER",
    "RgbColor",
    "Segment",
    "SourceColor",
    "SourceStyle",
    "Span",
    "TRANSPARENT",
    "TerminalStyle",
    "UnknownEmphasisError",
    "build_line",
    "build_lines",
    "build_span",
    "into_span",
    "translate_color",
    "translate_emphasis",
    "translate_style",
]
