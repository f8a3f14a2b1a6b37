"""Translate highlighter styles into terminal styles and spans.

Colors lose their alpha channel: a fully transparent color becomes ``None``
(terminal default) instead of being flattened to black. Font styles are only
accepted when they equal one of the eight combinations of bold, italic and
underline; anything else raises ``UnknownEmphasisError``.
"""

from __future__ import annotations

from .errors import UnknownEmphasisError
from .source import FontStyle, SourceColor, SourceStyle
from .terminal import NO_MODIFIER, Modifier, RgbColor, Span, TerminalStyle

Segment = tuple[SourceStyle, str]

# Exact-value table; masking would silently accept stray bits.
_FONT_STYLE_MODIFIERS: dict[int, Modifier] = {
    0: NO_MODIFIER,
    FontStyle.BOLD: Modifier.BOLD,
    FontStyle.ITALIC: Modifier.ITALIC,
    FontStyle.UNDERLINE: Modifier.UNDERLINED,
    FontStyle.BOLD | FontStyle.ITALIC: Modifier.BOLD | Modifier.ITALIC,
    FontStyle.BOLD | FontStyle.UNDERLINE: Modifier.BOLD | Modifier.UNDERLINED,
    FontStyle.ITALIC | FontStyle.UNDERLINE: Modifier.ITALIC | Modifier.UNDERLINED,
    FontStyle.BOLD | FontStyle.ITALIC | FontStyle.UNDERLINE: (
        Modifier.BOLD | Modifier.ITALIC | Modifier.UNDERLINED
    ),
}


def translate_color(color: SourceColor) -> RgbColor | None:
    """Drop alpha from ``color``; ``a == 0`` yields ``None`` (colorless)."""
    if color.a > 0:
        return RgbColor(color.r, color.g, color.b)
    return None


def translate_emphasis(font_style: FontStyle | int) -> Modifier:
    """Map a font-style bitset onto terminal modifiers.

    Raises ``UnknownEmphasisError`` with the raw bits when ``font_style`` is
    not exactly one of the supported combinations, and ``TypeError`` when it
    is not an integer bitset at all.
    """
    if isinstance(font_style, bool) or not isinstance(font_style, int):
        raise TypeError(f"font style must be an int bitset, got {type(font_style).__name__}")
    bits = int(font_style)
    try:
        return _FONT_STYLE_MODIFIERS[bits]
    except KeyError:
        raise UnknownEmphasisError(bits) from None


def translate_style(style: SourceStyle) -> TerminalStyle:
    """Translate a full highlighter style.

    Only the font style can fail; ``sub_modifier`` is always empty.
    """
    return TerminalStyle(
        fg=translate_color(style.foreground),
        bg=translate_color(style.background),
        add_modifier=translate_emphasis(style.font_style),
        sub_modifier=NO_MODIFIER,
    )


def build_span(style: SourceStyle, text: str) -> Span:
    """Pair ``text`` with the translated ``style``."""
    return Span.styled(str(text), translate_style(style))


def into_span(segment: Segment) -> Span:
    """``build_span`` for a ``(style, text)`` segment tuple."""
    style, text = segment
    return build_span(style, text)
