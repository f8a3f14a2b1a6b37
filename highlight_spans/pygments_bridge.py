"""Feed Pygments highlighting output into the source style model.

Pygments does the lexing and owns the style definitions; this module only
reads its token stream and ``style_for_token`` records.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from pygments.lexer import Lexer
from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import _TokenType

from .source import TRANSPARENT, FontStyle, SourceColor, SourceStyle
from .translate import Segment

DEFAULT_STYLE = "monokai"

_HEX_COLOR_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def color_from_hex(value: str | None) -> SourceColor:
    """Parse a Pygments ``rrggbb`` color.

    A missing color becomes fully transparent so it later translates to the
    terminal default rather than black.
    """
    if not value:
        return TRANSPARENT
    match = _HEX_COLOR_RE.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"not a hex color: {value!r}")
    digits = match.group(1)
    return SourceColor(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        255,
    )


def resolve_style(style: str | type[Style]) -> type[Style]:
    """Return a Pygments style class for a class or registered name."""
    if isinstance(style, str):
        return get_style_by_name(style)
    return style


def source_style_for_token(style: str | type[Style], token_type: _TokenType) -> SourceStyle:
    """Build the source style Pygments assigns to ``token_type``.

    Token types the style does not know fall back to their nearest known parent.
    """
    style_cls = resolve_style(style)
    while not style_cls.styles_token(token_type) and token_type.parent is not None:
        token_type = token_type.parent
    definition = style_cls.style_for_token(token_type)
    font_style = FontStyle(0)
    if definition.get("bold"):
        font_style |= FontStyle.BOLD
    if definition.get("italic"):
        font_style |= FontStyle.ITALIC
    if definition.get("underline"):
        font_style |= FontStyle.UNDERLINE
    return SourceStyle(
        foreground=color_from_hex(definition.get("color")),
        background=color_from_hex(definition.get("bgcolor")),
        font_style=font_style,
    )


def highlight_segments(
    line: str,
    lexer: Lexer,
    style: str | type[Style] = DEFAULT_STYLE,
) -> Iterator[Segment]:
    """Yield ``(SourceStyle, text)`` segments covering ``line``.

    Adjacent tokens that resolve to the same style are merged. The raw token
    stream is used so line endings are neither normalized nor added.
    """
    style_cls = resolve_style(style)
    current_style: SourceStyle | None = None
    parts: list[str] = []

    for _index, token_type, value in lexer.get_tokens_unprocessed(line):
        if not value:
            continue
        token_style = source_style_for_token(style_cls, token_type)
        if token_style != current_style and parts:
            assert current_style is not None
            yield current_style, "".join(parts)
            parts = []
        current_style = token_style
        parts.append(value)

    if parts:
        assert current_style is not None
        yield current_style, "".join(parts)
