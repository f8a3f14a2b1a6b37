"""Value types consumed by the terminal rendering layer.

Colors are RGB or absent, text decorations are a ``Modifier`` bitset, and
styled text is carried as ``Span``/``Line`` values.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import IntFlag

from .source import check_byte

TAB_STOP = 8


def text_display_width(text: str, start_col: int = 0) -> int:
    """Count the terminal cells ``text`` occupies when drawn from ``start_col``.

    Wide and fullwidth characters take two cells and combining marks none;
    a tab runs to the next multiple of ``TAB_STOP``.
    """
    col = start_col
    for ch in text:
        if ch == "\t":
            col = (col // TAB_STOP + 1) * TAB_STOP
        elif unicodedata.combining(ch):
            continue
        else:
            col += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return col - start_col


class Modifier(IntFlag):
    """Terminal text decorations."""

    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINED = 8
    SLOW_BLINK = 16
    RAPID_BLINK = 32
    REVERSED = 64
    HIDDEN = 128
    CROSSED_OUT = 256


NO_MODIFIER = Modifier(0)


@dataclass(frozen=True)
class RgbColor:
    """24-bit terminal color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            check_byte(name, getattr(self, name))


@dataclass(frozen=True)
class TerminalStyle:
    """Resolved style for a span.

    ``None`` colors mean "use the terminal default". ``add_modifier`` lists
    decorations to switch on, ``sub_modifier`` decorations to switch off.
    """

    fg: RgbColor | None = None
    bg: RgbColor | None = None
    add_modifier: Modifier = NO_MODIFIER
    sub_modifier: Modifier = NO_MODIFIER

    def with_fg(self, color: RgbColor | None) -> TerminalStyle:
        return replace(self, fg=color)

    def with_bg(self, color: RgbColor | None) -> TerminalStyle:
        return replace(self, bg=color)

    def add(self, modifier: Modifier) -> TerminalStyle:
        """Switch ``modifier`` on, cancelling any pending removal of it."""
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def remove(self, modifier: Modifier) -> TerminalStyle:
        """Switch ``modifier`` off, cancelling any pending addition of it."""
        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: TerminalStyle) -> TerminalStyle:
        """Layer ``other`` on top of this style.

        Colors set in ``other`` win; modifiers are combined add-then-remove.
        """
        merged = TerminalStyle(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=self.add_modifier,
            sub_modifier=self.sub_modifier,
        )
        return merged.add(other.add_modifier).remove(other.sub_modifier)


@dataclass(frozen=True)
class Span:
    """Owned text with a single style."""

    content: str
    style: TerminalStyle = field(default_factory=TerminalStyle)

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content=str(content))

    @classmethod
    def styled(cls, content: str, style: TerminalStyle) -> Span:
        return cls(content=str(content), style=style)

    def width(self) -> int:
        """Display width in terminal cells."""
        return text_display_width(self.content)


@dataclass(frozen=True)
class Line:
    """Ordered spans making up one rendered line."""

    spans: tuple[Span, ...] = ()

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def plain_text(self) -> str:
        return "".join(span.content for span in self.spans)

    def width(self) -> int:
        """Display width of the whole line; tabs align across span boundaries."""
        return text_display_width(self.plain_text())
