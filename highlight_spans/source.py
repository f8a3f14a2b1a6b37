"""Value types describing highlighter output (RGBA colors and font styles)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


def check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} channel must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be within 0..255, got {value!r}")


class FontStyle(IntFlag):
    """Highlighter font-style bitset.

    Values outside the three named flags stay representable, e.g.
    ``FontStyle(254)``; the translator rejects them.
    """

    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4


@dataclass(frozen=True)
class SourceColor:
    """RGBA color; ``a == 0`` marks a color that should not be painted."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            check_byte(name, getattr(self, name))


TRANSPARENT = SourceColor(0, 0, 0, 0)


@dataclass(frozen=True)
class SourceStyle:
    """Style attached to one highlighted segment."""

    foreground: SourceColor = TRANSPARENT
    background: SourceColor = TRANSPARENT
    font_style: FontStyle | int = FontStyle(0)
