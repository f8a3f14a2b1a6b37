"""Exception types raised while translating highlighter styles."""

from __future__ import annotations


class HighlightSpansError(Exception):
    """Base class for translation failures."""


class UnknownEmphasisError(HighlightSpansError, ValueError):
    """Font-style bits that do not equal one of the supported combinations.

    ``bits`` keeps the raw integer so callers can report exactly what the
    highlighter produced.
    """

    def __init__(self, bits: int) -> None:
        self.bits = int(bits)
        super().__init__(
            "Unable to convert font style into terminal modifier: "
            f"unsupported bits ({self.bits}) value."
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnknownEmphasisError):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash((UnknownEmphasisError, self.bits))

    def __reduce__(self):
        return (type(self), (self.bits,))
