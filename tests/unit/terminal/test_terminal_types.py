"""Terminal style builders and span/line measurement."""

from __future__ import annotations

import unittest
from dataclasses import FrozenInstanceError

from highlight_spans import Line, Modifier, RgbColor, Span, TerminalStyle
from highlight_spans.terminal import text_display_width


class TerminalStyleTests(unittest.TestCase):
    def test_default_style_is_colorless_and_unmodified(self) -> None:
        style = TerminalStyle()
        self.assertIsNone(style.fg)
        self.assertIsNone(style.bg)
        self.assertEqual(style.add_modifier, Modifier(0))
        self.assertEqual(style.sub_modifier, Modifier(0))

    def test_builders_return_new_instances(self) -> None:
        base = TerminalStyle()
        styled = base.with_fg(RgbColor(1, 2, 3)).with_bg(RgbColor(4, 5, 6))

        self.assertEqual(styled.fg, RgbColor(1, 2, 3))
        self.assertEqual(styled.bg, RgbColor(4, 5, 6))
        self.assertIsNone(base.fg)
        with self.assertRaises(FrozenInstanceError):
            styled.fg = None  # type: ignore[misc]

    def test_add_and_remove_cancel_each_other(self) -> None:
        style = TerminalStyle().remove(Modifier.BOLD).add(Modifier.BOLD | Modifier.ITALIC)
        self.assertEqual(style.add_modifier, Modifier.BOLD | Modifier.ITALIC)
        self.assertEqual(style.sub_modifier, Modifier(0))

        style = style.remove(Modifier.ITALIC)
        self.assertEqual(style.add_modifier, Modifier.BOLD)
        self.assertEqual(style.sub_modifier, Modifier.ITALIC)

    def test_patch_prefers_other_colors_and_merges_modifiers(self) -> None:
        base = TerminalStyle(fg=RgbColor(1, 1, 1), bg=RgbColor(2, 2, 2), add_modifier=Modifier.BOLD)
        other = TerminalStyle(fg=RgbColor(9, 9, 9), add_modifier=Modifier.UNDERLINED, sub_modifier=Modifier.BOLD)

        patched = base.patch(other)

        self.assertEqual(patched.fg, RgbColor(9, 9, 9))
        self.assertEqual(patched.bg, RgbColor(2, 2, 2))
        self.assertEqual(patched.add_modifier, Modifier.UNDERLINED)
        self.assertEqual(patched.sub_modifier, Modifier.BOLD)

    def test_rgb_color_rejects_out_of_range_channels(self) -> None:
        with self.assertRaises(ValueError):
            RgbColor(0, 300, 0)


class SpanAndLineTests(unittest.TestCase):
    def test_raw_span_has_default_style(self) -> None:
        self.assertEqual(Span.raw("plain"), Span("plain", TerminalStyle()))

    def test_span_width_counts_wide_and_combining_characters(self) -> None:
        self.assertEqual(Span.raw("abc").width(), 3)
        self.assertEqual(Span.raw("中文").width(), 4)
        self.assertEqual(Span.raw("é").width(), 1)

    def test_line_width_expands_tabs_across_spans(self) -> None:
        line = Line((Span.raw("ab"), Span.raw("\tc")))
        self.assertEqual(line.plain_text(), "ab\tc")
        self.assertEqual(line.width(), 9)
        self.assertEqual(len(line), 2)
        self.assertEqual([span.content for span in line], ["ab", "\tc"])

    def test_tab_width_depends_on_start_column(self) -> None:
        self.assertEqual(text_display_width("\t"), 8)
        self.assertEqual(text_display_width("\t", start_col=5), 3)
        self.assertEqual(text_display_width("\t", start_col=8), 8)

    def test_rgb_color_rejects_non_integer_channels(self) -> None:
        with self.assertRaises(TypeError):
            RgbColor(0, 0, 0.5)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
