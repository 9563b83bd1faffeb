# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for display_width and pad_to_width."""

import unittest

from gridtext.core.width import display_width, pad_to_width

VS16 = "\ufe0f"
ZWJ = "\u200d"


class DisplayWidthTests(unittest.TestCase):
    """Verify column counting for narrow, wide and zero-width text."""

    def test_ascii_equals_length(self) -> None:
        self.assertEqual(display_width("hello"), 5)
        self.assertEqual(display_width("Hello World"), 11)

    def test_empty_string(self) -> None:
        self.assertEqual(display_width(""), 0)

    def test_cjk_is_two_columns_each(self) -> None:
        self.assertEqual(display_width("中"), 2)
        self.assertEqual(display_width("中文"), 4)
        self.assertEqual(display_width("你好世界"), 8)

    def test_mixed_ascii_and_cjk(self) -> None:
        self.assertEqual(display_width("Hello中文"), 9)
        self.assertEqual(display_width("A中B文C"), 7)

    def test_kana_hangul_and_fullwidth_ascii(self) -> None:
        self.assertEqual(display_width("あ"), 2)
        self.assertEqual(display_width("アイウ"), 6)
        self.assertEqual(display_width("한글"), 4)
        self.assertEqual(display_width("Ａ"), 2)

    def test_wide_emoji(self) -> None:
        for emoji in ("⚡", "✅", "❌", "😀", "🚀", "🎉"):
            self.assertEqual(display_width(emoji), 2, emoji)

    def test_neutral_emoji_alone_is_one_column(self) -> None:
        self.assertEqual(display_width("⚠"), 1)
        self.assertEqual(display_width("✈"), 1)

    def test_neutral_emoji_with_vs16_is_two_columns(self) -> None:
        self.assertEqual(display_width("⚠" + VS16), 2)
        self.assertEqual(display_width("✈" + VS16), 2)
        self.assertEqual(display_width("a⚠" + VS16 + "b"), 4)

    def test_vs16_after_non_eligible_char_adds_nothing(self) -> None:
        self.assertEqual(display_width("A" + VS16), 1)
        self.assertEqual(display_width("中" + VS16), 2)
        self.assertEqual(display_width(VS16), 0)

    def test_vs16_upgrades_only_once(self) -> None:
        self.assertEqual(display_width("⚠" + VS16 + VS16), 2)

    def test_zero_width_between_symbol_and_vs16_blocks_upgrade(self) -> None:
        self.assertEqual(display_width("⚠" + ZWJ + VS16), 1)

    def test_zwj_sequence_counted_by_components(self) -> None:
        self.assertEqual(display_width("👨" + ZWJ + "💻"), 4)

    def test_combining_marks(self) -> None:
        self.assertEqual(display_width("e\u0301"), 1)
        self.assertEqual(display_width("a\u20d7"), 1)
        self.assertEqual(display_width("A\ufe00"), 1)

    def test_inserting_zero_width_never_changes_width(self) -> None:
        base = "Ab中⚠x"
        expected = display_width(base)
        for zw in ("\u200b", "\u200c", ZWJ, "\ufeff", "\u0301", "\ufe00", "\U000e0100"):
            for i in range(len(base) + 1):
                self.assertEqual(display_width(base[:i] + zw + base[i:]), expected)

    def test_box_drawing_is_narrow(self) -> None:
        self.assertEqual(display_width("─"), 1)
        self.assertEqual(display_width("┌┐└┘"), 4)

    def test_lone_surrogate_and_private_use_are_narrow(self) -> None:
        self.assertEqual(display_width("\ud800"), 1)
        self.assertEqual(display_width("\U000f0000"), 1)


class PadToWidthTests(unittest.TestCase):
    """Verify pad_to_width pads by display columns, not code points."""

    def test_empty_returns_empty(self) -> None:
        self.assertEqual(pad_to_width("", 4), "")

    def test_none_returns_empty(self) -> None:
        self.assertEqual(pad_to_width(None, 4), "")  # type: ignore[arg-type]

    def test_narrow_text_is_padded(self) -> None:
        self.assertEqual(pad_to_width("ab", 4), "ab  ")

    def test_wide_text_is_padded_by_columns(self) -> None:
        self.assertEqual(pad_to_width("中", 3), "中 ")

    def test_text_already_wide_enough_is_unchanged(self) -> None:
        self.assertEqual(pad_to_width("中文", 3), "中文")
        self.assertEqual(pad_to_width("⚠" + VS16, 2), "⚠" + VS16)


if __name__ == "__main__":
    unittest.main()
