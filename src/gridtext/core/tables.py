# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Codepoint width classification tables.

Every table is a tuple of sorted, non-overlapping, closed ``(lo, hi)``
intervals.  Membership is a binary search over the interval starts, so the
tables stay plain data that can be audited against the Unicode
``EastAsianWidth.txt`` / ``emoji-data.txt`` files without reading any logic.

Three predicates are exposed:

* :func:`is_fullwidth_char` -- always two columns (``East_Asian_Width`` W/F).
* :func:`is_emoji_modifiable` -- one column by default, two columns when
  immediately followed by VS16 (U+FE0F, emoji presentation).
* :func:`is_zero_width` -- no column at all (selectors, joiners, combining
  marks).

Grapheme clusters (skin tone modifiers, flag pairs, ZWJ families) are not
segmented; every codepoint is classified on its own.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from enum import Enum

VS16 = 0xFE0F
"""Variation Selector-16: requests emoji presentation of the preceding symbol."""

Interval = tuple[int, int]


def _merge(ranges: Iterable[Interval]) -> tuple[Interval, ...]:
    """Sort *ranges* and coalesce overlapping or adjacent intervals."""
    merged: list[list[int]] = []
    for lo, hi in sorted(ranges):
        if lo > hi:
            raise ValueError(f"empty interval U+{lo:04X}..U+{hi:04X}")
        if merged and lo <= merged[-1][1] + 1:
            merged[-1][1] = max(merged[-1][1], hi)
        else:
            merged.append([lo, hi])
    return tuple((lo, hi) for lo, hi in merged)


def _single(*codes: int) -> list[Interval]:
    return [(c, c) for c in codes]


# ---------------------------------------------------------------------------
# Always two columns (East_Asian_Width = W or F)
# ---------------------------------------------------------------------------

FULLWIDTH_RANGES: tuple[Interval, ...] = _merge(
    [
        # CJK
        (0x1100, 0x115F),  # Hangul Jamo
        (0x2E80, 0x2EFF),  # CJK Radicals Supplement
        (0x2F00, 0x2FDF),  # Kangxi Radicals
        (0x3000, 0x303F),  # CJK Symbols and Punctuation
        (0x3040, 0x309F),  # Hiragana
        (0x30A0, 0x30FF),  # Katakana
        (0x3100, 0x312F),  # Bopomofo
        (0x3130, 0x318F),  # Hangul Compatibility Jamo
        (0x3190, 0x31FF),  # Kanbun, Bopomofo Extended, CJK Strokes, Katakana ext.
        (0x3200, 0x33FF),  # Enclosed CJK Letters, CJK Compatibility
        (0x3400, 0x4DBF),  # CJK Extension A
        (0x4E00, 0x9FFF),  # CJK Unified Ideographs
        (0xAC00, 0xD7AF),  # Hangul Syllables
        (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
        (0xFE30, 0xFE4F),  # CJK Compatibility Forms
        (0xFF00, 0xFF60),  # Fullwidth ASCII
        (0xFFE0, 0xFFE6),  # Fullwidth symbols
        # Supplementary ideographic plane, closed ranges only.
        # U+F0000 and above is private use and must stay narrow.
        (0x20000, 0x2A6DF),  # CJK Extension B
        (0x2A700, 0x2B73F),  # CJK Extension C
        (0x2B740, 0x2B81F),  # CJK Extension D
        (0x2B820, 0x2CEAF),  # CJK Extension E
        (0x2CEB0, 0x2EBEF),  # CJK Extension F
        (0x2EBF0, 0x2F7FF),  # CJK Extension I
        (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
        (0x30000, 0x3134F),  # CJK Extension G
        (0x31350, 0x323AF),  # CJK Extension H
        # Emoji in the SMP with EAW=W
        (0x1F191, 0x1F19A),
        (0x1F1E0, 0x1F1FF),  # Regional indicators
        (0x1F200, 0x1F202),
        (0x1F300, 0x1F64F),  # Misc Symbols and Pictographs, Emoticons
        (0x1F680, 0x1F6FF),  # Transport and Map
        (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
        (0x1FA00, 0x1FA6F),  # Chess Symbols
        (0x1FA70, 0x1FAFF),  # Symbols and Pictographs Extended-A
        # BMP emoji with EAW=W
        (0x23E9, 0x23EC),
        (0x2648, 0x2653),  # zodiac
        (0x2753, 0x2755),
        (0x2795, 0x2797),
    ]
    + _single(
        0x1F004, 0x1F0CF, 0x1F18E,
        0x231A, 0x231B, 0x23F0, 0x23F3,
        0x25FD, 0x25FE,
        0x2614, 0x2615,
        0x267F, 0x2693,
        0x26A1,  # high voltage; U+26A0 (warning) is EAW=N
        0x26AA, 0x26AB, 0x26BD, 0x26BE, 0x26C4, 0x26C5, 0x26CE, 0x26D4,
        0x26EA, 0x26F2, 0x26F3, 0x26F5, 0x26FA, 0x26FD,
        0x2705, 0x270A, 0x270B, 0x2728,
        0x274C, 0x274E, 0x2757,
        0x27B0, 0x27BF,
        0x2B1B, 0x2B1C, 0x2B50, 0x2B55,
        0x3030, 0x303D, 0x3297, 0x3299,
    )
)

# ---------------------------------------------------------------------------
# One column, two with VS16 (EAW=N emoji-capable symbols)
# ---------------------------------------------------------------------------

EMOJI_MODIFIABLE_RANGES: tuple[Interval, ...] = _merge(
    [
        (0x2194, 0x2199),  # arrows
        (0x21A9, 0x21AA),
        (0x23E9, 0x23F3),
        (0x23F8, 0x23FA),
        (0x2600, 0x2604),  # weather
        (0x2618, 0x261D),
        (0x2638, 0x263A),
        (0x2660, 0x2668),  # card suits, hot springs
        (0x2934, 0x2935),
        (0x2B05, 0x2B07),
    ]
    + _single(
        0x00A9, 0x00AE,  # copyright, registered
        0x2122, 0x2139,  # trade mark, information
        0x231A, 0x231B,
        0x25AA, 0x25AB, 0x25B6, 0x25C0, 0x25FB, 0x25FC,
        0x260E, 0x2611, 0x2620, 0x2622, 0x2623, 0x2626, 0x262A, 0x262E, 0x262F,
        0x2640, 0x2642, 0x267B, 0x267E,
        0x26A0,  # warning sign
        0x2702, 0x2708, 0x2709, 0x270C, 0x270D, 0x270F, 0x2712, 0x2714, 0x2716,
        0x271D, 0x2721, 0x2733, 0x2734, 0x2744, 0x2747, 0x2763, 0x2764,
        0x27A1,
    )
)

# ---------------------------------------------------------------------------
# Zero columns
# ---------------------------------------------------------------------------

ZERO_WIDTH_RANGES: tuple[Interval, ...] = _merge(
    [
        (0x0300, 0x036F),  # Combining Diacritical Marks
        (0x0483, 0x0489),  # Combining Cyrillic
        (0x0591, 0x05BD),  # Hebrew points and accents
        (0x0610, 0x061A),  # Arabic signs
        (0x064B, 0x065F),  # Arabic harakat
        (0x200B, 0x200D),  # ZW space, ZW non-joiner, ZW joiner
        (0x20D0, 0x20FF),  # Combining Diacritical Marks for Symbols
        (0xFE00, 0xFE0F),  # Variation Selectors 1-16
        (0xFEFF, 0xFEFF),  # BOM / ZW no-break space
        (0xE0100, 0xE01EF),  # Variation Selectors Supplement
    ]
)


def in_table(code: int, table: tuple[Interval, ...]) -> bool:
    """Return True if *code* falls inside one of the closed intervals of *table*."""
    i = bisect_right(table, (code, 0x10FFFF + 1)) - 1
    return i >= 0 and table[i][0] <= code <= table[i][1]


def is_fullwidth_char(code: int) -> bool:
    """Return True if *code* always occupies two terminal columns.

    Symbols that only become wide with VS16 are *not* included here, see
    :func:`is_emoji_modifiable`.
    """
    return in_table(code, FULLWIDTH_RANGES)


def is_emoji_modifiable(code: int) -> bool:
    """Return True if *code* is one column alone but two when followed by VS16."""
    return in_table(code, EMOJI_MODIFIABLE_RANGES)


def is_zero_width(code: int) -> bool:
    """Return True if *code* occupies no terminal column.

    VS16 is in this table too; callers that honour the presentation upgrade
    must test for :data:`VS16` before calling this.
    """
    return in_table(code, ZERO_WIDTH_RANGES)


class WidthClass(Enum):
    """Display width class of a single codepoint, taken in isolation."""

    DOUBLE = "double"
    UPGRADABLE = "upgradable"
    ZERO = "zero"
    SINGLE = "single"

    @property
    def columns(self) -> int:
        """Columns the class occupies without any following selector."""
        return {WidthClass.DOUBLE: 2, WidthClass.ZERO: 0}.get(self, 1)


def classify(code: int) -> WidthClass:
    """Classify *code* into exactly one :class:`WidthClass`.

    Checks run zero-width first, then double-width, then upgrade eligibility,
    so a codepoint present in both the wide and the VS16 table (e.g. U+231A
    watch) is reported as :attr:`WidthClass.DOUBLE`.
    """
    if is_zero_width(code):
        return WidthClass.ZERO
    if is_fullwidth_char(code):
        return WidthClass.DOUBLE
    if is_emoji_modifiable(code):
        return WidthClass.UPGRADABLE
    return WidthClass.SINGLE
