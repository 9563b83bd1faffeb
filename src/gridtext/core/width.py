# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Display width of strings in monospace terminal columns."""

from __future__ import annotations

from .tables import VS16, is_emoji_modifiable, is_fullwidth_char, is_zero_width


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    - Fullwidth (CJK, EAW=W emoji): 2 columns
    - EAW=N emoji followed by VS16: 2 columns (VS16 upgrades the previous char)
    - EAW=N emoji alone: 1 column
    - Zero-width (selectors, joiners, combining marks): 0 columns
    - Everything else, including unassigned codepoints and lone surrogates: 1
    """
    width = 0
    prev_upgradable = False
    for ch in text:
        code = ord(ch)
        if code == VS16:
            if prev_upgradable:
                width += 1
                prev_upgradable = False
            continue
        if is_zero_width(code):
            prev_upgradable = False
            continue
        if is_fullwidth_char(code):
            width += 2
            prev_upgradable = False
        else:
            width += 1
            prev_upgradable = is_emoji_modifiable(code)
    return width


def pad_to_width(text: str, width: int) -> str:
    """Pad *text* with spaces until it spans *width* columns.

    Text that is already at least *width* columns wide is returned unchanged.
    """
    if not text:
        return ""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return f"{text}{' ' * missing}"
