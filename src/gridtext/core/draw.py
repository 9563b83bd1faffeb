# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Width-aware text drawing onto a column-major canvas."""

from __future__ import annotations

from .canvas import BLANK, PAD, Canvas, CharRole, RoleCanvas, in_bounds
from .tables import VS16, is_fullwidth_char, is_zero_width

__all__ = ["PAD", "draw_text"]


def draw_text(
    canvas: Canvas,
    x: int,
    y: int,
    text: str,
    force_overwrite: bool = False,
    role_canvas: RoleCanvas | None = None,
    role: CharRole | None = None,
) -> None:
    """Draw *text* onto *canvas* starting at column *x* of row *y*.

    Each wide glyph is followed by :data:`PAD` in the next column so the
    canvas keeps one cell per terminal column.

    Args:
        canvas: Column-major grid (``canvas[x][y]``), mutated in place.
        x: Starting column; may lie outside the canvas.
        y: Row; may lie outside the canvas.
        text: Text to draw.
        force_overwrite: When False only blank cells are written; occupied
            cells keep their content but still consume their column.
        role_canvas: Optional parallel grid tagged at each written glyph cell.
        role: Tag written into *role_canvas* (requires *role_canvas*).

    Out-of-bounds cells are skipped silently.  VS16 is attached to the cell
    this call wrote for the preceding glyph and widens it to two columns
    unless it is already wide.  After a glyph that was not written the
    selector is dropped, so it never reaches a cell left over from earlier
    drawing.  Other zero-width codepoints are skipped without affecting
    either rule.
    """
    offset = 0
    last_written: int | None = None
    last_was_double = False
    for ch in text:
        code = ord(ch)
        if code == VS16:
            if last_written is None:
                continue
            canvas[last_written][y] += ch
            if not last_was_double:
                px = x + offset
                if in_bounds(canvas, px, y):
                    canvas[px][y] = PAD
                offset += 1
                last_was_double = True
            continue
        if is_zero_width(code):
            continue

        cx = x + offset
        written = False
        if in_bounds(canvas, cx, y) and (force_overwrite or canvas[cx][y] == BLANK):
            canvas[cx][y] = ch
            if role_canvas is not None and role is not None and in_bounds(role_canvas, cx, y):
                role_canvas[cx][y] = role
            written = True
        # A blocked glyph must not let a later VS16 reach an older cell.
        last_written = cx if written else None
        offset += 1

        last_was_double = is_fullwidth_char(code)
        if last_was_double:
            if written:
                px = x + offset
                if in_bounds(canvas, px, y):
                    canvas[px][y] = PAD
            offset += 1
