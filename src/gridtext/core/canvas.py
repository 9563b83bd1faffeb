# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Column-major character canvas helpers.

A canvas is indexed ``canvas[x][y]``: the outer list holds columns, each
column holds one cell per row.  A cell is normally a single character but
may carry an attached selector (``"\\u26a0\\ufe0f"``).  Wide glyphs are
followed by :data:`PAD` in the next column, which the serialisers here
strip again.
"""

from __future__ import annotations

BLANK = " "
PAD = "\uE000"
"""Right-half marker of a wide glyph.

Private Use Area codepoint, so it never collides with real text.  If a
serialiser forgets to strip it, terminals show a visible box instead of
silently losing a column.
"""

Canvas = list[list[str]]
CharRole = str
RoleCanvas = list[list[CharRole | None]]


def mk_canvas(width: int, height: int) -> Canvas:
    """Return a blank *width* x *height* canvas."""
    return [[BLANK] * max(height, 0) for _ in range(max(width, 0))]


def mk_role_canvas(width: int, height: int) -> RoleCanvas:
    """Return a *width* x *height* role canvas with no roles assigned."""
    return [[None] * max(height, 0) for _ in range(max(width, 0))]


def canvas_size(canvas: Canvas | RoleCanvas) -> tuple[int, int]:
    """Return ``(width, height)`` of a column-major canvas."""
    if not canvas:
        return 0, 0
    return len(canvas), len(canvas[0])


def in_bounds(canvas: Canvas | RoleCanvas, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` addresses an existing cell."""
    width, height = canvas_size(canvas)
    return 0 <= x < width and 0 <= y < height


def canvas_to_lines(canvas: Canvas, *, strip_padding: bool = True) -> list[str]:
    """Serialise *canvas* into rows of text.

    PAD markers are dropped (unless *strip_padding* is False), trailing
    whitespace is trimmed from every row and trailing empty rows are removed.
    """
    width, height = canvas_size(canvas)
    lines: list[str] = []
    for y in range(height):
        cells = (canvas[x][y] for x in range(width))
        if strip_padding:
            cells = (cell for cell in cells if cell != PAD)
        lines.append("".join(cells).rstrip())
    while lines and not lines[-1]:
        lines.pop()
    return lines


def canvas_to_string(canvas: Canvas, *, strip_padding: bool = True) -> str:
    """Serialise *canvas* into a newline-joined string, see :func:`canvas_to_lines`."""
    return "\n".join(canvas_to_lines(canvas, strip_padding=strip_padding))
