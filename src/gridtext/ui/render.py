# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Rich rendering of a character canvas and its role canvas."""

from __future__ import annotations

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from .._util.logging_utils import _log_debug
from ..core.canvas import BLANK, PAD, Canvas, RoleCanvas, canvas_size, in_bounds
from ..core.config import DEFAULT_ROLE_STYLES


def _parse_styles(styles: dict[str, str]) -> dict[str, Style]:
    """Parse role style strings, dropping the ones rich cannot parse."""
    parsed: dict[str, Style] = {}
    for role, spec in styles.items():
        try:
            parsed[role] = Style.parse(spec) if spec else Style()
        except StyleSyntaxError as e:
            _log_debug(f"render: invalid style {spec!r} for role {role!r}: {e}")
    return parsed


def canvas_to_text(
    canvas: Canvas,
    role_canvas: RoleCanvas | None = None,
    styles: dict[str, str] | None = None,
) -> Text:
    """Convert *canvas* to a rich ``Text``, styling cells by their role.

    PAD cells are dropped (the glyph before them already spans two columns),
    trailing blanks of each row and trailing empty rows are trimmed, and cells
    whose role has no style are left unstyled.
    """
    parsed = _parse_styles(DEFAULT_ROLE_STYLES if styles is None else styles)
    width, height = canvas_size(canvas)
    rows: list[Text] = []
    for y in range(height):
        cells = [(x, canvas[x][y]) for x in range(width) if canvas[x][y] != PAD]
        while cells and cells[-1][1] == BLANK:
            cells.pop()
        row = Text()
        for x, cell in cells:
            role = None
            if role_canvas is not None and in_bounds(role_canvas, x, y):
                role = role_canvas[x][y]
            style = parsed.get(role) if role is not None else None
            row.append(cell, style=style or None)
        rows.append(row)
    while rows and not rows[-1].plain:
        rows.pop()
    return Text("\n").join(rows)


def print_canvas(
    canvas: Canvas,
    role_canvas: RoleCanvas | None = None,
    styles: dict[str, str] | None = None,
    console: Console | None = None,
) -> None:
    """Print *canvas* through a rich console (stdout by default)."""
    console = console or Console()
    console.print(canvas_to_text(canvas, role_canvas, styles), soft_wrap=True)
