"""gridtext package.

Terminal display width of Unicode text, and width-aware drawing of text onto
a column-major character canvas.

Modules:
- gridtext.core.tables: Codepoint width classification tables
- gridtext.core.width: Display width of strings
- gridtext.core.canvas: Canvas allocation and serialisation
- gridtext.core.draw: Width-aware text drawing
- gridtext.core.config: Global YAML configuration
- gridtext.ui.render: Rich rendering of canvases
- gridtext.cli: CLI entry point package (gridtext)
- gridtext._util: Internal helpers (ANSI colors, logging)
"""

from .core.canvas import BLANK, PAD, canvas_to_string, mk_canvas, mk_role_canvas
from .core.draw import draw_text
from .core.tables import (
    VS16,
    WidthClass,
    classify,
    is_emoji_modifiable,
    is_fullwidth_char,
    is_zero_width,
)
from .core.width import display_width, pad_to_width

__all__ = [
    "BLANK",
    "PAD",
    "VS16",
    "WidthClass",
    "canvas_to_string",
    "classify",
    "display_width",
    "draw_text",
    "is_emoji_modifiable",
    "is_fullwidth_char",
    "is_zero_width",
    "mk_canvas",
    "mk_role_canvas",
    "pad_to_width",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("gridtext")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["project"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
