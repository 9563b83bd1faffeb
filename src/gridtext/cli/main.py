#!/usr/bin/env python3

import argparse
import os
from pathlib import Path

import yaml

from .. import __version__
from .._util.ansi import (
    gray as _gray,
    supports_color as _supports_color,
    violet as _violet,
    yes_no as _yes_no,
)
from .._util.logging_utils import _log_debug
from ..core.canvas import canvas_to_string, mk_canvas, mk_role_canvas
from ..core.config import (
    get_canvas_size as _get_canvas_size,
    get_role_styles as _get_role_styles,
    get_strip_padding as _get_strip_padding,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    state_root as _state_root,
)
from ..core.draw import draw_text
from ..core.tables import classify
from ..core.width import display_width, pad_to_width
from ..ui.render import print_canvas


def _cmd_width(texts: list[str]) -> None:
    """Print the display width of each argument."""
    color_enabled = _supports_color()
    for text in texts:
        print(f"{display_width(text)}\t{_gray(text, color_enabled)}")


def _cmd_classify(text: str) -> None:
    """Print one line per codepoint with its width class."""
    color_enabled = _supports_color()
    for ch in text:
        cls = classify(ord(ch))
        glyph = ascii(ch) if cls.columns == 0 or not ch.isprintable() else ch
        print(
            f"U+{ord(ch):04X}  {_violet(pad_to_width(cls.value, 10), color_enabled)}  "
            f"{glyph}"
        )


def _cmd_draw(args: argparse.Namespace) -> None:
    """Draw text onto a fresh canvas and print it."""
    cfg_width, cfg_height = _get_canvas_size()
    width = args.width if args.width is not None else cfg_width
    height = args.height if args.height is not None else cfg_height
    if width <= 0 or height <= 0:
        raise SystemExit(f"Canvas size must be positive, got {width}x{height}")

    canvas = mk_canvas(width, height)
    role_canvas = mk_role_canvas(width, height) if args.role else None
    if args.base:
        draw_text(canvas, 0, args.row, args.base)
    draw_text(
        canvas,
        args.column,
        args.row,
        args.text,
        force_overwrite=args.overwrite,
        role_canvas=role_canvas,
        role=args.role,
    )
    _log_debug(
        f"draw: {width}x{height} at ({args.column},{args.row}) "
        f"text_width={display_width(args.text)} overwrite={args.overwrite}"
    )

    if args.keep_padding or args.plain or not _supports_color():
        strip = _get_strip_padding() and not args.keep_padding
        print(canvas_to_string(canvas, strip_padding=strip))
        return
    print_canvas(canvas, role_canvas, _get_role_styles())


def _print_config() -> None:
    """Display configuration search order and resolved settings."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    print("- Global config search order:")
    for p in _global_config_search_paths():
        print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(p.is_file(), color_enabled)})")

    width, height = _get_canvas_size()
    print(f"- Default canvas size: {width}x{height}")
    print(f"- Strip padding on output: {_yes_no(_get_strip_padding(), color_enabled)}")
    print("- Role styles:")
    for role, style in sorted(_get_role_styles().items()):
        print(f"  • {_violet(role, color_enabled)}: {style or '(none)'}")

    print("Writable locations (write):")
    log_path = _state_root() / "gridtext.log"
    print(f"- Debug log: {_gray(str(log_path), color_enabled)}")

    print("Environment overrides (if set):")
    for var in (
        "GRIDTEXT_CONFIG_FILE",
        "GRIDTEXT_STATE_DIR",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="gridtext",
        description="gridtext – measure and draw wide Unicode text on a character grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gridtext width 'Hello中文'\n"
            "  gridtext classify '⚠️'\n"
            "  gridtext draw '中文' --width 10\n"
            "  gridtext draw 'AB' --base 'XYZ' --overwrite\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"gridtext {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_width = sub.add_parser("width", help="Print the display width of each text")
    p_width.add_argument("text", nargs="+")

    p_classify = sub.add_parser("classify", help="Show the width class of every codepoint")
    p_classify.add_argument("text")

    p_draw = sub.add_parser("draw", help="Draw text onto a blank canvas and print it")
    p_draw.add_argument("text")
    p_draw.add_argument("--width", type=int, help="Canvas width (default from config)")
    p_draw.add_argument("--height", type=int, help="Canvas height (default from config)")
    p_draw.add_argument("-x", "--column", type=int, default=0, help="Start column")
    p_draw.add_argument("-y", "--row", type=int, default=0, help="Row")
    p_draw.add_argument(
        "--overwrite", action="store_true", help="Replace cells that already hold text"
    )
    p_draw.add_argument("--base", help="Text drawn at column 0 before TEXT")
    p_draw.add_argument("--role", help="Role used to style the drawn text")
    p_draw.add_argument(
        "--keep-padding", action="store_true", help="Show wide-glyph pad markers in the output"
    )
    p_draw.add_argument("--plain", action="store_true", help="Print without styling")

    sub.add_parser("config", help="Show configuration paths and resolved settings")

    args = parser.parse_args()

    try:
        if args.cmd == "width":
            _cmd_width(args.text)
        elif args.cmd == "classify":
            _cmd_classify(args.text)
        elif args.cmd == "draw":
            _cmd_draw(args)
        elif args.cmd == "config":
            _print_config()
    except yaml.YAMLError as e:
        raise SystemExit(f"Invalid config file {_global_config_path()}: {e}")


if __name__ == "__main__":
    main()
