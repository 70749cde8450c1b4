"""Command-line interface for attrtext.

Usage::

    attrtext "Hello World" --color red             # print styled document as JSON
    attrtext "Title" --preset academic --style heading_1
    attrtext "Note" --underline single --underline-color "#0000ff"
    attrtext --list-styles                          # list presets and style names
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from attrtext import __version__
from attrtext.config import OPTIONS, builder_from_options
from attrtext.errors import AttrTextError
from attrtext.style_manager import StyleManager


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attrtext",
        description="Apply a style to a string and print the resulting styled text.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to style.",
    )
    parser.add_argument(
        "-p", "--preset",
        default="default",
        choices=StyleManager.PRESETS,
        help="Style preset (default: %(default)s).",
    )
    parser.add_argument(
        "-s", "--style",
        help="Start from a named style of the preset (e.g. body, heading_1).",
    )
    for name, description in OPTIONS.items():
        flag = "--" + name.replace("_", "-")
        if name == "uppercase":
            parser.add_argument(flag, dest=name, action="store_true", default=None, help=description)
        else:
            parser.add_argument(flag, dest=name, help=description)
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available presets and style names and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.list_styles:
        print("Available style presets:")
        for preset in StyleManager.PRESETS:
            print(f"  - {preset}")
        print("Style names:")
        for name in StyleManager().list_style_names():
            print(f"  - {name}")
        return 0

    if args.text is None:
        parser.error("the following argument is required: text")

    manager = StyleManager(args.preset)
    if args.style and not manager.has_style(args.style):
        print(f"Error: unknown style {args.style!r} in preset {args.preset!r}", file=sys.stderr)
        return 1
    base = manager.get_style(args.style) if args.style else None

    options = {name: getattr(args, name) for name in OPTIONS}
    try:
        builder = builder_from_options(options, base=base)
    except AttrTextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    document = builder.build(args.text)
    indent = None if args.compact else 2
    print(json.dumps(document.to_dict(), indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
