#!/usr/bin/env python3
"""
kittik-shapes - Main Entry Point

Inspect, resolve and render serialized terminal shapes.
"""

import argparse
import logging
import sys
from pathlib import Path


def read_source(source):
    """Read shape JSON from a file path, '-' for stdin, or inline text."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not source.lstrip().startswith("{") and path.is_file():
        return path.read_text(encoding="utf-8")
    return source


def get_viewport(args):
    """Build the viewport from --columns/--rows, falling back to the terminal."""
    from kittik_shapes.shapes.layout import Viewport

    terminal = Viewport.from_terminal()
    return Viewport(
        args.columns if args.columns is not None else terminal.columns,
        args.rows if args.rows is not None else terminal.rows,
    )


def run_parse(args):
    """Parse and display a serialized shape."""
    from kittik_shapes.shapes import ShapeEncoder, ShapeError, ShapeValidator, load_shape

    try:
        shape = load_shape(read_source(args.shape))
    except ShapeError as e:
        print(f"Error: {e}")
        return 1

    print(f"Variant: {type(shape).__name__}")
    print(f"Normalized: {shape.to_json()}")
    print()
    print(ShapeEncoder.format_for_display(shape, multiline=True))

    valid, issues = ShapeValidator.validate_shape(shape)
    if not valid:
        print()
        print("Issues:")
        for issue in issues:
            print(f"  - {issue}")
    return 0


def run_resolve(args):
    """Print the absolute geometry of a shape for a viewport."""
    from kittik_shapes.shapes import ShapeError, load_shape

    viewport = get_viewport(args)
    try:
        shape = load_shape(read_source(args.shape))
        geometry = shape.get_geometry(viewport)
    except ShapeError as e:
        print(f"Error: {e}")
        return 1

    print(f"Viewport: {viewport.columns}x{viewport.rows}")
    print(f"width:  {geometry.width}")
    print(f"height: {geometry.height}")
    print(f"x:      {geometry.x}")
    print(f"y:      {geometry.y}")
    return 0


def run_render(args):
    """Render a shape onto a text canvas and print it."""
    from kittik_shapes.render import TextCanvas
    from kittik_shapes.shapes import ShapeError, load_shape

    canvas = TextCanvas.for_viewport(get_viewport(args))
    try:
        shape = load_shape(read_source(args.shape))
        shape.render(canvas)
    except ShapeError as e:
        print(f"Error: {e}")
        return 1
    except NotImplementedError:
        print(f"Error: {type(shape).__name__} cannot be rendered")
        return 1

    print(canvas.flush())
    return 0


def add_viewport_arguments(parser):
    parser.add_argument(
        "-c", "--columns",
        type=int,
        default=None,
        help="Viewport columns (default: terminal width)"
    )
    parser.add_argument(
        "-r", "--rows",
        type=int,
        default=None,
        help="Viewport rows (default: terminal height)"
    )


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="kittik-shapes - inspect and render terminal shapes"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse and display a serialized shape")
    parse_parser.add_argument("shape", help="Shape JSON, a file containing it, or '-' for stdin")

    # Resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Print resolved geometry")
    resolve_parser.add_argument("shape", help="Shape JSON, a file containing it, or '-' for stdin")
    add_viewport_arguments(resolve_parser)

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a shape as text")
    render_parser.add_argument("shape", help="Shape JSON, a file containing it, or '-' for stdin")
    add_viewport_arguments(render_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s"
        )

    if args.command == "parse":
        return run_parse(args)
    elif args.command == "resolve":
        return run_resolve(args)
    elif args.command == "render":
        return run_render(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
