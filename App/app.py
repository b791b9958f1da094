"""Pixel Remap - Main entry point."""

import argparse
import sys
from pathlib import Path

from config_manager import ConfigManager
from image_processing import ImageRecolorer, parse_rgba
from models import CONFIG_FILE, RemapMode
from ui import Console, InputClosed, RemapSession


def parse_mapping(text: str) -> "tuple[str, tuple[int, int, int, int]]":
    """argparse type for ``--map LABEL=RGBA``."""
    label, sep, value = text.partition("=")
    color = parse_rgba(value)
    if not sep or not label.strip() or color is None:
        raise argparse.ArgumentTypeError(
            f"expected LABEL=R,G,B,A or LABEL=#RRGGBB[AA], got '{text}'"
        )
    return label.strip(), color


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-remap",
        description="Recolor the palette of pixel-art images by semantic label.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "images", nargs="*", help="Images to recolor; prompts for paths when omitted"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RemapMode],
        default=None,
        help="Walk every color (all) or pick labels by name (single); configured mode when omitted",
    )
    parser.add_argument(
        "--map",
        dest="mappings",
        action="append",
        type=parse_mapping,
        default=[],
        metavar="LABEL=RGBA",
        help="Replacement for a label, e.g. 'Outline=20,12,28,255' (repeatable)",
    )
    parser.add_argument(
        "--output", default=None, help="Output file name, written next to each source image"
    )
    parser.add_argument("--swatch", default=None, help="Write an SVG swatch sheet to this path")
    parser.add_argument("--config", type=Path, default=CONFIG_FILE, help="Configuration file")
    parser.add_argument(
        "--list", action="store_true", help="Print the labeled palette and exit"
    )
    return parser


def iter_sources(images: "list[str]", console: Console):
    """Yield image paths from the command line, or ask until a blank reply."""
    if images:
        yield from images
        return
    while True:
        try:
            path = console.ask("Enter path of file: ")
        except InputClosed:
            return
        if not path:
            return
        yield path


def main(argv: "list[str] | None" = None, console: Console | None = None) -> int:
    """Run the remap loop over one or more images.

    Returns:
        Process exit status, 1 if any image failed
    """
    args = build_parser().parse_args(argv)
    console = console or Console()

    config = ConfigManager(args.config).load()
    recolorer = ImageRecolorer(config)
    session = RemapSession(
        recolorer,
        console,
        mode=RemapMode(args.mode) if args.mode else None,
        presets=dict(args.mappings),
        output_name=args.output,
        swatch_path=args.swatch,
    )

    # Outputs must never land on an image that is still to be read
    session.protected.update(Path(image).resolve() for image in args.images)

    failures = 0
    for source in iter_sources(args.images, console):
        session.protected.add(Path(source).resolve())
        try:
            if args.list:
                session.list_palette(source)
            else:
                session.run(source)
        except (ValueError, InputClosed) as e:
            failures += 1
            console.warn(f"Error: {e}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
