import argparse
import logging
import math
import sys
from functools import partial
from pathlib import Path

from boxpic.analyzer import ANALYZERS
from boxpic.canvas import StreamCanvas
from boxpic.colourize import LEGACY_PALETTES, CccTerminalColourizer
from boxpic.context import RenderOptions
from boxpic.frame import FRAMES
from boxpic.palette import PALETTES
from boxpic.renderer import DEFAULT_RENDERER
from boxpic.source import open_source
from boxpic.terminal import get_terminal_size, supports_truecolour

logger = logging.getLogger("boxpic")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as Unicode box-drawing art")
    parser.add_argument("image", help="Path to input image, rendered at its own size")
    parser.add_argument(
        "-p", "--palette", default="quadrants", choices=sorted(PALETTES), help="Glyph palette (default: quadrants)"
    )
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Enable ANSI colour output")
    parser.add_argument(
        "-l",
        "--legacy-palette",
        default=None,
        choices=sorted(LEGACY_PALETTES),
        help="Match colours against a 16-colour terminal palette instead of using 24-bit colour",
    )
    parser.add_argument("-f", "--frame", default=None, choices=sorted(FRAMES), help="Draw a frame around the output")
    parser.add_argument("--empty", default=None, help="Character for blocks with nothing set")
    parser.add_argument("--full", default=None, help="Character for blocks with everything set")
    parser.add_argument(
        "-a",
        "--analyzer",
        default="alpha-hsb",
        choices=sorted(ANALYZERS),
        help="How pixel brightness is measured (default: alpha-hsb)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug information")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    palette = PALETTES[args.palette]
    frame = FRAMES[args.frame] if args.frame else None
    legacy_palette = LEGACY_PALETTES[args.legacy_palette] if args.legacy_palette else None
    options = RenderOptions(empty_character=args.empty, full_character=args.full, analyzer=ANALYZERS[args.analyzer])

    source = open_source(image_path)
    columns = math.ceil(source.width / palette.pixel_width) + (2 if frame else 0)
    if columns > get_terminal_size(sys.stdout)[0]:
        logger.warning("Output is %d columns wide and will wrap; resize the image to fit", columns)

    factory = None
    if args.colour:
        if legacy_palette is None and not supports_truecolour():
            logger.warning("Terminal may not support 24-bit colour; try --legacy-palette")
        factory = partial(CccTerminalColourizer, limited_palette=legacy_palette)

    DEFAULT_RENDERER.render(source, StreamCanvas(sys.stdout), palette, frame, factory, options)
