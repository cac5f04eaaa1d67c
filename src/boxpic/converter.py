import logging
from functools import partial
from pathlib import Path

from PIL import Image

from boxpic.colourize import CccTerminalColourizer, LegacyTerminalPalette
from boxpic.context import RenderOptions
from boxpic.frame import Frame
from boxpic.palette import QUADRANTS, PixelPalette
from boxpic.renderer import DEFAULT_RENDERER
from boxpic.source import open_source

logger = logging.getLogger(__name__)


def image_to_boxes(
    image: Image.Image | str | Path,
    palette: PixelPalette = QUADRANTS,
    colour: bool = False,
    legacy_palette: LegacyTerminalPalette | None = None,
    frame: Frame | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render an image (or a path to one) as box art.

    The image is used at its own size: every ``palette.pixel_width`` by
    ``palette.pixel_height`` pixels become one character, so resize it
    beforehand to control the output dimensions.
    """
    source = open_source(image)
    factory = None
    if colour:
        factory = partial(CccTerminalColourizer, limited_palette=legacy_palette)
    elif legacy_palette is not None:
        logger.warning("Legacy palette given without colour output; ignoring it")
    return DEFAULT_RENDERER.render_to_string(source, palette, frame, factory, options)
