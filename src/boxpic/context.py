from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boxpic.analyzer import ALPHA_X_HUE_SATURATION_BRIGHTNESS, PixelAnalyzer
from boxpic.canvas import Canvas
from boxpic.frame import Frame
from boxpic.palette import PixelPalette
from boxpic.source import PixelSource

if TYPE_CHECKING:
    from boxpic.colourize import Colourizer
    from boxpic.renderer import Renderer


@dataclass(frozen=True)
class RenderOptions:
    """Optional refinements of the rendering process."""

    # Override the palette's own "empty" and "full" glyphs
    empty_character: str | None = None
    full_character: str | None = None
    analyzer: PixelAnalyzer | None = None


@dataclass
class RenderContext:
    """State and dependencies of a single render pass.

    One context is created per render and mutated while iterating: ``x`` and
    ``y`` hold the top-left pixel of the block being rendered. Never share a
    context between renders.
    """

    renderer: Renderer
    canvas: Canvas
    source: PixelSource
    palette: PixelPalette
    frame: Frame | None = None
    options: RenderOptions | None = None
    # Late-bound so the colourizer factory can receive this context
    colourizer: Colourizer | None = None
    x: int = 0
    y: int = 0
    empty_char: str = field(init=False)
    full_char: str = field(init=False)
    frame_width: int = field(init=False)
    analyzer: PixelAnalyzer = field(init=False)

    def __post_init__(self):
        options = self.options or RenderOptions()
        self.empty_char = options.empty_character if options.empty_character is not None else self.palette.empty
        self.full_char = options.full_character if options.full_character is not None else self.palette.full
        self.analyzer = options.analyzer or ALPHA_X_HUE_SATURATION_BRIGHTNESS
        # Content glyphs per row, partial blocks included
        self.frame_width = math.ceil(self.source.width / self.palette.pixel_width)
