from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from boxpic.canvas import Canvas, StringCanvas
from boxpic.colourize import Colourizer
from boxpic.context import RenderContext, RenderOptions
from boxpic.frame import Frame
from boxpic.palette import PixelPalette
from boxpic.source import PixelSource

logger = logging.getLogger(__name__)

ColourizerFactory = Callable[[RenderContext], Colourizer]


class Renderer:
    """Renders a pixel source as box art.

    The renderer holds no state of its own; everything a render pass needs
    lives in its ``RenderContext``, so one instance can serve many renders.
    The source is chunked into blocks of ``palette.pixel_width`` by
    ``palette.pixel_height`` pixels and every block becomes one glyph.
    Subclasses may override the individual steps.
    """

    def render(
        self,
        source: PixelSource,
        canvas: Canvas,
        palette: PixelPalette,
        frame: Frame | None = None,
        colourizer_factory: ColourizerFactory | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        """Append the box art of ``source`` to ``canvas``.

        ``colourizer_factory`` is called once with the new context and must
        return a fresh colourizer, as colourizers keep per-render state.
        """
        context = RenderContext(self, canvas, source, palette, frame, options)
        if colourizer_factory is not None:
            context.colourizer = colourizer_factory(context)
        logger.debug(
            "Rendering %dx%d source as %dx%d blocks of %dx%d pixels",
            source.width,
            source.height,
            context.frame_width,
            -(-source.height // palette.pixel_height),
            palette.pixel_width,
            palette.pixel_height,
        )
        self.render_internal(context)

    def render_to_string(
        self,
        source: PixelSource,
        palette: PixelPalette,
        frame: Frame | None = None,
        colourizer_factory: ColourizerFactory | None = None,
        options: RenderOptions | None = None,
    ) -> str:
        canvas = StringCanvas()
        self.render(source, canvas, palette, frame, colourizer_factory, options)
        return canvas.result()

    def render_internal(self, context: RenderContext) -> None:
        self.render_top_frame(context)
        self.render_body(context)
        self.render_bottom_frame(context)

    def render_top_frame(self, context: RenderContext) -> None:
        if context.frame is not None:
            context.frame.render_top(context.canvas, context.frame_width)

    def render_body(self, context: RenderContext) -> None:
        if context.source.width == 0 or context.source.height == 0:
            return
        for context.y in range(0, context.source.height, context.palette.pixel_height):
            self.render_row(context)

    def render_row(self, context: RenderContext) -> None:
        if context.frame is not None:
            context.frame.render_left(context.canvas)
        if context.colourizer is not None:
            context.colourizer.before_row()
        for context.x in range(0, context.source.width, context.palette.pixel_width):
            self.render_box(context)
        if context.colourizer is not None:
            context.colourizer.after_row()
        if context.frame is not None:
            context.frame.render_right(context.canvas)
        context.canvas.append_line()

    def render_box(self, context: RenderContext) -> None:
        colourizer = context.colourizer
        if colourizer is not None:
            colourizer.open_block()
        index = self.calculate_box_index(context)
        glyph = self.get_box_character(context, index)
        if colourizer is not None:
            colourizer.before_glyph()
        context.canvas.append(glyph)
        if colourizer is not None:
            colourizer.after_glyph()
            colourizer.close_block()

    def calculate_box_index(self, context: RenderContext) -> int:
        """Index of the glyph representing the block at (context.x, context.y).

        Sub-pixels outside the source are skipped, but the average brightness
        is still taken over the whole block area, so partial blocks at the
        right and bottom edges come out darker.
        """
        palette = context.palette
        source = context.source
        analyzer = context.analyzer
        colourizer = context.colourizer
        width, height = palette.pixel_width, palette.pixel_height

        index = 0
        total_brightness = 0.0
        for dy in range(min(height, source.height - context.y)):
            for dx in range(min(width, source.width - context.x)):
                pixel = source.get_pixel(context.x + dx, context.y + dy)
                is_set = analyzer.is_set(pixel)
                brightness = min(1.0, max(0.0, analyzer.brightness(pixel)))
                if colourizer is not None:
                    override = colourizer.process_sub_pixel(dx, dy, pixel, is_set, brightness)
                    # Anything but a boolean means "no opinion"
                    if isinstance(override, (bool, np.bool_)):
                        is_set = bool(override)
                if is_set:
                    index |= 1 << (width * dy + dx)
                total_brightness += brightness
        average = total_brightness / (width * height)

        shades = palette.shades_per_pixel
        if shades == 1 or index == 0:
            return index
        # Only reachable from subclasses that skip the brightness clamp
        return min((index - 1) * shades + int(average * shades), len(palette) - 1)

    def get_box_character(self, context: RenderContext, index: int) -> str:
        if index == 0:
            return context.empty_char
        if index == len(context.palette) - 1:
            return context.full_char
        return context.palette[index]

    def render_bottom_frame(self, context: RenderContext) -> None:
        if context.frame is not None:
            context.frame.render_bottom(context.canvas, context.frame_width)


DEFAULT_RENDERER = Renderer()


def render(
    source: PixelSource,
    palette: PixelPalette,
    frame: Frame | None = None,
    colourizer_factory: ColourizerFactory | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render ``source`` to a string with the default renderer."""
    return DEFAULT_RENDERER.render_to_string(source, palette, frame, colourizer_factory, options)
