from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple, Protocol

import numpy as np

from boxpic.colour import Colour

if TYPE_CHECKING:
    from boxpic.context import RenderContext

logger = logging.getLogger(__name__)

ESC = "\033"
RESET_COLOURS = f"{ESC}[39m{ESC}[49m"


class Colourizer(Protocol):
    """Hooks the renderer calls to augment the output with colour information.

    Per row the order is ``before_row``, then for every block ``open_block``,
    ``process_sub_pixel`` for each in-bounds sub-pixel, ``before_glyph``,
    ``after_glyph``, ``close_block``, and finally ``after_row``. Blocks at the
    right and bottom edges may be partial.
    """

    def before_row(self) -> None: ...

    def after_row(self) -> None: ...

    def open_block(self) -> None: ...

    def process_sub_pixel(self, dx: int, dy: int, pixel: Colour, is_set: bool, brightness: float) -> bool | None:
        """Return True/False to override whether the sub-pixel is set, None to leave it."""
        ...

    def before_glyph(self) -> None: ...

    def after_glyph(self) -> None: ...

    def close_block(self) -> None: ...


class NullColourizer:
    """No-op colourizer to inherit from when only some hooks are needed."""

    def before_row(self) -> None:
        pass

    def after_row(self) -> None:
        pass

    def open_block(self) -> None:
        pass

    def process_sub_pixel(self, dx: int, dy: int, pixel: Colour, is_set: bool, brightness: float) -> bool | None:
        return None

    def before_glyph(self) -> None:
        pass

    def after_glyph(self) -> None:
        pass

    def close_block(self) -> None:
        pass


class LegacyTerminalColour(NamedTuple):
    """A palette colour and its SGR foreground code; the background code is 10 higher."""

    colour: Colour
    foreground_code: int

    @property
    def background_code(self) -> int:
        return self.foreground_code + 10


_FOREGROUND_CODES = tuple(range(30, 38)) + tuple(range(90, 98))


class LegacyTerminalPalette(Sequence):
    """The 16-colour palette of a virtual terminal.

    Colours are given in SGR order: black, red, green, yellow, blue, magenta,
    cyan, white, then the bright variants of the same.
    """

    def __init__(self, colours: Sequence[Colour | tuple[int, ...]]):
        if len(colours) != len(_FOREGROUND_CODES):
            raise ValueError(f"A legacy terminal palette needs exactly 16 colours, got {len(colours)}")
        self._entries = tuple(
            LegacyTerminalColour(Colour(*colour), code) for colour, code in zip(colours, _FOREGROUND_CODES)
        )
        self._rgb = np.array([entry.colour[:3] for entry in self._entries], dtype=np.int64)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._entries[index]
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Index must be between 0 and {len(self._entries) - 1}, got {index}")
        return self._entries[index]

    def find_closest(self, target: Colour) -> LegacyTerminalColour:
        """Nearest entry by squared RGB distance; the lowest index wins ties."""
        diff = self._rgb - np.array(target[:3], dtype=np.int64)
        distances = (diff * diff).sum(axis=1)
        return self._entries[int(np.argmin(distances))]


# Windows console defaults before Windows Terminal
LEGACY_CMD = LegacyTerminalPalette(
    [
        (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
        (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
        (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
        (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
    ]
)  # fmt: skip

# Windows Terminal's Campbell scheme
CAMPBELL = LegacyTerminalPalette(
    [
        (0, 0, 0), (197, 15, 31), (19, 161, 14), (193, 156, 0),
        (0, 55, 218), (136, 23, 152), (58, 150, 221), (204, 204, 204),
        (118, 118, 118), (231, 72, 86), (22, 198, 12), (249, 241, 165),
        (59, 120, 255), (180, 0, 158), (97, 214, 214), (255, 255, 255),
    ]
)  # fmt: skip

LEGACY_PALETTES = {
    "cmd": LEGACY_CMD,
    "campbell": CAMPBELL,
}


class ColourTotals:
    """Running RGB sums of one luminance cluster of a block."""

    def __init__(self):
        self.clear()

    def add(self, colour: Colour) -> None:
        self.r += colour.r
        self.g += colour.g
        self.b += colour.b
        self.count += 1

    @property
    def average(self) -> Colour:
        if self.count == 0:
            return Colour.black()
        return Colour(self.r // self.count, self.g // self.count, self.b // self.count)

    def clear(self) -> None:
        self.r = self.g = self.b = self.count = 0


class CccTerminalColourizer:
    """Colours each glyph using a variant of Color Cell Compression.

    The sub-pixels of a block are split into two clusters around the block's
    average NTSC luminance. The brighter cluster's mean colour becomes the
    foreground and the darker one's the background, written as terminal
    escape sequences. Without a ``limited_palette`` full 24-bit colour codes
    are emitted; with one, the closest of its 16 colours is picked instead
    (this does not change what the terminal displays for those codes).

    Bright sub-pixels are also reported as "set", so the glyph shape follows
    the colour split.

    Stateful: build a new instance for every render.
    """

    def __init__(self, context: RenderContext, limited_palette: LegacyTerminalPalette | None = None):
        self.context = context
        self.limited_palette = limited_palette
        palette = context.palette
        self._luminance_map = [0.0] * (palette.pixel_width * palette.pixel_height)
        self._average_luminance = 0.0
        self._above = ColourTotals()
        self._below = ColourTotals()
        self._previous_foreground: str | None = None
        self._previous_background: str | None = None
        logger.debug("Colourizing with %s", "a 16-colour palette" if limited_palette else "24-bit colour")

    def open_block(self) -> None:
        context = self.context
        width, height = context.palette.pixel_width, context.palette.pixel_height
        total = 0.0
        for dy in range(min(height, context.source.height - context.y)):
            for dx in range(min(width, context.source.width - context.x)):
                luminance = context.source.get_pixel(context.x + dx, context.y + dy).luminance()
                self._luminance_map[dy * width + dx] = luminance
                total += luminance
        self._average_luminance = total / (width * height)

    def process_sub_pixel(self, dx: int, dy: int, pixel: Colour, is_set: bool, brightness: float) -> bool:
        above = self._luminance_map[dy * self.context.palette.pixel_width + dx] > self._average_luminance
        (self._above if above else self._below).add(pixel)
        return above

    def before_glyph(self) -> None:
        foreground = self._above.average
        background = self._below.average
        if self.limited_palette:
            foreground_code = f"{ESC}[{self.limited_palette.find_closest(foreground).foreground_code}m"
            background_code = f"{ESC}[{self.limited_palette.find_closest(background).background_code}m"
        else:
            foreground_code = f"{ESC}[38;2;{foreground.r};{foreground.g};{foreground.b}m"
            background_code = f"{ESC}[48;2;{background.r};{background.g};{background.b}m"

        if foreground_code != self._previous_foreground:
            self.context.canvas.append(foreground_code)
            self._previous_foreground = foreground_code
        if background_code != self._previous_background:
            self.context.canvas.append(background_code)
            self._previous_background = background_code

    def after_glyph(self) -> None:
        pass

    def close_block(self) -> None:
        self._above.clear()
        self._below.clear()

    def before_row(self) -> None:
        self.context.canvas.append(RESET_COLOURS)
        self._previous_foreground = None
        self._previous_background = None

    def after_row(self) -> None:
        self.context.canvas.append(RESET_COLOURS)
