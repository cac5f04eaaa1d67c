from dataclasses import dataclass

from boxpic import charsets


def required_length(pixel_width: int, pixel_height: int, shades_per_pixel: int) -> int:
    """Number of glyphs a palette with the given geometry must provide."""
    if pixel_width < 1 or pixel_height < 1 or shades_per_pixel < 1:
        raise ValueError(
            f"Palette dimensions must be positive, got {pixel_width}x{pixel_height} "
            f"with {shades_per_pixel} shades"
        )
    combinations = 2 ** (pixel_width * pixel_height)
    if shades_per_pixel == 1:
        return combinations
    return (combinations - 1) * shades_per_pixel + 1


@dataclass(frozen=True)
class PixelPalette:
    """Maps a sub-pixel/shade index to a glyph.

    ``characters`` is ordered from "empty" to "full". For binary palettes
    (one shade) index bit ``pixel_width * dy + dx`` is set when the sub-pixel
    at (dx, dy) of the block is set, so the characters go left-to-right, then
    top-to-bottom as binary numbers. Shaded palettes reserve index 0 for
    "nothing set" and spread ``shades_per_pixel`` brightness buckets after
    each bit pattern.
    """

    pixel_width: int
    pixel_height: int
    shades_per_pixel: int
    characters: tuple[str, ...]

    def __post_init__(self):
        # Accept any iterable of glyphs (including a plain string) but store a tuple
        object.__setattr__(self, "characters", tuple(self.characters))
        expected = required_length(self.pixel_width, self.pixel_height, self.shades_per_pixel)
        if len(self.characters) != expected:
            raise ValueError(
                f"A {self.pixel_width}x{self.pixel_height} palette with {self.shades_per_pixel} shades "
                f"needs exactly {expected} characters, got {len(self.characters)}"
            )

    def __len__(self) -> int:
        return len(self.characters)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self.characters):
            raise IndexError(
                f"Pixel index must be between 0 and {len(self.characters) - 1}, got {index} "
                f"({self.pixel_width}x{self.pixel_height} palette with {self.shades_per_pixel} shades)"
            )
        return self.characters[index]

    @property
    def empty(self) -> str:
        return self.characters[0]

    @property
    def full(self) -> str:
        return self.characters[-1]

    @property
    def character_aspect_ratio(self) -> float:
        """Aspect ratio of one sub-pixel, assuming terminal cells twice as tall as wide.

        Use it to resize the source image before rendering so the output isn't stretched.
        """
        return self.pixel_width / (self.pixel_height / 2)


# Very high compatibility
BOOLEAN = PixelPalette(1, 1, 1, charsets.BOOLEAN)
# High compatibility (Consolas, Courier New, Cascadia Code, Lucida Console, ...)
HALVES = PixelPalette(1, 2, 1, charsets.HALVES)
QUADRANTS = PixelPalette(2, 2, 1, charsets.QUADRANTS)
# Low compatibility, needs a font such as Cascadia Code
THIRDS = PixelPalette(1, 3, 1, charsets.THIRDS)
QUARTERS = PixelPalette(1, 4, 1, charsets.QUARTERS)
SEXTANTS = PixelPalette(2, 3, 1, charsets.SEXTANTS)
OCTANTS = PixelPalette(2, 4, 1, charsets.OCTANTS)
SHADES = PixelPalette(1, 1, 4, charsets.SHADES)

PALETTES = {
    "boolean": BOOLEAN,
    "halves": HALVES,
    "thirds": THIRDS,
    "quarters": QUARTERS,
    "quadrants": QUADRANTS,
    "sextants": SEXTANTS,
    "octants": OCTANTS,
    "shades": SHADES,
}
