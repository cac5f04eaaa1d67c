import colorsys
from typing import NamedTuple


class Colour(NamedTuple):
    """An RGBA colour, each channel in [0, 255]."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def black(cls) -> "Colour":
        return cls(0, 0, 0)

    def brightness(self) -> float:
        """HSB brightness (lightness) between 0.0 (black) and 1.0 (white)."""
        return colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)[1]

    def luminance(self) -> float:
        # NTSC weights
        return 0.3 * self.r + 0.59 * self.g + 0.11 * self.b
