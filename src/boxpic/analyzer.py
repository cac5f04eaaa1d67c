from typing import Callable

from boxpic.colour import Colour


class PixelAnalyzer:
    """Decides whether a pixel is "set" and how bright it is.

    The brightness function is expected to return a value between 0.0 (black)
    and 1.0 (white). Subclass and override ``brightness`` or ``is_set`` to
    change the logic, or pass a different function.
    """

    def __init__(self, brightness_func: Callable[[Colour], float]):
        self._brightness_func = brightness_func

    def brightness(self, pixel: Colour) -> float:
        return self._brightness_func(pixel)

    def is_set(self, pixel: Colour) -> bool:
        return self.brightness(pixel) > 0.5


ALPHA = PixelAnalyzer(lambda pixel: pixel.a / 256)
HUE_SATURATION_BRIGHTNESS = PixelAnalyzer(lambda pixel: pixel.brightness())
ALPHA_X_HUE_SATURATION_BRIGHTNESS = PixelAnalyzer(lambda pixel: pixel.a / 256 * pixel.brightness())

ANALYZERS = {
    "alpha": ALPHA,
    "hsb": HUE_SATURATION_BRIGHTNESS,
    "alpha-hsb": ALPHA_X_HUE_SATURATION_BRIGHTNESS,
}
