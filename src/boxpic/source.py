from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image

from boxpic.colour import Colour


class PixelSource(Protocol):
    """Read-only access to the pixels of a bitmap.

    The size of the source determines the size of the rendered output.
    """

    width: int
    height: int

    def get_pixel(self, x: int, y: int) -> Colour:
        """Return the colour at column ``x``, row ``y``."""
        ...


class ArraySource:
    """Pixel source backed by a numpy array.

    Accepts (H, W) grayscale, (H, W, 3) RGB or (H, W, 4) RGBA arrays with
    channel values in [0, 255].
    """

    def __init__(self, array: np.ndarray):
        arr = np.asarray(array)
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Expected integer channel values in [0, 255], got dtype {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError(f"Expected channel values in [0, 255], got range [{arr.min()}, {arr.max()}]")
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, np.newaxis], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W), (H, W, 3) or (H, W, 4) array, got shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=arr.dtype)
            arr = np.concatenate([arr, alpha], axis=2)
        self._pixels = arr.astype(np.uint8)
        self.height, self.width = self._pixels.shape[:2]

    def get_pixel(self, x: int, y: int) -> Colour:
        r, g, b, a = self._pixels[y, x]
        return Colour(int(r), int(g), int(b), int(a))


class ImageSource(ArraySource):
    """Pixel source backed by a Pillow image of any mode."""

    def __init__(self, image: Image.Image):
        super().__init__(np.asarray(image.convert("RGBA")))


def open_source(image: Image.Image | str | Path) -> ImageSource:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    return ImageSource(image)
