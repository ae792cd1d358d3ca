# renderer/image.py
import logging
from pathlib import Path
import numpy as np
from PIL import Image as PILImage
from renderer.ppm import write_ppm

logger = logging.getLogger(__name__)

class Image:
    """
    An 8-bit RGB pixel buffer, initially black. Row 0 is the top of the image.
    """
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def pixels(self) -> np.ndarray:
        """The underlying (height, width, 3) uint8 array."""
        return self._pixels

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def set_pixel(self, x: int, y: int, color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color

    def get_pixel(self, x: int, y: int) -> tuple:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def fill_rect(self, x: int, y: int, width: int, height: int, color) -> None:
        """Fill the rectangle whose upper-left corner is (x, y)."""
        if x < 0 or y < 0 or width < 0 or height < 0 \
                or x + width > self.width or y + height > self.height:
            raise IndexError(
                f"Rectangle at ({x}, {y}) with size ({width}, {height}) out of bounds")
        self._pixels[y:y + height, x:x + width] = color

    def save(self, path) -> None:
        """
        Write the image to disk. `.ppm` files use the plain-text encoder;
        any other extension is handed to Pillow.
        """
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            write_ppm(self, path)
            return
        PILImage.fromarray(self._pixels).save(path)
        logger.info("Wrote %dx%d image to %s", self.width, self.height, path)
