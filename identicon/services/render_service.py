from __future__ import annotations
from io import BytesIO
import logging
import numpy as np

from ..config import IdenticonConfig
from ..models.image import Image
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class RenderService:
    """
    Rasterizes the pixel map into an RGB numpy canvas.
    Fills are fully opaque with no anti-aliasing, so output is byte-stable.
    """

    def __init__(self, config: IdenticonConfig | None = None):
        self.config = config or IdenticonConfig.from_env()

    def blank_canvas(self) -> np.ndarray:
        size = self.config.canvas_size
        canvas = np.empty((size, size, 3), dtype=np.uint8)
        canvas[:, :] = self.config.background
        return canvas

    def draw_image(self, image: Image) -> Image:
        """
        Paint every rectangle of `pixel_map` in `color` on a fresh canvas.

        Rectangles run from top_left (inclusive) to bottom_right (exclusive),
        so every cell is exactly cell_size x cell_size pixels.
        """
        pixel_map = image.require("pixel_map")
        color = image.require("color")

        canvas = self.blank_canvas()
        for (x0, y0), (x1, y1) in pixel_map:
            canvas[y0:y1, x0:x1] = color

        logger.debug(f"Rendered {len(pixel_map)} cells for {image.input!r} in rgb{color}")
        return image.evolve(pixels=canvas)

    def encode_png(self, image: Image) -> bytes:
        buffer = BytesIO()
        ImageRepository.write_png(image.require("pixels"), buffer)
        return buffer.getvalue()
