from __future__ import annotations
from ..config import IdenticonConfig
from ..models.image import Image, Rect


class PixelMapService:
    """Maps surviving grid cells to square pixel regions on the canvas."""

    def __init__(self, config: IdenticonConfig | None = None):
        self.config = config or IdenticonConfig.from_env()

    def cell_rect(self, index: int) -> Rect:
        """
        Args:
            index (int): Row-major cell position in the full grid.

        Returns:
            ((x0, y0), (x1, y1)): Top-left and bottom-right corners of the cell.
        """
        dim = self.config.grid_dimension
        size = self.config.cell_size

        horizontal = (index % dim) * size
        vertical = (index // dim) * size

        top_left = (horizontal, vertical)
        bottom_right = (horizontal + size, vertical + size)
        return top_left, bottom_right

    def build_pixel_map(self, image: Image) -> Image:
        grid = image.require("grid")
        return image.evolve(pixel_map=tuple(self.cell_rect(cell.index) for cell in grid))
