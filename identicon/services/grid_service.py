from __future__ import annotations
import logging
from typing import List, Sequence

from ..config import IdenticonConfig
from ..errors import MalformedDigestError
from ..models.grid_cell import GridCell
from ..models.image import Image

logger = logging.getLogger(__name__)


class GridService:
    """
    Builds the symmetric cell grid from the digest and drops the even cells.
    """

    def __init__(self, config: IdenticonConfig | None = None):
        self.config = config or IdenticonConfig.from_env()

    @staticmethod
    def mirror_row(row: Sequence[int]) -> List[int]:
        """
        Reflect a half row around its last element.

        e.g. [a, b, c] -> [a, b, c, b, a]
        """
        row = list(row)
        return row + row[-2::-1]

    def _chunk(self, hex_: Sequence[int]) -> List[List[int]]:
        width = self.config.row_width
        # Trailing bytes that do not fill a whole chunk are discarded.
        return [list(hex_[i:i + width]) for i in range(0, len(hex_) - width + 1, width)]

    def build_grid(self, image: Image) -> Image:
        """
        Expand the digest into grid_dimension mirrored rows and index every cell.

        Args:
            image (Image): Image with `hex` set.

        Returns:
            (Image): A new Image whose `grid` holds every (value, index) cell,
            row-major, indices 0..dim*dim-1.
        """
        hex_ = image.require("hex")
        dim = self.config.grid_dimension

        chunks = self._chunk(hex_)
        if len(chunks) < dim:
            raise MalformedDigestError(
                f"Need {dim} rows of {self.config.row_width} bytes, digest has {len(hex_)} bytes"
            )

        values = [value for chunk in chunks[:dim] for value in self.mirror_row(chunk)]
        grid = tuple(GridCell(value, index) for index, value in enumerate(values))
        return image.evolve(grid=grid)

    @staticmethod
    def filter_odd_squares(image: Image) -> Image:
        """Keep only odd-valued cells. Order and original indices are preserved."""
        grid = image.require("grid")
        kept = tuple(cell for cell in grid if cell.is_odd)
        logger.debug(f"{len(kept)}/{len(grid)} cells kept for {image.input!r}")
        return image.evolve(grid=kept)
