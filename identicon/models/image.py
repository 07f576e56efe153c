from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Tuple
import numpy as np

from ..errors import MissingStageError
from .grid_cell import GridCell

Color = Tuple[int, int, int]
Point = Tuple[int, int]
Rect = Tuple[Point, Point]  # (top_left, bottom_right)


@dataclass(frozen=True)
class Image:
    """
    Record threaded through the identicon pipeline.
    Every stage returns a new Image with one more field filled in;
    nothing is mutated in place.
    """
    input: str
    hex: Tuple[int, ...] | None = None  # 16 digest bytes
    color: Color | None = None  # RGB
    grid: Tuple[GridCell, ...] | None = None
    pixel_map: Tuple[Rect, ...] | None = None
    pixels: np.ndarray | None = field(default=None, compare=False)  # Shape (H, W, 3), dtype uint8, RGB order.

    def evolve(self, **changes) -> Image:
        return replace(self, **changes)

    def require(self, name: str):
        """Return a field set by an earlier stage, or fail loudly."""
        value = getattr(self, name)
        if value is None:
            raise MissingStageError(f"Image.{name} is not set for input {self.input!r}")
        return value
