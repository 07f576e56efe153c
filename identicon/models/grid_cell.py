from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    """
    One cell of the logical grid.
    `index` is the position in the full (unfiltered) layout, row-major.
    """
    value: int  # digest byte, 0..255
    index: int

    @property
    def is_odd(self) -> bool:
        return self.value % 2 == 1

    def __iter__(self):
        # Lets a cell unpack as a plain `(value, index)` pair.
        yield self.value
        yield self.index
