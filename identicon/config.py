from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import os

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables
load_dotenv()

DIGEST_SIZE = 16  # md5


@dataclass(frozen=True)
class IdenticonConfig:
    """
    Rendering and output settings.
    Defaults reproduce the classic 250x250 canvas with a 5x5 grid.
    """
    canvas_size: int = 250  # pixels per edge
    grid_dimension: int = 5  # cells per edge
    output_dir: Path = Path(".")
    output_ext: str = ".png"
    background: Tuple[int, int, int] = (255, 255, 255)

    def __post_init__(self):
        if self.grid_dimension < 1 or self.grid_dimension % 2 == 0:
            raise ConfigurationError(
                f"grid_dimension must be a positive odd number, got {self.grid_dimension}"
            )
        if self.canvas_size < self.grid_dimension or self.canvas_size % self.grid_dimension:
            raise ConfigurationError(
                f"canvas_size {self.canvas_size} does not split into "
                f"{self.grid_dimension} equal cells"
            )
        needed = self.row_width * self.grid_dimension
        if needed > DIGEST_SIZE:
            raise ConfigurationError(
                f"a {self.grid_dimension}x{self.grid_dimension} grid needs {needed} digest "
                f"bytes, md5 only yields {DIGEST_SIZE}"
            )
        if len(self.background) != 3 or not all(0 <= c <= 255 for c in self.background):
            raise ConfigurationError(f"background must be an RGB triple, got {self.background}")

    @property
    def cell_size(self) -> int:
        return self.canvas_size // self.grid_dimension

    @property
    def row_width(self) -> int:
        """Digest bytes consumed per row before mirroring."""
        return (self.grid_dimension + 1) // 2

    @classmethod
    def from_env(cls) -> IdenticonConfig:
        try:
            return cls(
                canvas_size=int(os.getenv("IDENTICON_CANVAS_SIZE", "250")),
                grid_dimension=int(os.getenv("IDENTICON_GRID_DIMENSION", "5")),
                output_dir=Path(os.getenv("IDENTICON_OUTPUT_DIR", ".")),
                output_ext=os.getenv("IDENTICON_OUTPUT_EXT", ".png") or ".png",
                background=_parse_rgb(os.getenv("IDENTICON_BACKGROUND", "255,255,255")),
            )
        except ValueError as err:
            if isinstance(err, ConfigurationError):
                raise
            raise ConfigurationError(f"Invalid identicon environment settings: {err}") from err


def _parse_rgb(raw: str) -> Tuple[int, int, int]:
    parts = tuple(int(p) for p in raw.split(","))
    if len(parts) != 3:
        raise ConfigurationError(f"expected 'r,g,b', got {raw!r}")
    return parts
