from __future__ import annotations
from pathlib import Path
from typing import Union
import numpy as np

from ..config import IdenticonConfig
from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """Output helpers. No pipeline logic, only naming and persistence."""

    def __init__(self, config: IdenticonConfig | None = None):
        self.config = config or IdenticonConfig.from_env()
        self.image_repository = ImageRepository()

    def output_path(self, image: Image, output_dir: Union[str, Path, None] = None) -> Path:
        """
        Args:
            image (Image): Identicon whose input names the file.
            output_dir (str | Path | None): Overrides the configured directory.

        Returns:
            (Path): `<output_dir>/<input><ext>`.
        """
        folder = Path(output_dir) if output_dir is not None else self.config.output_dir
        return folder / f"{image.input}{self.config.output_ext}"

    def save(self, image: Image, output_dir: Union[str, Path, None] = None) -> Path:
        """
        Business-level method to save the rendered identicon.
        """
        return self.image_repository.save(image.require("pixels"), self.output_path(image, output_dir))

    def load(self, path: Union[str, Path]) -> np.ndarray:
        """Read a written identicon back as an RGB array."""
        return self.image_repository.load(path)
