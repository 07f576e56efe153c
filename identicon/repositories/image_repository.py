from pathlib import Path
from typing import BinaryIO, Union
import logging
import os
import tempfile
import numpy as np
from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def _file_mode() -> int:
    # mkstemp creates 0600 files; match what a plain open() would produce.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class ImageRepository:
    """
    Handles file I/O for rendered identicons.
    """

    @staticmethod
    def write_png(pixels: np.ndarray, fh: BinaryIO) -> None:
        PILImage.fromarray(pixels).save(fh, format="PNG")

    @classmethod
    def save(cls, pixels: np.ndarray, path: Union[str, Path]) -> Path:
        """
        Encode `pixels` as PNG and write them to `path` atomically.

        The bytes go to a temporary file next to the target, which is renamed
        into place only once fully written. On failure the temporary file is
        removed and the OSError propagates.
        """
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as fh:
                cls.write_png(pixels, fh)
            os.chmod(tmp_name, _file_mode())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Wrote {path}")
        return path

    @staticmethod
    def load(path: Union[str, Path]) -> np.ndarray:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        with PILImage.open(path) as img:
            return np.asarray(img.convert("RGB"))
