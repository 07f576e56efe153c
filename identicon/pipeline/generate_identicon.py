"""
Identicon pipeline.
Threads a single Image record through hash → color → grid → odd filter →
pixel map → render, then hands the pixels to the writer.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from ..config import IdenticonConfig
from ..models.image import Image
from ..services.color_service import ColorService
from ..services.grid_service import GridService
from ..services.hash_service import HashService
from ..services.image_service import ImageService
from ..services.pixel_map_service import PixelMapService
from ..services.render_service import RenderService

logger = logging.getLogger(__name__)


def build_identicon(input: str, *, config: IdenticonConfig | None = None) -> Image:
    """
    Run every in-memory stage for `input`. No files are touched.

    Args:
        input: Seed string.
        config: Canvas and grid settings, read from the environment when omitted.

    Returns:
        Image: Fully populated record, `pixels` included.
    """
    config = config or IdenticonConfig.from_env()
    grid_service = GridService(config)

    image = HashService().hash_input(input)
    image = ColorService.pick_color(image)
    image = grid_service.build_grid(image)
    image = grid_service.filter_odd_squares(image)
    image = PixelMapService(config).build_pixel_map(image)
    return RenderService(config).draw_image(image)


def generate(
    input: str,
    *,
    config: IdenticonConfig | None = None,
    output_dir: Union[str, Path, None] = None,
) -> Path:
    """
    Build the identicon for `input` and write it as `<input>.png`.

    Returns:
        Path: Where the image was written. OSErrors from the write propagate.
    """
    config = config or IdenticonConfig.from_env()
    image = build_identicon(input, config=config)
    logger.info(f"Identicon for {input!r}: color rgb{image.color}, {len(image.grid)} cells")
    return ImageService(config).save(image, output_dir)
