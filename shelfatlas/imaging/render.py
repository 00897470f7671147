"""
Atlas rendering and PNG output.
"""

import logging
from typing import Iterable

from PIL import Image

from shelfatlas.exceptions import AtlasWriteError
from shelfatlas.packing import PackResult

from .loader import Rectangle

logger = logging.getLogger(__name__)

ATLAS_FILENAME = "atlas.png"


def render_atlas(rectangles: Iterable[Rectangle], pack_result: PackResult) -> Image.Image:
    """
    Copy every source image into a new canvas at its placement.

    Pixels are overwritten, not blended. Placements never overlap so the
    paste order does not matter.

    Args:
        rectangles: Loaded rectangles (each must carry an image)
        pack_result: Output of pack_rectangles() for the same rectangles

    Returns:
        Transparent RGBA canvas of pack_result.size with all images pasted
    """
    atlas = Image.new('RGBA', pack_result.size, (0, 0, 0, 0))

    for rect in rectangles:
        placement = pack_result.placements[rect.id]
        if rect.image is None:
            raise ValueError(f"Rectangle {rect.id} has no image data")
        if rect.image.size != (placement.width, placement.height):
            raise ValueError(
                f"Rectangle {rect.id} image is {rect.image.size[0]}x{rect.image.size[1]}, "
                f"placement is {placement.width}x{placement.height}"
            )
        atlas.paste(rect.image, (placement.x, placement.y))

    logger.debug(f"Rendered {len(pack_result.placements)} images into {atlas.width}x{atlas.height} canvas")
    return atlas


def save_atlas(atlas: Image.Image, path: str = ATLAS_FILENAME, compress_level: int = 9) -> None:
    """
    Save the atlas as a lossless PNG.

    Raises:
        AtlasWriteError: If the canvas is empty or the file can't be written
    """
    if atlas.width == 0 or atlas.height == 0:
        raise AtlasWriteError(f"Refusing to write empty {atlas.width}x{atlas.height} atlas")

    try:
        atlas.save(path, format='PNG', optimize=compress_level == 9, compress_level=compress_level)
    except OSError as e:
        raise AtlasWriteError(f"Could not write atlas to {path}: {e}") from e

    logger.info(f"Saved {atlas.width}x{atlas.height} atlas to {path}")
