"""
Core shelfatlas client API

Provides the AtlasBuilder class for packing a directory of images and the
AtlasResult class for reporting and saving.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from PIL import Image

from shelfatlas.exceptions import NoImagesFoundError
from shelfatlas.imaging import (
    ATLAS_FILENAME,
    collect_image_files,
    load_images,
    render_atlas,
    save_atlas,
)
from shelfatlas.packing import Placement, pack_rectangles
from shelfatlas.schema import AtlasConfig, AtlasManifest, ManifestEntry

logger = logging.getLogger(__name__)


@dataclass
class AtlasResult:
    """
    A packed and rendered atlas.

    Attributes:
        canvas: Rendered RGBA atlas image
        placements: Rectangle id -> Placement in canvas pixels
        width: Atlas width
        height: Atlas height
        sources: Rectangle id -> source image path
        compress_level: PNG compression level used by save()
    """
    canvas: Image.Image
    placements: Dict[int, Placement]
    width: int
    height: int
    sources: Dict[int, str] = field(default_factory=dict)
    compress_level: int = 9

    def save(self, path: str = ATLAS_FILENAME) -> None:
        """
        Save the atlas as PNG.

        Raises:
            AtlasWriteError: If the file can't be written
        """
        save_atlas(self.canvas, path, compress_level=self.compress_level)

    def report_lines(self, filename: str = ATLAS_FILENAME) -> List[str]:
        """
        Human-readable summary: size, one line per id, success line.

        Example:
            >>> for line in result.report_lines():
            ...     print(line)
            Atlas size: 150 x 100
            Packed rectangles:
            ID: 1, Rect: (0,0)-(50,100)
            ...
        """
        lines = [f"Atlas size: {self.width} x {self.height}", "Packed rectangles:"]
        for rect_id in sorted(self.placements):
            lines.append(f"ID: {rect_id}, Rect: {self.placements[rect_id]}")
        lines.append(f"Atlas saved as {filename} successfully.")
        return lines

    def to_manifest(self, image: str = ATLAS_FILENAME) -> AtlasManifest:
        """Describe every placement with pixel rect and normalized UVs."""
        entries = []
        for rect_id in sorted(self.placements):
            p = self.placements[rect_id]
            entries.append(ManifestEntry(
                id=rect_id,
                source=self.sources.get(rect_id),
                rect=[p.x, p.y, p.width, p.height],
                uv=[
                    p.x / self.width,
                    p.y / self.height,
                    p.right / self.width,
                    p.bottom / self.height,
                ],
            ))
        return AtlasManifest(image=image, resolution=[self.width, self.height], entries=entries)

    def save_manifest(self, path: str, image: str = ATLAS_FILENAME) -> None:
        """Write the manifest as JSON."""
        with open(path, 'w') as f:
            json.dump(self.to_manifest(image).model_dump(), f, indent=2)


class AtlasBuilder:
    """
    Packs images into a single texture atlas.

    Examples:
        Basic usage:
        >>> builder = AtlasBuilder()
        >>> builder.build("sprites/").save("atlas.png")

        Narrower rows:
        >>> result = AtlasBuilder(row_width_limit=512).build("sprites/")
        >>> print(result.width, result.height)
    """

    def __init__(
        self,
        row_width_limit: int = 1080,
        max_workers: Optional[int] = None,
        compress_level: int = 9,
    ):
        """
        Initialize the builder.

        Args:
            row_width_limit: Maximum cumulative width of a shelf
            max_workers: Image loading pool size (None = automatic)
            compress_level: PNG compression level 0-9

        Raises:
            pydantic.ValidationError: On invalid settings
        """
        self.config = AtlasConfig(
            row_width_limit=row_width_limit,
            max_workers=max_workers,
            compress_level=compress_level,
        )

    @property
    def row_width_limit(self) -> int:
        return self.config.row_width_limit

    def build(self, filedir: str) -> AtlasResult:
        """
        Collect, load, pack and render every image under filedir.

        Raises:
            ImageCollectionError: If filedir can't be traversed
            NoImagesFoundError: If filedir holds no supported images
            ImageLoadError: If any image fails to load
        """
        files = collect_image_files(filedir)
        if not files:
            raise NoImagesFoundError(f"No image files found in {filedir}")
        return self.build_from_files(files)

    def build_from_files(self, paths: Sequence[str]) -> AtlasResult:
        """Same as build() for an explicit list of image paths."""
        if not paths:
            raise NoImagesFoundError("No image files given")

        rectangles = load_images(paths, max_workers=self.config.max_workers)
        packed = pack_rectangles(rectangles, self.config.row_width_limit)
        canvas = render_atlas(rectangles, packed)

        return AtlasResult(
            canvas=canvas,
            placements=packed.placements,
            width=packed.width,
            height=packed.height,
            sources={r.id: r.path for r in rectangles},
            compress_level=self.config.compress_level,
        )
