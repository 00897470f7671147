"""
Image collection and concurrent loading.

Turns a directory of source images into Rectangle records ready for packing.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from shelfatlas.exceptions import ImageCollectionError, ImageLoadError
from shelfatlas.packing import sort_rectangles

logger = logging.getLogger(__name__)

# Case-sensitive: "photo.PNG" is not collected
IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.gif', '.bmp')


@dataclass(frozen=True)
class Rectangle:
    """One source image awaiting placement."""
    id: int                                 # 1-based index in collected order
    width: int
    height: int
    image: Optional[Image.Image] = None     # Decoded RGBA pixels
    path: Optional[str] = None


def is_image_file(filename: str) -> bool:
    """Check if the filename has a supported image extension.

    The extension starts at the last dot of the base name, so a file named
    just ".png" counts.
    """
    name = os.path.basename(filename)
    dot = name.rfind('.')
    return dot >= 0 and name[dot:] in IMAGE_EXTENSIONS


def collect_image_files(filedir: str) -> List[str]:
    """
    Recursively collect supported image files under a directory.

    Directories and files are visited in sorted order so the result (and
    the ids derived from it) is reproducible.

    Raises:
        ImageCollectionError: If the root or any subdirectory can't be read
    """
    if not os.path.isdir(filedir):
        raise ImageCollectionError(f"Not a directory: {filedir}")

    def _raise(err: OSError) -> None:
        raise ImageCollectionError(f"Cannot read {err.filename}: {err.strerror}") from err

    files = []
    for dirpath, dirnames, filenames in os.walk(filedir, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            if is_image_file(name):
                files.append(os.path.join(dirpath, name))

    logger.info(f"Collected {len(files)} image files from {filedir}")
    return files


def load_image(path: str) -> Image.Image:
    """
    Open and fully decode an image as RGBA.

    The file handle is released before returning.
    """
    with Image.open(path) as img:
        return img.convert('RGBA')


def _default_workers(count: int) -> int:
    return max(1, min(count, (os.cpu_count() or 1) + 4, 32))


def load_images(paths: Sequence[str], max_workers: Optional[int] = None) -> List[Rectangle]:
    """
    Load images concurrently and return them sorted tallest first.

    Each task owns exactly one slot of a preallocated result list, so the
    output order never depends on completion order. Every failure is
    collected; if any occurred, nothing is returned.

    Args:
        paths: Image file paths; ids are assigned as index + 1
        max_workers: Thread pool size (default: min(len(paths), cpus + 4, 32))

    Returns:
        Rectangles sorted by (height desc, id asc)

    Raises:
        ImageLoadError: With every (path, error) pair, in input order
    """
    if not paths:
        return []

    slots: List[Optional[Rectangle]] = [None] * len(paths)
    errors: List[Optional[Exception]] = [None] * len(paths)

    def _load(index: int, path: str) -> None:
        try:
            img = load_image(path)
        except Exception as e:
            errors[index] = e
            return
        slots[index] = Rectangle(
            id=index + 1,
            width=img.width,
            height=img.height,
            image=img,
            path=path,
        )
        logger.debug(f"Loaded {path} ({img.width}x{img.height})")

    workers = max_workers or _default_workers(len(paths))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_load, i, path) for i, path in enumerate(paths)]
    # Leaving the block waits for every task
    for future in futures:
        future.result()

    failures: List[Tuple[str, Exception]] = [
        (paths[i], err) for i, err in enumerate(errors) if err is not None
    ]
    if failures:
        logger.warning(f"{len(failures)} of {len(paths)} images failed to load")
        raise ImageLoadError(failures) from failures[0][1]

    logger.info(f"Loaded {len(slots)} images using {workers} workers")
    return sort_rectangles(slots)
