"""
Image I/O for atlas building.

Includes directory collection, concurrent decoding, canvas rendering and PNG output.
"""
from .loader import Rectangle, IMAGE_EXTENSIONS, collect_image_files, load_image, load_images
from .render import ATLAS_FILENAME, render_atlas, save_atlas

__all__ = [
    'Rectangle',
    'IMAGE_EXTENSIONS',
    'collect_image_files',
    'load_image',
    'load_images',
    'ATLAS_FILENAME',
    'render_atlas',
    'save_atlas',
]
