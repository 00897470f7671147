"""
shelfatlas - Pack a directory of images into a single texture atlas

Images are loaded concurrently, sorted tallest first and placed with a
first-fit shelf packer, then rendered into one PNG.
"""

from shelfatlas.client import AtlasBuilder, AtlasResult

__version__ = "0.1.0"
__all__ = ["AtlasBuilder", "AtlasResult"]
