"""
Rectangle packing for texture atlases.

Greedy first-fit shelf packing of rectangles sorted tallest first.
"""
from .shelf_packer import (
    Placement,
    Shelf,
    PackResult,
    ShelfPacker,
    sort_rectangles,
    pack_rectangles,
)

__all__ = [
    'Placement',
    'Shelf',
    'PackResult',
    'ShelfPacker',
    'sort_rectangles',
    'pack_rectangles',
]
