"""
Shelf Rectangle Packer

Packs rectangles into horizontal shelves, tallest first.

Shelf Layout:
    +--------+------+----+.........   <- shelf 0, height of its first rect
    |   1    |  3   | 2  |
    +--------+--+---+----+.........   <- shelf 1
    |     4     | 5 |
    +-----------+---+..............

Each shelf accepts a rectangle when the rectangle is no taller than the shelf
and the shelf's used width plus the rectangle's width stays within the row
width limit. The first such shelf wins; otherwise a new shelf is opened under
the last one.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class Packable(Protocol):
    id: int
    width: int
    height: int


@dataclass(frozen=True)
class Placement:
    """Axis-aligned destination rectangle in canvas coordinates."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: "Placement") -> bool:
        return (
            self.x < other.right and other.x < self.right
            and self.y < other.bottom and other.y < self.bottom
        )

    def __str__(self) -> str:
        return f"({self.x},{self.y})-({self.right},{self.bottom})"


@dataclass
class Shelf:
    """A horizontal packing row."""
    y: int
    height: int
    used_width: int = 0


@dataclass
class PackResult:
    """Placements plus the canvas bounding box."""
    placements: Dict[int, Placement]
    width: int
    height: int
    shelves: List[Shelf] = field(default_factory=list)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


def sort_rectangles(rectangles: Iterable[Packable]) -> List[Packable]:
    """Order rectangles tallest first; equal heights keep ascending id order."""
    return sorted(rectangles, key=lambda r: (-r.height, r.id))


class ShelfPacker:
    """Packs rectangles using a greedy first-fit shelf algorithm."""

    def __init__(self, row_width_limit: int):
        if row_width_limit < 0:
            raise ValueError(f"row_width_limit must be >= 0, got {row_width_limit}")
        self.row_width_limit = row_width_limit
        # Zero-sized starting shelf; nothing with a positive height fits it
        self.shelves: List[Shelf] = [Shelf(y=0, height=0)]
        self.max_width = 0

    def _find_shelf(self, width: int, height: int) -> Optional[Shelf]:
        for shelf in self.shelves:
            if height <= shelf.height and shelf.used_width + width <= self.row_width_limit:
                return shelf
        return None

    def pack(self, width: int, height: int) -> Tuple[int, int]:
        """Place a rect and return its (x, y). Always succeeds."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Rectangle dimensions must be positive, got {width}x{height}")

        shelf = self._find_shelf(width, height)
        if shelf is not None:
            x, y = shelf.used_width, shelf.y
            shelf.used_width += width
            self.max_width = max(self.max_width, shelf.used_width)
            return x, y

        # New shelf under the last one. May exceed the limit when the rect
        # alone is wider than it.
        last = self.shelves[-1]
        shelf = Shelf(y=last.y + last.height, height=height, used_width=width)
        self.shelves.append(shelf)
        self.max_width = max(self.max_width, width)
        logger.debug(f"Opened shelf {len(self.shelves) - 1} at y={shelf.y} (height {height})")
        return 0, shelf.y

    @property
    def canvas_size(self) -> Tuple[int, int]:
        last = self.shelves[-1]
        return self.max_width, last.y + last.height


def pack_rectangles(rectangles: Iterable[Packable], row_width_limit: int) -> PackResult:
    """
    Pack rectangles into shelves in the order given.

    Callers normally pass the output of sort_rectangles(); packing taller
    rectangles first gives fewer, fuller shelves.

    Args:
        rectangles: Objects with id, width and height attributes
        row_width_limit: Maximum cumulative width of a shelf

    Returns:
        PackResult with one Placement per rectangle id and the canvas size.
        An empty input yields a (0, 0) canvas.
    """
    packer = ShelfPacker(row_width_limit)
    placements: Dict[int, Placement] = {}

    for rect in rectangles:
        if rect.id in placements:
            raise ValueError(f"Duplicate rectangle id: {rect.id}")
        x, y = packer.pack(rect.width, rect.height)
        placements[rect.id] = Placement(x, y, rect.width, rect.height)

    width, height = packer.canvas_size
    # Drop the zero-sized starting shelf from the public snapshot
    shelves = [Shelf(s.y, s.height, s.used_width) for s in packer.shelves[1:]]

    logger.info(f"Packed {len(placements)} rectangles into {width}x{height} ({len(shelves)} shelves)")
    return PackResult(placements=placements, width=width, height=height, shelves=shelves)
