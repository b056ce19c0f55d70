"""
Tilemap data model for maze2mesh.

Provides the TileGrid byte array loaded from an ASCII map and the
TileKind enum used to classify each cell.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import WALL_TILE, EMPTY_TILE, BUILDING_FIRST, BUILDING_LAST


class TileKind(Enum):
    """Tile classification by cell byte."""
    WALL = "wall"
    BUILDING = "building"
    EMPTY = "empty"
    UNKNOWN = "unknown"

    @classmethod
    def classify(cls, value: int) -> 'TileKind':
        """
        Classify a cell byte.

        Args:
            value: Cell value (0-255)

        Returns:
            WALL for '*', BUILDING for 'A'..'Z', EMPTY for ' ',
            UNKNOWN for everything else (including the zero fill byte)
        """
        if value == WALL_TILE:
            return cls.WALL
        elif BUILDING_FIRST <= value <= BUILDING_LAST:
            return cls.BUILDING
        elif value == EMPTY_TILE:
            return cls.EMPTY
        else:
            return cls.UNKNOWN


@dataclass
class TileGrid:
    """
    Rectangular tile array, row-major with stride == width.

    Attributes:
        width: Number of columns
        height: Number of rows
        data: width * height cell bytes; rows shorter than width in the
              source leave trailing cells at 0. None means all zero.
    """
    width: int
    height: int
    data: Optional[bytearray] = None

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid grid dimensions {self.width}x{self.height}")
        if self.data is None:
            self.data = bytearray(self.width * self.height)
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"Grid data has {len(self.data)} cells, expected {self.width}x{self.height}"
            )

    def index(self, col: int, row: int) -> int:
        """Flat offset of (col, row)."""
        return row * self.width + col

    def get(self, col: int, row: int) -> int:
        """Cell byte at (col, row)."""
        return self.data[self.index(col, row)]

    def set(self, col: int, row: int, value: int) -> None:
        """Overwrite the cell byte at (col, row)."""
        self.data[self.index(col, row)] = value

    def kind(self, col: int, row: int) -> TileKind:
        """Classification of the cell at (col, row)."""
        return TileKind.classify(self.get(col, row))

    def rows(self):
        """Iterate over each row as bytes."""
        for row in range(self.height):
            start = row * self.width
            yield bytes(self.data[start:start + self.width])

    def is_empty(self) -> bool:
        """True for a 0x0 grid."""
        return self.width == 0 or self.height == 0

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height})"


def format_tilemap(grid: TileGrid, fill_char: str = '.') -> str:
    """
    Render the grid as text, one line per row.

    Zero bytes (cells past the end of a short source row, or zeroed
    unknown tiles) are shown as fill_char.

    Args:
        grid: Grid to render
        fill_char: Placeholder for zero cells

    Returns:
        Multi-line string without a trailing newline
    """
    fill = ord(fill_char)
    lines = []
    for row in grid.rows():
        cells = bytes(fill if b == 0 else b for b in row)
        lines.append(cells.decode('latin-1'))
    return "\n".join(lines)
