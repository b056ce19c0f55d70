"""
ASCII tilemap loader for maze2mesh.

Reads a line-oriented text map into a TileGrid using two passes:
the first sizes the grid, the second copies each row into place.

Source format:
    - Lines starting with ';' are comments
    - Empty lines are ignored
    - Every other line is one grid row, one byte per cell
"""

from typing import BinaryIO, Iterator, Tuple
import logging

from ..config import COMMENT_PREFIX
from ..models.tilemap import TileGrid

logger = logging.getLogger(__name__)


class TilemapLoadError(Exception):
    """Raised when the tilemap source cannot be read."""

    def __init__(self, path: str, strerror: str):
        super().__init__(f"Error loading map '{path}': {strerror}")
        self.path = path
        self.strerror = strerror


def iter_map_lines(f: BinaryIO) -> Iterator[bytes]:
    """
    Yield the qualifying lines of a map source.

    A single trailing newline is stripped from each line. Lines that are
    then empty, and lines starting with ';', are skipped entirely.
    Call again after f.seek(0) to restart.

    Args:
        f: Binary file object positioned at the start of the map

    Yields:
        Row bytes without the newline
    """
    for line in f:
        if line.endswith(b'\n'):
            line = line[:-1]

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        yield line


def scan_dimensions(f: BinaryIO) -> Tuple[int, int]:
    """
    First pass: measure the grid.

    Returns:
        (max_w, max_h): longest qualifying line and number of such lines
    """
    max_w = 0
    max_h = 0

    for line in iter_map_lines(f):
        max_h += 1
        if len(line) > max_w:
            max_w = len(line)

    return max_w, max_h


def fill_grid(f: BinaryIO, grid: TileGrid) -> None:
    """
    Second pass: copy every qualifying line into its grid row.

    Bytes past the end of a short line keep the grid's zero fill.
    """
    offset = 0
    for line in iter_map_lines(f):
        assert len(line) <= grid.width, \
            f"Row of length {len(line)} exceeds grid width {grid.width}"
        assert offset + len(line) <= len(grid.data), \
            "Row offset runs past the end of the grid"

        grid.data[offset:offset + len(line)] = line
        offset += grid.width


def load_tilemap(filepath: str) -> TileGrid:
    """
    Load a tilemap from an ASCII map file.

    Args:
        filepath: Path to the map text file

    Returns:
        TileGrid sized to the longest row by the number of rows

    Raises:
        TilemapLoadError: If the file cannot be opened or read
    """
    logger.debug(f"Loading tilemap from {filepath}")

    try:
        with open(filepath, 'rb') as f:
            width, height = scan_dimensions(f)
            grid = TileGrid(width, height)

            f.seek(0)
            fill_grid(f, grid)
    except OSError as e:
        raise TilemapLoadError(filepath, e.strerror or str(e)) from e

    logger.info(f"Loaded {grid.width}x{grid.height} map '{filepath}'")

    if grid.is_empty():
        logger.warning(f"Map '{filepath}' has no rows")

    return grid
