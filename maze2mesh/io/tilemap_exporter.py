"""
Binary tilemap snapshot for maze2mesh.

Layout (native byte order, no padding):
    int32  width
    int32  height
    uint8  cells[width * height]   row-major, stride == width

The header uses the host's byte order, so snapshots are only portable
between machines of the same endianness.
"""

import struct
import logging

from ..models.tilemap import TileGrid
from .errors import ExportError

logger = logging.getLogger(__name__)

# '=' keeps native byte order but drops native alignment padding
HEADER_FORMAT = '=ii'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


def export_tilemap(grid: TileGrid, filepath: str) -> int:
    """
    Write the tile grid to a binary snapshot.

    Args:
        grid: Grid to serialize (written verbatim)
        filepath: Output file path

    Returns:
        Number of bytes written

    Raises:
        ExportError: If the file cannot be written
    """
    header = struct.pack(HEADER_FORMAT, grid.width, grid.height)

    try:
        with open(filepath, 'wb') as f:
            f.write(header)
            f.write(grid.data)
    except OSError as e:
        raise ExportError.from_os_error(filepath, e) from e

    size = HEADER_SIZE + len(grid.data)
    logger.info(
        f"Exported tilemap: {grid.width}x{grid.height} ({size} bytes) to {filepath}"
    )
    return size


def read_tilemap(filepath: str) -> TileGrid:
    """
    Read a binary snapshot written by export_tilemap().

    Args:
        filepath: Snapshot path

    Returns:
        TileGrid with the stored dimensions and cells

    Raises:
        ValueError: If the file is truncated or has trailing bytes
    """
    with open(filepath, 'rb') as f:
        blob = f.read()

    if len(blob) < HEADER_SIZE:
        raise ValueError(f"Tilemap snapshot too short: {len(blob)} bytes")

    width, height = struct.unpack_from(HEADER_FORMAT, blob)
    if width < 0 or height < 0:
        raise ValueError(f"Invalid tilemap dimensions {width}x{height}")

    cells = blob[HEADER_SIZE:]
    if len(cells) != width * height:
        raise ValueError(
            f"Tilemap snapshot has {len(cells)} cells, expected {width * height}"
        )

    return TileGrid(width, height, bytearray(cells))
