"""
Maze geometry generator for maze2mesh.

Walks the tile grid and emits one cube per wall or building tile into
the matching mesh group. Empty tiles produce nothing; unknown tiles
produce nothing and may optionally be zeroed in the grid.
"""

from dataclasses import dataclass
import logging

from ..config import TILE_SCALE, ZEROED_TILE
from ..models.tilemap import TileGrid, TileKind
from ..processing.mesh_grouper import MazeMeshGroups
from .cube import emit_cube

logger = logging.getLogger(__name__)


@dataclass
class GeometryStats:
    """Tile counts from one geometry pass."""
    walls: int = 0
    buildings: int = 0
    empty: int = 0
    unknown: int = 0
    zeroed: int = 0


def build_maze_geometry(
    grid: TileGrid,
    groups: MazeMeshGroups,
    scale: float = TILE_SCALE,
    zero_unknown: bool = False
) -> GeometryStats:
    """
    Emit cube geometry for every wall and building tile.

    Tiles are visited row by row. Cells are addressed with stride ==
    grid.width, so non-square maps are handled correctly.

    Args:
        grid: Loaded tile grid (modified in place if zero_unknown)
        groups: Target mesh groups; walls go to groups.maze,
                buildings to groups.houses
        scale: Tile edge length in mesh units
        zero_unknown: If True, overwrite unrecognized cells with 0

    Returns:
        GeometryStats with per-kind tile counts
    """
    stats = GeometryStats()

    for row in range(grid.height):
        for col in range(grid.width):
            kind = grid.kind(col, row)

            if kind == TileKind.WALL:
                emit_cube(groups.maze, col, row, grid.width, grid.height, scale)
                stats.walls += 1
            elif kind == TileKind.BUILDING:
                emit_cube(groups.houses, col, row, grid.width, grid.height, scale)
                stats.buildings += 1
            elif kind == TileKind.EMPTY:
                stats.empty += 1
            else:
                stats.unknown += 1
                if zero_unknown and grid.get(col, row) != ZEROED_TILE:
                    grid.set(col, row, ZEROED_TILE)
                    stats.zeroed += 1

    logger.info(
        f"Generated {stats.walls} wall cubes and {stats.buildings} building cubes "
        f"({stats.empty} empty, {stats.unknown} unknown tiles)"
    )
    if stats.zeroed:
        logger.debug(f"Zeroed {stats.zeroed} unknown tiles")

    return stats
