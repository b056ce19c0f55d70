"""
Mesh generators for maze2mesh.

Contains the unit cube emitter, the maze geometry builder that walks
the tile grid, and the floor/ceiling bounding plane generator.
"""

from .cube import (
    CUBE_CORNERS,
    CUBE_TRIANGLES,
    CUBE_VERTEX_COUNT,
    CUBE_INDEX_COUNT,
    tile_origin,
    emit_cube,
)
from .maze_generator import build_maze_geometry, GeometryStats
from .plane import (
    EmptyGeometryError,
    generate_bounding_plane,
    generate_floor,
    generate_ceiling,
)

__all__ = [
    'CUBE_CORNERS',
    'CUBE_TRIANGLES',
    'CUBE_VERTEX_COUNT',
    'CUBE_INDEX_COUNT',
    'tile_origin',
    'emit_cube',
    'build_maze_geometry',
    'GeometryStats',
    'EmptyGeometryError',
    'generate_bounding_plane',
    'generate_floor',
    'generate_ceiling',
]
