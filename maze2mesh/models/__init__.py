"""
Data models for maze2mesh.
"""

from .geometry import Vertex, BBox3D, empty_bbox, vertex_min, vertex_max
from .tilemap import TileGrid, TileKind, format_tilemap
from .mesh import MeshGroup

__all__ = [
    'Vertex', 'BBox3D', 'empty_bbox', 'vertex_min', 'vertex_max',
    'TileGrid', 'TileKind', 'format_tilemap',
    'MeshGroup',
]
