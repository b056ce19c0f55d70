"""
Input/Output modules for maze2mesh.
"""

from .errors import ExportError
from .tilemap_loader import (
    TilemapLoadError,
    iter_map_lines,
    scan_dimensions,
    load_tilemap,
)
from .obj_exporter import (
    EmptyMapError,
    ExportStats,
    export_mesh_groups,
    validate_obj_file,
)
from .tilemap_exporter import export_tilemap, read_tilemap

__all__ = [
    'ExportError',
    # Tilemap loading
    'TilemapLoadError',
    'iter_map_lines',
    'scan_dimensions',
    'load_tilemap',
    # OBJ export
    'EmptyMapError',
    'ExportStats',
    'export_mesh_groups',
    'validate_obj_file',
    # Tilemap snapshot
    'export_tilemap',
    'read_tilemap',
]
