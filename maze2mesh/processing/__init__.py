"""
Processing modules for maze2mesh.

Contains the mesh group set and the vertex welding optimizer.
"""

from .mesh_grouper import MazeMeshGroups
from .mesh_optimizer import (
    OptimizeResult,
    generate_vertex_remap,
    remap_index_buffer,
    remap_vertex_buffer,
    optimize_mesh,
)

__all__ = [
    'MazeMeshGroups',
    'OptimizeResult',
    'generate_vertex_remap',
    'remap_index_buffer',
    'remap_vertex_buffer',
    'optimize_mesh',
]
