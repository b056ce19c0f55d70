"""
Mesh grouping for maze2mesh.

Holds the four mesh groups produced per run. Each group is exported as
a separate object in the OBJ file.

Groups (export order):
- maze: wall tiles ('*')
- houses: building tiles ('A'..'Z'), all letters combined
- floor: rectangle under the wall bounds
- ceiling: rectangle over the wall bounds (optional)
"""

from typing import Dict

from ..config import GROUP_WALLS, GROUP_BUILDINGS, GROUP_FLOOR, GROUP_CEILING
from ..models.mesh import MeshGroup


class MazeMeshGroups:
    """
    The per-run set of mesh groups.

    All groups start empty; generators append to them and the optimizer
    compacts them in place.
    """

    def __init__(self):
        self.maze = MeshGroup(GROUP_WALLS)
        self.houses = MeshGroup(GROUP_BUILDINGS)
        self.floor = MeshGroup(GROUP_FLOOR)
        self.ceiling = MeshGroup(GROUP_CEILING)

    def get_all_groups(self) -> Dict[str, MeshGroup]:
        """
        Get all mesh groups as a dictionary, in export order.

        Returns:
            Dictionary mapping group name to MeshGroup
        """
        return {
            self.maze.name: self.maze,
            self.houses.name: self.houses,
            self.floor.name: self.floor,
            self.ceiling.name: self.ceiling,
        }

    def get_non_empty_groups(self) -> Dict[str, MeshGroup]:
        """
        Get only non-empty mesh groups, in export order.

        Returns:
            Dictionary mapping group name to non-empty MeshGroup
        """
        return {
            name: mesh
            for name, mesh in self.get_all_groups().items()
            if not mesh.is_empty()
        }

    def total_vertices(self) -> int:
        """Sum of vertex counts over all groups."""
        return sum(m.vertex_count() for m in self.get_all_groups().values())

    def total_triangles(self) -> int:
        """Sum of triangle counts over all groups."""
        return sum(m.triangle_count() for m in self.get_all_groups().values())

    def get_stats_summary(self) -> str:
        """Get a human-readable summary of group sizes."""
        return "\n".join(
            f"{name}: {mesh.vertex_count()} vertices, {mesh.triangle_count()} triangles"
            for name, mesh in self.get_all_groups().items()
        )
