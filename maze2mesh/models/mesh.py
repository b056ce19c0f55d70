"""
Mesh data model for maze2mesh.

Provides MeshGroup, the named bundle of vertices and triangle indices
that becomes one object in the exported OBJ file.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional

from .geometry import Vertex, BBox3D, empty_bbox


@dataclass
class MeshGroup:
    """
    Generated mesh data for one logical object (walls, houses, floor, ceiling).

    Attributes:
        name: Object name written to the OBJ file
        vertices: List of (x, y, z) vertex positions
        indices: Flat triangle index buffer (0-based, local to this group)
        bbox: Running axis-aligned bounds of every vertex added so far

    Note on indexing:
        - Indices always come in multiples of 3 and refer to this group's
          own vertex list. The OBJ exporter converts them to 1-based,
          file-global indices.
        - The bbox stays inverted until the first vertex is added; use
          bounds() when the group may be empty.
    """
    name: str
    vertices: List[Tuple[float, float, float]] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    bbox: BBox3D = field(default_factory=empty_bbox)

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.vertices)

    def triangle_count(self) -> int:
        """Get number of triangles."""
        return len(self.indices) // 3

    def add_vertex(self, x: float, y: float, z: float) -> int:
        """
        Add a vertex, grow the bbox, and return its 0-based index.

        Args:
            x, y, z: Vertex coordinates

        Returns:
            0-based index of the new vertex
        """
        self.vertices.append((x, y, z))
        self.bbox = self.bbox.include(Vertex(x, y, z))
        return len(self.vertices) - 1

    def add_triangle(self, v1: int, v2: int, v3: int) -> None:
        """
        Add a triangle.

        Args:
            v1, v2, v3: Vertex indices (0-based, CCW order)
        """
        self.indices.extend((v1, v2, v3))

    def add_quad(self, v1: int, v2: int, v3: int, v4: int) -> None:
        """
        Add a quad as two triangles: (v1, v2, v3) and (v1, v3, v4).

        Args:
            v1, v2, v3, v4: Vertex indices (0-based, CCW order)
        """
        self.add_triangle(v1, v2, v3)
        self.add_triangle(v1, v3, v4)

    def triangles(self):
        """Iterate over (a, b, c) index triples."""
        for i in range(0, len(self.indices), 3):
            yield (self.indices[i], self.indices[i + 1], self.indices[i + 2])

    def replace_buffers(
        self,
        vertices: List[Tuple[float, float, float]],
        indices: List[int]
    ) -> None:
        """
        Swap in new vertex and index buffers and rebuild the bbox from them.

        A compacted buffer may keep fewer distinct positions than the one
        it replaces (rounded welds), so the old bbox cannot be reused.
        """
        self.vertices = vertices
        self.indices = indices
        self.recompute_bbox()

    def recompute_bbox(self) -> BBox3D:
        """Rebuild the bbox from the current vertex list."""
        bbox = empty_bbox()
        for x, y, z in self.vertices:
            bbox = bbox.include(Vertex(x, y, z))
        self.bbox = bbox
        return bbox

    def clear(self) -> None:
        """Clear all geometry and reset the bbox."""
        self.vertices.clear()
        self.indices.clear()
        self.bbox = empty_bbox()

    def is_empty(self) -> bool:
        """Check if mesh has no geometry."""
        return len(self.vertices) == 0

    def bounds(self) -> Optional[BBox3D]:
        """Bounding box, or None if the group is empty."""
        if not self.bbox.is_valid:
            return None
        return self.bbox

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if len(self.indices) % 3 != 0:
            errors.append(
                f"Index count {len(self.indices)} is not a multiple of 3"
            )

        max_idx = len(self.vertices)

        for i, idx in enumerate(self.indices):
            if idx < 0 or idx >= max_idx:
                errors.append(
                    f"Index {i} has invalid vertex index {idx} "
                    f"(valid range: 0-{max_idx - 1})"
                )

        return errors

    def __repr__(self) -> str:
        return (
            f"MeshGroup(name={self.name!r}, vertices={len(self.vertices)}, "
            f"triangles={self.triangle_count()})"
        )
