"""
Core geometry types for maze2mesh.

Provides Vertex and BBox3D value records used throughout the pipeline
for representing mesh-space points and the bounds of mesh groups.
"""

from dataclasses import dataclass
import math


@dataclass(frozen=True, slots=True)
class Vertex:
    """3D point in mesh space."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple:
        """Return (x, y, z)."""
        return (self.x, self.y, self.z)

    def __sub__(self, other: 'Vertex') -> 'Vertex':
        """Vector subtraction."""
        return Vertex(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: 'Vertex') -> 'Vertex':
        """Vector addition."""
        return Vertex(self.x + other.x, self.y + other.y, self.z + other.z)


def vertex_min(a: Vertex, b: Vertex) -> Vertex:
    """Component-wise minimum of two vertices."""
    return Vertex(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def vertex_max(a: Vertex, b: Vertex) -> Vertex:
    """Component-wise maximum of two vertices."""
    return Vertex(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


@dataclass(frozen=True, slots=True)
class BBox3D:
    """
    Axis-aligned bounding box in 3D.

    An empty box is inverted (min > max on every axis), see empty_bbox().
    Growing it with include() yields the tight box of all included points.
    """
    min: Vertex
    max: Vertex

    def include(self, v: Vertex) -> 'BBox3D':
        """Return a new bbox grown to contain v."""
        return BBox3D(vertex_min(self.min, v), vertex_max(self.max, v))

    @property
    def is_valid(self) -> bool:
        """True once at least one point has been included."""
        return (
            self.min.x <= self.max.x and
            self.min.y <= self.max.y and
            self.min.z <= self.max.z
        )

    def contains(self, v: Vertex) -> bool:
        """Check if point is inside bbox (inclusive)."""
        return (
            self.min.x <= v.x <= self.max.x and
            self.min.y <= v.y <= self.max.y and
            self.min.z <= v.z <= self.max.z
        )

    @property
    def size(self) -> Vertex:
        """Extent along each axis."""
        return self.max - self.min

    @property
    def center(self) -> Vertex:
        """Center point of bbox."""
        return Vertex(
            (self.min.x + self.max.x) / 2,
            (self.min.y + self.max.y) / 2,
            (self.min.z + self.max.z) / 2
        )


def empty_bbox() -> BBox3D:
    """Return the inverted sentinel box that any first point will replace."""
    return BBox3D(
        Vertex(math.inf, math.inf, math.inf),
        Vertex(-math.inf, -math.inf, -math.inf)
    )
