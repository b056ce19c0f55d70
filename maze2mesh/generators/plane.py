"""
Bounding plane generator for maze2mesh.

Builds the floor (and optional ceiling) rectangle spanning the X/Z
extent of the wall mesh.
"""

import logging

from ..models.geometry import BBox3D
from ..models.mesh import MeshGroup

logger = logging.getLogger(__name__)


class EmptyGeometryError(ValueError):
    """Raised when a bounding plane is requested from an empty mesh."""
    pass


def generate_bounding_plane(
    bbox: BBox3D,
    y: float,
    target: MeshGroup,
    facing_up: bool = True
) -> None:
    """
    Append a rectangle (4 vertices, 2 triangles) covering bbox in X/Z.

    Args:
        bbox: Source bounds; only min/max X and Z are used
        y: Height of the plane
        target: Group to append to
        facing_up: True for a floor (+Y normal), False for a ceiling

    Raises:
        EmptyGeometryError: If bbox is the empty sentinel
    """
    if not bbox.is_valid:
        raise EmptyGeometryError(
            "Cannot synthesize a bounding plane from an empty source mesh"
        )

    v0 = target.add_vertex(bbox.min.x, y, bbox.min.z)
    v1 = target.add_vertex(bbox.max.x, y, bbox.min.z)
    v2 = target.add_vertex(bbox.max.x, y, bbox.max.z)
    v3 = target.add_vertex(bbox.min.x, y, bbox.max.z)

    if facing_up:
        target.add_quad(v0, v3, v2, v1)
    else:
        target.add_quad(v0, v1, v2, v3)


def generate_floor(source: MeshGroup, target: MeshGroup) -> None:
    """Floor plane at the source's lowest Y."""
    if source.is_empty():
        raise EmptyGeometryError(
            f"Cannot build floor: mesh group '{source.name}' is empty"
        )

    generate_bounding_plane(source.bbox, source.bbox.min.y, target, facing_up=True)
    logger.debug(f"Floor plane at y={source.bbox.min.y} from '{source.name}' bounds")


def generate_ceiling(source: MeshGroup, target: MeshGroup) -> None:
    """Ceiling plane at the source's highest Y, facing down."""
    if source.is_empty():
        raise EmptyGeometryError(
            f"Cannot build ceiling: mesh group '{source.name}' is empty"
        )

    generate_bounding_plane(source.bbox, source.bbox.max.y, target, facing_up=False)
    logger.debug(f"Ceiling plane at y={source.bbox.max.y} from '{source.name}' bounds")
