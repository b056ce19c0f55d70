"""
Unit cube emitter for maze2mesh.

Every wall or building tile becomes one axis-aligned cube. Cubes are
not merged or culled against their neighbours; shared corners are only
welded later by the mesh optimizer.

Mesh space: X across columns, Z across rows, Y up. The grid is
recentred on the origin with integer division, so odd-sized maps sit
half a tile off the true centre.
"""

from typing import Tuple

from ..models.mesh import MeshGroup

# Local corner offsets, in tile units.
# Bottom ring (y=0) then top ring (y=1), both CCW seen from above.
CUBE_CORNERS: Tuple[Tuple[float, float, float], ...] = (
    (-0.5, 0.0, -0.5),
    (0.5, 0.0, -0.5),
    (0.5, 0.0, 0.5),
    (-0.5, 0.0, 0.5),
    (-0.5, 1.0, -0.5),
    (0.5, 1.0, -0.5),
    (0.5, 1.0, 0.5),
    (-0.5, 1.0, 0.5),
)

# 12 triangles, CCW seen from outside (outward normals)
CUBE_TRIANGLES: Tuple[Tuple[int, int, int], ...] = (
    # bottom (-Y)
    (0, 1, 2), (0, 2, 3),
    # top (+Y)
    (4, 6, 5), (4, 7, 6),
    # front (-Z)
    (0, 4, 5), (0, 5, 1),
    # back (+Z)
    (3, 2, 6), (3, 6, 7),
    # left (-X)
    (0, 3, 7), (0, 7, 4),
    # right (+X)
    (1, 5, 6), (1, 6, 2),
)

CUBE_VERTEX_COUNT = len(CUBE_CORNERS)
CUBE_INDEX_COUNT = 3 * len(CUBE_TRIANGLES)


def tile_origin(
    col: int,
    row: int,
    width: int,
    height: int,
    scale: float
) -> Tuple[float, float, float]:
    """
    Mesh-space position of a tile's base centre.

    Uses truncating division for the centring offset:
        x = (col - width // 2) * scale
        z = (row - height // 2) * scale
    """
    return (
        (col - width // 2) * scale,
        0.0,
        (row - height // 2) * scale,
    )


def emit_cube(
    mesh: MeshGroup,
    col: int,
    row: int,
    width: int,
    height: int,
    scale: float
) -> None:
    """
    Append one tile cube (8 vertices, 12 triangles) to a mesh group.

    Args:
        mesh: Target group; its bbox grows with each vertex
        col, row: Tile coordinates in the grid
        width, height: Grid dimensions (for centring)
        scale: Tile edge length in mesh units
    """
    ox, oy, oz = tile_origin(col, row, width, height, scale)

    base = mesh.vertex_count()
    for cx, cy, cz in CUBE_CORNERS:
        mesh.add_vertex(ox + cx * scale, oy + cy * scale, oz + cz * scale)

    for a, b, c in CUBE_TRIANGLES:
        mesh.add_triangle(base + a, base + b, base + c)
