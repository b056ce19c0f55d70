"""
Vertex welding for maze2mesh.

Turns the unindexed "cube soup" of a mesh group into a compact indexed
mesh: identical vertices are merged, the index buffer is rewritten to
point at the survivors, and the triangle count is left unchanged.

Vertices are compared as packed float32 triples (12 bytes each), the
same way the GPU would see them. New indices are handed out in order of
first appearance in the vertex buffer, so a buffer with no duplicates
maps onto itself and welding twice changes nothing.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..models.mesh import MeshGroup

logger = logging.getLogger(__name__)

VERTEX_DTYPE = np.float32
VERTEX_STRIDE = 3 * np.dtype(VERTEX_DTYPE).itemsize


@dataclass
class OptimizeResult:
    """Outcome of welding one mesh group."""
    name: str
    vertices_before: int = 0
    vertices_after: int = 0
    triangles: int = 0

    @property
    def vertices_removed(self) -> int:
        return self.vertices_before - self.vertices_after


def _vertex_keys(
    vertices: Sequence[Tuple[float, float, float]],
    precision: Optional[int]
) -> np.ndarray:
    """One opaque 12-byte key per vertex."""
    data = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)

    if precision is not None:
        # + 0.0 folds -0.0 into 0.0 so rounded twins share a key
        data = np.round(data, precision) + 0.0

    packed = np.ascontiguousarray(data.astype(VERTEX_DTYPE))
    return packed.view(np.dtype((np.void, VERTEX_STRIDE))).reshape(-1)


def generate_vertex_remap(
    indices: Sequence[int],
    vertices: Sequence[Tuple[float, float, float]],
    precision: Optional[int] = None
) -> Tuple[int, np.ndarray]:
    """
    Build the old-index to new-index table for a vertex buffer.

    Args:
        indices: Triangle index buffer (validated against vertices)
        vertices: Unindexed vertex buffer
        precision: If set, round to this many decimals before comparing

    Returns:
        (unique_count, remap) where remap[i] is the new index of vertex i
        and unique_count <= len(vertices)

    Raises:
        ValueError: If the index buffer is not a triangle list over vertices
    """
    vertex_count = len(vertices)
    idx = np.asarray(indices, dtype=np.int64)

    if idx.size % 3 != 0:
        raise ValueError(f"Index count {idx.size} is not a multiple of 3")

    if idx.size and (idx.min() < 0 or idx.max() >= vertex_count):
        raise ValueError(
            f"Index buffer references vertices outside 0-{vertex_count - 1}"
        )

    if vertex_count == 0:
        return 0, np.empty(0, dtype=np.int64)

    keys = _vertex_keys(vertices, precision)
    _, first, inverse = np.unique(keys, return_index=True, return_inverse=True)

    # np.unique numbers keys in sorted order; renumber by first occurrence
    order = np.argsort(first, kind='stable')
    rank = np.empty_like(order)
    rank[order] = np.arange(len(order))

    return len(first), rank[inverse.reshape(-1)]


def remap_index_buffer(indices: Sequence[int], remap: np.ndarray) -> List[int]:
    """Rewrite every index through the remap table."""
    idx = np.asarray(indices, dtype=np.int64)
    return np.asarray(remap)[idx].tolist()


def remap_vertex_buffer(
    vertices: Sequence[Tuple[float, float, float]],
    unique_count: int,
    remap: np.ndarray
) -> List[Tuple[float, float, float]]:
    """
    Compact the vertex buffer to unique_count entries.

    Each new slot takes the first original vertex mapped to it.
    """
    remap = np.asarray(remap, dtype=np.int64)
    first = np.full(unique_count, len(remap), dtype=np.int64)
    np.minimum.at(first, remap, np.arange(len(remap), dtype=np.int64))
    return [vertices[i] for i in first.tolist()]


def optimize_mesh(mesh: MeshGroup, precision: Optional[int] = None) -> OptimizeResult:
    """
    Weld duplicate vertices of a mesh group in place.

    Empty groups are left untouched.

    Args:
        mesh: Group to compact
        precision: Optional rounding before comparison (None = exact)

    Returns:
        OptimizeResult with before/after vertex counts
    """
    result = OptimizeResult(
        name=mesh.name,
        vertices_before=mesh.vertex_count(),
        vertices_after=mesh.vertex_count(),
        triangles=mesh.triangle_count(),
    )

    if mesh.is_empty():
        logger.debug(f"Skipping optimization of empty group '{mesh.name}'")
        return result

    unique_count, remap = generate_vertex_remap(mesh.indices, mesh.vertices, precision)

    mesh.replace_buffers(
        remap_vertex_buffer(mesh.vertices, unique_count, remap),
        remap_index_buffer(mesh.indices, remap),
    )

    result.vertices_after = unique_count
    assert mesh.triangle_count() == result.triangles

    logger.debug(
        f"Optimized '{mesh.name}': {result.vertices_before} -> "
        f"{result.vertices_after} vertices"
    )

    return result
