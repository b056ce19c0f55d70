"""
OBJ mesh exporter for maze2mesh.

Exports mesh groups to a single multi-object Wavefront OBJ file:
- One 'o' object per non-empty group, in the order given
- Smoothing off ('s 0') for every object
- Face indices are 1-based and file-global
"""

import os
from typing import Iterable, List, Optional
from dataclasses import dataclass
import logging

from ..config import OBJ_VERTEX_PRECISION
from ..models.mesh import MeshGroup
from .errors import ExportError

logger = logging.getLogger(__name__)


class EmptyMapError(ValueError):
    """Raised when there is no geometry to export."""
    pass


@dataclass
class ExportStats:
    """Statistics from OBJ export."""
    total_vertices: int = 0
    total_faces: int = 0
    total_objects: int = 0
    file_size_bytes: int = 0


def export_mesh_groups(
    groups: Iterable[MeshGroup],
    filepath: str,
    comment: Optional[str] = None,
    precision: int = OBJ_VERTEX_PRECISION
) -> ExportStats:
    """
    Export mesh groups as separate objects in ONE OBJ file.

    Empty groups are skipped entirely. Each group's local 0-based indices
    are shifted by the number of vertices already written, then made
    1-based, since OBJ face indices refer to the whole file.

    Args:
        groups: Mesh groups in export order
        filepath: Output file path (.obj)
        comment: Optional comment to include in file header
        precision: Decimal places for vertex coordinates

    Returns:
        ExportStats with export statistics

    Raises:
        EmptyMapError: If every group is empty
        ExportError: If the file cannot be written
    """
    stats = ExportStats()

    non_empty_groups = [mesh for mesh in groups if not mesh.is_empty()]

    if not non_empty_groups:
        raise EmptyMapError(f"No non-empty mesh groups to export to {filepath}")

    try:
        with open(filepath, 'w', encoding='utf-8') as f:
            # Header
            f.write("# maze2mesh OBJ Export\n")
            f.write(f"# Objects: {len(non_empty_groups)}\n")
            if comment:
                f.write(f"# {comment}\n")
            f.write("\n")

            # OBJ uses global indices
            vertex_offset = 0

            for mesh in non_empty_groups:
                f.write(f"o {mesh.name}\n")

                for x, y, z in mesh.vertices:
                    f.write(
                        f"v {x:.{precision}f} {y:.{precision}f} {z:.{precision}f}\n"
                    )

                f.write("s 0\n")

                base = vertex_offset + 1
                for a, b, c in mesh.triangles():
                    f.write(f"f {a + base} {b + base} {c + base}\n")

                f.write("\n")

                logger.debug(
                    f"Wrote object '{mesh.name}': {mesh.vertex_count()} vertices, "
                    f"{mesh.triangle_count()} faces (vertex offset {vertex_offset})"
                )

                stats.total_vertices += mesh.vertex_count()
                stats.total_faces += mesh.triangle_count()
                stats.total_objects += 1

                vertex_offset += mesh.vertex_count()
    except OSError as e:
        raise ExportError.from_os_error(filepath, e) from e

    stats.file_size_bytes = os.path.getsize(filepath)

    logger.info(
        f"Exported OBJ (multi-object): {stats.total_vertices} vertices, "
        f"{stats.total_faces} faces, {stats.total_objects} objects"
    )

    return stats


def validate_obj_file(filepath: str) -> List[str]:
    """
    Validate an OBJ file for common issues.

    Args:
        filepath: Path to OBJ file

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not os.path.exists(filepath):
        errors.append(f"File does not exist: {filepath}")
        return errors

    vertex_count = 0
    face_count = 0
    max_vertex_ref = 0

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            for line_num, line in enumerate(f, 1):
                parts = line.split()

                if not parts or parts[0].startswith('#'):
                    continue

                if parts[0] == 'v':
                    vertex_count += 1
                    if len(parts) < 4:
                        errors.append(
                            f"Line {line_num}: Vertex has < 3 coordinates"
                        )

                elif parts[0] == 'f':
                    face_count += 1
                    if len(parts) != 4:
                        errors.append(
                            f"Line {line_num}: Face is not a triangle"
                        )

                    for part in parts[1:]:
                        try:
                            idx = int(part)
                        except ValueError:
                            errors.append(
                                f"Line {line_num}: Invalid vertex index '{part}'"
                            )
                            continue

                        if idx < 1:
                            errors.append(
                                f"Line {line_num}: Non-positive index {idx}"
                            )
                        elif idx > vertex_count:
                            errors.append(
                                f"Line {line_num}: Face references vertex {idx} "
                                f"before it is defined"
                            )
                        max_vertex_ref = max(max_vertex_ref, idx)

    except OSError as e:
        errors.append(f"Failed to read file: {e}")
        return errors

    if max_vertex_ref > vertex_count:
        errors.append(
            f"Face references vertex {max_vertex_ref} but only {vertex_count} vertices exist"
        )

    if vertex_count == 0:
        errors.append("File contains no vertices")

    if face_count == 0:
        errors.append("File contains no faces")

    return errors
