"""Tests for the floor/ceiling bounding plane generator."""

import pytest

from maze2mesh.generators.maze_generator import build_maze_geometry
from maze2mesh.generators.plane import (
    EmptyGeometryError,
    generate_bounding_plane,
    generate_floor,
    generate_ceiling,
)
from maze2mesh.io.tilemap_loader import load_tilemap
from maze2mesh.models.geometry import BBox3D, Vertex, empty_bbox
from maze2mesh.models.mesh import MeshGroup


def _normal_y(mesh, tri):
    a, b, c = (mesh.vertices[i] for i in tri)
    ux, uz = b[0] - a[0], b[2] - a[2]
    vx, vz = c[0] - a[0], c[2] - a[2]
    # y component of (b - a) x (c - a) for a horizontal triangle
    return uz * vx - ux * vz


class TestGenerateBoundingPlane:
    def test_rectangle_covers_bbox(self):
        box = BBox3D(Vertex(-2, 0, -1), Vertex(3, 4, 5))
        mesh = MeshGroup("floor")
        generate_bounding_plane(box, 0.0, mesh)

        assert mesh.vertex_count() == 4
        assert mesh.triangle_count() == 2
        assert mesh.bounds() == BBox3D(Vertex(-2, 0, -1), Vertex(3, 0, 5))

    def test_facing_up(self):
        box = BBox3D(Vertex(0, 0, 0), Vertex(1, 1, 1))
        mesh = MeshGroup("floor")
        generate_bounding_plane(box, 0.0, mesh, facing_up=True)
        for tri in mesh.triangles():
            assert _normal_y(mesh, tri) > 0

    def test_facing_down(self):
        box = BBox3D(Vertex(0, 0, 0), Vertex(1, 1, 1))
        mesh = MeshGroup("ceiling")
        generate_bounding_plane(box, 1.0, mesh, facing_up=False)
        for tri in mesh.triangles():
            assert _normal_y(mesh, tri) < 0

    def test_appends_with_offset(self):
        box = BBox3D(Vertex(0, 0, 0), Vertex(1, 1, 1))
        mesh = MeshGroup("floor")
        generate_bounding_plane(box, 0.0, mesh)
        generate_bounding_plane(box, 1.0, mesh)
        assert mesh.vertex_count() == 8
        assert min(mesh.indices[6:]) == 4
        assert mesh.validate() == []

    def test_empty_bbox_rejected(self):
        mesh = MeshGroup("floor")
        with pytest.raises(EmptyGeometryError):
            generate_bounding_plane(empty_bbox(), 0.0, mesh)
        assert mesh.is_empty()


class TestFloorAndCeiling:
    def test_ring_scenario_floor(self, ring_map, groups):
        grid = load_tilemap(ring_map)
        build_maze_geometry(grid, groups)
        generate_floor(groups.maze, groups.floor)

        assert groups.floor.vertex_count() == 4
        assert groups.floor.triangle_count() == 2
        floor_box = groups.floor.bounds()
        wall_box = groups.maze.bounds()
        assert floor_box.min == Vertex(wall_box.min.x, 0.0, wall_box.min.z)
        assert floor_box.max == Vertex(wall_box.max.x, 0.0, wall_box.max.z)

    def test_ceiling_at_wall_top(self, ring_map, groups):
        grid = load_tilemap(ring_map)
        build_maze_geometry(grid, groups, scale=2.0)
        generate_ceiling(groups.maze, groups.ceiling)

        box = groups.ceiling.bounds()
        assert box.min.y == box.max.y == 2.0

    def test_empty_walls_fail_fast(self, groups):
        with pytest.raises(EmptyGeometryError):
            generate_floor(groups.maze, groups.floor)
        with pytest.raises(EmptyGeometryError):
            generate_ceiling(groups.maze, groups.ceiling)
        assert groups.floor.is_empty()
        assert groups.ceiling.is_empty()
