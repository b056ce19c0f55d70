"""Tests for the pipeline and the command line entry point."""

import logging
import os
import struct

import pytest

from maze2mesh.config import PipelineConfig, OBJ_OUTPUT_FILENAME, TILEMAP_OUTPUT_FILENAME
from maze2mesh.io.obj_exporter import validate_obj_file
from maze2mesh.main import main, run_pipeline


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _object_names(path):
    with open(path, encoding="utf-8") as f:
        return [line.split()[1] for line in f if line.startswith("o ")]


# ---------------------------------------------------------------------------
# run_pipeline (memory mode)
# ---------------------------------------------------------------------------


class TestRunPipelineMemory:
    def test_ring_scenario(self, ring_map):
        result = run_pipeline(PipelineConfig(source_path=ring_map), output_mode="memory")

        assert result.success
        assert result.obj_path is None
        stats = result.report.stats
        assert (stats.map_width, stats.map_height) == (3, 3)
        assert stats.wall_tiles == 8
        assert stats.vertices_before_optimize == 64 + 4
        assert stats.vertices_removed == 32

        groups = result.groups
        assert list(groups) == ["maze", "houses", "floor", "ceiling"]
        assert groups["houses"].is_empty()
        assert groups["floor"].vertex_count() == 4
        assert groups["floor"].triangle_count() == 2
        assert groups["ceiling"].is_empty()

    def test_group_invariants(self, write_map):
        source = write_map("*****\n*A B*\n* C *\n*****\n")
        result = run_pipeline(
            PipelineConfig(source_path=source, emit_ceiling=True), output_mode="memory"
        )
        assert result.success
        for mesh in result.groups.values():
            assert len(mesh.indices) % 3 == 0
            assert all(i < mesh.vertex_count() for i in mesh.indices)

    def test_ceiling_enabled(self, ring_map):
        result = run_pipeline(
            PipelineConfig(source_path=ring_map, emit_ceiling=True), output_mode="memory"
        )
        ceiling = result.groups["ceiling"]
        assert ceiling.vertex_count() == 4
        assert ceiling.bounds().min.y == 1.0

    def test_no_optimize_keeps_cube_soup(self, ring_map):
        result = run_pipeline(
            PipelineConfig(source_path=ring_map, optimize=False), output_mode="memory"
        )
        assert result.groups["maze"].vertex_count() == 64
        assert result.report.stats.vertices_removed == 0

    def test_optimize_planes_is_harmless(self, ring_map):
        result = run_pipeline(
            PipelineConfig(source_path=ring_map, emit_ceiling=True, optimize_planes=True),
            output_mode="memory"
        )
        assert result.groups["floor"].vertex_count() == 4
        assert result.groups["ceiling"].vertex_count() == 4

    def test_zero_unknown_tiles(self, write_map):
        source = write_map("**#\n* *\n***\n")
        result = run_pipeline(
            PipelineConfig(source_path=source, zero_unknown_tiles=True), output_mode="memory"
        )
        assert result.report.stats.zeroed_tiles == 1
        assert result.grid.get(2, 0) == 0

    def test_missing_source(self, tmp_path):
        path = str(tmp_path / "nope.txt")
        result = run_pipeline(PipelineConfig(source_path=path), output_mode="memory")
        assert not result.success
        assert path in result.report.errors[0]
        assert result.groups is None

    def test_blank_only_map_fails_explicitly(self, write_map):
        result = run_pipeline(
            PipelineConfig(source_path=write_map("\n\n")), output_mode="memory"
        )
        assert not result.success
        assert "Empty map" in result.report.errors[0]
        assert result.grid.is_empty()

    def test_print_map_returns_text(self, write_map, capsys):
        result = run_pipeline(
            PipelineConfig(source_path=write_map("***\n*A\n"), print_map=True),
            output_mode="memory"
        )
        assert result.map_text == "***\n*A."
        assert capsys.readouterr().out == ""

    def test_map_text_off_by_default(self, ring_map):
        result = run_pipeline(PipelineConfig(source_path=ring_map), output_mode="memory")
        assert result.map_text is None


class TestPipelineConfig:
    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError):
            PipelineConfig(tile_scale=0)

    def test_rejects_negative_precision(self):
        with pytest.raises(ValueError):
            PipelineConfig(weld_precision=-1)


# ---------------------------------------------------------------------------
# run_pipeline (file mode)
# ---------------------------------------------------------------------------


class TestRunPipelineFile:
    def test_writes_both_outputs(self, ring_map, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        result = run_pipeline(
            PipelineConfig(source_path=ring_map, output_dir=str(out_dir))
        )

        assert result.success
        assert result.obj_path == str(out_dir / OBJ_OUTPUT_FILENAME)
        assert result.tilemap_path == str(out_dir / TILEMAP_OUTPUT_FILENAME)
        assert result.report.output_files == [result.obj_path, result.tilemap_path]

        assert _object_names(result.obj_path) == ["maze", "floor"]
        assert validate_obj_file(result.obj_path) == []

        blob = (out_dir / TILEMAP_OUTPUT_FILENAME).read_bytes()
        assert struct.unpack("=ii", blob[:8]) == (3, 3)

    def test_floor_faces_offset_by_wall_vertices(self, ring_map, tmp_path):
        result = run_pipeline(PipelineConfig(source_path=ring_map, output_dir=str(tmp_path)))
        wall_vertices = result.groups["maze"].vertex_count()

        faces = []
        in_floor = False
        with open(result.obj_path, encoding="utf-8") as f:
            for line in f:
                if line.startswith("o "):
                    in_floor = line.split()[1] == "floor"
                elif in_floor and line.startswith("f "):
                    faces.extend(int(p) for p in line.split()[1:])

        assert min(faces) == wall_vertices + 1
        assert max(faces) == wall_vertices + 4

    def test_missing_output_dir(self, ring_map, tmp_path):
        out_dir = str(tmp_path / "missing")
        result = run_pipeline(PipelineConfig(source_path=ring_map, output_dir=out_dir))
        assert not result.success
        assert os.path.join(out_dir, OBJ_OUTPUT_FILENAME) in result.report.errors[0]
        assert result.report.output_files == []


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    def test_success(self, ring_map, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main([ring_map]) == 0
        assert (tmp_path / OBJ_OUTPUT_FILENAME).exists()
        assert (tmp_path / TILEMAP_OUTPUT_FILENAME).exists()

    def test_missing_source_reports_path(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["does_not_exist.txt"]) == 1
        err = capsys.readouterr().err
        assert "Error loading map 'does_not_exist.txt'" in err
        assert not (tmp_path / OBJ_OUTPUT_FILENAME).exists()

    def test_ceiling_flag(self, ring_map, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main([ring_map, "--ceiling"]) == 0
        assert _object_names(tmp_path / OBJ_OUTPUT_FILENAME) == ["maze", "floor", "ceiling"]

    def test_print_map_flag(self, write_map, tmp_path, monkeypatch, capsys):
        source = write_map("***\n*A\n")
        monkeypatch.chdir(tmp_path)
        assert main([source, "--print-map"]) == 0
        assert capsys.readouterr().out.startswith("***\n*A.\n")

    def test_unwritable_log_file(self, ring_map, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        log_path = str(tmp_path / "nodir" / "run.log")
        assert main([ring_map, "--log-file", log_path]) == 1
        assert f"Error opening log file '{log_path}'" in capsys.readouterr().err
        assert not (tmp_path / OBJ_OUTPUT_FILENAME).exists()

    def test_bundled_sample(self, tmp_path, monkeypatch):
        sample = os.path.join(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
            "data", "bt1skarabrae.txt"
        )
        monkeypatch.chdir(tmp_path)
        assert main([sample]) == 0
        assert _object_names(tmp_path / OBJ_OUTPUT_FILENAME) == ["maze", "houses", "floor"]
