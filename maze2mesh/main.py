"""
maze2mesh - Main CLI

Converts an ASCII tilemap into a multi-object OBJ mesh and a binary
tilemap snapshot.

Usage:
    python -m maze2mesh.main [source]

Example:
    python -m maze2mesh.main data/bt1skarabrae.txt

Outputs (always in the working directory):
    maze1.obj           walls, houses, floor and ceiling objects
    maze1.tilemap.bin   width, height and raw tile bytes
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass, field
from typing import List, Dict, Optional

from . import __version__
from .config import (
    PipelineConfig,
    DEFAULT_SOURCE_PATH,
    OBJ_OUTPUT_FILENAME,
    TILEMAP_OUTPUT_FILENAME,
)
from .io.errors import ExportError
from .io.tilemap_loader import load_tilemap, TilemapLoadError
from .io.obj_exporter import export_mesh_groups, EmptyMapError
from .io.tilemap_exporter import export_tilemap
from .generators.maze_generator import build_maze_geometry
from .generators.plane import generate_floor, generate_ceiling, EmptyGeometryError
from .processing.mesh_grouper import MazeMeshGroups
from .processing.mesh_optimizer import optimize_mesh
from .models.mesh import MeshGroup
from .models.tilemap import TileGrid, format_tilemap


@dataclass
class PipelineStats:
    """Statistics from the pipeline run."""
    map_width: int = 0
    map_height: int = 0
    wall_tiles: int = 0
    building_tiles: int = 0
    empty_tiles: int = 0
    unknown_tiles: int = 0
    zeroed_tiles: int = 0
    # Optimization stats
    vertices_before_optimize: int = 0
    vertices_removed: int = 0
    total_vertices: int = 0
    total_faces: int = 0
    group_vertices: Dict[str, int] = field(default_factory=dict)
    processing_time_ms: int = 0


@dataclass
class PipelineReport:
    """Report from pipeline run."""
    source_path: str
    version: str
    success: bool
    stats: PipelineStats
    output_files: List[str]
    errors: List[str] = field(default_factory=list)


@dataclass
class PipelineResult:
    """
    Complete result of pipeline execution.

    Supports two output modes:
    - 'file': Writes the OBJ and tilemap files (CLI mode)
    - 'memory': Skips the exporters and returns the data

    Attributes:
        success: Whether pipeline completed without errors
        report: Detailed statistics and metadata
        obj_path: Path to the OBJ file (file mode only)
        tilemap_path: Path to the tilemap snapshot (file mode only)
        groups: Final mesh groups by name (when geometry was built)
        grid: Loaded tile grid (when loading succeeded)
        map_text: Loaded map rendered as text (when print_map is set)
    """
    success: bool
    report: PipelineReport

    # File mode outputs
    obj_path: Optional[str] = None
    tilemap_path: Optional[str] = None

    # Memory mode outputs
    groups: Optional[Dict[str, MeshGroup]] = None
    grid: Optional[TileGrid] = None

    # Rendered map text (when print_map is set)
    map_text: Optional[str] = None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def run_pipeline(
    config: PipelineConfig,
    output_mode: str = "file"
) -> PipelineResult:
    """
    Run the complete maze meshing pipeline.

    Steps:
    1. Load the tilemap
    2. Emit wall and building cubes
    3. Add floor (and optional ceiling) planes from the wall bounds
    4. Weld duplicate vertices per group
    5. Export OBJ and tilemap snapshot (file mode only)

    Any failure stops the run; files already written stay on disk.

    Args:
        config: Pipeline configuration
        output_mode: "file" to write outputs (default), "memory" to return data

    Returns:
        PipelineResult with report and either file paths or mesh data
    """
    logger = logging.getLogger(__name__)

    start_time = time.time()
    stats = PipelineStats()
    errors: List[str] = []
    output_files: List[str] = []

    def fail(message: str, **outputs) -> PipelineResult:
        errors.append(message)
        stats.processing_time_ms = int((time.time() - start_time) * 1000)
        report = PipelineReport(
            source_path=config.source_path,
            version=__version__,
            success=False,
            stats=stats,
            output_files=output_files,
            errors=errors,
        )
        return PipelineResult(success=False, report=report, **outputs)

    # Step 1: Load tilemap
    logger.info(f"Loading tilemap {config.source_path}")
    try:
        grid = load_tilemap(config.source_path)
    except TilemapLoadError as e:
        return fail(str(e))

    stats.map_width = grid.width
    stats.map_height = grid.height

    map_text = format_tilemap(grid) if config.print_map else None

    # Step 2: Tile geometry
    logger.info("Generating tile geometry")
    groups = MazeMeshGroups()
    geometry_stats = build_maze_geometry(
        grid,
        groups,
        scale=config.tile_scale,
        zero_unknown=config.zero_unknown_tiles
    )
    stats.wall_tiles = geometry_stats.walls
    stats.building_tiles = geometry_stats.buildings
    stats.empty_tiles = geometry_stats.empty
    stats.unknown_tiles = geometry_stats.unknown
    stats.zeroed_tiles = geometry_stats.zeroed

    # Step 3: Bounding planes
    logger.info("Generating bounding planes")
    try:
        generate_floor(groups.maze, groups.floor)
        if config.emit_ceiling:
            generate_ceiling(groups.maze, groups.ceiling)
    except EmptyGeometryError as e:
        return fail(
            f"Empty map '{config.source_path}': {e}",
            groups=groups.get_all_groups(),
            grid=grid,
            map_text=map_text,
        )

    # Step 4: Optimize meshes (deduplicate vertices)
    stats.vertices_before_optimize = groups.total_vertices()

    if config.optimize:
        logger.info("Optimizing meshes (vertex deduplication)")
        targets = [groups.maze, groups.houses]
        if config.optimize_planes:
            targets.extend([groups.floor, groups.ceiling])

        for mesh in targets:
            if mesh.is_empty():
                continue
            opt_result = optimize_mesh(mesh, precision=config.weld_precision)
            stats.vertices_removed += opt_result.vertices_removed
            logger.info(
                f"Group '{mesh.name}': {opt_result.vertices_before} -> "
                f"{opt_result.vertices_after} vertices "
                f"({opt_result.vertices_removed} removed)"
            )

    for name, mesh in groups.get_all_groups().items():
        errors_found = mesh.validate()
        assert not errors_found, f"Group '{name}' is inconsistent: {errors_found}"
        stats.group_vertices[name] = mesh.vertex_count()

    stats.total_vertices = groups.total_vertices()
    stats.total_faces = groups.total_triangles()

    if stats.vertices_before_optimize > 0:
        reduction = (stats.vertices_removed / stats.vertices_before_optimize) * 100
        logger.info(
            f"Optimization: {stats.vertices_before_optimize} -> {stats.total_vertices} vertices "
            f"({stats.vertices_removed} removed, {reduction:.1f}% reduction)"
        )
    logger.debug(f"Group stats:\n{groups.get_stats_summary()}")

    # Step 5: Export
    obj_path = None
    tilemap_path = None

    if output_mode == "file":
        obj_path = os.path.join(config.output_dir, OBJ_OUTPUT_FILENAME)
        tilemap_path = os.path.join(config.output_dir, TILEMAP_OUTPUT_FILENAME)

        logger.info(f"Exporting OBJ to {obj_path}")
        try:
            export_mesh_groups(
                groups.get_non_empty_groups().values(),
                obj_path,
                comment=f"Source: {config.source_path} ({grid.width}x{grid.height})",
                precision=config.obj_precision
            )
        except (ExportError, EmptyMapError) as e:
            return fail(
                str(e), groups=groups.get_all_groups(), grid=grid, map_text=map_text
            )
        output_files.append(obj_path)

        logger.info(f"Exporting tilemap to {tilemap_path}")
        try:
            export_tilemap(grid, tilemap_path)
        except ExportError as e:
            return fail(
                str(e),
                obj_path=obj_path,
                groups=groups.get_all_groups(),
                grid=grid,
                map_text=map_text,
            )
        output_files.append(tilemap_path)
    else:
        logger.info(f"Memory mode: {stats.total_vertices} vertices, {stats.total_faces} faces")

    stats.processing_time_ms = int((time.time() - start_time) * 1000)
    logger.info(f"Pipeline completed in {stats.processing_time_ms}ms")

    report = PipelineReport(
        source_path=config.source_path,
        version=__version__,
        success=True,
        stats=stats,
        output_files=output_files,
        errors=errors,
    )

    return PipelineResult(
        success=True,
        report=report,
        obj_path=obj_path,
        tilemap_path=tilemap_path,
        groups=groups.get_all_groups(),
        grid=grid,
        map_text=map_text,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description='maze2mesh - Convert an ASCII tilemap into an OBJ mesh'
    )

    parser.add_argument(
        'source',
        nargs='?',
        default=DEFAULT_SOURCE_PATH,
        help=f'Tilemap text file (default: {DEFAULT_SOURCE_PATH})'
    )

    parser.add_argument(
        '--ceiling',
        action='store_true',
        help='Also emit a ceiling plane at the top of the walls'
    )

    parser.add_argument(
        '--zero-unknown',
        action='store_true',
        help='Zero unrecognized tiles in the grid (affects the tilemap snapshot)'
    )

    parser.add_argument(
        '--no-optimize',
        action='store_true',
        help='Skip vertex welding (export the raw cube soup)'
    )

    parser.add_argument(
        '--optimize-planes',
        action='store_true',
        help='Also weld the floor and ceiling groups'
    )

    parser.add_argument(
        '--print-map',
        action='store_true',
        help='Print the loaded tilemap to stdout'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG log to this file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as e:
        print(f"Error opening log file '{args.log_file}': {e.strerror}", file=sys.stderr)
        return 1

    config = PipelineConfig(
        source_path=args.source,
        zero_unknown_tiles=args.zero_unknown,
        emit_ceiling=args.ceiling,
        optimize=not args.no_optimize,
        optimize_planes=args.optimize_planes,
        verbose=args.verbose,
        print_map=args.print_map,
    )

    result = run_pipeline(config, output_mode="file")
    report = result.report

    if result.map_text is not None:
        print(result.map_text)

    if not result.success:
        for error in report.errors:
            print(error, file=sys.stderr)
        return 1

    print(f"\nSuccess! Converted {report.stats.map_width}x{report.stats.map_height} map")
    print(f"Tiles: {report.stats.wall_tiles} walls, {report.stats.building_tiles} buildings")
    print(
        f"Mesh: {report.stats.total_vertices} vertices, {report.stats.total_faces} faces "
        f"({report.stats.vertices_removed} vertices welded)"
    )
    print(f"Output files: {', '.join(report.output_files)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
