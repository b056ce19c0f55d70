"""
Configuration constants for maze2mesh.

Contains the tile vocabulary, geometry constants, export settings and
output locations, plus the per-run PipelineConfig.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# TILE VOCABULARY
# =============================================================================

# Cell bytes as they appear in the ASCII source
WALL_TILE = ord('*')
EMPTY_TILE = ord(' ')

# Building markers: any uppercase letter. Letter identity is kept in the
# tile grid only, all buildings share one mesh group.
BUILDING_FIRST = ord('A')
BUILDING_LAST = ord('Z')

# Value written over unknown tiles when zeroing is enabled
ZEROED_TILE = 0

# Source lines starting with this byte are comments
COMMENT_PREFIX = b';'

# =============================================================================
# GEOMETRY CONSTANTS
# =============================================================================

# Edge length of one tile cube in mesh units (uniform for x, y and z).
# Cubes and bounding planes must use the same value.
TILE_SCALE = 1.0

# =============================================================================
# MESH GROUP NAMES (OBJ object names, in export order)
# =============================================================================

GROUP_WALLS = "maze"
GROUP_BUILDINGS = "houses"
GROUP_FLOOR = "floor"
GROUP_CEILING = "ceiling"

GROUP_ORDER = (GROUP_WALLS, GROUP_BUILDINGS, GROUP_FLOOR, GROUP_CEILING)

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

# OBJ export precision (decimal places)
OBJ_VERTEX_PRECISION = 6

# Fixed output filenames, written to the working directory
OBJ_OUTPUT_FILENAME = "maze1.obj"
TILEMAP_OUTPUT_FILENAME = "maze1.tilemap.bin"

# Map used when no source path is given on the command line
DEFAULT_SOURCE_PATH = "data/bt1skarabrae.txt"


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Runtime configuration for the maze meshing pipeline.

    This class holds all configurable parameters that can be
    adjusted per-run via CLI arguments or programmatically.
    """

    # Input
    source_path: str = DEFAULT_SOURCE_PATH

    # Geometry
    tile_scale: float = TILE_SCALE
    zero_unknown_tiles: bool = False
    emit_ceiling: bool = False

    # Optimization (vertex welding)
    optimize: bool = True
    optimize_planes: bool = False
    # None = exact match; otherwise round to this many decimals before welding
    weld_precision: Optional[int] = None

    # Export
    output_dir: str = "."
    obj_precision: int = OBJ_VERTEX_PRECISION

    # Debug
    verbose: bool = False
    print_map: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.tile_scale <= 0:
            raise ValueError("tile_scale must be positive")

        if self.weld_precision is not None and self.weld_precision < 0:
            raise ValueError("weld_precision must be non-negative")

        if self.obj_precision < 0:
            raise ValueError("obj_precision must be non-negative")


# Default configuration instance
DEFAULT_CONFIG = PipelineConfig()
