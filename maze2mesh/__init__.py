"""
maze2mesh

Converts a 2D ASCII tilemap (walls, buildings, open floor) into a
per-tile cube mesh exported as a multi-object Wavefront OBJ file, plus
a binary snapshot of the tile grid.

Can be used as:
- CLI tool: python -m maze2mesh.main [source]
- Library: maze2mesh.main.run_pipeline(PipelineConfig(...), output_mode="memory")
"""

__version__ = "0.1.0"
__author__ = "maze2mesh Team"
