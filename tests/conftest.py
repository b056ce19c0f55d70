"""
Shared test fixtures for the maze2mesh test suite.
"""

import pytest

from maze2mesh.processing.mesh_grouper import MazeMeshGroups


# 3x3 ring of walls around one empty cell
RING_MAP = "***\n* *\n***\n"


@pytest.fixture
def write_map(tmp_path):
    """Factory writing map text (or bytes) to a file and returning its path."""
    def _write(content, name="map.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("latin-1"))
        return str(path)
    return _write


@pytest.fixture
def ring_map(write_map):
    return write_map(RING_MAP)


@pytest.fixture
def groups():
    return MazeMeshGroups()
