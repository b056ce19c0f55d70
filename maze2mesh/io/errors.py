"""
Shared I/O error types for maze2mesh.
"""


class ExportError(Exception):
    """Raised when an output file cannot be written."""

    def __init__(self, path: str, strerror: str):
        super().__init__(f"Error writing '{path}': {strerror}")
        self.path = path
        self.strerror = strerror

    @classmethod
    def from_os_error(cls, path: str, error: OSError) -> 'ExportError':
        """Build from the OSError raised while opening or writing path."""
        return cls(path, error.strerror or str(error))
