# region Imports
from typing import Optional
# endregion

# region Terrain Errors
class TerrainError(Exception):
    """Base class for unrecoverable terrain input or lookup failures."""


class InvalidTerrainMarker(TerrainError, ValueError):
    def __init__(self, marker: str, line: Optional[int] = None, column: Optional[int] = None):
        self.marker = marker
        self.line = line
        self.column = column
        msg = f"{marker!r} is not a valid terrain marker"
        if line is not None:
            msg += f" (line {line}, column {column})"
        super().__init__(msg)


class EmptyRowError(TerrainError, LookupError):
    def __init__(self, row: int):
        self.row = row
        super().__init__(f"empty terrain at row {row}")
# endregion
