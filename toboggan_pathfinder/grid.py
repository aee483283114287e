# region Imports
from typing import Iterable, Optional
import numpy as np
from toboggan_pathfinder.models import Grid, Terrain
from toboggan_pathfinder.errors import InvalidTerrainMarker
# endregion

# region Row Parsing
def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_row(line: str, lineno: Optional[int] = None) -> np.ndarray:
    """Map one text line to a uint8 array of Terrain values."""
    cells = []
    for col, ch in enumerate(_strip_terminator(line), start=1):
        try:
            cells.append(Terrain.from_marker(ch))
        except InvalidTerrainMarker:
            raise InvalidTerrainMarker(ch, lineno, col) from None
    return np.array(cells, dtype=np.uint8)
# endregion

# region Grid Construction
def parse_grid(lines: Iterable[str]) -> Grid:
    return Grid(tuple(parse_row(line, i) for i, line in enumerate(lines, start=1)))


def load_grid(path) -> Grid:
    # OSError / UnicodeDecodeError propagate to the caller
    with open(path, "r", encoding="utf-8", errors="strict", newline="\n") as f:
        return parse_grid(f)
# endregion
