# models.py
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple
import numpy as np

from toboggan_pathfinder.config import SLOPE_MARKER, TREE_MARKER
from toboggan_pathfinder.errors import InvalidTerrainMarker, EmptyRowError


class Terrain(IntEnum):
    SLOPE = 0
    TREE = 1

    @classmethod
    def from_marker(cls, ch: str) -> "Terrain":
        try:
            return _MARKERS[ch]
        except KeyError:
            raise InvalidTerrainMarker(ch) from None


_MARKERS = {SLOPE_MARKER: Terrain.SLOPE, TREE_MARKER: Terrain.TREE}


@dataclass(frozen=True)
class StepVector:
    down: int
    right: int

    def __post_init__(self):
        if self.down < 1:
            raise ValueError(f"vertical stride must be at least 1, got {self.down}")
        if self.right < 0:
            raise ValueError(f"horizontal stride must be non-negative, got {self.right}")


@dataclass(frozen=True)
class Grid:
    """
    rows: one 1-D uint8 array of Terrain values per text line.
    Rows keep their own length; column lookups wrap per row.
    """
    rows: Tuple[np.ndarray, ...] = field(default_factory=tuple)

    def __post_init__(self):
        rows = tuple(np.array(r, dtype=np.uint8) for r in self.rows)
        for r in rows:
            r.flags.writeable = False
        object.__setattr__(self, "rows", rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(len(r) for r in self.rows)

    def terrain_at(self, row: int, col: int) -> Terrain:
        if not 0 <= row < len(self.rows):
            raise IndexError(f"row {row} outside grid of {len(self.rows)} rows")
        cells = self.rows[row]
        if len(cells) == 0:
            raise EmptyRowError(row)
        return Terrain(int(cells[col % len(cells)]))
