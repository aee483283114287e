# region Imports
import math
from typing import Iterator, Iterable, Tuple
from toboggan_pathfinder.models import Grid, StepVector, Terrain
# endregion

# region Route Generation
def visited_cells(grid: Grid, vector: StepVector) -> Iterator[Tuple[int, int]]:
    """
    Yield (row, col) for every cell the toboggan lands on, starting at (0, 0).
    Columns are absolute; Grid.terrain_at wraps them per row.
    """
    col = 0
    for row in range(0, grid.height, vector.down):
        yield row, col
        col += vector.right
# endregion

# region Tree Counting
def count_trees(grid: Grid, vector: StepVector) -> int:
    return sum(
        1
        for r, c in visited_cells(grid, vector)
        if grid.terrain_at(r, c) == Terrain.TREE
    )


def survey_product(grid: Grid, vectors: Iterable[StepVector]) -> int:
    return math.prod(count_trees(grid, v) for v in vectors)
# endregion
