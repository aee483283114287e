# app.py — command-line entry: load a terrain file and report tree counts

from __future__ import annotations
from typing import List, Optional
import sys

from toboggan_pathfinder.config import (
    FIRST_SLOPE,
    SURVEY_SLOPES,
    USAGE_MESSAGE,
    FIRST_RESULT_FMT,
    PRODUCT_RESULT_FMT,
)
from toboggan_pathfinder.errors import TerrainError
from toboggan_pathfinder.models import StepVector
from toboggan_pathfinder.grid import load_grid
from toboggan_pathfinder.walker import count_trees, survey_product


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE_MESSAGE)
        return 0

    # every failure below is fatal; nothing is retried
    try:
        grid = load_grid(args[0])
        first = count_trees(grid, StepVector(*FIRST_SLOPE))
        product = survey_product(grid, [StepVector(*s) for s in SURVEY_SLOPES])
    except (OSError, UnicodeDecodeError, TerrainError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(FIRST_RESULT_FMT.format(first))
    print(PRODUCT_RESULT_FMT.format(product))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
