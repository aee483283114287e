import pytest

EXAMPLE = """\
..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def example_file(tmp_path):
    p = tmp_path / "example.txt"
    p.write_text(EXAMPLE)
    return p
