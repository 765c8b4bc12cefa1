from pathlib import Path

import pytest

from magnets.grid.parser import load_puzzle, parse_puzzle_text

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# 1 行 2 列、マグネット 1 個。左が + / 右が - の1通りだけ解がある
ONE_BY_TWO = """
1 2
1
1
1 0
0 1
0 0
"""

# 1 行 4 列、横向きマグネット 2 個。解は "+-+-"
ONE_BY_FOUR = """
1 4
2
2
1 0 1 0
0 1 0 1
0 0 0 0
"""

# 1 行 6 列、横向きマグネット 3 個。解は "+-+-+-"
ONE_BY_SIX = """
1 6
3
3
1 0 1 0 1 0
0 1 0 1 0 1
0 0 0 0 0 0
"""

# 2 行 2 列、縦向きマグネット 2 個
TWO_BY_TWO_VERTICAL = """
2 2
1 1
1 1
1 1
1 1
1 1
1 1
"""

SAMPLE_6X6_SOLUTION = [
    "+-+-+-",
    "-+-+-+",
    "+-+-+-",
    "-+-+-+",
    "+-+-+-",
    "......",
]


@pytest.fixture
def one_by_two():
    return parse_puzzle_text(ONE_BY_TWO)


@pytest.fixture
def one_by_four():
    return parse_puzzle_text(ONE_BY_FOUR)


@pytest.fixture
def one_by_six():
    return parse_puzzle_text(ONE_BY_SIX)


@pytest.fixture
def two_by_two_vertical():
    return parse_puzzle_text(TWO_BY_TWO_VERTICAL)


@pytest.fixture
def sample_6x6():
    return load_puzzle(DATA_DIR / "sample_6x6.txt")


@pytest.fixture
def unsolvable():
    return load_puzzle(DATA_DIR / "sample_unsolvable.txt")


@pytest.fixture
def adjacency_unsolvable():
    return load_puzzle(DATA_DIR / "sample_adjacency_unsolvable.txt")
