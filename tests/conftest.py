import pytest

from crucible import CostGrid

EXAMPLE = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

ULTRA_EXAMPLE = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE


@pytest.fixture
def example_grid() -> CostGrid:
    return CostGrid.from_text(EXAMPLE)


@pytest.fixture
def ultra_example_grid() -> CostGrid:
    return CostGrid.from_text(ULTRA_EXAMPLE)


@pytest.fixture
def small_grid() -> CostGrid:
    return CostGrid.from_text("12\n34\n")
