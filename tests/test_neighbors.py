from gridpath.grid import GridWorld
from gridpath.search import find_neighbors


def grid3():
    return GridWorld.uniform(3, 3, (0, 0), (2, 2))


def test_even_cell_reverses_order():
    # canonical left, right, up, down -> reversed
    assert find_neighbors(grid3(), 1, 1, set()) == [(1, 2), (1, 0), (2, 1), (0, 1)]


def test_odd_cell_keeps_canonical_order():
    assert find_neighbors(grid3(), 1, 0, set()) == [(0, 0), (2, 0), (1, 1)]
    assert find_neighbors(grid3(), 0, 1, set()) == [(1, 1), (0, 0), (0, 2)]


def test_corner_drops_out_of_bounds():
    assert find_neighbors(grid3(), 0, 0, set()) == [(0, 1), (1, 0)]
    assert find_neighbors(grid3(), 2, 2, set()) == [(2, 1), (1, 2)]


def test_skips_visited_and_blocked():
    g = grid3()
    g.block(1, 2)
    visited = {(0, 1): None}
    assert find_neighbors(g, 1, 1, visited) == [(1, 0), (2, 1)]
