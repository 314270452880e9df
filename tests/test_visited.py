from crucible import Direction, SearchState, VisitedSet

START = SearchState((0, 0))
A = SearchState((1, 0), Direction.EAST, 1)
B = SearchState((2, 0), Direction.EAST, 2)
C = SearchState((2, 1), Direction.SOUTH, 1)


def test_finalize_once():
    v = VisitedSet()
    assert v.finalize(START, 0, None)
    assert v.finalize(A, 3, START)
    assert not v.finalize(A, 1, None)
    assert v.cost_of(A) == 3
    assert v.parent_of(A) == START
    assert len(v) == 2
    assert A in v and B not in v


def test_cells_collapse_headings():
    v = VisitedSet()
    v.finalize(A, 3, START)
    v.finalize(SearchState((1, 0), Direction.SOUTH, 1), 5, None)
    assert v.cells() == {(1, 0)}


def test_path_to_finalized_state():
    v = VisitedSet()
    v.finalize(START, 0, None)
    v.finalize(A, 1, START)
    v.finalize(B, 2, A)
    assert v.path_to(B) == [START, A, B]


def test_path_to_unfinalized_goal_via_parent():
    v = VisitedSet()
    v.finalize(START, 0, None)
    v.finalize(A, 1, START)
    v.finalize(B, 2, A)
    assert v.path_to(C, B) == [START, A, B, C]
    assert v.path_to(START) == [START]
