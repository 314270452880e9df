from crucible import NORMAL, ULTRA, run_profile, run_profiles


def test_run_profile_solved(example_grid):
    st = run_profile(example_grid, NORMAL)
    assert st.reached
    assert st.cost == 102
    assert st.profile == "normal"
    assert st.path_taken[0] == (0, 0)
    assert st.path_taken[-1] == (12, 12)
    assert st.steps == len(st.path_taken) - 1
    assert st.expansions > 0
    assert st.frontier_peak > 0
    assert set(st.path_taken[:-1]) <= st.expanded_all
    assert st.result.cost == st.cost


def test_run_profile_no_path(small_grid):
    st = run_profile(small_grid, ULTRA)
    assert not st.reached
    assert st.cost is None
    assert st.path_taken == []
    assert st.result is None
    assert st.expanded_all


def test_run_profiles_default_pair(small_grid):
    results = run_profiles(small_grid)
    assert [name for name, _ in results] == ["normal", "ultra"]
    assert [st.reached for _, st in results] == [True, False]
