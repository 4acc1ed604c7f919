from hypothesis import given, strategies as st

from arraykit.setops import sorted_intersection, sorted_union

sorted_lists = st.lists(st.integers(-50, 50)).map(sorted)


def test_union_worked_example():
    assert sorted_union([1, 2, 2, 3, 4], [2, 2, 4, 6, 7, 8]) == [1, 2, 3, 4, 6, 7, 8]


def test_intersection_worked_example():
    assert sorted_intersection([1, 2, 2, 3, 4], [2, 2, 4, 6, 7, 8]) == [2, 4]


def test_empty_inputs():
    assert sorted_union([], []) == []
    assert sorted_intersection([1, 2], []) == []


@given(sorted_lists, sorted_lists)
def test_union_is_strictly_increasing_and_complete(first, second):
    result = sorted_union(first, second)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert set(result) == set(first) | set(second)


@given(sorted_lists, sorted_lists)
def test_intersection_is_strictly_increasing_and_common(first, second):
    result = sorted_intersection(first, second)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert set(result) == set(first) & set(second)


@given(sorted_lists)
def test_union_with_itself_removes_duplicates(values):
    assert sorted_union(values, values) == sorted_intersection(values, values)