import pytest
from fnutils.shaping import group_n, omit, pick, zip_all


def test_pick_selects_present_keys():
    obj = {"a": 1, "b": 2, "c": 3}
    assert pick(obj, ["c", "a", "missing"]) == {"c": 3, "a": 1}
    assert list(pick(obj, ["c", "a"])) == ["c", "a"]


def test_omit_excludes_keys():
    obj = {"a": 1, "b": 2, "c": 3}
    assert omit(obj, ["b", "missing"]) == {"a": 1, "c": 3}
    assert omit(obj, []) == obj
    assert omit(obj, []) is not obj


def test_zip_all_pads_with_none():
    assert zip_all([1, 2, 3], ["a", "b"]) == [[1, "a"], [2, "b"], [3, None]]
    assert zip_all() == []


def test_group_n_splits_into_pairs():
    assert group_n([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]


def test_group_n_edge_cases():
    assert group_n([], 3) == []
    assert group_n([1, 2], 5) == [[1, 2]]
    with pytest.raises(ValueError):
        group_n([1, 2], 0)
