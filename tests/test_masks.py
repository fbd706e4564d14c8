import pytest

from sphgrid.masks import filter_from_mask


def test_removes_masked_items_in_order():
    items = ["a", "b", "c", "d", "e"]
    mask = [False, True, False, True, False]
    assert filter_from_mask(mask, items) == ["a", "c", "e"]


def test_all_false_keeps_everything():
    items = [3, 1, 2]
    assert filter_from_mask([False, False, False], items) == items


def test_all_true_removes_everything():
    assert filter_from_mask([True, True], [1, 2]) == []


def test_longer_mask_is_accepted():
    assert filter_from_mask([True, False, True, True], [10, 20]) == [20]


def test_short_mask_raises():
    with pytest.raises(IndexError):
        filter_from_mask([False], [1, 2])


def test_input_is_left_untouched():
    items = [1, 2, 3]
    result = filter_from_mask([True, False, False], items)
    assert items == [1, 2, 3]
    assert len(result) == len(items) - 1