import pytest

from puzzlebox.partition import partition_array


@pytest.mark.parametrize(
    "nums, k, expected",
    [([3, 6, 1, 2, 5], 2, 2), ([1, 2, 3], 1, 2), ([2, 2, 4, 5], 0, 3)],
)
def test_examples(nums, k, expected):
    assert partition_array(nums, k) == expected


def test_zero_spread_counts_distinct_values():
    nums = [7, 1, 7, 3, 3, 9]
    assert partition_array(nums, 0) == len(set(nums))


def test_wide_spread_is_one_group():
    nums = [4, 100, -20, 55]
    assert partition_array(nums, max(nums) - min(nums)) == 1


def test_empty_input():
    assert partition_array([], 3) == 0


def test_does_not_modify_input():
    nums = [3, 6, 1, 2, 5]
    partition_array(nums, 2)
    assert nums == [3, 6, 1, 2, 5]


def test_larger_k_never_needs_more_groups():
    nums = [1, 4, 9, 10, 16, 22, 23]
    counts = [partition_array(nums, k) for k in range(0, 25)]
    assert counts == sorted(counts, reverse=True)