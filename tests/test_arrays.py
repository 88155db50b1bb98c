import pytest

from algokit.arrays import (
    boolean_matrix,
    identical_pairs,
    min_size_subarray,
    unique_elements,
)


def test_boolean_matrix_example():
    assert boolean_matrix([[1, 0], [0, 0]]) == [[1, 1], [1, 0]]


def test_boolean_matrix_zeros_unchanged():
    zeros = [[0, 0, 0], [0, 0, 0]]
    assert boolean_matrix(zeros) == zeros


def test_boolean_matrix_empty():
    assert boolean_matrix([]) == []


def test_boolean_matrix_does_not_mutate():
    matrix = [[0, 1], [0, 0]]
    boolean_matrix(matrix)
    assert matrix == [[0, 1], [0, 0]]


def test_boolean_matrix_ragged():
    with pytest.raises(ValueError):
        boolean_matrix([[0, 1], [0]])


def test_min_size_subarray_example():
    assert min_size_subarray([1, 2, 3], 5) == 2


def test_min_size_subarray_whole_cycles():
    nums = [1, 2, 3]
    assert min_size_subarray(nums, 2 * sum(nums)) == 2 * len(nums)


def test_min_size_subarray_single_element():
    nums = [4, 7, 9]
    assert min_size_subarray(nums, 7) == 1


def test_min_size_subarray_impossible():
    with pytest.raises(ValueError):
        min_size_subarray([2, 4, 6, 8], 3)


def test_min_size_subarray_bad_input():
    with pytest.raises(ValueError):
        min_size_subarray([], 3)
    with pytest.raises(ValueError):
        min_size_subarray([1, 0, 2], 3)


def test_unique_elements_fruits():
    fruits = ["apple", "banana", "apple", "cherry", "cherry"]
    assert unique_elements(fruits) == ["apple", "banana", "cherry"]


def test_unique_elements_invariants():
    items = [3, 1, 3, 2, 1, 5]
    result = unique_elements(items)
    assert len(result) == len(set(items))
    assert set(result) == set(items)
    assert result == sorted(result, key=items.index)


def test_identical_pairs_example():
    assert identical_pairs([1, 2, 3, 1, 1, 3]) == 4


def test_identical_pairs_distinct_and_empty():
    assert identical_pairs([1, 2, 3]) == 0
    assert identical_pairs([]) == 0


def test_identical_pairs_order_independent():
    nums = [5, 1, 5, 2, 1, 5, 5]
    assert identical_pairs(nums) == identical_pairs(sorted(nums))