import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.problems import (
    is_sorted,
    majority_brute,
    majority_moore,
    majority_sorted,
    max_profit,
    max_water,
    max_water_brute,
    pair_sum,
    pair_sum_brute,
    second_largest,
    second_smallest,
)

int_lists = st.lists(st.integers(-50, 50), max_size=25)


@pytest.mark.parametrize("finder", [pair_sum_brute, pair_sum])
@pytest.mark.parametrize("target", [9, 26])
def test_pair_sum_source_examples(finder, target):
    nums = [2, 7, 11, 15]
    i, j = finder(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


@pytest.mark.parametrize("finder", [pair_sum_brute, pair_sum])
def test_pair_sum_missing(finder):
    assert finder([2, 7, 11, 15], 100) is None


@given(int_lists, st.integers(-100, 100))
def test_pair_sum_sorted_agrees_on_existence(raw, target):
    nums = sorted(raw)
    brute = pair_sum_brute(nums, target)
    fast = pair_sum(nums, target)
    assert (brute is None) == (fast is None)
    if fast is not None:
        i, j = fast
        assert i < j
        assert nums[i] + nums[j] == target


@given(st.data(), st.integers(-20, 20), st.lists(st.integers(-20, 20), max_size=10))
def test_majority_variants_find_majority(data, majority, others):
    nums = [majority] * (len(others) + 1) + others
    nums = data.draw(st.permutations(nums))
    assert majority_brute(nums) == majority
    assert majority_sorted(nums) == majority
    assert majority_moore(nums) == majority


@pytest.mark.parametrize(
    "nums", [[1, 1, 2, 2, 2], [1, 1, 1, 2, 2], [1, 1, 2, 2, 2, 2, 2, 1, 1]]
)
def test_majority_source_examples_agree(nums):
    expected = majority_brute(nums)
    assert nums.count(expected) > len(nums) // 2
    assert majority_sorted(nums) == expected
    assert majority_moore(nums) == expected


@pytest.mark.parametrize("finder", [majority_brute, majority_sorted])
def test_no_majority(finder):
    assert finder([1, 2, 3, 4]) == -1
    assert finder([]) == -1


def test_moore_on_empty_list():
    assert majority_moore([]) == 0


@given(int_lists)
def test_max_profit_is_achievable(prices):
    profit = max_profit(prices)
    assert profit >= 0
    if profit > 0:
        assert any(
            prices[j] - prices[i] == profit
            for i in range(len(prices))
            for j in range(i + 1, len(prices))
        )
    assert all(
        prices[j] - prices[i] <= profit
        for i in range(len(prices))
        for j in range(i + 1, len(prices))
    )


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=25))
def test_max_profit_on_ascending_prices(raw):
    prices = sorted(raw)
    assert max_profit(prices) == prices[-1] - prices[0]


@given(st.lists(st.integers(-50, 50), max_size=25))
def test_max_profit_on_descending_prices(raw):
    assert max_profit(sorted(raw, reverse=True)) == 0


@pytest.mark.parametrize("finder", [max_water_brute, max_water])
def test_max_water_source_example(finder):
    assert finder([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@pytest.mark.parametrize("finder", [max_water_brute, max_water])
@pytest.mark.parametrize("heights", [[], [5]])
def test_max_water_needs_two_lines(finder, heights):
    assert finder(heights) == 0


@given(st.lists(st.integers(0, 100), max_size=25))
def test_max_water_variants_agree(heights):
    assert max_water(heights) == max_water_brute(heights)


def test_second_values_source_example():
    values = [-1, -5, -2, -3, -8, -7]
    assert second_largest(values) == -2
    assert second_smallest(values) == -7


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=25))
def test_second_largest_invariants(values):
    result = second_largest(values)
    distinct = set(values)
    if len(distinct) < 2:
        assert result is None
    else:
        assert result in distinct
        assert result < max(values)
        assert not any(result < value < max(values) for value in distinct)


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=25))
def test_second_smallest_invariants(values):
    result = second_smallest(values)
    distinct = set(values)
    if len(distinct) < 2:
        assert result is None
    else:
        assert result in distinct
        assert result > min(values)
        assert not any(min(values) < value < result for value in distinct)


@pytest.mark.parametrize("finder", [second_largest, second_smallest])
def test_second_values_reject_empty(finder):
    with pytest.raises(ValueError):
        finder([])


def test_is_sorted_source_example():
    assert not is_sorted([1, 2, 9, 7, 9, 10])
    assert is_sorted(sorted([1, 2, 9, 7, 9, 10]))


@given(int_lists)
def test_is_sorted_matches_sorted(values):
    assert is_sorted(values) == (values == sorted(values))
    assert is_sorted(sorted(values))