import pytest

from algoset.sliding_window import (
    find_max_consecutive_ones,
    length_of_longest_substring,
    longest_ones,
    max_profit,
    max_score,
    num_subarrays_with_sum,
    number_of_nice_subarrays,
    number_of_substrings,
    subarray_sum,
)

BINARY = [1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 1]


def _total_subarrays(seq):
    return len(seq) * (len(seq) + 1) // 2


def test_longest_ones_is_monotone_in_k():
    zeros = BINARY.count(0)
    results = [longest_ones(BINARY, k) for k in range(zeros + 1)]
    assert results == sorted(results)
    assert results[-1] == len(BINARY)


def test_longest_ones_without_flips_matches_plain_run():
    assert longest_ones(BINARY, 0) == find_max_consecutive_ones(BINARY)


def test_find_max_consecutive_ones_all_ones():
    ones = [1] * 7
    assert find_max_consecutive_ones(ones) == len(ones)
    assert find_max_consecutive_ones([0, 0, 0]) == 0


@pytest.mark.parametrize("nums", [[1, 1, 2, 1, 1], [2, 4, 6], [2, 2, 2, 1, 2, 2, 1, 2, 2, 2], [3]])
def test_nice_subarrays_partition_all_subarrays(nums):
    total = sum(number_of_nice_subarrays(nums, k) for k in range(len(nums) + 1))
    assert total == _total_subarrays(nums)


def test_nice_subarrays_all_odd():
    nums = [1, 3, 5, 7, 9]
    assert number_of_nice_subarrays(nums, 1) == len(nums)


def test_binary_subarrays_partition_all_subarrays():
    total = sum(num_subarrays_with_sum(BINARY, goal) for goal in range(sum(BINARY) + 1))
    assert total == _total_subarrays(BINARY)


@pytest.mark.parametrize("goal", [0, 1, 2, 5])
def test_binary_subarrays_agree_with_prefix_sums(goal):
    assert num_subarrays_with_sum(BINARY, goal) == subarray_sum(BINARY, goal)


def test_subarray_sum_all_zeros():
    zeros = [0] * 6
    assert subarray_sum(zeros, 0) == _total_subarrays(zeros)


def test_subarray_sum_with_negatives_partitions():
    nums = [3, -1, 4, -1, -5, 9, -2]
    bound = sum(abs(v) for v in nums)
    total = sum(subarray_sum(nums, k) for k in range(-bound, bound + 1))
    assert total == _total_subarrays(nums)


def test_number_of_substrings_worked_example():
    assert number_of_substrings("aaacb") == 3


def test_number_of_substrings_missing_letter():
    assert number_of_substrings("aabbab") == 0


def test_number_of_substrings_bounded():
    s = "abcabcacb"
    assert 0 < number_of_substrings(s) <= _total_subarrays(s)


def test_number_of_substrings_rejects_other_letters():
    with pytest.raises(ValueError):
        number_of_substrings("abd")


def test_max_score_worked_example():
    assert max_score([1, 2, 3, 4, 5, 6, 1], 3) == 12


def test_max_score_all_cards():
    cards = [9, 7, 7, 9, 7, 7, 9]
    assert max_score(cards, len(cards)) == sum(cards)


@pytest.mark.parametrize("k", [1, 2, 3])
def test_max_score_beats_either_end(k):
    cards = [100, 40, 17, 9, 73, 75]
    result = max_score(cards, k)
    assert result >= sum(cards[:k])
    assert result >= sum(cards[-k:])


def test_max_score_rejects_too_many():
    with pytest.raises(ValueError):
        max_score([1, 2], 3)


def test_longest_substring_worked_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_longest_substring_distinct():
    s = "qwerty"
    assert length_of_longest_substring(s) == len(s)
    assert length_of_longest_substring("") == len("")


def test_longest_substring_bounded_by_alphabet():
    s = "pwwkewpwwkew"
    assert length_of_longest_substring(s) <= len(set(s))
    assert length_of_longest_substring("bbbb") == len(set("bbbb"))


def test_max_profit_increasing():
    prices = [1, 2, 3, 4, 5]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_decreasing():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_picks_lowest_before_highest():
    prices = [7, 1, 5, 3, 6, 4]
    assert max_profit(prices) == max(prices[2:]) - min(prices)