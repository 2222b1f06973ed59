import pytest

from algoset.dynamic_programming import (
    min_falling_path_sum,
    min_path_sum,
    minimum_total,
    rob,
    unique_paths,
    unique_paths_with_obstacles,
)


def test_minimum_total_worked_example():
    assert minimum_total([[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]) == 11


def test_minimum_total_single_row():
    assert minimum_total([[-10]]) == -10


@pytest.mark.parametrize("rows", [1, 2, 5, 8])
def test_minimum_total_all_ones_equals_row_count(rows):
    triangle = [[1] * (i + 1) for i in range(rows)]
    assert minimum_total(triangle) == rows


def test_minimum_total_empty_raises():
    with pytest.raises(ValueError):
        minimum_total([])


def test_rob_circle_skips_adjacent_ends():
    assert rob([2, 3, 2]) == 3


def test_rob_worked_example():
    assert rob([1, 2, 3, 1]) == 4


def test_rob_single_and_pair():
    assert rob([5]) == 5
    assert rob([7, 7]) == 7


@pytest.mark.parametrize("nums", [[2, 7, 9, 3, 1], [1, 2, 3, 1], [4, 1, 2, 7, 5, 3, 1]])
def test_rob_is_rotation_invariant(nums):
    expected = rob(nums)
    for shift in range(len(nums)):
        assert rob(nums[shift:] + nums[:shift]) == expected


@pytest.mark.parametrize("nums", [[2, 7, 9, 3, 1], [5, 5, 5], [1, 0, 0, 1]])
def test_rob_bounded_by_total_and_max(nums):
    result = rob(nums)
    assert max(nums) <= result <= sum(nums)


def test_rob_empty_raises():
    with pytest.raises(ValueError):
        rob([])


@pytest.mark.parametrize("n", [1, 4, 9])
def test_unique_paths_thin_grids(n):
    assert unique_paths(1, n) == 1
    assert unique_paths(2, n) == n


@pytest.mark.parametrize("m,n", [(2, 2), (3, 7), (4, 5), (6, 6)])
def test_unique_paths_recurrence_and_symmetry(m, n):
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)
    assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@pytest.mark.parametrize("m,n", [(1, 1), (3, 3), (3, 7), (5, 2)])
def test_obstacle_free_grid_matches_unique_paths(m, n):
    grid = [[0] * n for _ in range(m)]
    assert unique_paths_with_obstacles(grid) == unique_paths(m, n)


def test_obstacles_blocking_start_or_end():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_obstacle_wall_blocks_everything():
    grid = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    assert unique_paths_with_obstacles(grid) == 0


def test_obstacle_reduces_path_count():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert 0 < unique_paths_with_obstacles(grid) < unique_paths(3, 3)


def test_min_path_sum_worked_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_sum_single_row_and_column():
    assert min_path_sum([[1, 2, 3, 4]]) == sum([1, 2, 3, 4])
    assert min_path_sum([[5], [6], [7]]) == sum([5, 6, 7])


def test_min_path_sum_zero_grid():
    assert min_path_sum([[0, 0], [0, 0]]) == 0


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_min_falling_single_row():
    assert min_falling_path_sum([[4, -3, 8]]) == -3


def test_min_falling_constant_rows():
    matrix = [[3, 3, 3], [1, 1, 1], [6, 6, 6]]
    assert min_falling_path_sum(matrix) == sum(row[0] for row in matrix)


@pytest.mark.parametrize(
    "matrix",
    [[[2, 1, 3], [6, 5, 4], [7, 8, 9]], [[-19, 57], [-40, -5]], [[1, 9, 1], [9, 1, 9], [1, 9, 1]]],
)
def test_min_falling_bounds(matrix):
    result = min_falling_path_sum(matrix)
    assert sum(min(row) for row in matrix) <= result
    for column in range(len(matrix)):
        assert result <= sum(row[column] for row in matrix)


def test_min_falling_empty_raises():
    with pytest.raises(ValueError):
        min_falling_path_sum([])