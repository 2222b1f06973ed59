# algoset

A collection of classic algorithms written as plain Python functions over
lists, strings, binary trees, linked lists, grids and graphs. It has no
runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `algoset.arrays`

- `three_sum(nums)`: all distinct triplets summing to zero, each ascending.
- `majority_element(nums)`: the value occurring more than `len(nums) // 2`
  times; raises `ValueError` if there is none.
- `majority_elements(nums)`: every value occurring more than
  `len(nums) // 3` times.
- `rearrange_by_sign(nums)`: alternates non-negative and negative values,
  starting non-negative and keeping their order; raises `ValueError` unless
  both groups are the same size.
- `remove_duplicates(nums)`: compacts a sorted list in place so its first
  `k` items are unique and returns `k`.
- `find_duplicate(nums)`: the repeated value among `n + 1` values drawn
  from `1..n`.
- `next_permutation(nums)`: the next lexicographic permutation, in place;
  the last one wraps round to ascending order.
- `max_subarray(nums)`: largest sum of a non-empty contiguous run.
- `merge_intervals(intervals)`: merges overlapping `[start, end]` pairs.
- `sort_colors(nums)`: sorts 0s, 1s and 2s in place in one pass.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` values of
  `nums2` into the first `m` of `nums1`, in place.

### `algoset.searching`

- `search_rotated(nums, target)`: index in a rotated ascending list, or -1.
- `find_median_sorted_arrays(nums1, nums2)`: median of two ascending lists.
- `single_non_duplicate(nums)`: the one unpaired value in a sorted list.
- `search_matrix(matrix, target)`: membership in a row-wise ascending matrix.
- `my_pow(x, n)`: `x` to an integer power by repeated squaring.

### `algoset.strings`

- `reverse_words(s)`: words in reverse order, single-spaced.
- `nearest_palindromic(n)`: the closest palindrome to the number in `n`,
  other than `n` itself; ties go to the smaller one.

### `algoset.sliding_window`

`longest_ones`, `number_of_nice_subarrays`, `number_of_substrings`,
`max_score`, `length_of_longest_substring`, `num_subarrays_with_sum`,
`subarray_sum`, `find_max_consecutive_ones`, `max_profit`.

### `algoset.dynamic_programming`

`minimum_total`, `rob` (houses in a circle), `unique_paths`,
`unique_paths_with_obstacles`, `min_path_sum`, `min_falling_path_sum`.

### `algoset.matrices`

- `rotate(matrix)`: 90 degrees clockwise, in place; square matrices only.
- `spiral_order(matrix)`: values read clockwise from the top-left.
- `set_zeroes(matrix)`: zeroes every row and column holding a zero, in place.
- `pascal_triangle(num_rows)`: the first rows of Pascal's triangle.

### `algoset.graphs`

- `num_islands(grid)`: groups of `"1"` cells joined orthogonally.
- `num_buses_to_destination(routes, source, target)`: fewest buses from
  one stop to another, or -1.

### `algoset.trees`

`TreeNode`, `build_tree` (from level-order values with `None` for gaps),
`is_balanced`, `preorder`, `inorder`, `postorder`, `lowest_common_ancestor`,
`diameter`.

### `algoset.linked_lists`

`ListNode`, `build_list`, `list_values`, `detect_cycle`, `is_palindrome`
(leaves the list as it found it), `rotate_right`.

Nodes of both `TreeNode` and `ListNode` compare by identity.

## Examples

```python
from algoset.arrays import three_sum, merge_intervals
from algoset.sliding_window import length_of_longest_substring
from algoset.trees import build_tree, inorder, diameter
from algoset.linked_lists import build_list, list_values, rotate_right

three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
length_of_longest_substring("abcabcbb")     # 3

root = build_tree([1, 2, 3, 4, 5])
inorder(root)                               # [4, 2, 5, 1, 3]
diameter(root)                              # 3

list_values(rotate_right(build_list([1, 2, 3, 4, 5]), 2))  # [4, 5, 1, 2, 3]
```

## Running the tests

```
pip install ".[test]"
pytest
```