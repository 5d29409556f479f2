# algopractice

A collection of classic algorithm exercises written as plain Python functions
and small classes. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algopractice.nodes` | `ListNode` (iterable over its values), `TreeNode`, `build_list`, `list_values` |
| `algopractice.trees` | `preorder_traversal`, `is_balanced`, `invert_tree`, `diameter_of_binary_tree` |
| `algopractice.linked_lists` | `get_intersection_node`, `remove_nth_from_end`, `remove_elements`, `is_palindrome`, `delete_node` |
| `algopractice.lru_cache` | `LRUCache` with `get`, `put`, `len()` and `in` |
| `algopractice.bits` | `hamming_weight`, `count_bits`, `count_ones` |
| `algopractice.sorting` | `bubble_sort`, `quick_sort` |
| `algopractice.arrays` | `two_sum`, `max_area`, `three_sum`, `longest_consecutive`, `rotate`, `contains_duplicate`, `contains_nearby_duplicate`, `move_zeroes`, `find_disappeared_numbers`, `max_sub_array`, `merge_intervals` |
| `algopractice.text` | `length_of_longest_substring`, `longest_palindrome`, `group_anagrams`, `find_anagrams`, `title_to_number` |
| `algopractice.presum` | `product_except_self`, `NumArray` with `sum_range`, `subarray_sum` |
| `algopractice.dp` | `minimum_total`, `word_break`, `min_falling_path_sum`, `generate`, `max_product`, `rob`, `count_primes`, `count_primes_trial_division`, `num_squares`, `coin_change`, `longest_palindrome`, `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum`, `delete_and_earn`, `format_grid` |

## Examples

```python
from algopractice.nodes import build_list, list_values
from algopractice.linked_lists import remove_elements
from algopractice.lru_cache import LRUCache
from algopractice.dp import longest_palindrome, word_break
from algopractice.sorting import quick_sort

head = build_list([1, 2, 6, 3, 4, 5, 6])
print(list_values(remove_elements(head, 6)))   # [1, 2, 3, 4, 5]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)          # 1
cache.put(3, 3)       # evicts key 2
cache.get(2)          # -1

print(longest_palindrome("babad"))              # "bab"
print(word_break("aaaaaaa", ["aaaa", "aa"]))    # True

values = [5, 3, 9, 1]
quick_sort(values)
print(values)                                    # [1, 3, 5, 9]
```

## Behaviour worth knowing

- Functions that change their argument and return `None`: `rotate`,
  `move_zeroes`, `bubble_sort` and `quick_sort` rearrange the list they are
  given; `delete_node` rewrites the node it is given. `invert_tree` mirrors
  the tree in place and returns its root; `remove_elements` and
  `remove_nth_from_end` relink the nodes of the list they are given.
- `two_sum` returns `None` when no pair exists.
- `LRUCache.get` returns `-1` for a missing key. A cache always keeps the
  entry just written, even with a capacity below one.
- `hamming_weight` treats its argument as an unsigned 32-bit integer.
- `title_to_number` sums, over the bytes of the title, each byte's offset
  from `A` plus 26 times its position (`"A"` gives 0, `"AA"` gives 26); it is
  not the usual spreadsheet column number.
- `find_anagrams` reports no match when both strings have the same length
  but different first characters.
- `text.longest_palindrome` and `dp.longest_palindrome` both return the
  longest palindromic substring, the earliest one on a tie.
- `format_grid` returns the grid as text, one row per line, every value
  followed by a space.

Errors are raised rather than signalled by return values:

| Call | Raises |
| --- | --- |
| `rotate` on an empty list with `k > 0` | `ValueError` |
| `find_disappeared_numbers` with a value outside `1..len(nums)` | `ValueError` |
| `count_bits(n)` with `n < -1` | `ValueError` |
| `NumArray.sum_range` with an index out of range | `IndexError` |
| `min_falling_path_sum` with fewer than 1 or more than 100 rows | `ValueError` |
| `generate(num_rows)` with `num_rows < 1` | `ValueError` |
| `coin_change` with no coins or a non-positive coin (amount not 0) | `ValueError` |
| `unique_paths` with a negative dimension | `ValueError` |
| `min_path_sum` on an empty grid | `ValueError` |
| `delete_and_earn` with a negative value (two or more values) | `ValueError` |

## What it does not do

This is a library only: it installs no command-line tool and reads or writes
no files. The sorting functions sort Python lists in memory.