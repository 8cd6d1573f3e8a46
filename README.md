# algopractice

A collection of well-known algorithm solutions: trie-based lookups, binary
searches, subarray maximisation, string puzzles, stack techniques and small
array problems. Each solution is a plain function or a small class that takes
Python values and returns a result. Several problems come in two variants that
give the same answers by different methods.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `algopractice.contacts` | `Contacts` with `add(name)` and `find(prefix)`, counting stored names that start with a prefix |
| `algopractice.xor_trie` | `to_binary(value, bits=64)`, `max_xor_of_two(values)` (-1 for fewer than two values), `find_maximum_xor(nums)` (0 for fewer than two) |
| `algopractice.prefix_set` | `first_prefix_conflict(words)` (the first offending word, or `None`), `longest_word(words)` |
| `algopractice.stream_checker` | `StreamChecker(words)` with `query(letter)`, telling whether the letters so far end with one of the words |
| `algopractice.palindrome_pairs` | `palindrome_pairs(words)`, `palindrome_pairs_trie(words)`, both returning `(i, j)` index tuples |
| `algopractice.searching` | `first_bad_version(n, is_bad)`, `single_non_duplicate(nums)`, `is_perfect_square(num)`, `is_perfect_square_newton(num)`, `find_median_sorted_arrays(nums1, nums2)` |
| `algopractice.subarrays` | `max_subarray(nums)`, `max_product(nums)`, `max_subarray_sum_circular(nums)`, `max_subarray_sum_circular_minmax(nums)` |
| `algopractice.strings` | `remove_k_digits(num, k)`, `remove_k_digits_stack(num, k)`, `find_anagrams(s, p)`, `num_jewels_in_stones(jewels, stones)`, `can_construct(ransom_note, magazine)`, `first_uniq_char(s)` |
| `algopractice.grids` | `find_judge(n, trust)`, `find_judge_xor(n, trust)`, `flood_fill(image, sr, sc, new_color)` (in place), `check_straight_line(coordinates)`, `check_straight_line_reduced(coordinates)` |
| `algopractice.linked_list` | `ListNode` (iterable over its values), `from_values(values)`, `odd_even_list(head)` |
| `algopractice.binary_tree` | `TreeNode`, `is_cousins(root, x, y)` |
| `algopractice.numbers` | `find_complement(n)`, `reverse_bits(n)`, `total_hamming_distance(nums)`, `total_hamming_distance_shift(nums)`, `majority_element(nums)`, `has_pair_with_sum(values, k)` |
| `algopractice.stack_problems` | `longest_valid_prefix(expression)`, `largest_rectangle(heights)`, `next_permutation_digits(digits)` (or `None`), `max_xor_secondary(values)`, `to_reverse_polish(expression)`, `can_reorder_trucks(order)` |
| `algopractice.chef_problems` | `count_one_substrings(s)`, `is_lapindrome(s)`, `is_rainbow_array(values)`, `safe_houses(cop_houses, speed, minutes)`, `forgotten_words(words, phrases)`, `minimum_moves(salaries)` |

Functions that need at least one value, such as `max_subarray`,
`single_non_duplicate` or `majority_element`, raise `ValueError` when given an
empty sequence. Arguments outside the accepted range (a negative `k`, a
negative `n` for `find_complement`, a value wider than 32 bits for
`reverse_bits`, a house number outside 1..100) also raise `ValueError`.

## Examples

```python
from algopractice.contacts import Contacts
from algopractice.subarrays import max_subarray_sum_circular
from algopractice.searching import find_median_sorted_arrays
from algopractice.stack_problems import to_reverse_polish

book = Contacts()
book.add("hack")
book.add("hackerrank")
book.find("hac")       # 2
book.find("hak")       # 0

max_subarray_sum_circular([5, -3, 5])           # 10
find_median_sorted_arrays([1, 2], [3, 4])       # 2.5
to_reverse_polish("(a+(b*c))")                  # "abc*+"
```

```python
from algopractice.stream_checker import StreamChecker

checker = StreamChecker(["cd", "f", "kl"])
[checker.query(c) for c in "abcd"]   # [False, False, False, True]
```

```python
from algopractice.linked_list import from_values, odd_even_list

list(odd_even_list(from_values([1, 2, 3, 4, 5])))   # [1, 3, 5, 2, 4]
```

## What it does not do

The package is a library only. It installs no command and does not read
problem input from files or standard input, nor write answers out; callers
pass in the values and use what the functions return.