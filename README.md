# algokata

Compact, pure-Python solutions to classic programming exercises, grouped by
theme. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokata.searching`

- `two_sum(nums, target)`: indices `(i, j)` of the first pair summing to
  `target`, or `None`.
- `two_sum_sorted(numbers, target)`: 1-based indices of a pair in a sorted
  sequence, or `None`.
- `three_sum(nums)`: every distinct triple summing to zero, each as an ascending list.
- `max_area(height)`: the most water held between two walls.
- `contains_duplicate(nums)`, `contains_nearby_duplicate(nums, k)`.

### `algokata.counting`

- `single_number(nums)`: the value seen once when others appear twice.
- `single_number_ii(nums)`: the value seen once when others appear three
  times; raises `ValueError` on an empty input.
- `cyclic_sort(values)`: in place, puts each `v` in `0..len-1` at index `v`.
- `missing_number(nums)`: the absent number of `0..len(nums)`.
- `find_disappeared_numbers(nums)`: absent numbers of `1..len(nums)`; raises
  `ValueError` if a value is outside that range.
- `find_error_nums(nums)`: `(duplicate, missing)`, with `-1` for a value not found.

### `algokata.transforms`

- `sorted_squares(nums)`, `running_sum(nums)`, `get_concatenation(nums)`.
- `remove_duplicates(nums)` and `remove_element(nums, val)`: work in place on a
  list and return the number of items kept at its front.
- `shuffle(nums, n)`: interleaves `nums[:n]` with `nums[n:]`; raises
  `ValueError` for a negative `n`.
- `smaller_numbers_than_current(nums)`, `find_max_consecutive_ones(nums)`.
- `plus_one(digits)`: returns a new digit list.
- `build_array(target, n)`: the `"Push"`/`"Pop"` operations that leave `target`
  on a stack.
- `reverse_string(chars)`: reverses a list of characters in place.

### `algokata.strings`

- `is_palindrome(s)`: ignores case and non-ASCII-alphanumeric characters.
- `valid_palindrome(s)`: palindrome after deleting at most one character.
- `is_vowel(c)`, `reverse_vowels(s)`, `length_of_longest_substring(s)`.
- `roman_to_int(s)`: raises `ValueError` on an unknown symbol.

### `algokata.numbers`

- `reverse_integer(x)`: returns 0 when the result falls outside the signed
  32-bit range.
- `is_palindrome_number(x)`, `trailing_zeroes(n)`, `subtract_product_and_sum(n)`,
  `count_odds(low, high)`, `is_power_of_two(n)`.
- `add_digits(num)`: the digital root; raises `ValueError` for negative input.

### `algokata.linked_list`

- `ListNode(val, next)`: iterating a node yields the values from it onwards.
- `build_list(values)`: head of a new list, or `None` when empty.
- `add_two_numbers(l1, l2)`: adds numbers stored least significant digit first.
- `reverse_list(head)`: reverses in place and returns the new head.

### `algokata.structures`

- `QueueStack`: a stack kept in one queue, with `push`, `pop`, `top`, `empty`
  and `len()`.
- `StackQueue`: a queue kept in two stacks, with `push`, `pop`, `peek`, `empty`
  and `len()`.

Both raise `IndexError` when read while empty.

### `algokata.rpn`

- `eval_rpn(tokens)`: evaluates integer RPN with `+ - * /`, division truncating
  toward zero; raises `ValueError` for a missing operand or an empty expression.

## Examples

```python
from algokata.searching import two_sum, three_sum
from algokata.strings import roman_to_int
from algokata.linked_list import build_list, add_two_numbers
from algokata.rpn import eval_rpn

two_sum([2, 7, 11, 15], 9)            # (0, 1)
three_sum([-1, 0, 1, 2, -1, -4])      # [[-1, -1, 2], [-1, 0, 1]]
roman_to_int("MCMXCIV")               # 1994

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list(total)                           # [7, 0, 8]

eval_rpn(["2", "1", "+", "3", "*"])   # 9
```

```python
from algokata.structures import QueueStack, StackQueue

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.top()    # 2
stack.pop()    # 2

queue = StackQueue()
queue.push(1)
queue.push(2)
queue.peek()   # 1
queue.pop()    # 1
```

## Scope

algokata is a library only: it has no command-line tool, and every function
works on values passed in directly.