# basickit

Small, self-contained routines built around classic programming exercises:
date arithmetic, text calendars, number bases, big-integer addition, array
searches, XOR tricks, matrices, a linked list, a stack, a growable array, text
clean-up and star patterns. It uses only the standard library.

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

### `basickit.dates`

- `Date(year, month, day)`: a frozen, orderable dataclass; `str()` gives
  `YYYY-MM-DD`.
- `is_leap_year(year)` and `month_days(year, month)` (raises `ValueError` for a
  month outside 1–12).
- `validate_date(date)` returns whether the month and day exist.
- `date_to_days(date)` and `days_to_date(total_days)` convert between dates and
  day counts from 1900-01-01. A negative count raises `ValueError`.
- `weekday_name(date)` returns one of `一 二 三 四 五 六 日` (Monday first).
- `advance(date, days)`, `day_of_year(date)`, `days_between(first, second)` and
  `next_date(date)`.
- `day_of_week(date)` returns the full name, such as `星期一`, counted from
  year 1.

The functions that need a real date raise `ValueError` for an invalid one.

### `basickit.calendar_view`

- `first_weekday(year, month)`: 1 for Monday to 7 for Sunday.
- `month_calendar(year, month)`: a header line `MON … SUN` and one line per week.
- `month_block(year, month)`: the seven fixed lines used inside a year view.
- `year_calendar(year)`: months 1–6 beside months 7–12.

### `basickit.bases`

`decimal_to_binary`, `binary_to_decimal`, `decimal_to_hex` (upper case),
`hex_char_value`, `hex_to_decimal` (an optional `0x`/`0X` prefix is accepted)
and `count_one_bits`, which counts set bits in the 32-bit two's-complement
form of a signed 32-bit integer. Negative input to the `decimal_to_*`
functions and bad digits raise `ValueError`.

### `basickit.bigint`

- `BigInt`: a signed integer held as decimal digits. `BigInt.parse("-00123")`
  reads it, `+` adds two of them and `str()` writes the result. Zero is always
  positive.
- `big_add(first, second)` adds two signed decimal strings.
- `add_unsigned(first, second)` adds two unsigned decimal strings.

### `basickit.arrays`

`selection_sort`, `unique_sorted` (drops consecutive repeats),
`common_elements` and `common_elements_of_three` for ascending sequences,
`closest_pair`, `max_and_second`, `majority_element` (returns `None` when no
value fills more than half) and `sort_strings`.

### `basickit.xor_tricks`

`single_unique`, `two_uniques` and `three_uniques` find the values that are
not part of a pair; `find_repeated` finds the extra value among 1..n.

### `basickit.grid`

`matrix_multiply(first, second)`, `snake_matrix(n)` (a clockwise spiral of
1..n²), `count_grid_paths(m, n)` and `format_matrix(matrix, width=4)`.

### `basickit.linkedlist`

`LinkedList(values=())` is made of `Node` objects and keeps a head and a tail.
It has `push_front`, `push_back`, `insert_sorted`, `delete_at` (1-based,
`IndexError` when out of range), `merge`, `reverse`, `nth_from_end`, `middle`,
`has_cycle`, `remove_consecutive_duplicates` and `split_odd_even`.
`find_intersection(first, second)` returns the first node that two lists share,
or `None`.

### `basickit.containers`

- `LinkedStack`: `push`, `top` (raises `IndexError` when empty), `pop` (returns
  `None` when empty), `len()` and iteration from the top.
- `Vector(capacity)`: `push_back` doubles `capacity` when full. It supports
  `len()`, indexing and iteration.

### `basickit.text`

`count_categories` (returns `CategoryCounts(alpha, digits, other)`),
`category_chart`, `split_digits_letters`, `replace_spaces` (each space becomes
`%020`), `remove_char`, `remove_duplicates`, `remove_extra_spaces`,
`split_words`, `compare_strings` (returns 1, -1 or 0) and `to_upper_letters`
(upper-cases the lower-case letters before the first `?` and drops everything
else).

### `basickit.patterns`

`multiplication_table()`, `diamond(n=5)`, `hollow_diamond(n=5)` and
`heart(n=8)` each return the pattern as text.

## Example

```python
from basickit.dates import Date, advance, weekday_name
from basickit.bigint import big_add
from basickit.grid import snake_matrix, format_matrix

later = advance(Date(2024, 2, 28), 2)
print(later, weekday_name(later))        # 2024-03-01 五

print(big_add("-100000000000000000000", "1"))

print(format_matrix(snake_matrix(4), 4))
```

## What it does not do

The package is a library only. It installs no commands and reads no input
from the terminal. Each routine takes its values as arguments and returns its
result. Printing and prompting are left to the caller.