# drillbox

Classic beginner programming exercises as a small Python library, with a few
console programs on top: a four-function calculator, text patterns, an event
scheduler and a small shop.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `drillbox.arithmetic`: `calculate(operation, num1, num2)` with an `Operation`
  (`ADD`, `SUBTRACT`, `MULTIPLY`, `DIVIDE`; division returns a float and raises
  `ZeroDivisionError` for a zero divisor, an unknown option raises
  `ValueError`), `square`, `cube`, `is_perfect_square`, `class_average`
  (grades must lie in 0..100), `factorial_iterative`, `factorial_recursive`,
  `fibonacci_iterative`, `fibonacci_recursive` (both return the first `count`
  numbers as a list), `largest_of_three` (returns `(position, value)`),
  `is_leap_year`, `is_even`, `sum_natural`, `swap_arithmetic`, `swap_temp` and
  `multiplication_table`.
- `drillbox.digits`: `count_digits`, `digit_frequency` (a dict from digit to
  count), `is_prime`, `reverse_digits` (a string, leading zeros kept),
  `has_unique_digits` and `is_vowel`.
- `drillbox.patterns`: `half_pyramid_numbers`, `half_pyramid_symbol`,
  `inverted_half_pyramid_numbers`, `inverted_half_pyramid_symbol`,
  `pyramid_numbers`, `pyramid_symbol`, `hollow_pyramid`, `pascal_pyramid` and
  `pascal_diamond`. Each takes a height and returns a list of lines; a height
  below one gives an empty list.
- `drillbox.events`: `EventScheduler` with `add_event`, `cancel_event`,
  `upcoming_events` and `past_events`; `Event`; `format_record` and
  `parse_record` for lines of the form `id | name | date | time | status`.
  Failures raise `SchedulerError`.
- `drillbox.shopping`: `Shop` with `add_product`, `add_to_cart`, `cart_lines`,
  `cart_total`, `checkout` and `purchase_history`; `Product`, `CartItem` and
  `current_date` (today as `DD-MM-YYYY`). Failures raise `ShoppingError`.

```python
from drillbox.arithmetic import factorial_iterative, is_leap_year, is_perfect_square
from drillbox.digits import count_digits, is_prime
from drillbox.patterns import pyramid_symbol

factorial_iterative(5)      # 120
is_leap_year(2000)          # True
is_perfect_square(14)       # False
count_digits(12345)         # 5
is_prime(13)                # True

print("\n".join(pyramid_symbol(3)))
#   *
#  ***
# *****
```

## Console programs

```
drillbox calc                 # interactive calculator
drillbox calc 4 7 2           # option (1-4, 0 to stop) and two integers
drillbox pattern pyramid-symbol 5
drillbox pattern hollow-pyramid   # asks for the height
drillbox events               # same as drillbox-events
drillbox shop                 # same as drillbox-shop
drillbox-events [--file event_records.txt]
drillbox-shop [--products products.txt] [--history history.txt]
```

Pattern names for `drillbox pattern` are `half-pyramid-numbers`,
`half-pyramid-symbol`, `hollow-pyramid`, `inverted-half-pyramid-numbers`,
`inverted-half-pyramid-symbol`, `pascal-diamond`, `pascal-pyramid`,
`pyramid-numbers` and `pyramid-symbol`.

`drillbox-events` and `drillbox-shop` are menu-driven; their record files
default to the current directory.

## What it does not do

- The event scheduler only knows the events added in the current session.
  Listings read the records file, but cancelling an event from an earlier
  session is not possible, and cancelling rewrites the records file with the
  current session's events only.
- The shop does not load products from its products file at start; the file is
  only appended to. Products and the cart exist for one session, and only the
  purchase history is read back.