# contestkit

Solutions to well-known programming-contest problems, written as small
Python functions. Each function takes ordinary Python values and returns
the answer; invalid input that the problem cannot handle raises
`ValueError`.

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

- `contestkit.numbers` – arithmetic problems: `years_until_heavier`,
  `cheap_travel_cost`, `max_dominoes`, `elephant_steps`, `max_expression`,
  `kth_not_divisible`, `longest_divisors_interval`, `sandwich_layers`,
  `is_nearly_lucky`, `candle_hours`, `banana_debt`, `odd_sum_verdict`,
  `flagstones`, `can_split_watermelon`, `wrong_subtraction`,
  `forces_balanced`, `can_build_fence`, `is_lucky`, `is_almost_lucky` and
  `count_fibonacci_starts`.
- `contestkit.text` – string problems: `apply_statements`, `fix_caps_lock`,
  `winning_team`, `rearrange_sum`, `compare_ignore_case`,
  `stones_to_remove`, `abbreviate`, `capitalize_first`, `can_say_hello`,
  `gender_verdict`, `strip_vowels`, `fix_word_case` and
  `count_sorted_variants`.
- `contestkit.sequences` – problems over lists: `count_pairs`,
  `dalton_swaps`, `can_defeat_dragons`, `shops_affordable`,
  `can_reach_cell`, `advancing_count`, `same_difference_pairs`,
  `min_taxis`, `lantern_radius`, `pile_numbers`, `ringroad_time`,
  `best_fence_start`, `max_ones_after_flip`, `has_happy_laptops`,
  `moves_to_center`, `min_operations`, `distinct_suffix_counts` and
  `problems_solved`.
- `contestkit.cli` – the `contestkit` command.

## Usage

```python
from contestkit.numbers import flagstones, max_expression, can_split_watermelon
from contestkit.text import abbreviate, can_say_hello

flagstones(6, 6, 4)            # 4
max_expression(1, 2, 3)        # 9
can_split_watermelon(8)        # True
abbreviate("localization")     # "l10n"
can_say_hello("ahhellllloou")  # True
```

```python
from contestkit.sequences import shops_affordable

shops_affordable([3, 10, 8, 6, 11], [1, 10, 3, 11])  # [0, 4, 1, 5]
```

## Command line

The `contestkit` command takes a subcommand naming a problem and reads
whitespace-separated input from standard input:

| Subcommand   | Input                                             | Output                                  |
|--------------|---------------------------------------------------|-----------------------------------------|
| `abbreviate` | a count, then that many words                     | each word, shortened if over ten letters |
| `flagstones` | `n m a`                                           | flagstones needed                       |
| `drinks`     | a count and that many prices, a count and budgets | shops affordable for each budget        |
| `suffixes`   | `n m`, then `n` values, then `m` 1-based starts   | distinct values from each start         |

```
echo "6 6 4" | contestkit flagstones
```

Answers are printed one per line and the command exits with status 0.
Malformed or out-of-range input prints a message to standard error and
exits with status 1. Run `contestkit --help` to list the subcommands.

## Limits

Only the four problems above are available from the command line; every
other problem is reached through its Python function.