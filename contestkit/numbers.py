"""Small arithmetic puzzles: counting, divisibility and digit checks."""

from __future__ import annotations

from collections.abc import Iterable

_LUCKY_DIGITS = frozenset("47")


def years_until_heavier(a: int, b: int) -> int:
    """Years until a weight tripling each year exceeds one doubling each year."""
    if a <= 0 and a <= b:
        raise ValueError("the first weight must be positive to ever overtake the second")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def cheap_travel_cost(n: int, m: int, a: int, b: int) -> int:
    """Cheapest price for n rides, with single tickets at a and m-ride tickets at b."""
    if m * a <= b:
        return n * a
    full, rest = divmod(n, m)
    return full * b + min(rest * a, b)


def max_dominoes(m: int, n: int) -> int:
    """Largest number of 2x1 dominoes that fit on an m by n board."""
    return m * n // 2


def elephant_steps(n: int) -> int:
    """Fewest moves of length at most five needed to cover distance n."""
    return -(-n // 5)


def max_expression(a: int, b: int, c: int) -> int:
    """Largest value obtainable by placing + and * and brackets between a, b, c."""
    return max(a + b + c, a * b * c, a * (b + c), (a + b) * c)


def kth_not_divisible(n: int, k: int) -> int:
    """The k-th positive integer that is not divisible by n."""
    if n < 2:
        raise ValueError("n must be at least 2")
    return k + (k - 1) // (n - 1)


def longest_divisors_interval(n: int) -> int:
    """Length of the longest run of consecutive small divisors of n."""
    if n == 1:
        return 1
    longest = 0
    count = 0
    i = 1
    while i ** 5 <= n:
        if n % i == 0:
            count += 1 if n // i == i else 2
        else:
            longest = max(longest, count)
            count = 0
        i += 1
    longest = max(longest, count)
    return longest // 2


def sandwich_layers(bread: int, cheese: int, ham: int) -> int:
    """Most layers in a sandwich alternating bread with fillings, bread outside."""
    used = min(bread, cheese + ham)
    layers = 2 * used
    return layers - 1 if bread == used else layers + 1


def is_nearly_lucky(n: int) -> bool:
    """Whether the count of digits 4 and 7 in n is itself 4 or 7."""
    digits = str(n) if n > 0 else ""
    count = sum(1 for digit in digits if digit in _LUCKY_DIGITS)
    return count in (4, 7)


def candle_hours(a: int, b: int) -> int:
    """Hours of light from a candles when b burnt ones make a new candle."""
    if b < 2:
        raise ValueError("b must be at least 2")
    hours = a
    while a >= b:
        fresh, left = divmod(a, b)
        hours += fresh
        a = fresh + left
    return hours


def banana_debt(k: int, n: int, w: int) -> int:
    """Money to borrow for w bananas costing k, 2k, ..., wk when holding n."""
    return max(0, k * w * (w + 1) // 2 - n)


def odd_sum_verdict(n: int, k: int) -> bool:
    """Whether n is a sum of k distinct positive odd integers."""
    return n % 2 == k % 2 and k * k <= n


def flagstones(n: int, m: int, a: int) -> int:
    """Number of a by a flagstones needed to cover an n by m square."""
    return -(-n // a) * -(-m // a)


def can_split_watermelon(w: int) -> bool:
    """Whether weight w splits into two positive even parts."""
    return w % 2 == 0 and w > 2


def wrong_subtraction(n: int, k: int) -> int:
    """Apply k steps of subtraction that drops a trailing zero instead of borrowing."""
    for _ in range(k):
        if n % 10:
            n -= 1
        else:
            n //= 10
    return n


def forces_balanced(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Whether the given three-dimensional force vectors sum to zero."""
    total_x = total_y = total_z = 0
    for x, y, z in forces:
        total_x += x
        total_y += y
        total_z += z
    return total_x == total_y == total_z == 0


def can_build_fence(angle: int) -> bool:
    """Whether some regular polygon with 3 to 180 sides has this interior angle."""
    if angle == 0:
        return False
    return any(180 * (sides - 2) // sides == angle for sides in range(3, 181))


def is_lucky(n: int) -> bool:
    """Whether every digit of n is 4 or 7."""
    if n <= 0:
        return True
    return all(digit in _LUCKY_DIGITS for digit in str(n))


def is_almost_lucky(n: int) -> bool:
    """Whether n has a lucky divisor."""
    return any(n % i == 0 and is_lucky(i) for i in range(1, n + 1))


def _extends_backwards(first: int, second: int, steps: int) -> bool:
    while first >= 0 and second >= 0:
        if steps == 0:
            return True
        first, second = second - first, first
        steps -= 1
    return False


def count_fibonacci_starts(n: int, k: int) -> int:
    """Count non-negative Fibonacci-like sequences of length k whose k-th term is n."""
    if k < 2:
        raise ValueError("k must be at least 2")
    return sum(
        1 for first in range(n // 2, -1, -1) if _extends_backwards(first, n - first, k - 2)
    )