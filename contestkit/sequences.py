"""Puzzles over lists of numbers: greedy matching, prefix sums and scans."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise

_CENTER = 2


def count_pairs(boys: Iterable[int], girls: Iterable[int]) -> int:
    """Most dance pairs whose skills differ by at most one."""
    boys = sorted(boys)
    girls = sorted(girls)
    pairs = 0
    b = g = 0
    while b < len(boys) and g < len(girls):
        if abs(boys[b] - girls[g]) <= 1:
            pairs += 1
            b += 1
            g += 1
        elif boys[b] < girls[g]:
            b += 1
        else:
            g += 1
    return pairs


def dalton_swaps(permutation: Iterable[int]) -> int:
    """Swaps needed so that no value stands at its own 1-based position."""
    fixed = sum(1 for position, value in enumerate(permutation, start=1) if value == position)
    return (fixed + 1) // 2


def can_defeat_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Whether every (strength, bonus) dragon can be beaten in some order."""
    for dragon_strength, bonus in sorted(dragons, key=lambda dragon: dragon[0]):
        if strength <= dragon_strength:
            return False
        strength += bonus
    return True


def shops_affordable(prices: Iterable[int], budgets: Iterable[int]) -> list[int]:
    """For each budget, how many shops sell the drink at or below it."""
    ordered = sorted(prices)
    return [bisect_right(ordered, budget) for budget in budgets]


def can_reach_cell(portals: Sequence[int], target: int) -> bool:
    """Whether following portals from cell 1 reaches the 1-based target cell."""
    cells = len(portals) + 1
    if not 1 <= target <= cells:
        raise ValueError(f"target {target} is outside cells 1..{cells}")
    if any(step < 1 for step in portals):
        raise ValueError("every portal must move at least one cell forward")
    cell = 0
    goal = target - 1
    while cell < goal:
        cell += portals[cell]
    return cell == goal


def advancing_count(scores: Sequence[int], k: int) -> int:
    """Participants with a positive score at least that of the k-th place."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"place {k} is outside 1..{len(scores)}")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def same_difference_pairs(values: Iterable[int]) -> int:
    """Pairs i < j with values[j] - values[i] == j - i."""
    counts = Counter(value - index for index, value in enumerate(values))
    return sum(count * (count - 1) // 2 for count in counts.values())


def min_taxis(groups: Iterable[int]) -> int:
    """Fewest four-seat taxis carrying groups of one to four children."""
    sizes = Counter()
    for size in groups:
        if size not in (1, 2, 3, 4):
            raise ValueError(f"group size {size} is not between 1 and 4")
        sizes[size] += 1
    ones, twos, threes = sizes[1], sizes[2], sizes[3]
    matched = min(ones, threes)
    taxis = sizes[4] + matched
    ones -= matched
    threes -= matched

    if ones == 0:
        taxis += twos // 2 + twos % 2 + threes
        twos = 0

    if threes == 0:
        taxis += twos // 2
        if twos % 2 == 0:
            taxis += -(-ones // 4)
        else:
            taxis += -(-(ones + 2) // 4)
    return taxis


def lantern_radius(positions: Iterable[float], length: float) -> float:
    """Smallest lantern radius that lights a street of the given length."""
    ordered = sorted([*positions, length])
    if len(ordered) < 2:
        raise ValueError("at least one lantern is required")
    widest_gap = max(right - left for left, right in pairwise(ordered))
    return max(widest_gap / 2, ordered[0], length - ordered[-2])


def pile_numbers(piles: Iterable[int], worms: Iterable[int]) -> list[int]:
    """1-based pile holding each worm, labels running consecutively across piles."""
    bounds = list(accumulate(piles))
    return [bisect_left(bounds, worm) + 1 for worm in worms]


def ringroad_time(n: int, tasks: Iterable[int]) -> int:
    """Time to visit houses in order on a one-way ring of n houses from house 1."""
    total = 0
    house = 1
    for task in tasks:
        total += task - house if task >= house else n - house + task
        house = task
    return total


def best_fence_start(heights: Sequence[int], k: int) -> int:
    """1-based start of the first k consecutive planks with the least total height."""
    if not 1 <= k <= len(heights):
        raise ValueError(f"window {k} does not fit {len(heights)} planks")
    best = current = sum(heights[:k])
    start = 0
    for index in range(k, len(heights)):
        current += heights[index] - heights[index - k]
        if current < best:
            best = current
            start = index - k + 1
    return start + 1


def max_ones_after_flip(bits: Iterable[int]) -> int:
    """Most ones left after flipping exactly one non-empty segment."""
    bits = list(bits)
    if not bits:
        return 0
    ones = sum(bits)
    best = current = None
    for bit in bits:
        gain = 1 - 2 * bit
        current = gain if current is None or current < 0 else current + gain
        best = current if best is None else max(best, current)
    return max(0, ones + best)


def has_happy_laptops(laptops: Iterable[tuple[int, int]]) -> bool:
    """Whether some cheaper laptop has better quality than a dearer one."""
    ordered = sorted(laptops)
    return any(later[1] < earlier[1] for earlier, later in pairwise(ordered))


def moves_to_center(matrix: Iterable[Iterable[int]]) -> int:
    """Adjacent swaps needed to bring the single 1 to the centre of a 5x5 grid."""
    position = None
    for row, cells in enumerate(matrix):
        for col, cell in enumerate(cells):
            if cell == 1:
                position = (row, col)
    if position is None:
        raise ValueError("the matrix holds no 1")
    row, col = position
    return abs(row - _CENTER) + abs(col - _CENTER)


def min_operations(values: Sequence[int]) -> int:
    """Operations needed to make a non-decreasing list unsorted; 0 if it already is."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    smallest = None
    for left, right in pairwise(values):
        gap = right - left
        if gap < 0:
            return 0
        smallest = gap if smallest is None else min(smallest, gap)
    return smallest // 2 + 1


def distinct_suffix_counts(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each 1-based start, how many distinct values lie from there to the end."""
    seen: set[int] = set()
    counts = [0] * len(values)
    for index in range(len(values) - 1, -1, -1):
        seen.add(values[index])
        counts[index] = len(seen)
    answers = []
    for query in queries:
        if not 1 <= query <= len(values):
            raise ValueError(f"query {query} is outside 1..{len(values)}")
        answers.append(counts[query - 1])
    return answers


def problems_solved(votes: Iterable[tuple[int, int, int]]) -> int:
    """Problems that at least two of three friends are sure about."""
    return sum(1 for petya, vasya, tonya in votes if petya + vasya + tonya >= 2)