"""Small string puzzles: case fixes, abbreviations and pattern checks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_VOWELS = frozenset("aoyeui")

_FEMALE_VERDICT = "CHAT WITH HER!"
_MALE_VERDICT = "IGNORE HIM!"


def apply_statements(statements: Iterable[str]) -> int:
    """Run increment and decrement statements on X, starting from zero."""
    x = 0
    for statement in statements:
        if statement in ("++X", "X++"):
            x += 1
        elif statement in ("--X", "X--"):
            x -= 1
    return x


def fix_caps_lock(word: str) -> str:
    """Upper-case the first letter and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def winning_team(goals: Iterable[str]) -> str:
    """Name of the team that scored the most goals, or an empty string."""
    counts = Counter(goals)
    if not counts:
        return ""
    team, _ = counts.most_common(1)[0]
    return team


def rearrange_sum(expression: str) -> str:
    """Reorder the single-digit summands of an expression like '3+1+2' ascending."""
    return "+".join(sorted(expression[::2]))


def compare_ignore_case(first: str, second: str) -> int:
    """Compare equal-length strings ignoring case, returning -1, 0 or 1."""
    if len(first) != len(second):
        raise ValueError("strings must have the same length")
    for left, right in zip(first.lower(), second.lower()):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def stones_to_remove(colors: str) -> int:
    """Stones to take away so that no two neighbours share a colour."""
    return sum(1 for left, right in zip(colors, colors[1:]) if left == right)


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def capitalize_first(word: str) -> str:
    """Upper-case the first letter and leave the rest untouched."""
    return word[:1].upper() + word[1:]


def can_say_hello(typed: str) -> bool:
    """Whether 'hello' can be obtained by deleting letters from typed."""
    letters = iter(typed)
    return all(wanted in letters for wanted in "hello")


def gender_verdict(username: str) -> str:
    """Guess from the parity of distinct characters in a user name."""
    distinct = len(set(username))
    if distinct % 2 == 0:
        return _FEMALE_VERDICT
    return _MALE_VERDICT


def strip_vowels(word: str) -> str:
    """Drop vowels, lower-case consonants and put a dot before each."""
    return "".join(
        "." + char.lower() for char in word if char.lower() not in _VOWELS
    )


def fix_word_case(word: str) -> str:
    """Make the word all upper case if most letters are upper, else all lower."""
    upper = sum(1 for char in word if char.isupper())
    return word.upper() if upper > len(word) - upper else word.lower()


def count_sorted_variants(word: str, ranges: Iterable[tuple[int, int]]) -> int:
    """Count distinct strings made by sorting each 1-based inclusive range of word."""
    variants: set[str] = set()
    for left, right in ranges:
        if left < 1 or right > len(word) or left - 1 > right:
            raise ValueError(f"range ({left}, {right}) is outside the word")
        start = left - 1
        variants.add(word[:start] + "".join(sorted(word[start:right])) + word[right:])
    return len(variants)