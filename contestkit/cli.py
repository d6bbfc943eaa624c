"""Command-line entry point that solves puzzles read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from contestkit.numbers import flagstones
from contestkit.sequences import distinct_suffix_counts, shops_affordable
from contestkit.text import abbreviate


class InputError(ValueError):
    """Raised when standard input does not hold what a command expects."""


class _Tokens:
    """Whitespace-separated tokens consumed in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.number()
        if value < 0:
            raise InputError(f"count {value} is negative")
        return value

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _run_abbreviate(tokens: _Tokens) -> list[str]:
    total = tokens.count()
    return [abbreviate(tokens.word()) for _ in range(total)]


def _run_flagstones(tokens: _Tokens) -> list[str]:
    n, m, a = tokens.numbers(3)
    if a < 1:
        raise InputError("flagstone side must be positive")
    return [str(flagstones(n, m, a))]


def _run_drinks(tokens: _Tokens) -> list[str]:
    prices = tokens.numbers(tokens.count())
    budgets = tokens.numbers(tokens.count())
    return [f"{shops} " for shops in shops_affordable(prices, budgets)]


def _run_suffixes(tokens: _Tokens) -> list[str]:
    n = tokens.count()
    m = tokens.count()
    values = tokens.numbers(n)
    queries = tokens.numbers(m)
    return [str(answer) for answer in distinct_suffix_counts(values, queries)]


_COMMANDS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "abbreviate": (_run_abbreviate, "shorten words longer than ten letters"),
    "flagstones": (_run_flagstones, "count flagstones covering a rectangular square"),
    "drinks": (_run_drinks, "count shops affordable for each day's budget"),
    "suffixes": (_run_suffixes, "count distinct values in each queried suffix"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve a puzzle whose input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen command on standard input and print its answers."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        lines = handler(_Tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"contestkit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())