"""Range-add, range-maximum segment tree and a query runner."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

_NEG_INF = float("-inf")


class SegmentTree:
    """Maximum over ranges of values, with lazy addition to ranges.

    Positions are numbered from 1 and ranges include both ends.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self._size = len(values)
        width = 1
        while width < len(values):
            width *= 2
        self._width = width
        self._max: list[float] = [_NEG_INF] * (2 * width)
        self._pending = [0] * (2 * width)
        self._max[width:width + len(values)] = values
        for node in range(width - 1, 0, -1):
            self._max[node] = max(self._max[2 * node], self._max[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position from ``left`` to ``right``."""
        self._check(left, right)
        self._add(1, 1, self._width, left, right, value)

    def max(self, left: int, right: int) -> int:
        """Largest value among positions ``left`` to ``right``."""
        self._check(left, right)
        return self._query(1, 1, self._width, left, right)

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._size:
            raise IndexError(f"range [{left}, {right}] is outside 1..{self._size}")

    def _apply(self, node: int, value: int) -> None:
        self._max[node] += value
        if node < self._width:
            self._pending[node] += value

    def _push(self, node: int) -> None:
        if self._pending[node]:
            self._apply(2 * node, self._pending[node])
            self._apply(2 * node + 1, self._pending[node])
            self._pending[node] = 0

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, value)
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, left, right, value)
        self._add(2 * node + 1, mid + 1, hi, left, right, value)
        self._max[node] = max(self._max[2 * node], self._max[2 * node + 1])

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> float:
        if right < lo or hi < left:
            return _NEG_INF
        if left <= lo and hi <= right:
            return self._max[node]
        self._push(node)
        mid = (lo + hi) // 2
        return max(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )


def _ints(tokens: Iterator[str]) -> Iterator[int]:
    for token in tokens:
        yield int(token)


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_queries(text: str) -> list[int]:
    """Run the command input and return the answers to ``m`` queries.

    Input: n, n values, the number of commands, then commands
    ``m l r`` (maximum) or ``a l r value`` (add).
    """
    tokens = iter(text.split())
    count = int(_take(tokens))
    values: Sequence[int] = [int(_take(tokens)) for _ in range(count)]
    tree = SegmentTree(values)
    answers = []
    for _ in range(int(_take(tokens))):
        command = _take(tokens)
        left, right = int(_take(tokens)), int(_take(tokens))
        if command == "m":
            answers.append(tree.max(left, right))
        else:
            tree.add(left, right, int(_take(tokens)))
    return answers


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the answers."""
    answers = run_queries(sys.stdin.read())
    sys.stdout.write("".join(f"{answer} " for answer in answers))
    return 0