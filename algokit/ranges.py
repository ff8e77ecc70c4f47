"""An integer range with forward and reverse iteration."""

from __future__ import annotations

from collections.abc import Iterator


class Range:
    """Integers from begin up to (not including) end, moving by step.

    Called as ``Range(end)``, ``Range(begin, end)`` or ``Range(begin, end, step)``.
    A zero step, or a step pointing away from end, gives an empty range.
    """

    __slots__ = ("_begin", "_step", "_size")

    def __init__(self, *args: int) -> None:
        if len(args) == 1:
            begin, end, step = 0, args[0], 1
        elif len(args) == 2:
            begin, end = args
            step = 1
        elif len(args) == 3:
            begin, end, step = args
        else:
            raise TypeError(f"Range expects 1 to 3 arguments, got {len(args)}")
        for value in (begin, end, step):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("Range arguments must be ints")

        span = end - begin
        if (step > 0 and span >= 0) or (step < 0 and span <= 0):
            size = -(-abs(span) // abs(step))
        else:
            begin, size = 0, 0
        self._begin = begin
        self._step = step
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        value = self._begin
        for _ in range(self._size):
            yield value
            value += self._step

    def __reversed__(self) -> Iterator[int]:
        value = self._begin + self._step * (self._size - 1)
        for _ in range(self._size):
            yield value
            value -= self._step

    def __repr__(self) -> str:
        return f"Range(begin={self._begin}, step={self._step}, size={self._size})"