"""Convex hull by Graham scan, with area reporting."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from algokit.geometry import Point, Vector, cross_product, dot_product


def _leftmost(points: list[Point]) -> Point:
    """The point with the smallest x, and the smallest y among those."""
    return min(points, key=lambda point: (point.x, point.y))


def _clockwise_from(origin: Point) -> Callable[[Point], object]:
    """Sort key ordering points clockwise around ``origin``; farther first on a ray."""

    def compare(lhs: Point, rhs: Point) -> int:
        first = lhs - origin
        second = rhs - origin
        turn = cross_product(first, second)
        if turn:
            return -1 if turn < 0 else 1
        return dot_product(second, second) - dot_product(first, first)

    return cmp_to_key(compare)


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """The convex hull in clockwise order, starting at the leftmost lowest point.

    Points lying on hull edges may be kept; ``drop_collinear`` removes them.
    The input points are not changed.
    """
    candidates = [point.clone() for point in points]
    if not candidates:
        return []
    start = _leftmost(candidates)
    rest = sorted(
        (point for point in candidates if point != start),
        key=_clockwise_from(start),
    )
    if not rest:
        return [start]

    stack = [start, rest[0]]
    for point in rest[1:]:
        if point == stack[-1]:
            continue
        while len(stack) >= 2 and cross_product(point - stack[-1], stack[-1] - stack[-2]) < 0:
            stack.pop()
        stack.append(point)
    return stack


def drop_collinear(hull: Iterable[Point]) -> list[Point]:
    """The hull without vertices that lie on a straight edge; the first is kept."""
    vertices = list(hull)
    if not vertices:
        return []
    kept = [vertices[0]]
    following = vertices[2:] + vertices[:1]
    for previous, current, after in zip(vertices, vertices[1:], following):
        if cross_product(previous - current, current - after) != 0:
            kept.append(current)
    return kept


def doubled_area(hull: Iterable[Point]) -> int:
    """Twice the signed area of the polygon; negative for clockwise order."""
    vertices = list(hull)
    return sum(
        cross_product(Vector(a.x, a.y), Vector(b.x, b.y))
        for a, b in zip(vertices, vertices[1:] + vertices[:1])
    )


def format_area(doubled: int) -> str:
    """Half the absolute value of ``doubled``, written with one decimal."""
    whole, half = divmod(abs(doubled), 2)
    return f"{whole}.{5 if half else 0}"


def solve(text: str) -> str:
    """Read a point count and points, and report the hull and its area.

    The report is the number of hull vertices, one ``x y`` line per vertex,
    and the area on the last line.
    """
    tokens = iter(text.split())

    def take() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count = take()
    points = [Point(take(), take()) for _ in range(count)]
    hull = drop_collinear(graham_scan(points))
    lines = [str(len(hull))]
    lines.extend(f"{point.x} {point.y}" for point in hull)
    lines.append(format_area(doubled_area(hull)))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read points from standard input and print the hull report."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0