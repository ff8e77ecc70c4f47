"""Planar integer geometry: vectors, points and shapes with crossing tests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import pairwise


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


@dataclass(frozen=True)
class Vector:
    """A free vector with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __pos__(self) -> Vector:
        return Vector(self.x, self.y)

    def __mul__(self, value: object) -> Vector:
        if isinstance(value, bool) or not isinstance(value, int):
            return NotImplemented
        return Vector(self.x * value, self.y * value)

    def __rmul__(self, value: object) -> Vector:
        return self.__mul__(value)

    def __floordiv__(self, value: object) -> Vector:
        """Divide both coordinates, rounding toward zero."""
        if isinstance(value, bool) or not isinstance(value, int):
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("vector division by zero")
        return Vector(_trunc_div(self.x, value), _trunc_div(self.y, value))

    def __str__(self) -> str:
        return f"Vector({self.x}, {self.y})"


def cross_product(lhs: Vector, rhs: Vector) -> int:
    """The z component of the cross product of two vectors."""
    return lhs.x * rhs.y - lhs.y * rhs.x


def dot_product(lhs: Vector, rhs: Vector) -> int:
    """The scalar product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y


class Shape(ABC):
    """A figure that can be moved and tested against points and segments."""

    @abstractmethod
    def move(self, shift: Vector) -> Shape:
        """Shift the shape in place by a vector and return it."""

    @abstractmethod
    def contains_point(self, point: Point) -> bool:
        """Whether the point lies on or in the shape."""

    @abstractmethod
    def crosses_segment(self, segment: Segment) -> bool:
        """Whether the shape and the segment have a common point."""

    @abstractmethod
    def clone(self) -> Shape:
        """An independent copy of the shape."""


@dataclass
class Point(Shape):
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    def move(self, shift: Vector) -> Point:
        self.x += shift.x
        self.y += shift.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self.x == point.x and self.y == point.y

    def crosses_segment(self, segment: Segment) -> bool:
        to_end = segment.end - self
        from_begin = self - segment.begin
        return cross_product(to_end, from_begin) == 0 and dot_product(to_end, from_begin) >= 0

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass
class Line(Shape):
    """The line a*x + b*y + c = 0."""

    a: int
    b: int
    c: int

    @classmethod
    def through(cls, first: Point, second: Point) -> Line:
        """The line through two distinct points."""
        if first.y == second.y:
            return cls(0, 1, -first.y)
        if first.x == second.x:
            return cls(1, 0, -first.x)
        guide = second - first
        a, b = -guide.y, guide.x
        return cls(a, b, -first.x * a - first.y * b)

    def move(self, shift: Vector) -> Line:
        if self.a == 0:
            self.c -= shift.y
        elif self.b == 0:
            self.c -= shift.x
        else:
            self.c = self.c - self.a * shift.x - self.b * shift.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self.point_value(point) == 0

    def crosses_segment(self, segment: Segment) -> bool:
        return self.point_value(segment.begin) * self.point_value(segment.end) <= 0

    def clone(self) -> Line:
        return Line(self.a, self.b, self.c)

    def point_value(self, point: Point) -> int:
        """The value of a*x + b*y + c at the point."""
        return self.a * point.x + self.b * point.y + self.c

    def normal_vector(self) -> Vector:
        return Vector(self.a, self.b)

    def __str__(self) -> str:
        return f"Line({self.a}, {self.b}, {self.c})"


@dataclass
class Segment(Shape):
    """The closed segment between two points."""

    begin: Point
    end: Point

    def move(self, shift: Vector) -> Segment:
        self.begin = self.begin + shift
        self.end = self.end + shift
        return self

    def contains_point(self, point: Point) -> bool:
        return point.crosses_segment(self)

    def crosses_segment(self, segment: Segment) -> bool:
        own_line = Line.through(self.begin, self.end)
        other_line = Line.through(segment.begin, segment.end)
        if own_line.crosses_segment(segment) and other_line.crosses_segment(self):
            overlap_x = max(self.begin.x, self.end.x) >= min(segment.begin.x, segment.end.x)
            overlap_y = max(self.begin.y, self.end.y) >= min(segment.begin.y, segment.end.y)
            return overlap_x and overlap_y
        return False

    def clone(self) -> Segment:
        return Segment(self.begin.clone(), self.end.clone())

    def __str__(self) -> str:
        return f"Segment({self.begin}, {self.end})"


@dataclass
class Ray(Shape):
    """A ray from a point along a direction."""

    begin: Point = field(default_factory=Point)
    direction: Vector = Vector()

    @classmethod
    def through(cls, begin: Point, point: Point) -> Ray:
        """The ray from ``begin`` passing through ``point``."""
        return cls(begin.clone(), point - begin)

    def move(self, shift: Vector) -> Ray:
        self.begin = self.begin + shift
        return self

    def contains_point(self, point: Point) -> bool:
        offset = point - self.begin
        return (
            cross_product(offset, self.direction) == 0
            and dot_product(offset, self.direction) >= 0
        )

    def crosses_segment(self, segment: Segment) -> bool:
        if segment.contains_point(self.begin):
            return True
        carrier = Line.through(self.begin, self.begin + self.direction)
        if not carrier.crosses_segment(segment):
            return False
        along = segment.end - segment.begin
        offset = self.begin - segment.begin
        return cross_product(along, offset) * cross_product(along, self.direction) <= 0

    def clone(self) -> Ray:
        return Ray(self.begin.clone(), self.direction)

    def __str__(self) -> str:
        return f"Ray({self.begin}, {self.direction})"


@dataclass
class Circle(Shape):
    """A closed disc given by its centre and radius."""

    center: Point
    radius: int

    def _distance_squared(self, point: Point) -> int:
        return (point.x - self.center.x) ** 2 + (point.y - self.center.y) ** 2

    def move(self, shift: Vector) -> Circle:
        self.center = self.center + shift
        return self

    def contains_point(self, point: Point) -> bool:
        return self._distance_squared(point) <= self.radius * self.radius

    def strictly_contains_point(self, point: Point) -> bool:
        """Whether the point lies inside, not on the boundary."""
        return self._distance_squared(point) < self.radius * self.radius

    def crosses_segment(self, segment: Segment) -> bool:
        begin_in = self.contains_point(segment.begin)
        end_in = self.contains_point(segment.end)
        if begin_in != end_in:
            return True
        if self.strictly_contains_point(segment.begin) and self.strictly_contains_point(
            segment.end
        ):
            return False
        carrier = Line.through(segment.begin, segment.end)
        value = carrier.point_value(self.center)
        if value * value > self.radius * self.radius * (carrier.a**2 + carrier.b**2):
            return False
        normal = Line.through(self.center, self.center + carrier.normal_vector())
        return normal.crosses_segment(segment)

    def clone(self) -> Circle:
        return Circle(self.center.clone(), self.radius)

    def __str__(self) -> str:
        return f"Circle({self.center}, {self.radius})"


@dataclass
class Polygon(Shape):
    """A polygon given by its vertices in order."""

    vertices: list[Point]

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        if not self.vertices:
            raise ValueError("a polygon needs at least one vertex")

    def _edges(self) -> list[Segment]:
        return [Segment(a, b) for a, b in pairwise(self.vertices)]

    def move(self, shift: Vector) -> Polygon:
        self.vertices = [vertex + shift for vertex in self.vertices]
        return self

    def contains_point(self, point: Point) -> bool:
        probe = Ray.through(point, Point(10001, point.y + 1))
        count = 0
        for edge in self._edges():
            if edge.contains_point(point):
                return True
            if probe.crosses_segment(edge):
                count += 1
        closing = Segment(self.vertices[0], self.vertices[-1])
        if probe.crosses_segment(closing):
            if closing.contains_point(point):
                return True
            count += 1
        return count % 2 == 1

    def crosses_segment(self, segment: Segment) -> bool:
        edges = self._edges()
        if not edges:
            return False
        closing = Segment(self.vertices[-1], self.vertices[0])
        return any(segment.crosses_segment(edge) for edge in edges) or segment.crosses_segment(
            closing
        )

    def clone(self) -> Polygon:
        return Polygon([vertex.clone() for vertex in self.vertices])

    def __str__(self) -> str:
        return "Polygon(" + ", ".join(str(vertex) for vertex in self.vertices) + ")"