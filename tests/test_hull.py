import io
import random

import pytest

from algokit.geometry import Point
from algokit.hull import doubled_area, drop_collinear, format_area, graham_scan, main, solve

CORNERS = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
EDGE_POINTS = [Point(0, 1), Point(1, 2), Point(2, 1), Point(1, 0)]


def _coords(points):
    return {(point.x, point.y) for point in points}


def test_interior_point_is_excluded():
    hull = graham_scan(CORNERS + [Point(1, 1)])
    assert _coords(hull) == _coords(CORNERS)


def test_hull_starts_at_leftmost_lowest():
    hull = graham_scan([Point(2, 2), Point(0, 2), Point(2, 0), Point(0, 0)])
    assert hull[0] == Point(0, 0)


def test_hull_is_clockwise():
    hull = graham_scan(CORNERS + [Point(1, 1)])
    assert doubled_area(hull) < 0


def test_order_of_input_does_not_matter():
    points = CORNERS + EDGE_POINTS + [Point(1, 1)]
    shuffled = list(points)
    random.Random(3).shuffle(shuffled)
    assert graham_scan(shuffled) == graham_scan(points)


def test_input_is_not_changed():
    points = [Point(3, 1), Point(1, 3), Point(0, 0), Point(4, 4)]
    before = [point.clone() for point in points]
    graham_scan(points)
    assert points == before


def test_drop_collinear_leaves_corners():
    hull = drop_collinear(graham_scan(CORNERS + EDGE_POINTS))
    assert _coords(hull) == _coords(CORNERS)


def test_drop_collinear_keeps_area():
    hull = graham_scan(CORNERS + EDGE_POINTS)
    assert doubled_area(drop_collinear(hull)) == doubled_area(hull)


def test_duplicates_do_not_repeat():
    hull = graham_scan(CORNERS + CORNERS)
    assert len(hull) == len(CORNERS)


def test_empty_and_single():
    assert graham_scan([]) == []
    assert graham_scan([Point(5, 7), Point(5, 7)]) == [Point(5, 7)]
    assert drop_collinear([]) == []


def test_area_is_reversal_invariant():
    hull = drop_collinear(graham_scan(CORNERS))
    assert doubled_area(hull) == -doubled_area(list(reversed(hull)))


def test_format_area_odd():
    assert format_area(7) == "3.5"


@pytest.mark.parametrize("doubled", [0, 2, 8, 10, 1, 3, 99])
def test_format_area_sign_and_suffix(doubled):
    assert format_area(-doubled) == format_area(doubled)
    assert format_area(doubled).endswith(".5" if doubled % 2 else ".0")


def test_solve_triangle():
    assert solve("3\n0 0\n0 1\n1 0\n") == "3\n0 0\n0 1\n1 0\n0.5"


def test_solve_reports_hull_size():
    text = "5\n0 0\n0 2\n2 2\n2 0\n1 1\n"
    lines = solve(text).split("\n")
    assert int(lines[0]) == len(lines) - 2
    assert _coords(Point(*map(int, line.split())) for line in lines[1:-1]) == _coords(CORNERS)


def test_solve_short_input():
    with pytest.raises(ValueError):
        solve("3\n0 0\n1")


def test_main_prints_report(monkeypatch, capsys):
    text = "4\n0 0\n0 2\n2 2\n2 0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main() == 0
    assert capsys.readouterr().out == solve(text)