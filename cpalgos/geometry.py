"""Planar points, lines, segments and circles."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

EPS = 1e-12


def sgn(x: float) -> int:
    """Sign of ``x`` as -1, 0 or 1."""
    return (x > 0) - (x < 0)


@dataclass(frozen=True, eq=False)
class Point:
    """A point (or vector) in the plane, compared with tolerance EPS."""

    x: float = 0
    y: float = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPS and abs(self.y - other.y) < EPS

    def __lt__(self, other: Point) -> bool:
        if abs(self.x - other.x) < EPS:
            return self.y < other.y
        return self.x < other.x

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        return Point(self.x / divisor, self.y / divisor)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, a: Point, b: Point | None = None) -> float:
        """Cross product with ``a``; with ``b``, of (a - self) and (b - self)."""
        if b is None:
            return self.x * a.y - self.y * a.x
        return (a - self).cross(b - self)

    def dist2(self) -> float:
        return self.x * self.x + self.y * self.y

    def dist(self) -> float:
        return math.sqrt(self.dist2())

    def angle(self) -> float:
        """Angle to the x axis in [-pi, pi]."""
        return math.atan2(self.y, self.x)

    def unit(self) -> Point:
        return self / self.dist()

    def perp(self) -> Point:
        """Rotated by +90 degrees."""
        return Point(-self.y, self.x)

    def normal(self) -> Point:
        return self.perp().unit()

    def rotate(self, angle: float) -> Point:
        """Rotated ``angle`` radians counter-clockwise around the origin."""
        c, s = math.cos(angle), math.sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)


def line_inter(s1: Point, e1: Point, s2: Point, e2: Point) -> tuple[int, Point]:
    """Intersection of lines s1-e1 and s2-e2.

    Returns (1, point) for a unique point, (0, origin) for parallel lines and
    (-1, origin) for identical lines.
    """
    d = (e1 - s1).cross(e2 - s2)
    if d == 0:
        return (-1 if s1.cross(e1, s2) == 0 else 0), Point()
    p = s2.cross(e1, e2)
    q = s2.cross(e2, s1)
    return 1, (s1 * p + e1 * q) / d


def line_dist(a: Point, b: Point, p: Point) -> float:
    """Signed distance of ``p`` from line a-b; positive on the left of a->b."""
    return a.cross(b, p) / (b - a).dist()


def on_segment(s: Point, e: Point, p: Point) -> bool:
    return p.cross(s, e) == 0 and (s - p).dot(e - p) <= 0


def _equivalent(p: Point, q: Point) -> bool:
    return not p < q and not q < p


def seg_inter(a: Point, b: Point, c: Point, d: Point) -> list[Point]:
    """Intersection of segments a-b and c-d.

    Empty if none, one point if unique, the two endpoints of the common part
    if infinitely many.
    """
    oa, ob = c.cross(d, a), c.cross(d, b)
    oc, od = a.cross(b, c), a.cross(b, d)
    if sgn(oa) * sgn(ob) < 0 and sgn(oc) * sgn(od) < 0:
        return [(a * ob - b * oa) / (ob - oa)]
    found: list[Point] = []
    for (start, end), point in (((c, d), a), ((c, d), b), ((a, b), c), ((a, b), d)):
        if on_segment(start, end, point) and not any(_equivalent(point, q) for q in found):
            found.append(point)
    return sorted(found)


def seg_dist(s: Point, e: Point, p: Point) -> float:
    """Shortest distance from ``p`` to segment s-e."""
    if s == e:
        return (p - s).dist()
    d = (e - s).dist2()
    t = min(d, max(0.0, (p - s).dot(e - s)))
    return ((p - s) * d - (e - s) * t).dist() / d


def circle_line(center: Point, radius: float, a: Point, b: Point) -> list[Point]:
    """Points where the circle meets the line a-b: zero, one or two."""
    ab = b - a
    p = a + ab * (center - a).dot(ab) / ab.dist2()
    s = a.cross(b, center)
    h2 = radius * radius - s * s / ab.dist2()
    if h2 < 0:
        return []
    if h2 == 0:
        return [p]
    h = ab.unit() * math.sqrt(h2)
    return [p - h, p + h]


def circle_inter(
    a: Point, b: Point, r1: float, r2: float
) -> tuple[int, tuple[Point, Point] | None]:
    """Intersection of two circles.

    Returns (1, (p, q)) when they meet, (0, None) when they do not and
    (-1, None) when they coincide.
    """
    if a == b:
        return (-1 if abs(r1 - r2) < EPS else 0), None
    d = (b - a).dist()
    d1 = (d + (r1 * r1 - r2 * r2) / d) / 2
    if r1 + r2 < d - EPS or abs(r1 - r2) > d + EPS:
        return 0, None
    direction = (b - a) / d
    foot = a + direction * d1
    height = math.sqrt(max(0.0, r1 * r1 - d1 * d1))
    direction = direction.perp()
    return 1, (foot + direction * height, foot - direction * height)


def _unique_sorted(points: Iterable[Point]) -> list[Point]:
    result: list[Point] = []
    for point in sorted(points):
        if not result or point != result[-1]:
            result.append(point)
    return result


def count_circle_regions(circles: Iterable[tuple[float, float, float]]) -> int:
    """Number of regions the plane is cut into by circles given as (x, y, r)."""
    discs = [(Point(x, y), r) for x, y, r in circles]
    neighbours: list[list[int]] = [[] for _ in discs]
    all_points: list[Point] = []
    edges = 0
    for i, (ci, ri) in enumerate(discs):
        on_circle: list[Point] = []
        for j, (cj, rj) in enumerate(discs):
            if i == j:
                continue
            status, points = circle_inter(ci, cj, ri, rj)
            if status == 1 and points is not None:
                on_circle.extend(points)
                neighbours[i].append(j)
        distinct = _unique_sorted(on_circle)
        edges += len(distinct)
        all_points.extend(distinct)
    vertices = len(_unique_sorted(all_points))

    seen = [False] * len(discs)
    components = 0
    for start in range(len(discs)):
        if seen[start]:
            continue
        components += 1
        seen[start] = True
        stack = [start]
        while stack:
            for nxt in neighbours[stack.pop()]:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append(nxt)
    return edges - vertices + components + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` circles as ``x y r`` and print the number of regions."""
    argparse.ArgumentParser(description="Count regions formed by circles.").parse_args(argv)
    numbers = iter(int(tok) for tok in sys.stdin.read().split())
    n = next(numbers)
    circles = [(next(numbers), next(numbers), next(numbers)) for _ in range(n)]
    print(count_circle_regions(circles))
    return 0