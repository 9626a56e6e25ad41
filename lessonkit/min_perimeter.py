"""Triangle of least perimeter among plane points, by divide and conquer."""

import argparse
import heapq
import math
import random
import sys
import time
from dataclasses import dataclass

X_RANGE = (0, 359)
Y_RANGE = (-90, 90)


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates and an identifier."""

    x: int
    y: int
    id: int = 0


def _by_y(point):
    return point.y


def _by_x(point):
    return (point.x, point.y)


def _side(a, b):
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def perimeter(a, b, c):
    """Return the perimeter of the triangle abc."""
    return _side(a, b) + _side(a, c) + _side(c, b)


class _TriangleSearch:
    def __init__(self):
        self.best = math.inf
        self.triangle = None

    def consider(self, a, b, c):
        candidate = perimeter(a, b, c)
        if candidate < self.best:
            self.best = candidate
            self.triangle = (a, b, c)

    def run(self, points):
        """Search points sorted by x; return them sorted by y."""
        count = len(points)
        if count <= 4:
            if count == 4:
                self.consider(points[0], points[1], points[3])
            return sorted(points, key=_by_y)

        middle = (count - 1) // 2
        mid_x = points[middle].x
        left = self.run(points[: middle + 1])
        right = self.run(points[middle + 1 :])
        merged = list(heapq.merge(left, right, key=_by_y))

        strip = []
        for point in merged:
            if abs(point.x - mid_x) <= self.best / 2:
                j = len(strip) - 2
                while (
                    j >= 0
                    and point.y - strip[j].y < self.best / 2
                    and point.y - strip[j + 1].y < self.best / 2
                ):
                    self.consider(point, strip[j], strip[j + 1])
                    j -= 2
                strip.append(point)
        return merged


def min_perimeter_triangle(points):
    """Return (perimeter, (a, b, c)) for the smallest triangle the search finds.

    Raises ValueError when the search examines no triangle at all, which is
    the case for fewer than four points.
    """
    ordered = sorted(points, key=_by_x)
    if len(ordered) < 3:
        raise ValueError("at least three points are needed")
    search = _TriangleSearch()
    search.run(ordered)
    if search.triangle is None:
        raise ValueError("no triangle was examined")
    return search.best, search.triangle


def random_points(n, rng=None):
    """Return n points with x in 0..359 and y in -90..90, numbered from 0."""
    rng = rng if rng is not None else random.Random()
    return [
        Point(rng.randint(*X_RANGE), rng.randint(*Y_RANGE), index) for index in range(n)
    ]


def time_run(n, rng=None):
    """Time the search over n random points and return the seconds it took."""
    points = random_points(n, rng)
    start = time.perf_counter()
    _TriangleSearch().run(sorted(points, key=_by_x))
    return time.perf_counter() - start


def main(argv=None):
    """Time the search for growing point counts and write the timings."""
    parser = argparse.ArgumentParser(description="Time the least-perimeter search.")
    parser.add_argument("--max-power", type=int, default=6)
    parser.add_argument("--output", default="timer_algo.dat")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    with open(args.output, "w", encoding="ascii") as out:
        for power in range(2, args.max_power + 1):
            print(f"raz: {power}\t", end="", flush=True)
            scale = 10**power
            for factor in range(1, 10):
                print(factor, end=" ", flush=True)
                n = factor * scale
                out.write(f"{n}\t{time_run(n, rng):.6f}\n")
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())