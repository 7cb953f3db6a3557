"""Geometry primitives and the segment/segment intersection kernel.

Points, segments and triangles are small immutable value types. Approximate
equality is deliberately *not* wired into ``==``: dataclass equality stays
exact and tolerance comparisons go through :func:`points_equal`, which is not
transitive near the tolerance boundary.

Intersection follows the parametric line-line form
(https://en.wikipedia.org/wiki/Line%E2%80%93line_intersection)::

    L1 = (x1, y1) + t (x2 - x1, y2 - y1)
    L2 = (x3, y3) + u (x4 - x3, y4 - y3)

         (x1 - x3)(y3 - y4) - (y1 - y3)(x3 - x4)
    t  = ---------------------------------------
         (x1 - x2)(y3 - y4) - (y1 - y2)(x3 - x4)

         (x1 - x3)(y1 - y2) - (y1 - y3)(x1 - x2)
    u  = ---------------------------------------
         (x1 - x2)(y3 - y4) - (y1 - y2)(x3 - x4)

The shared denominator must not vanish and both parameters must lie in
the closed interval [0, 1].
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from .constants import COMPARE_TOLERANCE

__all__ = [
	'Point', 'LineSegment', 'Triangle',
	'points_equal', 'contains_point', 'intersect', 'intersect_segments',
	'vectorized_seg_intersection', 'segments_to_arrays',
]


@dataclass(frozen=True)
class Point:
	x: float
	y: float

	def as_tuple(self) -> Tuple[float, float]:
		return (self.x, self.y)


@dataclass(frozen=True)
class LineSegment:
	"""Bounded segment from ``p1`` to ``p2``. Endpoint order is kept as given."""
	p1: Point
	p2: Point

	@classmethod
	def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> 'LineSegment':
		return cls(Point(float(x1), float(y1)), Point(float(x2), float(y2)))

	def as_tuple(self) -> Tuple[float, float, float, float]:
		return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)


@dataclass(frozen=True)
class Triangle:
	"""Three intersection points closing a 3-cycle of segments.

	``p1`` is shared by the first and second segment, ``p2`` by the second
	and third, ``p3`` by the third and first.
	"""
	p1: Point
	p2: Point
	p3: Point

	def as_tuple(self) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
		return (self.p1.as_tuple(), self.p2.as_tuple(), self.p3.as_tuple())


def points_equal(a: Point, b: Point, tol: float = COMPARE_TOLERANCE) -> bool:
	"""Return True when both coordinate differences are strictly below ``tol``."""
	return abs(a.x - b.x) < tol and abs(a.y - b.y) < tol


def contains_point(points: Iterable[Point], pt: Point, tol: float = COMPARE_TOLERANCE) -> bool:
	"""Linear membership test of ``pt`` in ``points`` under :func:`points_equal`."""
	return any(points_equal(p, pt, tol) for p in points)


def intersect(A: Point, B: Point, C: Point, D: Point, tol: float = COMPARE_TOLERANCE) -> Optional[Point]:
	"""Intersection of segment A->B with segment C->D, or None.

	Parallel and collinear pairs (``|denominator| < tol``) report no
	intersection, even when collinear segments overlap. Touching at an
	endpoint counts as an intersection.
	"""
	x1, y1 = A.x, A.y
	x2, y2 = B.x, B.y
	x3, y3 = C.x, C.y
	x4, y4 = D.x, D.y

	x1_x2 = x1 - x2
	x1_x3 = x1 - x3
	x3_x4 = x3 - x4
	y1_y2 = y1 - y2
	y1_y3 = y1 - y3
	y3_y4 = y3 - y4

	denominator = x1_x2 * y3_y4 - y1_y2 * x3_x4
	if abs(denominator) < tol:
		return None

	t = (x1_x3 * y3_y4 - y1_y3 * x3_x4) / denominator
	if t < 0 or t > 1:
		return None

	u = (x1_x3 * y1_y2 - y1_y3 * x1_x2) / denominator
	if u < 0 or u > 1:
		return None

	return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def intersect_segments(s1: LineSegment, s2: LineSegment, tol: float = COMPARE_TOLERANCE) -> Optional[Point]:
	"""Segment-object overload of :func:`intersect`."""
	return intersect(s1.p1, s1.p2, s2.p1, s2.p2, tol=tol)


def segments_to_arrays(segments) -> Tuple[np.ndarray, np.ndarray]:
	"""Split a sequence of segments into (N,2) start and end point arrays."""
	if len(segments) == 0:
		empty = np.empty((0, 2), dtype=np.float64)
		return empty, empty.copy()
	starts = np.array([s.p1.as_tuple() for s in segments], dtype=np.float64)
	ends = np.array([s.p2.as_tuple() for s in segments], dtype=np.float64)
	return starts, ends


def vectorized_seg_intersection(a_pts, b_pts, c_pts, d_pts, tol: float = COMPARE_TOLERANCE):
	"""Vectorized form of :func:`intersect` for equal-length arrays of segment pairs.

	a_pts, b_pts, c_pts, d_pts must be arrays of shape (M,2); pair ``i`` is
	segment a_pts[i]-b_pts[i] against c_pts[i]-d_pts[i]. Returns ``(mask, pts)``
	where ``mask`` is a boolean array (M,) and ``pts`` an (M,2) array holding
	the intersection point for masked rows and NaN elsewhere.
	"""
	a = np.asarray(a_pts, dtype=np.float64).reshape(-1, 2)
	b = np.asarray(b_pts, dtype=np.float64).reshape(-1, 2)
	c = np.asarray(c_pts, dtype=np.float64).reshape(-1, 2)
	d = np.asarray(d_pts, dtype=np.float64).reshape(-1, 2)

	x1_x2 = a[:, 0] - b[:, 0]
	x1_x3 = a[:, 0] - c[:, 0]
	x3_x4 = c[:, 0] - d[:, 0]
	y1_y2 = a[:, 1] - b[:, 1]
	y1_y3 = a[:, 1] - c[:, 1]
	y3_y4 = c[:, 1] - d[:, 1]

	denom = x1_x2 * y3_y4 - y1_y2 * x3_x4
	ok = np.abs(denom) >= tol
	safe = np.where(ok, denom, 1.0)
	t = (x1_x3 * y3_y4 - y1_y3 * x3_x4) / safe
	u = (x1_x3 * y1_y2 - y1_y3 * x1_x2) / safe
	mask = ok & (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)

	pts = np.full(a.shape, np.nan, dtype=np.float64)
	pts[mask] = a[mask] + t[mask, None] * (b[mask] - a[mask])
	return mask, pts
