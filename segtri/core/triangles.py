"""Triangle enumeration over per-segment intersection sets.

Segments ``i < j < k`` close a triangle when ``i`` and ``j`` meet at P,
``j`` and ``k`` meet at Q and ``k`` and ``i`` meet at R. The walk below is
a fixed nested traversal; its order defines the emission order of the
result. Triangles are neither deduplicated nor checked for collinearity.
"""
from __future__ import annotations

import time
from typing import List, Optional, Sequence

from .constants import COMPARE_TOLERANCE
from .geometry import LineSegment, Point, Triangle, contains_point, points_equal
from .intersections import aggregate_intersections
from .logging_utils import get_logger
from .stats import SearchStats

log = get_logger('segtri.triangles')


def enumerate_triangles(per_segment_points: Sequence[Sequence[Point]], tol: float = COMPARE_TOLERANCE,
                        stats: Optional[SearchStats] = None) -> List[Triangle]:
    """Return every triangle found by walking the per-segment intersection sets.

    ``per_segment_points[i]`` holds the distinct points on segment ``i`` as
    produced by :func:`aggregate_intersections`.
    """
    t0 = time.perf_counter()
    n = len(per_segment_points)
    triangles: List[Triangle] = []
    for one in range(n - 2):
        first = per_segment_points[one]
        for start in first:
            for two in range(one + 1, n - 1):
                second = per_segment_points[two]
                if not contains_point(second, start, tol):
                    continue
                for middle in second:
                    if points_equal(middle, start, tol):
                        continue
                    for three in range(two + 1, n):
                        third = per_segment_points[three]
                        if not contains_point(third, middle, tol):
                            continue
                        for last in third:
                            if points_equal(last, middle, tol) or not contains_point(first, last, tol):
                                continue
                            log.debug('triangle on segments (%d, %d, %d)', one, two, three)
                            triangles.append(Triangle(start, middle, last))

    if stats is not None:
        stats.triangles += len(triangles)
        stats.time_triangles += time.perf_counter() - t0
    log.info('found %d triangle(s)', len(triangles))
    return triangles


def find_triangles(segments: Sequence[LineSegment], tol: float = COMPARE_TOLERANCE,
                   stats: Optional[SearchStats] = None) -> List[Triangle]:
    """Aggregate intersections for ``segments`` and enumerate their triangles."""
    per_segment = aggregate_intersections(segments, tol=tol, stats=stats)
    return enumerate_triangles(per_segment, tol=tol, stats=stats)


__all__ = ['enumerate_triangles', 'find_triangles']
