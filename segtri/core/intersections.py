"""Per-segment intersection point aggregation.

For every unordered pair of segments the intersection (if any) is recorded
on both segments. Each segment keeps its own insertion-ordered list of
distinct points; dedup is local to the segment, never global, and uses the
pairwise tolerance test rather than hashing so the non-transitive
comparison semantics are preserved exactly.
"""
from __future__ import annotations

import time
from typing import List, Optional, Sequence

from .constants import COMPARE_TOLERANCE
from .geometry import LineSegment, Point, contains_point, intersect_segments
from .logging_utils import get_logger
from .stats import SearchStats

log = get_logger('segtri.intersections')


def _add_point(points: List[Point], pt: Point, tol: float) -> bool:
    if contains_point(points, pt, tol):
        return False
    points.append(pt)
    return True


def _is_parallel(s1: LineSegment, s2: LineSegment, tol: float) -> bool:
    denom = (s1.p1.x - s1.p2.x) * (s2.p1.y - s2.p2.y) - (s1.p1.y - s1.p2.y) * (s2.p1.x - s2.p2.x)
    return abs(denom) < tol


def aggregate_intersections(segments: Sequence[LineSegment], tol: float = COMPARE_TOLERANCE,
                            stats: Optional[SearchStats] = None) -> List[List[Point]]:
    """Return, for each input segment, the distinct intersection points lying on it.

    The result is indexed like ``segments``. Pairs are visited as (i, j)
    with i < j in lexicographic order, which fixes the insertion order of
    every per-segment list.
    """
    t0 = time.perf_counter()
    n = len(segments)
    per_segment: List[List[Point]] = [[] for _ in range(n)]
    pairs = hits = parallel = 0
    for i in range(n - 1):
        for j in range(i + 1, n):
            pairs += 1
            pt = intersect_segments(segments[i], segments[j], tol=tol)
            if pt is None:
                if stats is not None and _is_parallel(segments[i], segments[j], tol):
                    parallel += 1
                continue
            hits += 1
            log.debug('segments %d and %d meet at (%g, %g)', i, j, pt.x, pt.y)
            _add_point(per_segment[i], pt, tol)
            _add_point(per_segment[j], pt, tol)

    elapsed = time.perf_counter() - t0
    if stats is not None:
        stats.segments = n
        stats.pairs_checked += pairs
        stats.intersections += hits
        stats.parallel_rejects += parallel
        stats.range_rejects += pairs - hits - parallel
        stats.distinct_points += sum(len(p) for p in per_segment)
        stats.time_intersections += elapsed
    log.info('checked %d segment pairs: %d intersections', pairs, hits)
    return per_segment


__all__ = ['aggregate_intersections']
