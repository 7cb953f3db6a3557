"""Search statistics data structures and presentation utilities.

Counters are filled in by the aggregation and triangle enumeration passes
when a SearchStats instance is passed to them; both passes run fine
without one.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class SearchStats:
    segments: int = 0
    pairs_checked: int = 0
    parallel_rejects: int = 0
    range_rejects: int = 0
    intersections: int = 0
    distinct_points: int = 0
    triangles: int = 0
    # Timing (seconds)
    time_intersections: float = 0.0
    time_triangles: float = 0.0

    @property
    def time_total(self) -> float:
        return self.time_intersections + self.time_triangles

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['time_total'] = self.time_total
        d['hit_rate'] = (self.intersections / self.pairs_checked) if self.pairs_checked else 0.0
        return d

    def pretty_print(self, logger) -> None:
        logger.info(
            'segments=%d pairs=%d intersections=%d (parallel=%d out-of-range=%d) '
            'distinct_points=%d triangles=%d',
            self.segments, self.pairs_checked, self.intersections,
            self.parallel_rejects, self.range_rejects,
            self.distinct_points, self.triangles,
        )
        logger.info(
            'time: intersections=%.6fs triangles=%.6fs total=%.6fs',
            self.time_intersections, self.time_triangles, self.time_total,
        )


__all__ = ['SearchStats']
