#!/usr/bin/env python3
"""Triangle search driver / CLI tool.

Builds (or loads) a list of line segments, aggregates their pairwise
intersections, enumerates the triangles they close and reports the result.

Key Responsibilities:
  * Run orchestration over a segment list (`run_search`).
  * CLI argument parsing (`main`).
  * Optional outputs: JSON export, PNG plot, statistics summary.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import SearchConfig
from .geometry import LineSegment, Point, Triangle
from .intersections import aggregate_intersections
from .io import format_report, read_segments, write_results_json
from .logging_utils import configure_logging, get_logger
from .scenarios import reference_segments
from .stats import SearchStats
from .triangles import enumerate_triangles

log = get_logger('segtri.driver')


@dataclass
class SearchResult:
    segments: List[LineSegment]
    per_segment_points: List[List[Point]]
    triangles: List[Triangle]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def count(self) -> int:
        return len(self.triangles)


def run_search(segments: Sequence[LineSegment], config: Optional[SearchConfig] = None) -> SearchResult:
    """Run the full pipeline on ``segments`` and handle configured side outputs."""
    cfg = config or SearchConfig()
    segments = list(segments)
    stats = SearchStats()
    per_segment = aggregate_intersections(segments, tol=cfg.tolerance, stats=stats)
    triangles = enumerate_triangles(per_segment, tol=cfg.tolerance, stats=stats)
    result = SearchResult(segments, per_segment, triangles, stats)

    if cfg.json_out:
        write_results_json(cfg.json_out, segments, triangles, stats)
        log.info('Wrote %s', cfg.json_out)
    if cfg.plot:
        from .visualization import plot_search
        plot_search(segments, per_segment, triangles, outname=cfg.plot_out)
    return result


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description='Find triangles formed by pairwise intersections of line segments')
    ap.add_argument('--segments', type=str, default=None,
                    help='Segment file (x1 y1 x2 y2 per line); defaults to the built-in reference figure')
    ap.add_argument('--tolerance', type=float, default=SearchConfig.tolerance,
                    help='Absolute coordinate tolerance for point equality (default: %(default)g)')
    ap.add_argument('--width', type=int, default=SearchConfig.coord_width, help='Coordinate field width in the report')
    ap.add_argument('--json', type=str, default=None, help='Write results as JSON to this path')
    ap.add_argument('--plot', type=str, default=None, help='Write a PNG plot of the result to this path')
    ap.add_argument('--stats', action='store_true', help='Log search statistics at the end')
    ap.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                    default=SearchConfig.log_level)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = SearchConfig(
        tolerance=args.tolerance,
        coord_width=args.width,
        plot=args.plot is not None,
        plot_out=args.plot or SearchConfig.plot_out,
        json_out=args.json,
        log_level=args.log_level,
    )
    level = cfg.log_level
    if args.stats and logging.getLevelName(level) > logging.INFO:
        # Summary is logged at INFO
        level = 'INFO'
    configure_logging(level)

    if args.segments:
        try:
            segments = read_segments(args.segments)
        except (OSError, ValueError) as e:
            log.error('Could not read segments: %s', e)
            return 2
        log.info('Loaded %d segments from %s', len(segments), args.segments)
    else:
        segments = reference_segments()

    result = run_search(segments, cfg)
    print(format_report(result.segments, result.triangles, width=cfg.coord_width))
    if args.stats:
        result.stats.pretty_print(log)
    return 0


__all__ = ['SearchResult', 'run_search', 'main']


if __name__ == '__main__':
    sys.exit(main())
