"""Segment file I/O and result reporting.

Segment files are plain text, one segment per line as four numbers
``x1 y1 x2 y2`` separated by whitespace and/or commas. Blank lines and
lines starting with ``#`` are ignored.

The text report mirrors the classic console output::

    Line segments
    (  5,   1), (  9,   9)
    ...

    Triangles
    (  5,   1), (  4,   3), (  6,   3)
    ...

    There are 27 triangle(s) found.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Sequence

from .constants import COORD_WIDTH
from .geometry import LineSegment, Point, Triangle
from .stats import SearchStats


def read_segments(filepath: str) -> List[LineSegment]:
    """Read segments from a text file.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If a line does not hold exactly four finite numbers
    """
    segments: List[LineSegment] = []
    with open(filepath, 'r') as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith('#'):
                continue
            fields = line.replace(',', ' ').split()
            if len(fields) != 4:
                raise ValueError(f"{filepath}:{lineno}: expected 4 coordinates, got {len(fields)}")
            try:
                coords = [float(v) for v in fields]
            except ValueError:
                raise ValueError(f"{filepath}:{lineno}: non-numeric coordinate in {line!r}") from None
            if not all(math.isfinite(v) for v in coords):
                raise ValueError(f"{filepath}:{lineno}: non-finite coordinate in {line!r}")
            segments.append(LineSegment.from_coords(*coords))
    return segments


def write_segments(filepath: str, segments: Sequence[LineSegment]) -> None:
    with open(filepath, 'w') as f:
        for s in segments:
            f.write('{:g} {:g} {:g} {:g}\n'.format(*s.as_tuple()))


def _fmt_point(p: Point, width: int) -> str:
    return f"({p.x:>{width}g}, {p.y:>{width}g})"


def format_report(segments: Sequence[LineSegment], triangles: Sequence[Triangle],
                  width: int = COORD_WIDTH) -> str:
    """Human-readable listing of the input segments and the triangles found."""
    lines = ['Line segments']
    for s in segments:
        lines.append(f"{_fmt_point(s.p1, width)}, {_fmt_point(s.p2, width)}")
    lines.append('')
    lines.append('Triangles')
    for t in triangles:
        lines.append(', '.join(_fmt_point(p, width) for p in (t.p1, t.p2, t.p3)))
    lines.append('')
    lines.append(f"There are {len(triangles)} triangle(s) found.")
    return '\n'.join(lines)


def results_to_dict(segments: Sequence[LineSegment], triangles: Sequence[Triangle],
                    stats: Optional[SearchStats] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        'segments': [list(s.as_tuple()) for s in segments],
        'triangles': [[list(p) for p in t.as_tuple()] for t in triangles],
        'count': len(triangles),
    }
    if stats is not None:
        out['stats'] = stats.to_dict()
    return out


def write_results_json(filepath: str, segments: Sequence[LineSegment], triangles: Sequence[Triangle],
                       stats: Optional[SearchStats] = None) -> None:
    with open(filepath, 'w') as f:
        json.dump(results_to_dict(segments, triangles, stats), f, indent=2)


__all__ = ['read_segments', 'write_segments', 'format_report', 'results_to_dict', 'write_results_json']
