"""Built-in segment scenarios.

``reference_segments`` is the classic "count the triangles" figure: a large
triangle with apex (5, 1) and base on y = 9, cut by three lines parallel to
each side. It yields 27 triangles.
"""
from __future__ import annotations

from typing import List

from .geometry import LineSegment

REFERENCE_COORDS = (
    # parallel to the right side
    (5, 1, 9, 9),
    (4, 3, 7, 9),
    (3, 5, 5, 9),
    (2, 7, 3, 9),
    # parallel to the left side
    (5, 1, 1, 9),
    (6, 3, 3, 9),
    (7, 5, 5, 9),
    (8, 7, 7, 9),
    # horizontals
    (4, 3, 6, 3),
    (3, 5, 7, 5),
    (2, 7, 8, 7),
    (1, 9, 9, 9),
)

REFERENCE_TRIANGLE_COUNT = 27


def reference_segments() -> List[LineSegment]:
    return [LineSegment.from_coords(*c) for c in REFERENCE_COORDS]


__all__ = ['REFERENCE_COORDS', 'REFERENCE_TRIANGLE_COUNT', 'reference_segments']
