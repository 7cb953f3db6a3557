"""Central numerical tolerances and report formatting constants.

Keeps the comparison threshold in one place so geometry, aggregation and
triangle search all agree on what "the same point" means.
"""
from __future__ import annotations

# Geometry tolerances
COMPARE_TOLERANCE: float = 1e-5   # absolute per-coordinate tolerance for point equality

# Report formatting
COORD_WIDTH: int = 3              # right-aligned field width for printed coordinates

__all__ = [
    'COMPARE_TOLERANCE',
    'COORD_WIDTH',
]
