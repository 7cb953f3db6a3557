"""Configuration objects for a triangle search run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import COMPARE_TOLERANCE, COORD_WIDTH


@dataclass
class SearchConfig:
    """Settings for :func:`segtri.core.driver.run_search`.

    Attributes
    ----------
    tolerance : float
        Absolute per-coordinate tolerance used for point equality and the
        parallel-segment test.
    coord_width : int
        Field width for coordinates in the text report.
    plot : bool
        Render a PNG of segments, intersections and triangles.
    plot_out : str
        Output path for the plot.
    json_out : str, optional
        When set, write a machine-readable copy of the results here.
    log_level : str
        Level for the 'segtri' logger family.
    """
    tolerance: float = COMPARE_TOLERANCE
    coord_width: int = COORD_WIDTH
    plot: bool = False
    plot_out: str = 'triangles.png'
    json_out: Optional[str] = None
    log_level: str = 'WARNING'


__all__ = ['SearchConfig']
