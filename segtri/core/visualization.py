"""Plotting helpers for triangle search results.

Kept apart from the driver so the core search never imports matplotlib.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from .geometry import segments_to_arrays
from .logging_utils import get_logger

logger = get_logger('segtri.viz')


def plot_search(segments, per_segment_points, triangles, outname="triangles.png", fill_alpha: float = 0.12):
    """Plot segments, their intersection points and the triangles found.

    Args:
        segments: sequence of LineSegment
        per_segment_points: per-segment intersection lists (may be None)
        triangles: sequence of Triangle
        outname: output image path
        fill_alpha: opacity of each triangle fill; overlaps darken
    """
    starts, ends = segments_to_arrays(segments)
    fig, ax = plt.subplots(figsize=(6, 6))
    for s, e in zip(starts, ends):
        ax.plot([s[0], e[0]], [s[1], e[1]], color='k', linewidth=1.2)

    for tri in triangles:
        verts = np.array(tri.as_tuple())
        ax.add_patch(Polygon(verts, closed=True, facecolor=(0.2, 0.4, 0.85, fill_alpha), edgecolor='none'))

    if per_segment_points:
        pts = np.array([p.as_tuple() for pts in per_segment_points for p in pts], dtype=float).reshape(-1, 2)
        if pts.size:
            ax.scatter(pts[:, 0], pts[:, 1], s=14, color=(0.85, 0.2, 0.2), zorder=3)

    ax.set_aspect('equal')
    ax.invert_yaxis()
    ax.set_title(f"{len(segments)} segments, {len(triangles)} triangle(s)")
    fig.savefig(outname, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info('Wrote %s', outname)
    return outname


__all__ = ['plot_search']
