"""Public package API for segtri.

Finds every triangle closed by the pairwise intersections of a set of 2-D
line segments. This facade provides a flat import surface on top of the
internal implementation package ``segtri.core``; plotting is left out so
``import segtri`` never pulls in matplotlib.

Example
-------
    from segtri import LineSegment, find_triangles

    segs = [LineSegment.from_coords(0, 0, 4, 0),
            LineSegment.from_coords(0, 0, 2, 3),
            LineSegment.from_coords(4, 0, 2, 3)]
    tris = find_triangles(segs)
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("segtri")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core import constants, geometry, intersections, triangles, io, stats, config, scenarios  # noqa: E402
from .core.constants import COMPARE_TOLERANCE, COORD_WIDTH  # noqa: E402
from .core.geometry import (  # noqa: E402
    Point, LineSegment, Triangle,
    points_equal, contains_point, intersect, intersect_segments,
    vectorized_seg_intersection,
)
from .core.intersections import aggregate_intersections  # noqa: E402
from .core.triangles import enumerate_triangles, find_triangles  # noqa: E402
from .core.stats import SearchStats  # noqa: E402
from .core.config import SearchConfig  # noqa: E402
from .core.io import read_segments, write_segments, format_report, write_results_json  # noqa: E402
from .core.scenarios import reference_segments, REFERENCE_TRIANGLE_COUNT  # noqa: E402
from .core.driver import run_search, SearchResult  # noqa: E402
from .core.logging_utils import get_logger, configure_logging  # noqa: E402

__all__ = [
    '__version__',
    # geometry primitives
    'Point', 'LineSegment', 'Triangle',
    'points_equal', 'contains_point', 'intersect', 'intersect_segments', 'vectorized_seg_intersection',
    # tolerances
    'COMPARE_TOLERANCE', 'COORD_WIDTH',
    # search
    'aggregate_intersections', 'enumerate_triangles', 'find_triangles',
    'run_search', 'SearchResult', 'SearchConfig', 'SearchStats',
    # io
    'read_segments', 'write_segments', 'format_report', 'write_results_json',
    'reference_segments', 'REFERENCE_TRIANGLE_COUNT',
    'get_logger', 'configure_logging',
    # submodules
    'constants', 'geometry', 'intersections', 'triangles', 'io', 'stats', 'config', 'scenarios',
]
