"""Tests for segment file I/O and the text/JSON reports."""
import json

import pytest

from segtri.core.geometry import LineSegment, Point, Triangle
from segtri.core.io import format_report, read_segments, results_to_dict, write_results_json, write_segments
from segtri.core.scenarios import reference_segments
from segtri.core.stats import SearchStats
from segtri.core.triangles import find_triangles


def test_format_report_reference():
    segs = reference_segments()
    report = format_report(segs, find_triangles(segs))
    lines = report.splitlines()
    assert lines[0] == 'Line segments'
    assert lines[1] == '(  5,   1), (  9,   9)'
    assert lines[12] == '(  1,   9), (  9,   9)'
    assert lines[13] == ''
    assert lines[14] == 'Triangles'
    assert lines[15] == '(  5,   1), (  4,   3), (  6,   3)'
    assert lines[-2] == ''
    assert lines[-1] == 'There are 27 triangle(s) found.'
    assert len(lines) == 1 + 12 + 2 + 27 + 2


def test_format_report_empty():
    assert format_report([], []) == 'Line segments\n\nTriangles\n\nThere are 0 triangle(s) found.'


def test_format_report_non_integer_and_width():
    tri = Triangle(Point(6.5, 3), Point(1 / 3, -2), Point(10, 100))
    line = format_report([], [tri]).splitlines()[3]
    assert line == '(6.5,   3), (0.333333,  -2), ( 10, 100)'
    wide = format_report([LineSegment.from_coords(1, 2, 3, 4)], [], width=5).splitlines()[1]
    assert wide == '(    1,     2), (    3,     4)'


def test_read_segments_formats(tmp_path):
    p = tmp_path / "segs.txt"
    p.write_text("# header comment\n5 1 9 9\n\n4,3,7,9\n 3, 5  5 9 \n")
    segs = read_segments(str(p))
    assert [s.as_tuple() for s in segs] == [(5, 1, 9, 9), (4, 3, 7, 9), (3, 5, 5, 9)]


def test_write_then_read_segments(tmp_path):
    p = tmp_path / "ref.txt"
    write_segments(str(p), reference_segments())
    assert read_segments(str(p)) == reference_segments()


@pytest.mark.parametrize("content,match", [
    ("1 2 3\n", "expected 4"),
    ("1 2 3 4 5\n", "expected 4"),
    ("1 2 x 4\n", "non-numeric"),
    ("nan 0 1 1\n", "non-finite"),
    ("0 0 1 1\n0 inf 1 1\n", r":2:"),
])
def test_read_segments_rejects_malformed(tmp_path, content, match):
    p = tmp_path / "bad.txt"
    p.write_text(content)
    with pytest.raises(ValueError, match=match):
        read_segments(str(p))


def test_read_segments_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_segments(str(tmp_path / "nope.txt"))


def test_results_json(tmp_path):
    segs = reference_segments()
    stats = SearchStats()
    tris = find_triangles(segs, stats=stats)
    out = tmp_path / "res.json"
    write_results_json(str(out), segs, tris, stats)
    data = json.loads(out.read_text())
    assert data['count'] == 27
    assert len(data['triangles']) == 27
    assert data['segments'][0] == [5.0, 1.0, 9.0, 9.0]
    assert data['stats']['pairs_checked'] == 66
    assert [c for p in data['triangles'][0] for c in p] == pytest.approx([5, 1, 4, 3, 6, 3])


def test_results_to_dict_without_stats():
    d = results_to_dict([], [])
    assert d == {'segments': [], 'triangles': [], 'count': 0}


def test_bundled_example_matches_reference():
    import pathlib
    path = pathlib.Path(__file__).resolve().parents[2] / "examples" / "reference_segments.txt"
    assert read_segments(str(path)) == reference_segments()
