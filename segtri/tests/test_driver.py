"""Tests for the search driver and CLI entry point."""
import json

from segtri.core.config import SearchConfig
from segtri.core.driver import SearchResult, main, run_search
from segtri.core.geometry import LineSegment
from segtri.core.io import write_segments
from segtri.core.scenarios import reference_segments


def test_run_search_reference():
    result = run_search(reference_segments())
    assert isinstance(result, SearchResult)
    assert result.count == 27
    assert len(result.per_segment_points) == 12
    assert result.stats.triangles == 27
    assert result.stats.pairs_checked == 66


def test_run_search_empty():
    result = run_search([])
    assert result.count == 0
    assert result.per_segment_points == []


def test_run_search_writes_json_and_plot(tmp_path):
    json_out = tmp_path / "res.json"
    png_out = tmp_path / "res.png"
    cfg = SearchConfig(json_out=str(json_out), plot=True, plot_out=str(png_out))
    result = run_search(reference_segments(), cfg)
    assert json.loads(json_out.read_text())['count'] == result.count
    assert png_out.exists() and png_out.stat().st_size > 0


def test_run_search_tolerance_is_forwarded():
    segs = [
        LineSegment.from_coords(0, 0, 10, 0),
        LineSegment.from_coords(5, -1, 5, 1),
        LineSegment.from_coords(5.000001, -1, 5.000001, 1),
    ]
    loose = run_search(segs)
    tight = run_search(segs, SearchConfig(tolerance=1e-9))
    assert len(loose.per_segment_points[0]) == 1
    assert len(tight.per_segment_points[0]) == 2


def test_main_reference_report(capsys):
    rc = main([])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('Line segments\n(  5,   1), (  9,   9)\n')
    assert 'There are 27 triangle(s) found.' in out


def test_main_reads_segment_file(tmp_path, capsys):
    p = tmp_path / "segs.txt"
    write_segments(str(p), [
        LineSegment.from_coords(-1, 0, 5, 0),
        LineSegment.from_coords(-0.5, -1, 2.5, 5),
        LineSegment.from_coords(4.5, -1, 1.5, 5),
    ])
    rc = main(['--segments', str(p), '--json', str(tmp_path / "out.json")])
    out = capsys.readouterr().out
    assert rc == 0
    assert 'There are 1 triangle(s) found.' in out
    assert json.loads((tmp_path / "out.json").read_text())['count'] == 1


def test_main_bad_segment_file(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("1 2 3\n")
    assert main(['--segments', str(p)]) == 2
    assert main(['--segments', str(tmp_path / "missing.txt")]) == 2


def test_main_width_option(capsys):
    assert main(['--width', '5']) == 0
    out = capsys.readouterr().out
    assert '(    5,     1), (    9,     9)' in out
