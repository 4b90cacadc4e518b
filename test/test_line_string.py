"""
Geometrie-Kernel Tests: split(), Loop-Traversierung, shorter_arc()
"""

import math

import pytest

from sketcher.geometry import Polyline, extent_of, path_length, same_coordinate, segment_contains
from sketcher.line_string import loop_travel_indices, shorter_arc, split, split_index

LOOP = [(0, 10), (-10, 10), (-10, 20), (0, 20), (10, 20), (10, 10), (0, 10)]


def test_split_inserts_coordinate_on_segment():
    line = Polyline([(0, -50), (0, 0)], id="a", properties={"highway": "residential"})
    result = split(line, (0, -25))

    assert result.coordinates == [(0, -50), (0, -25), (0, 0)]
    assert result.id == "a"
    assert result.properties["highway"] == "residential"
    # Eingabe bleibt unverändert
    assert line.coordinates == [(0, -50), (0, 0)]


def test_split_on_vertex_returns_input_unchanged():
    line = Polyline([(0, 0), (-25, 25), (-50, 25)])
    assert split(line, (-25, 25)) is line
    assert split(line, (0, 0)) is line
    assert split(line, (-50, 25)) is line


def test_split_off_line_returns_input_unchanged():
    line = Polyline([(0, 0), (0, 10)])
    assert split(line, (1, 5)) is line
    assert split(line, (0, 11)) is line


def test_split_is_idempotent():
    line = Polyline([(0, 0), (25, 25), (50, 25)])
    once = split(line, (40, 25))
    twice = split(once, (40, 25))
    assert twice is once
    assert once.coordinates == [(0, 0), (25, 25), (40, 25), (50, 25)]


def test_split_uses_first_containing_segment():
    line = Polyline([(0, 0), (10, 0), (0, 0.0001), (10, 0.0001)])
    assert split_index(line.coordinates, (5, 0)) == 1


def test_loop_travel_indices_forward():
    assert loop_travel_indices(5, 1, 3) == [1, 2, 3]


def test_loop_travel_indices_wraps_and_skips_seam():
    assert loop_travel_indices(6, 4, 3) == [4, 5, 1, 2, 3]
    assert loop_travel_indices(7, 3, 0) == [3, 4, 5, 6]


def test_shorter_arc_forward():
    loop = Polyline(LOOP)
    assert shorter_arc(loop, 3, 5) == [(0, 20), (10, 20), (10, 10)]


def test_shorter_arc_backward():
    loop = Polyline(LOOP)
    assert shorter_arc(loop, 3, 1) == [(0, 20), (-10, 20), (-10, 10)]


def test_shorter_arc_across_seam():
    loop = Polyline(LOOP)
    assert shorter_arc(loop, 5, 1) == [(10, 10), (0, 10), (-10, 10)]
    assert shorter_arc(loop, 1, 5) == [(-10, 10), (0, 10), (10, 10)]


def test_shorter_arc_tie_prefers_forward():
    square = Polyline([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
    assert shorter_arc(square, 0, 2) == [(0, 0), (10, 0), (10, 10)]


def test_shorter_arc_same_index_is_empty():
    assert shorter_arc(Polyline(LOOP), 2, 2) == []


def test_polyline_loop_detection():
    assert Polyline(LOOP).is_loop
    assert not Polyline([(0, 0), (0, 10)]).is_loop
    assert not Polyline([(0, 0), (0, 0)]).is_loop


def test_polyline_contains_is_boundary_inclusive():
    line = Polyline([(0, 0), (-25, 25), (-50, 25)])
    assert line.contains((0, 0))
    assert line.contains((-50, 25))
    assert line.contains((-30, 25))
    assert not line.contains((-30, 26))


def test_single_vertex_polyline_contains_only_its_vertex():
    line = Polyline([(5, 5)])
    assert line.contains((5, 5))
    assert not line.contains((5, 6))


def test_exact_coordinate_comparison():
    assert same_coordinate((0, 10), [0.0, 10.0])
    assert not same_coordinate((0, 10), (0, 10.000001))
    assert not same_coordinate(None, (0, 0))


def test_segment_contains_degenerate_segment():
    assert segment_contains((1, 1), (1, 1), (1, 1))
    assert not segment_contains((1, 1), (1, 1), (1, 2))


def test_path_length_and_extent():
    assert math.isclose(path_length(LOOP), 60.0)
    assert path_length([(0, 0)]) == 0.0
    assert extent_of(LOOP) == pytest.approx((-10, 10, 10, 20))
    assert extent_of([]) is None


def test_copy_keeps_id_and_merges_properties():
    line = Polyline([(0, 0), (0, 10)], id="way", properties={"highway": "service"})
    copied = line.copy(candidate=True)

    assert copied is not line
    assert copied.id == "way"
    assert copied.properties == {"highway": "service", "candidate": True}
    assert "candidate" not in line.properties
