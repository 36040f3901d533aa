"""Tests for the hand-drawn stroke generator."""
from __future__ import annotations

import numpy as np
import pytest

from roughsketch.board import SketchBoard, Tool
from roughsketch.renderer import Drawable, RoughGenerator, RoughOptions, _roughness_gain


class TestRoughGenerator:
    def test_line_has_two_strokes(self) -> None:
        drawable = RoughGenerator(seed=1).line(0, 0, 100, 0)
        assert isinstance(drawable, Drawable)
        assert drawable.kind == "line"
        assert len(drawable.strokes) == 2
        for stroke in drawable.strokes:
            assert stroke.shape == (RoughOptions().samples, 2)

    def test_strokes_stay_near_the_edge(self) -> None:
        drawable = RoughGenerator(seed=7).line(0, 0, 100, 0)
        min_x, min_y, max_x, max_y = drawable.bounds()
        assert min_x == pytest.approx(0, abs=5)
        assert max_x == pytest.approx(100, abs=5)
        assert abs(min_y) < 5 and abs(max_y) < 5

    def test_rectangle_has_eight_strokes(self) -> None:
        drawable = RoughGenerator(seed=3).rectangle(10, 10, 40, 30)
        assert drawable.kind == "rectangle"
        assert len(drawable.strokes) == 8

    def test_negative_extents_are_normalized(self) -> None:
        options = RoughOptions(roughness=0.0)
        forward = RoughGenerator(options).rectangle(10, 10, 40, 30)
        backward = RoughGenerator(options).rectangle(50, 40, -40, -30)
        assert forward.bounds() == backward.bounds() == (10.0, 10.0, 50.0, 40.0)

    def test_zero_roughness_is_straight(self) -> None:
        drawable = RoughGenerator(RoughOptions(roughness=0.0)).line(1, 2, 3, 4)
        for stroke in drawable.strokes:
            np.testing.assert_allclose(stroke, [[1, 2], [3, 4]])

    def test_zero_length_line(self) -> None:
        drawable = RoughGenerator(seed=0).line(5, 5, 5, 5)
        assert drawable.bounds() == (5.0, 5.0, 5.0, 5.0)

    def test_seed_makes_output_reproducible(self) -> None:
        a = RoughGenerator(seed=42).line(0, 0, 80, 60)
        b = RoughGenerator(seed=42).line(0, 0, 80, 60)
        for sa, sb in zip(a.strokes, b.strokes):
            np.testing.assert_array_equal(sa, sb)

    def test_reseed(self) -> None:
        gen = RoughGenerator(seed=5)
        first = gen.line(0, 0, 80, 60)
        gen.reseed(5)
        again = gen.line(0, 0, 80, 60)
        np.testing.assert_array_equal(first.strokes[0], again.strokes[0])

    def test_options_are_attached(self) -> None:
        options = RoughOptions(stroke_color="#ff0000", stroke_width=3.0)
        drawable = RoughGenerator(options, seed=1).line(0, 0, 10, 10)
        assert drawable.options is options

    def test_empty_drawable_bounds(self) -> None:
        assert Drawable(kind="line", options=RoughOptions()).bounds() is None

    def test_gain_shrinks_for_long_edges(self) -> None:
        assert _roughness_gain(100) == 1.0
        assert _roughness_gain(1000) == 0.4
        assert 0.4 < _roughness_gain(350) < 1.0

    def test_drives_the_board(self) -> None:
        board = SketchBoard(RoughGenerator(seed=9), tool=Tool.RECTANGLE)
        board.pointer_down(0, 0)
        board.pointer_move(30, 20)
        board.pointer_up()
        shape = board.shapes[0]
        assert isinstance(shape.renderable, Drawable)
        assert shape.renderable.kind == "rectangle"
