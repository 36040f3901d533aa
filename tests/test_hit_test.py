"""Tests for picking the shape under the pointer."""
from __future__ import annotations

from roughsketch.hit_test import find_shape_at
from roughsketch.shapes import Shape, ShapeKind


def _shape(shape_id, x1, y1, x2, y2, kind=ShapeKind.RECTANGLE) -> Shape:
    return Shape(id=shape_id, x1=x1, y1=y1, x2=x2, y2=y2, kind=kind)


class TestFindShapeAt:
    def test_empty_board(self) -> None:
        assert find_shape_at((1, 1), []) is None

    def test_miss(self) -> None:
        shapes = [_shape(0, 0, 0, 10, 10)]
        assert find_shape_at((20, 20), shapes) is None

    def test_oldest_shape_wins_overlap(self) -> None:
        shapes = [_shape(0, 0, 0, 100, 100), _shape(1, 10, 10, 50, 50)]
        hit = find_shape_at((20, 20), shapes)
        assert hit is not None
        assert hit.id == 0

    def test_later_shape_found_outside_overlap(self) -> None:
        shapes = [_shape(0, 0, 0, 10, 10), _shape(1, 20, 20, 40, 40)]
        assert find_shape_at((30, 30), shapes).id == 1

    def test_mixed_kinds(self) -> None:
        shapes = [
            _shape(0, 100, 100, 200, 200),
            _shape(1, 0, 0, 10, 10, kind=ShapeKind.LINE),
        ]
        assert find_shape_at((5, 5), shapes).id == 1
        assert find_shape_at((150, 150), shapes).id == 0

    def test_plain_string_kinds(self) -> None:
        shapes = [
            Shape(id=0, x1=0, y1=0, x2=10, y2=10, kind="rectangle"),
            Shape(id=1, x1=20, y1=20, x2=30, y2=30, kind="line"),
        ]
        assert find_shape_at((5, 5), shapes).id == 0
        assert find_shape_at((25, 25), shapes).id == 1
        assert find_shape_at((50, 5), shapes) is None
