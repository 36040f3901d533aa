"""Geometry helpers for pointer hit-testing on the sketch board.

The line test below is a loose triangle-inequality check rather than a true
point-to-segment distance. It accepts points whose detour through ``P`` is
less than one pixel longer than the segment itself, so the accepted region is
a thin ellipse with the endpoints as foci. Collinear points are only accepted
up to half a pixel past either endpoint.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from roughsketch.shapes import Shape, ShapeKind

Point = Tuple[float, float]

LINE_SLACK = 1.0


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def rect_bounds(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` regardless of drag direction."""
    return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)


def point_in_rect(point: Sequence[float], x1: float, y1: float, x2: float, y2: float) -> bool:
    min_x, min_y, max_x, max_y = rect_bounds(x1, y1, x2, y2)
    px, py = float(point[0]), float(point[1])
    return min_x <= px < max_x and min_y <= py < max_y


def near_segment(point: Sequence[float], a: Sequence[float], b: Sequence[float], slack: float = LINE_SLACK) -> bool:
    offset = distance(a, b) - (distance(a, point) + distance(b, point))
    return abs(offset) < slack


def is_within_element(point: Sequence[float], shape: Shape) -> bool:
    if shape.kind is ShapeKind.RECTANGLE:
        return point_in_rect(point, shape.x1, shape.y1, shape.x2, shape.y2)
    if shape.kind is ShapeKind.LINE:
        return near_segment(point, shape.anchor, shape.free_point)
    raise ValueError(f"Unsupported shape kind '{shape.kind}'")
