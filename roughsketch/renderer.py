"""Hand-drawn stroke generator used as the board's rendering collaborator.

Every edge is drawn twice as a slightly bowed cubic Bezier between jittered
endpoints, which gives the sketchy look. The routines only produce sampled
polylines; painting them is left to the surface.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from roughsketch.geometry import rect_bounds


@dataclass(frozen=True)
class RoughOptions:
    roughness: float = 1.0
    bowing: float = 1.0
    stroke_width: float = 1.5
    stroke_color: str = "#1e1e1e"
    max_offset: float = 2.0
    samples: int = 24


@dataclass(frozen=True, eq=False)
class Drawable:
    """Renderable handle for one shape: stroke polylines plus drawing options."""

    kind: str
    options: RoughOptions
    strokes: Tuple[np.ndarray, ...] = field(default_factory=tuple)

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        if not self.strokes:
            return None
        stacked = np.vstack(self.strokes)
        mn = stacked.min(axis=0)
        mx = stacked.max(axis=0)
        return (float(mn[0]), float(mn[1]), float(mx[0]), float(mx[1]))


def _roughness_gain(length: float) -> float:
    """Long edges get proportionally less jitter."""
    if length < 200.0:
        return 1.0
    if length > 500.0:
        return 0.4
    return -0.0016668 * length + 1.233334


def _cubic_bezier(p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray, samples: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, max(2, samples))[:, None]
    u = 1.0 - t
    return (u ** 3) * p0 + 3.0 * (u ** 2) * t * p1 + 3.0 * u * (t ** 2) * p2 + (t ** 3) * p3


class RoughGenerator:
    """Generate sketchy :class:`Drawable` values for lines and rectangles.

    ``seed`` fixes the jitter so the same geometry renders the same way; with
    ``None`` every call draws fresh noise.
    """

    def __init__(self, options: RoughOptions | None = None, seed: int | None = None):
        self.options = options or RoughOptions()
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def reseed(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Drawable:
        strokes = self._double_stroke(x1, y1, x2, y2)
        return Drawable(kind="line", options=self.options, strokes=tuple(strokes))

    def rectangle(self, x: float, y: float, width: float, height: float) -> Drawable:
        left, top, right, bottom = rect_bounds(x, y, x + width, y + height)
        corners = [(left, top), (right, top), (right, bottom), (left, bottom)]
        strokes = []
        for i, (ax, ay) in enumerate(corners):
            bx, by = corners[(i + 1) % len(corners)]
            strokes.extend(self._double_stroke(ax, ay, bx, by))
        return Drawable(kind="rectangle", options=self.options, strokes=tuple(strokes))

    # ------------------------------------------------------------------
    # Stroke construction
    def _double_stroke(self, x1: float, y1: float, x2: float, y2: float) -> list[np.ndarray]:
        return [self._stroke(x1, y1, x2, y2, overlay=False), self._stroke(x1, y1, x2, y2, overlay=True)]

    def _offset(self, scale: float, gain: float) -> float:
        return float(self._rng.uniform(-scale, scale)) * self.options.roughness * gain

    def _stroke(self, x1: float, y1: float, x2: float, y2: float, overlay: bool) -> np.ndarray:
        opts = self.options
        length = math.hypot(x2 - x1, y2 - y1)
        start = np.array([x1, y1], dtype=float)
        end = np.array([x2, y2], dtype=float)
        if opts.roughness <= 0.0 or length <= 1e-9:
            return np.vstack((start, end))

        gain = _roughness_gain(length)
        offset = min(opts.max_offset, length / 10.0)
        half = offset / 2.0
        scale = half if overlay else offset
        diverge = 0.2 + float(self._rng.random()) * 0.2

        # bow perpendicular to the edge
        bow_x = opts.bowing * opts.max_offset * (y2 - y1) / 200.0
        bow_y = opts.bowing * opts.max_offset * (x1 - x2) / 200.0
        bow_x += self._offset(half, gain)
        bow_y += self._offset(half, gain)

        dx, dy = x2 - x1, y2 - y1
        p0 = start + np.array([self._offset(scale, gain), self._offset(scale, gain)])
        p1 = np.array([
            bow_x + x1 + dx * diverge + self._offset(scale, gain),
            bow_y + y1 + dy * diverge + self._offset(scale, gain),
        ])
        p2 = np.array([
            bow_x + x1 + 2.0 * dx * diverge + self._offset(scale, gain),
            bow_y + y1 + 2.0 * dy * diverge + self._offset(scale, gain),
        ])
        p3 = end + np.array([self._offset(scale, gain), self._offset(scale, gain)])
        return _cubic_bezier(p0, p1, p2, p3, opts.samples)
