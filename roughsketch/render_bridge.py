"""Push the shape collection to the drawing surface."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol

from roughsketch.shapes import Shape

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Drawing target that paints renderables produced by the generator."""

    def clear(self) -> None:
        ...

    def draw(self, renderable: Any) -> None:
        ...


class RenderBridge:
    """Redraw the whole board whenever shapes change.

    The surface is cleared first and shapes are drawn oldest first, so a
    later shape paints over an earlier one where they overlap.
    """

    def __init__(self, surface: Surface):
        self.surface = surface
        self.frames = 0

    def render(self, shapes: Iterable[Shape]) -> None:
        self.surface.clear()
        count = 0
        for shape in sorted(shapes, key=lambda s: s.id):
            if shape.renderable is None:
                logger.debug("Shape #%d has no renderable; nothing to draw", shape.id)
                continue
            self.surface.draw(shape.renderable)
            count += 1
        self.frames += 1
        logger.debug("Rendered frame %d with %d shapes", self.frames, count)

    __call__ = render
