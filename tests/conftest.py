"""Shared fixtures: recording collaborators standing in for the renderer and surface."""
from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from roughsketch.board import SketchBoard, Tool


class RecordingGenerator:
    """Return plain tuples describing what the board asked to render."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def line(self, x1, y1, x2, y2):
        call = ("line", x1, y1, x2, y2)
        self.calls.append(call)
        return call

    def rectangle(self, x, y, width, height):
        call = ("rectangle", x, y, width, height)
        self.calls.append(call)
        return call


class RecordingSurface:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def clear(self) -> None:
        self.events.append(("clear", None))

    def draw(self, renderable) -> None:
        self.events.append(("draw", renderable))

    def last_frame(self) -> List[Any]:
        frame: List[Any] = []
        for name, payload in self.events:
            if name == "clear":
                frame = []
            else:
                frame.append(payload)
        return frame


@pytest.fixture
def generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def changes() -> list:
    return []


@pytest.fixture
def board(generator, changes) -> SketchBoard:
    return SketchBoard(generator, on_change=changes.append, tool=Tool.LINE)
