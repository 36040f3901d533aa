"""Shape model for the sketch board.

Shapes are immutable values. Geometry changes always go through
:func:`create_shape` so the renderable is rebuilt together with the
coordinates, and :class:`ShapeStore` keeps every shape at the slot matching
its ``id``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Protocol, Tuple

Point = Tuple[float, float]


class ShapeKind(str, Enum):
    LINE = "line"
    RECTANGLE = "rectangle"

    @classmethod
    def coerce(cls, value: Any) -> Optional["ShapeKind"]:
        """Map ``value`` (a kind, a tool or a plain string) to a kind, or ``None``."""
        if isinstance(value, ShapeKind):
            return value
        raw = getattr(value, "value", value)
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.lower())
        except ValueError:
            return None


class ShapeGenerator(Protocol):
    """Rendering collaborator that turns geometry into opaque renderables."""

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Any:
        ...

    def rectangle(self, x: float, y: float, width: float, height: float) -> Any:
        ...


class ShapeIndexError(ValueError):
    """Raised when a shape would break the id-equals-index invariant."""


@dataclass(frozen=True)
class Shape:
    """One line or rectangle on the board.

    ``(x1, y1)`` is the anchor where the drag started and ``(x2, y2)`` the
    free point that followed the pointer.
    """

    id: int
    x1: float
    y1: float
    x2: float
    y2: float
    kind: ShapeKind
    renderable: Any = None

    def __post_init__(self) -> None:
        resolved = ShapeKind.coerce(self.kind)
        if resolved is None:
            raise ValueError(f"Unknown shape kind '{self.kind}'")
        object.__setattr__(self, "kind", resolved)

    @property
    def anchor(self) -> Point:
        return (self.x1, self.y1)

    @property
    def free_point(self) -> Point:
        return (self.x2, self.y2)

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def coords(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


def create_shape(
    shape_id: int,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    kind: Any,
    generator: ShapeGenerator,
) -> Optional[Shape]:
    """Build a shape and its renderable; ``None`` when ``kind`` is unknown."""
    resolved = ShapeKind.coerce(kind)
    if resolved is None:
        return None
    x1, y1, x2, y2 = float(x1), float(y1), float(x2), float(y2)
    if resolved is ShapeKind.LINE:
        renderable = generator.line(x1, y1, x2, y2)
    elif resolved is ShapeKind.RECTANGLE:
        # width/height keep their sign; the generator normalizes
        renderable = generator.rectangle(x1, y1, x2 - x1, y2 - y1)
    else:  # pragma: no cover - exhaustive over ShapeKind
        return None
    return Shape(id=int(shape_id), x1=x1, y1=y1, x2=x2, y2=y2, kind=resolved, renderable=renderable)


class ShapeStore:
    """Ordered shape collection indexed by shape id."""

    def __init__(self) -> None:
        self._shapes: List[Shape] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __getitem__(self, shape_id: int) -> Shape:
        return self._shapes[shape_id]

    def next_id(self) -> int:
        return len(self._shapes)

    def last(self) -> Optional[Shape]:
        return self._shapes[-1] if self._shapes else None

    def snapshot(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def append(self, shape: Shape) -> None:
        if shape is None:
            raise ShapeIndexError("Cannot append an empty shape")
        if shape.id != len(self._shapes):
            raise ShapeIndexError(f"Shape id {shape.id} does not match next slot {len(self._shapes)}")
        self._shapes.append(shape)

    def replace(self, shape: Shape) -> None:
        if shape is None:
            raise ShapeIndexError("Cannot store an empty shape")
        if not 0 <= shape.id < len(self._shapes):
            raise ShapeIndexError(f"No shape with id {shape.id} to replace")
        self._shapes[shape.id] = shape
