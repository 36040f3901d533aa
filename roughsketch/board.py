"""Drawing and selection state machine driven by pointer events."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from roughsketch.hit_test import find_shape_at
from roughsketch.shapes import Point, Shape, ShapeGenerator, ShapeStore, create_shape

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Tuple[Shape, ...]], None]


class Tool(str, Enum):
    LINE = "line"
    RECTANGLE = "rectangle"
    SELECTION = "selection"

    @classmethod
    def coerce(cls, value: Any) -> Optional["Tool"]:
        if value is None or isinstance(value, Tool):
            return value
        raw = str(getattr(value, "value", value)).strip().lower()
        if raw in ("", "none"):
            return None
        return cls(raw)


class Action(str, Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    MOVING = "moving"


@dataclass(frozen=True)
class Grab:
    """Copy of a grabbed shape and the pointer offset from its anchor."""

    shape: Shape
    offset: Point


class SketchBoard:
    """Own the shapes, the active tool and the drag in progress.

    ``generator`` builds renderables for new geometry and ``on_change`` is
    called with the full shape tuple after every append or replace.
    """

    def __init__(
        self,
        generator: ShapeGenerator,
        on_change: Optional[ChangeCallback] = None,
        tool: Any = Tool.LINE,
    ):
        self.generator = generator
        self._on_change = on_change
        self._store = ShapeStore()
        self._tool: Any = None
        self._action = Action.IDLE
        self._grab: Optional[Grab] = None
        self.set_tool(tool)

    # ------------------------------------------------------------------
    # State accessors
    @property
    def tool(self) -> Any:
        return self._tool

    @property
    def action(self) -> Action:
        return self._action

    @property
    def selection(self) -> Optional[Grab]:
        return self._grab

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return self._store.snapshot()

    def set_tool(self, tool: Any) -> None:
        """Select the tool used by the next pointer-down.

        Unrecognised names are kept so the creation guard can reject them.
        """
        try:
            resolved = Tool.coerce(tool)
        except ValueError:
            logger.warning("Unknown tool %r selected", tool)
            resolved = tool
        if resolved != self._tool:
            logger.debug("Tool changed from %s to %s", self._tool, resolved)
        self._tool = resolved

    def set_on_change(self, callback: Optional[ChangeCallback]) -> None:
        self._on_change = callback

    # ------------------------------------------------------------------
    # Pointer protocol
    def pointer_down(self, x: float, y: float) -> None:
        if self._action is not Action.IDLE:
            return
        if self._tool is None:
            return
        if self._tool is Tool.SELECTION:
            self._begin_move(x, y)
            return
        self._begin_draw(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        if self._action is Action.DRAWING:
            self._update_draw(x, y)
        elif self._action is Action.MOVING:
            self._update_move(x, y)

    def pointer_up(self, x: float | None = None, y: float | None = None) -> None:
        if self._action is Action.IDLE:
            return
        logger.debug("Action %s finished", self._action.value)
        self._action = Action.IDLE
        self._grab = None

    def cursor_at(self, x: float, y: float) -> str:
        """Cursor hint for hovering at ``(x, y)``."""
        if self._tool is Tool.SELECTION and find_shape_at((x, y), self._store) is not None:
            return "move"
        return "default"

    def status(self) -> Dict[str, Any]:
        tool = getattr(self._tool, "value", self._tool)
        return {
            "tool": tool if tool is not None else "none",
            "action": self._action.value,
            "shapes": len(self._store),
            "selected": None if self._grab is None else self._grab.shape.id,
        }

    def redraw(self) -> None:
        self._notify()

    # ------------------------------------------------------------------
    # Transitions
    def _begin_draw(self, x: float, y: float) -> None:
        shape = create_shape(self._store.next_id(), x, y, x, y, self._tool, self.generator)
        if shape is None:
            logger.warning("Tool %r cannot create shapes; ignoring pointer-down", self._tool)
            return
        self._store.append(shape)
        self._action = Action.DRAWING
        logger.debug("Drawing %s #%d from (%.1f, %.1f)", shape.kind.value, shape.id, x, y)
        self._notify()

    def _update_draw(self, x: float, y: float) -> None:
        current = self._store.last()
        if current is None:
            return
        shape = create_shape(current.id, current.x1, current.y1, x, y, current.kind, self.generator)
        self._commit(shape)

    def _begin_move(self, x: float, y: float) -> None:
        hit = find_shape_at((x, y), self._store)
        if hit is None:
            return
        self._grab = Grab(shape=hit, offset=(x - hit.x1, y - hit.y1))
        self._action = Action.MOVING
        logger.debug("Grabbed %s #%d at offset (%.1f, %.1f)", hit.kind.value, hit.id, *self._grab.offset)

    def _update_move(self, x: float, y: float) -> None:
        grab = self._grab
        if grab is None:
            return
        original = grab.shape
        new_x1 = x - grab.offset[0]
        new_y1 = y - grab.offset[1]
        shape = create_shape(
            original.id,
            new_x1,
            new_y1,
            new_x1 + original.width,
            new_y1 + original.height,
            original.kind,
            self.generator,
        )
        self._commit(shape)

    def _commit(self, shape: Optional[Shape]) -> None:
        if shape is None:
            return
        self._store.replace(shape)
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self._store.snapshot())
