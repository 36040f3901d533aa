"""Hand-drawn line and rectangle sketch board."""
from __future__ import annotations

from roughsketch.board import Action, Grab, SketchBoard, Tool
from roughsketch.geometry import distance, is_within_element
from roughsketch.hit_test import find_shape_at
from roughsketch.render_bridge import RenderBridge, Surface
from roughsketch.renderer import Drawable, RoughGenerator, RoughOptions
from roughsketch.shapes import Shape, ShapeIndexError, ShapeKind, ShapeStore, create_shape

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Drawable",
    "Grab",
    "RenderBridge",
    "RoughGenerator",
    "RoughOptions",
    "Shape",
    "ShapeIndexError",
    "ShapeKind",
    "ShapeStore",
    "SketchBoard",
    "Surface",
    "Tool",
    "create_shape",
    "distance",
    "find_shape_at",
    "is_within_element",
]
