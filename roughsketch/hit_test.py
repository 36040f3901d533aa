"""Pick the shape under the pointer."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from roughsketch.geometry import is_within_element
from roughsketch.shapes import Shape


def find_shape_at(point: Sequence[float], shapes: Iterable[Shape]) -> Optional[Shape]:
    """Return the first shape in id order containing ``point``.

    Earlier shapes win ties even though later ones are painted over them.
    """
    for shape in shapes:
        if is_within_element(point, shape):
            return shape
    return None
