"""Layout store for UI element rectangles and their rescaling on window resize."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from overlayui.geometry import Box, Vector2


@dataclass
class RenderInfo:
    """Render state of one UI element: the box it is drawn in."""

    bounds: Box = field(default_factory=Box)


def nearest_anchor(x: float, y: float, width: float, height: float) -> Vector2:
    """Return the anchor nearest to ``(x, y)`` on a ``width`` x ``height`` screen.

    The anchor is one of the four corners, (0, 0), (1, 0), (0, 1), (1, 1), or
    the centre, (0.5, 0.5), in units of the screen size. Ties go to the
    corner checked first in that order, and to any corner before the centre.
    """
    distances = [
        ((x * x + y * y), Vector2(0, 0)),
        ((width - x) ** 2 + y ** 2, Vector2(1, 0)),
        (x ** 2 + (height - y) ** 2, Vector2(0, 1)),
        ((width - x) ** 2 + (height - y) ** 2, Vector2(1, 1)),
        ((x - width * 0.5) ** 2 + (y - height * 0.5) ** 2, Vector2(0.5, 0.5)),
    ]
    smallest = min(d for d, _ in distances)
    return next(anchor for d, anchor in distances if d == smallest)


class Layout:
    """Owns the rectangles of all UI elements, addressed by element index.

    Lookups with an index that has no element are ignored, and queries for
    such an index answer with zeros.
    """

    def __init__(self) -> None:
        self._renders: List[RenderInfo] = []
        self._locked = True

    def new_render(self, x: float, y: float, width: float, height: float) -> RenderInfo:
        """Create and register the render info of a new element."""
        info = RenderInfo(Box(x, y, width, height))
        self._renders.append(info)
        return info

    def _get(self, index: int) -> Optional[RenderInfo]:
        if 0 <= index < len(self._renders):
            return self._renders[index]
        return None

    def move(self, index: int, pos: Vector2) -> None:
        """Centre element ``index`` on ``pos``."""
        info = self._get(index)
        if info is None:
            return
        info.bounds.left = pos.x - info.bounds.width / 2
        info.bounds.top = pos.y - info.bounds.height / 2

    def resize(self, index: int, size: Vector2) -> None:
        """Give element ``index`` a new size, keeping its centre."""
        info = self._get(index)
        if info is None:
            return
        center = info.bounds.center
        info.bounds.left = center.x - size.x / 2
        info.bounds.top = center.y - size.y / 2
        info.bounds.width = size.x
        info.bounds.height = size.y

    def position(self, index: int) -> Vector2:
        """Centre of element ``index``."""
        info = self._get(index)
        return info.bounds.center if info is not None else Vector2(0, 0)

    def transform(self, index: int) -> Tuple[float, float, float, float]:
        """Centre x, centre y, width and height of element ``index``."""
        info = self._get(index)
        if info is None:
            return (0.0, 0.0, 0.0, 0.0)
        center = info.bounds.center
        return (center.x, center.y, info.bounds.width, info.bounds.height)

    def size(self, index: int) -> Vector2:
        info = self._get(index)
        if info is None:
            return Vector2(0, 0)
        return Vector2(info.bounds.width, info.bounds.height)

    def lock(self, lock: bool) -> None:
        """With ``lock`` set, resizing keeps each element's aspect ratio."""
        self._locked = lock

    def size_change(
        self,
        x_magnification: float,
        y_magnification: float,
        old_width: float,
        old_height: float,
    ) -> None:
        """Rescale every element after the screen changed size."""
        for info in self._renders:
            bounds = info.bounds
            if not self._locked:
                bounds.left *= x_magnification
                bounds.top *= y_magnification
                bounds.width *= x_magnification
                bounds.height *= y_magnification
                continue
            rate = bounds.width / bounds.height
            old_ui_width = bounds.width
            old_ui_height = bounds.height
            center = bounds.center
            anchor = nearest_anchor(center.x, center.y, old_width, old_height)
            if bounds.width * x_magnification < bounds.height * y_magnification:
                bounds.width *= x_magnification
                bounds.height = bounds.width / rate
            else:
                bounds.height *= y_magnification
                bounds.width = bounds.height * rate
            anchor_x = bounds.left + anchor.x * old_ui_width
            anchor_y = bounds.top + anchor.y * old_ui_height
            bounds.left = anchor_x * x_magnification - anchor.x * bounds.width
            bounds.top = anchor_y * y_magnification - anchor.y * bounds.height