"""Routing of raw touch input to the UI elements whose boxes it hits."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from overlayui.geometry import Box
from overlayui.pool import ObjectPool

T = TypeVar("T")

MapPoint = Callable[[float, float], Optional[Tuple[float, float]]]


class TouchType(enum.Enum):
    """Kinds of touch event delivered to UI elements."""

    DOWN = enum.auto()
    UP = enum.auto()
    PRESS = enum.auto()
    ENTER = enum.auto()
    LEAVE = enum.auto()


@dataclass
class InputMeta:
    """One touch point together with the UI elements it is bound to.

    ``master`` is the element the touch went down on and ``temp_master`` the
    element it currently rests over; ``None`` means empty space.
    """

    type: TouchType = TouchType.DOWN
    x: float = 0.0
    y: float = 0.0
    master: Optional[int] = None
    temp_master: Optional[int] = None

    def copy_from(self, other: InputMeta) -> None:
        self.type = other.type
        self.x = other.x
        self.y = other.y
        self.master = other.master
        self.temp_master = other.temp_master


@dataclass
class MessageQueue:
    """Per-element queue of events; storage is reused between frames."""

    data: List[InputMeta] = field(default_factory=list)
    usable: int = 0

    def push(self, meta: InputMeta) -> None:
        if len(self.data) <= self.usable:
            self.data.append(meta)
        else:
            self.data[self.usable] = meta
        self.usable += 1

    def pending(self) -> List[InputMeta]:
        """Events queued since the last reset, oldest first."""
        return self.data[: self.usable]


@dataclass
class TouchFilter:
    """Decides which touch events a control reacts to.

    A down inside the control always counts. Releases and presses outside the
    control, or without a preceding down, count only when the matching
    ``accept_*`` flag is set.
    """

    accept_out_up: bool = False
    accept_nodown_press: bool = False
    accept_out_press: bool = False
    accept_nodown_up: bool = False
    down: bool = False

    def filter(self, meta: InputMeta, width: float, height: float) -> bool:
        inside = 0 < meta.x < width and 0 < meta.y < height
        result = True
        if meta.type is TouchType.DOWN:
            self.down = True
        elif meta.type is TouchType.UP:
            if not self.down:
                result = result and self.accept_nodown_up
            if not inside:
                result = result and self.accept_out_up
            self.down = True
        elif meta.type is TouchType.PRESS:
            if not self.down:
                result = result and self.accept_nodown_press
            if not inside:
                result = result and self.accept_out_press
        return result


class InputSource:
    """Supplies raw touch points.

    The base source hands out the points it was given, or ``None`` when it
    holds none. Implementations keep the same ``InputMeta`` objects alive
    across frames so that the element bindings stored on them persist.
    """

    touches: Optional[List[InputMeta]] = None

    def __init__(self, touches: Optional[Sequence[InputMeta]] = None) -> None:
        self.touches = list(touches) if touches is not None else None

    def get_positions(self) -> Optional[Sequence[InputMeta]]:
        """Return the current touch points, or ``None`` if input is unavailable."""
        return self.touches


class PriorityIterate(Generic[T]):
    """Hit testing in reverse insertion order: later items lie on top."""

    def __init__(self, get_box: Callable[[T], Optional[Box]]) -> None:
        self._get_box = get_box
        self._items: List[Tuple[T, Optional[Box]]] = []

    def add(self, item: T) -> None:
        self._items.append((item, self._get_box(item)))

    def query(self, x: float, y: float) -> Optional[T]:
        """Return the topmost item whose box and mask accept the point."""
        for item, box in reversed(self._items):
            if box is None or not box.contains_point(x, y):
                continue
            if box.mask is None or box.mask.is_hitable(x, y):
                return item
        return None


class InputSystem:
    """Turns raw touch points into per-element DOWN/UP/PRESS/ENTER/LEAVE events."""

    def __init__(
        self,
        source: InputSource,
        width: float,
        height: float,
        map_point: Optional[MapPoint] = None,
    ) -> None:
        self._source = source
        self._width = width
        self._height = height
        self._map_point: MapPoint = map_point if map_point is not None else self._screen_map
        self._boxes: List[Optional[Box]] = []
        self._priority: PriorityIterate[int] = PriorityIterate(self._box_at)
        self._pool: ObjectPool[InputMeta] = ObjectPool(creator=InputMeta)

    def _screen_map(self, x: float, y: float) -> Optional[Tuple[float, float]]:
        if 0 <= x <= self._width and 0 <= y <= self._height:
            return x, y
        return None

    def _box_at(self, index: int) -> Optional[Box]:
        return self._boxes[index] if index < len(self._boxes) else None

    def add_bounds(self, box: Box, index: int) -> None:
        """Register the box of element ``index``; indices must not skip ahead."""
        if index > len(self._boxes):
            raise IndexError(f"element index {index} skips past {len(self._boxes)}")
        if index == len(self._boxes):
            self._boxes.append(None)
        self._boxes[index] = box
        self._priority.add(index)

    def update(self, messages: List[MessageQueue]) -> bool:
        """Read the source and queue events; False when there was nothing to read."""
        metas = self._source.get_positions()
        if not metas:
            return False
        for meta in metas:
            mapped = self._map_point(meta.x, meta.y)
            if mapped is None:
                continue
            meta.x, meta.y = mapped
            index = self._priority.query(meta.x, meta.y)
            self._route(meta, index, messages)
        return True

    def clear_state(self, index: int, messages: List[MessageQueue]) -> None:
        """Drop the events consumed by element ``index`` and recycle copies."""
        messages[index].usable = 0
        self._pool.release_all()

    def size_change(
        self,
        x_magnification: float,
        y_magnification: float,
        new_width: float,
        new_height: float,
    ) -> None:
        """Track the new screen size; element boxes are read live."""
        self._width = new_width
        self._height = new_height

    def _give(self, meta: InputMeta, index: int, messages: List[MessageQueue]) -> None:
        box = self._boxes[index]
        meta.x -= box.left
        meta.y -= box.top
        messages[index].push(meta)

    def _give_copy(
        self,
        meta: InputMeta,
        kind: TouchType,
        index: int,
        messages: List[MessageQueue],
    ) -> None:
        copy = self._pool.acquire()
        copy.copy_from(meta)
        copy.type = kind
        self._give(copy, index, messages)

    def _route(
        self, meta: InputMeta, index: Optional[int], messages: List[MessageQueue]
    ) -> None:
        if meta.type is TouchType.DOWN:
            meta.master = index
            meta.temp_master = index
            if index is not None:
                self._give(meta, index, messages)
        elif meta.type is TouchType.PRESS:
            if index != meta.temp_master:
                if meta.temp_master is not None:
                    self._give_copy(meta, TouchType.LEAVE, meta.temp_master, messages)
                if index is not None:
                    self._give_copy(meta, TouchType.ENTER, index, messages)
                meta.temp_master = index
            if meta.master is not None:
                self._give_copy(meta, TouchType.PRESS, meta.master, messages)
            if index != meta.master and index is not None:
                self._give_copy(meta, TouchType.PRESS, index, messages)
        elif meta.type is TouchType.UP:
            if meta.master is not None:
                self._give(meta, meta.master, messages)
            if meta.master != index and index is not None:
                self._give_copy(meta, TouchType.UP, index, messages)