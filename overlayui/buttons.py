"""Touch-driven buttons: a plain rectangle and one shaped by a pixel mask."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from overlayui.geometry import Box, InputMask
from overlayui.inputsystem import InputMeta, MessageQueue, TouchFilter, TouchType

_EVENTS_PER_FRAME = 2

PointCallback = Callable[[float, float], None]
PlainCallback = Callable[[], None]


class TouchHandler:
    """Receives a button's touch events.

    Each event is forwarded to the matching callback when one is given;
    subclasses may override the methods instead.
    """

    on_down: Optional[PointCallback] = None
    on_up: Optional[PointCallback] = None
    on_press: Optional[PointCallback] = None
    on_enter: Optional[PlainCallback] = None
    on_leave: Optional[PlainCallback] = None

    def __init__(
        self,
        on_down: Optional[PointCallback] = None,
        on_up: Optional[PointCallback] = None,
        on_press: Optional[PointCallback] = None,
        on_enter: Optional[PlainCallback] = None,
        on_leave: Optional[PlainCallback] = None,
    ) -> None:
        self.on_down = on_down
        self.on_up = on_up
        self.on_press = on_press
        self.on_enter = on_enter
        self.on_leave = on_leave

    def touch_down(self, x: float, y: float) -> None:
        """Called when a touch goes down on the button."""
        if self.on_down is not None:
            self.on_down(x, y)

    def touch_up(self, x: float, y: float) -> None:
        """Called when a touch is released."""
        if self.on_up is not None:
            self.on_up(x, y)

    def touch_press(self, x: float, y: float) -> None:
        """Called while a touch is held."""
        if self.on_press is not None:
            self.on_press(x, y)

    def touch_enter(self) -> None:
        """Called when a held touch moves onto the button."""
        if self.on_enter is not None:
            self.on_enter()

    def touch_leave(self) -> None:
        """Called when a held touch moves off the button."""
        if self.on_leave is not None:
            self.on_leave()


class _Button(InputMask):
    def __init__(self, bounds: Box, actions: Optional[Sequence[bool]] = None) -> None:
        flags = tuple(actions) if actions is not None else (False, False, False, False)
        if len(flags) != 4:
            raise ValueError("actions must hold exactly four flags")
        self.bounds = bounds
        bounds.mask = self
        self.accept_input = True
        self.handler: Optional[TouchHandler] = None
        # Flag order: out-of-control up, press without down,
        # out-of-control press, up without down.
        self.touch_filter = TouchFilter(*flags)

    def update(self, queue: MessageQueue) -> None:
        """Handle at most two queued events; a filtered event ends the frame."""
        for meta in queue.pending()[:_EVENTS_PER_FRAME]:
            if not self.touch_filter.filter(meta, self.bounds.width, self.bounds.height):
                return
            self._dispatch(meta)

    def _dispatch(self, meta: InputMeta) -> None:
        handler = self.handler
        if handler is None:
            return
        if meta.type is TouchType.DOWN:
            handler.touch_down(meta.x, meta.y)
        elif meta.type is TouchType.UP:
            handler.touch_up(meta.x, meta.y)
        elif meta.type is TouchType.PRESS:
            handler.touch_press(meta.x, meta.y)
        elif meta.type is TouchType.ENTER:
            handler.touch_enter()
        elif meta.type is TouchType.LEAVE:
            handler.touch_leave()


class EmptyButton(_Button):
    """An invisible button that accepts input over its whole box."""

    def __init__(self, bounds: Box, actions: Optional[Sequence[bool]] = None) -> None:
        super().__init__(bounds, actions)

    def is_hitable(self, x: float, y: float) -> bool:
        return self.accept_input

    def update(self, queue: MessageQueue) -> None:
        super().update(queue)


class MaskButton(_Button):
    """A button whose texture mask decides where it can be hit.

    ``mask`` holds one flag per texture pixel, row by row; a true flag marks a
    pixel that touches pass through. An empty mask makes the whole box solid;
    points that map outside the texture pass through.
    """

    def __init__(
        self,
        bounds: Box,
        mask: Sequence[bool],
        texture_width: int,
        texture_height: int,
        actions: Optional[Sequence[bool]] = None,
    ) -> None:
        if mask and len(mask) != texture_width * texture_height:
            raise ValueError("mask size does not match the texture size")
        super().__init__(bounds, actions)
        self._mask = list(mask)
        self._texture_width = texture_width
        self._texture_height = texture_height

    def _throughable(self, px: int, py: int) -> bool:
        if not self._mask:
            return False
        if not (0 <= px < self._texture_width and 0 <= py < self._texture_height):
            return True
        return self._mask[py * self._texture_width + px]

    def is_hitable(self, x: float, y: float) -> bool:
        if not self.accept_input:
            return False
        local_x = x - self.bounds.left
        local_y = y - self.bounds.top
        px = int(local_x / self.bounds.width * self._texture_width)
        py = int(local_y / self.bounds.height * self._texture_height)
        return not self._throughable(px, py)

    def update(self, queue: MessageQueue) -> None:
        super().update(queue)