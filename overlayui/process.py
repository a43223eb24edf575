"""Per-frame update loop over the UI elements of one screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from overlayui.inputsystem import MessageQueue

log = logging.getLogger(__name__)


@dataclass
class UpdateInfo:
    """What an element gets each frame: its event queue and a render switch."""

    queue: MessageQueue
    enable_render: bool = True


class NormalProcess:
    """Drives UI elements through start, update/render and destroy.

    Elements provide ``start()``, ``update(queue)``, ``render()`` and
    ``destroy()``. Call order: ``give_ui`` for each element, ``init_vars``,
    ``begin``, ``update`` every frame, ``destroy``.
    """

    def __init__(self) -> None:
        self._uis: List[Any] = []
        self._infos: List[UpdateInfo] = []

    def give_ui(self, ui: Any) -> int:
        """Add an element and return its index."""
        self._uis.append(ui)
        return len(self._uis) - 1

    @property
    def update_infos(self) -> Tuple[UpdateInfo, ...]:
        return tuple(self._infos)

    def init_vars(self, queues: Sequence[MessageQueue]) -> None:
        """Bind each element to its event queue; call after all elements are added."""
        if len(queues) < len(self._uis):
            raise IndexError("fewer message queues than UI elements")
        self._infos = [UpdateInfo(queue) for queue, _ in zip(queues, self._uis)]

    def begin(self) -> None:
        for ui in self._uis:
            ui.start()

    def update(self, index: int) -> bool:
        """Update and render element ``index``; False if the element failed."""
        if not 0 <= index < len(self._uis):
            raise IndexError(f"no UI element at index {index}")
        info = self._infos[index]
        try:
            self._uis[index].update(info.queue)
            if info.enable_render:
                self._uis[index].render()
        except Exception:
            log.exception("UI element %d failed to update", index)
            return False
        return True

    def destroy(self) -> None:
        """Destroy every element and forget them."""
        for ui in self._uis:
            ui.destroy()
        self._uis.clear()
        self._infos.clear()

    def __len__(self) -> int:
        return len(self._uis)