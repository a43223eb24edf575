"""Region quadtree over values that each occupy a box."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from overlayui.geometry import Box, Vector2

T = TypeVar("T")

_THRESHOLD = 16
_MAX_DEPTH = 8


@dataclass
class _Node(Generic[T]):
    children: Optional[List[_Node[T]]] = None
    values: List[T] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.children is None


class Quadtree(Generic[T]):
    """Stores values by the box ``get_box`` returns for them."""

    def __init__(
        self,
        box: Box,
        get_box: Callable[[T], Box],
        equal: Optional[Callable[[T, T], bool]] = None,
    ) -> None:
        self._box = box
        self._root: _Node[T] = _Node()
        self._get_box = get_box
        self._equal = equal if equal is not None else operator.eq

    @property
    def box(self) -> Box:
        return self._box

    def add(self, value: T) -> None:
        if not self._box.contains(self._get_box(value)):
            raise ValueError("value's box lies outside the quadtree")
        self._add(self._root, 0, self._box, value)

    def remove(self, value: T) -> None:
        if not self._box.contains(self._get_box(value)):
            raise ValueError("value's box lies outside the quadtree")
        self._remove(self._root, self._box, value)

    def query(self, box: Box) -> List[T]:
        """Return every value whose box intersects ``box``."""
        found: List[T] = []
        if box.intersects(self._box):
            self._query(self._root, self._box, box, found)
        return found

    def find_all_intersections(self) -> List[Tuple[T, T]]:
        """Return every pair of values whose boxes intersect, each pair once."""
        pairs: List[Tuple[T, T]] = []
        self._find_all_intersections(self._root, pairs)
        return pairs

    @staticmethod
    def _compute_box(box: Box, quadrant: int) -> Box:
        origin = box.top_left
        child = box.size / 2
        if quadrant == 0:
            return Box.from_vectors(origin, child)
        if quadrant == 1:
            return Box.from_vectors(Vector2(origin.x + child.x, origin.y), child)
        if quadrant == 2:
            return Box.from_vectors(Vector2(origin.x, origin.y + child.y), child)
        if quadrant == 3:
            return Box.from_vectors(origin + child, child)
        raise ValueError(f"invalid child index {quadrant}")

    @staticmethod
    def _quadrant(node_box: Box, value_box: Box) -> int:
        center = node_box.center
        if value_box.right < center.x:
            if value_box.bottom < center.y:
                return 0
            if value_box.top >= center.y:
                return 2
            return -1
        if value_box.left >= center.x:
            if value_box.bottom < center.y:
                return 1
            if value_box.top >= center.y:
                return 3
            return -1
        return -1

    def _add(self, node: _Node[T], depth: int, box: Box, value: T) -> None:
        if node.is_leaf:
            if depth >= _MAX_DEPTH or len(node.values) < _THRESHOLD:
                node.values.append(value)
            else:
                self._split(node, box)
                self._add(node, depth, box, value)
            return
        quadrant = self._quadrant(box, self._get_box(value))
        if quadrant != -1:
            self._add(
                node.children[quadrant],
                depth + 1,
                self._compute_box(box, quadrant),
                value,
            )
        else:
            node.values.append(value)

    def _split(self, node: _Node[T], box: Box) -> None:
        node.children = [_Node() for _ in range(4)]
        kept: List[T] = []
        for value in node.values:
            quadrant = self._quadrant(box, self._get_box(value))
            if quadrant != -1:
                node.children[quadrant].values.append(value)
            else:
                kept.append(value)
        node.values = kept

    def _remove(self, node: _Node[T], box: Box, value: T) -> bool:
        if node.is_leaf:
            self._remove_value(node, value)
            return True
        quadrant = self._quadrant(box, self._get_box(value))
        if quadrant != -1:
            if self._remove(
                node.children[quadrant], self._compute_box(box, quadrant), value
            ):
                return self._try_merge(node)
        else:
            self._remove_value(node, value)
        return False

    def _remove_value(self, node: _Node[T], value: T) -> None:
        for position, candidate in enumerate(node.values):
            if self._equal(value, candidate):
                node.values[position] = node.values[-1]
                node.values.pop()
                return
        raise ValueError("value is not present in the quadtree")

    def _try_merge(self, node: _Node[T]) -> bool:
        total = len(node.values)
        for child in node.children:
            if not child.is_leaf:
                return False
            total += len(child.values)
        if total > _THRESHOLD:
            return False
        for child in node.children:
            node.values.extend(child.values)
        node.children = None
        return True

    def _query(self, node: _Node[T], box: Box, query_box: Box, found: List[T]) -> None:
        found.extend(v for v in node.values if query_box.intersects(self._get_box(v)))
        if node.is_leaf:
            return
        for quadrant, child in enumerate(node.children):
            child_box = self._compute_box(box, quadrant)
            if query_box.intersects(child_box):
                self._query(child, child_box, query_box, found)

    def _find_all_intersections(
        self, node: _Node[T], pairs: List[Tuple[T, T]]
    ) -> None:
        for i, value in enumerate(node.values):
            value_box = self._get_box(value)
            for other in node.values[:i]:
                if value_box.intersects(self._get_box(other)):
                    pairs.append((value, other))
        if node.is_leaf:
            return
        for child in node.children:
            for value in node.values:
                self._find_in_descendants(child, value, pairs)
        for child in node.children:
            self._find_all_intersections(child, pairs)

    def _find_in_descendants(
        self, node: _Node[T], value: T, pairs: List[Tuple[T, T]]
    ) -> None:
        value_box = self._get_box(value)
        for other in node.values:
            if value_box.intersects(self._get_box(other)):
                pairs.append((value, other))
        if not node.is_leaf:
            for child in node.children:
                self._find_in_descendants(child, value, pairs)