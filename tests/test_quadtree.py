import random

import pytest

from overlayui.geometry import Box
from overlayui.quadtree import Quadtree

WORLD = Box(0, 0, 1000, 1000)


def _random_boxes(count, seed=7):
    rng = random.Random(seed)
    boxes = []
    for _ in range(count):
        w = rng.uniform(1, 60)
        h = rng.uniform(1, 60)
        boxes.append(Box(rng.uniform(0, 1000 - w), rng.uniform(0, 1000 - h), w, h))
    return boxes


def _build(boxes):
    tree = Quadtree(WORLD, boxes.__getitem__)
    for index in range(len(boxes)):
        tree.add(index)
    return tree


def test_box_property_returns_world():
    tree = Quadtree(WORLD, lambda v: v)
    assert tree.box == WORLD


def test_query_whole_world_returns_everything():
    boxes = _random_boxes(300)
    tree = _build(boxes)
    assert sorted(tree.query(WORLD)) == list(range(len(boxes)))


@pytest.mark.parametrize(
    "query", [Box(100, 100, 200, 200), Box(500, 0, 10, 1000), Box(0, 0, 1, 1)]
)
def test_query_matches_exhaustive_search(query):
    boxes = _random_boxes(300)
    tree = _build(boxes)
    expected = {i for i, b in enumerate(boxes) if query.intersects(b)}
    result = tree.query(query)
    assert len(result) == len(set(result))
    assert set(result) == expected


def test_query_outside_world_is_empty():
    tree = _build(_random_boxes(50))
    assert tree.query(Box(2000, 2000, 10, 10)) == []


def test_find_all_intersections_matches_exhaustive_search():
    boxes = _random_boxes(250)
    tree = _build(boxes)
    expected = {
        frozenset((i, j))
        for i in range(len(boxes))
        for j in range(i)
        if boxes[i].intersects(boxes[j])
    }
    pairs = tree.find_all_intersections()
    as_sets = [frozenset(p) for p in pairs]
    assert len(as_sets) == len(set(as_sets))
    assert set(as_sets) == expected


def test_remove_drops_values_from_queries():
    boxes = _random_boxes(200)
    tree = _build(boxes)
    removed = set(range(0, 200, 3))
    for index in removed:
        tree.remove(index)
    assert set(tree.query(WORLD)) == set(range(200)) - removed


def test_remove_everything_then_readd():
    boxes = _random_boxes(100)
    tree = _build(boxes)
    for index in range(100):
        tree.remove(index)
    assert tree.query(WORLD) == []
    tree.add(5)
    assert tree.query(WORLD) == [5]


def test_remove_missing_value_raises():
    boxes = _random_boxes(10)
    tree = Quadtree(WORLD, boxes.__getitem__)
    tree.add(0)
    with pytest.raises(ValueError):
        tree.remove(1)


def test_add_outside_world_raises():
    tree = Quadtree(WORLD, lambda b: b)
    with pytest.raises(ValueError):
        tree.add(Box(990, 990, 20, 20))


def test_custom_equality_is_used_for_removal():
    boxes = {"a": Box(1, 1, 5, 5), "b": Box(10, 10, 5, 5)}
    tree = Quadtree(WORLD, lambda key: boxes[key.lower()], lambda x, y: x.lower() == y.lower())
    tree.add("a")
    tree.add("b")
    tree.remove("A")
    assert tree.query(WORLD) == ["b"]


def test_many_identical_boxes_survive_depth_limit():
    same = Box(1, 1, 2, 2)
    tree = Quadtree(WORLD, lambda _: same)
    for index in range(100):
        tree.add(index)
    assert sorted(tree.query(same)) == list(range(100))