import json
from datetime import timedelta

import pytest

from mondrian.animation import AnimationType, Rectangle
from mondrian.direction import Direction
from mondrian.json_tree import JsonLeaf, JsonTree
from mondrian.tiled_tree import Space, TiledTree, new_rects, split_rect

GAP = 12
ROOT = Rectangle(0, 0, 1000, 800)


@pytest.fixture
def space():
    s = Space()
    s.place("a", ROOT, False)
    return s


@pytest.fixture
def tree():
    return TiledTree("a", GAP)


def test_new_rects_right_halves_width():
    original, new = new_rects(Direction.RIGHT, ROOT, GAP)
    assert original.x == ROOT.x
    assert original.width == new.width
    assert new.x == original.x + original.width + GAP
    assert original.height == new.height == ROOT.height
    assert new.x + new.width <= ROOT.x + ROOT.width


def test_new_rects_left_puts_new_first():
    original, new = new_rects(Direction.LEFT, ROOT, GAP)
    assert new.x == ROOT.x
    assert original.x == new.x + new.width + GAP


def test_new_rects_vertical():
    original, new = new_rects(Direction.DOWN, ROOT, GAP)
    assert original.y == ROOT.y
    assert new.y == original.y + original.height + GAP
    assert original.width == new.width == ROOT.width


def test_split_rect_offset_moves_divider():
    left, right = split_rect(ROOT, Direction.RIGHT, (50, 0), GAP)
    assert left.width - right.width == 100
    assert right.x == left.x + left.width + GAP
    assert left.height == right.height == ROOT.height


def test_split_rect_vertical_zero_offset():
    top, bottom = split_rect(ROOT, Direction.UP, (0, 0), GAP)
    assert top.height == bottom.height
    assert bottom.y == top.y + top.height + GAP
    assert top.width == ROOT.width


def test_insert_window_right(tree, space):
    assert tree.insert_window("a", "b", Direction.RIGHT, space)
    assert tree.get_count() == 2
    a = space.element_geometry("a")
    b = space.element_geometry("b")
    assert a.x == ROOT.x
    assert b.x == a.x + a.width + GAP
    assert a.width == b.width
    assert space.activated == "b"
    assert tree.root_rect(space) == ROOT


def test_insert_window_queues_animations(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    first, second = space.take_animations()
    b = space.element_geometry("b")
    assert first.window == "a"
    assert first.source == ROOT
    assert first.target == space.element_geometry("a")
    assert first.animation_type is AnimationType.EASE_IN_OUT_QUAD
    assert first.duration == timedelta(milliseconds=30)
    assert second.window == "b"
    assert second.animation_type is AnimationType.OVERSHOOT_BOUNCE
    assert second.target == b
    assert second.source == Rectangle(b.x + b.width, b.y, b.width, b.height)
    assert space.take_animations() == []


def test_insert_window_unknown_target(tree, space):
    assert tree.insert_window("zzz", "b", Direction.RIGHT, space) is False
    assert tree.get_count() == 1


def test_insert_window_defaults_to_first(tree, space):
    assert tree.insert_window(None, "b", Direction.DOWN, space)
    assert tree.first_window() == "a"
    assert space.element_geometry("b").y > space.element_geometry("a").y


def test_insert_sets_neighbours(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    assert tree.neighbor_graph.get("a", Direction.RIGHT) == ["b"]
    assert tree.neighbor_graph.get("b", Direction.LEFT) == ["a"]


def test_remove_leaf_sibling_restores(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    removed, focus = tree.remove("b", "b", space)
    assert removed is True
    assert focus == "a"
    assert tree.get_count() == 1
    assert space.element_geometry("a") == ROOT
    assert tree.find_node("b") is None


def test_remove_last_window(tree, space):
    assert tree.remove("a", "a", space) == (True, None)
    assert tree.is_empty()
    assert tree.first_window() is None
    assert tree.root_rect(space) is None


def test_remove_unknown(tree, space):
    assert tree.remove("zzz", "a", space) == (False, "a")


def test_remove_with_split_sibling(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    tree.insert_window("b", "c", Direction.DOWN, space)
    removed, focus = tree.remove("a", "a", space)
    assert removed
    assert focus == "b"
    b = space.element_geometry("b")
    c = space.element_geometry("c")
    assert b.width == c.width == ROOT.width
    assert b.y == ROOT.y
    assert c.y == b.y + b.height + GAP
    assert tree.root_rect(space) == ROOT


def test_invert_window(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    tree.invert_window("a", space)
    a = space.element_geometry("a")
    b = space.element_geometry("b")
    assert a.x == b.x == ROOT.x
    assert a.width == ROOT.width
    assert b.y == a.y + a.height + GAP


def test_invert_single_window_is_noop(tree, space):
    tree.invert_window("a", space)
    assert space.element_geometry("a") == ROOT
    assert space.take_animations() == []


def test_resize(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    tree.resize("a", (50, 0), space)
    a = space.element_geometry("a")
    b = space.element_geometry("b")
    assert a.width - b.width == 100
    assert b.x == a.x + a.width + GAP


def test_exchange(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    a_before = space.element_geometry("a")
    b_before = space.element_geometry("b")
    space.take_animations()
    tree.exchange("a", Direction.RIGHT, space)
    assert space.element_geometry("a") == b_before
    assert space.element_geometry("b") == a_before
    assert tree.first_window() == "b"
    assert tree.neighbor_graph.get("b", Direction.RIGHT) == ["a"]
    animations = space.take_animations()
    assert [(r.window, r.source, r.target) for r in animations] == [
        ("b", b_before, a_before),
        ("a", a_before, b_before),
    ]


def test_exchange_without_neighbour(tree, space):
    tree.insert_window("a", "b", Direction.RIGHT, space)
    space.take_animations()
    before = space.element_geometry("a")
    tree.exchange("a", Direction.LEFT, space)
    assert space.element_geometry("a") == before
    assert space.take_animations() == []


def test_modify_unmapped_window_raises(tree):
    with pytest.raises(LookupError):
        tree.modify(tree.find_node("a"), ROOT, Space())


def test_from_json(tree, tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"tiled_tree": {"type": "Leaf", "app_id": "foot"}}))
    assert tree.from_json(path) == JsonTree(JsonLeaf("foot"))
    assert tree.from_json(tmp_path / "missing.json") is None