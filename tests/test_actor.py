import pytest

from nippon.actor import Actor
from nippon.component import Component
from nippon.transform import Transform


class Tag(Component):
    def __init__(self, actor, label):
        super().__init__(actor)
        self.label = label


def test_actor_has_transform():
    actor = Actor("hero")
    assert actor.name == "hero"
    assert actor.get_component(Transform) is actor.transform
    assert actor.transform.actor is actor


def test_attach_returns_existing_component():
    actor = Actor("a")
    first = actor.attach_component(Tag, "one")
    second = actor.attach_component(Tag, "two")
    assert first is second
    assert second.label == "one"


def test_missing_component_is_none():
    assert Actor("a").get_component(Tag) is None


def test_children_and_flags():
    parent = Actor("p")
    child = Actor("c")
    assert parent.is_child
    assert not parent.has_children
    parent.add_child(child)
    assert list(parent) == [child]
    assert parent.has_children
    assert not parent.is_child
    parent.remove_child(child)
    assert list(parent) == []


def test_remove_unknown_child_raises():
    with pytest.raises(ValueError):
        Actor("p").remove_child(Actor("stranger"))


def test_parent_flag():
    parent, child = Actor("p"), Actor("c")
    assert child.has_no_parent
    child.parent = parent
    assert not child.has_no_parent


def test_components_view_is_read_only():
    actor = Actor("a")
    with pytest.raises(TypeError):
        actor.components[Tag] = Tag(actor, "x")
    assert set(actor.components) == {Transform}