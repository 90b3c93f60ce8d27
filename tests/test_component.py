from nippon.actor import Actor
from nippon.component import Component


def test_component_keeps_its_actor():
    actor = Actor("owner")
    component = Component(actor)
    assert component.actor is actor


def test_attached_component_is_bound_to_actor():
    actor = Actor("owner")
    component = actor.attach_component(Component)
    assert component.actor is actor
    assert actor.get_component(Component) is component