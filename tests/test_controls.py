import pytest

from gravdash.controls import Action, Controls, KeyboardControls


class FakeKeyboard:
    def __init__(self, held=(), initial=(), clicked=()):
        self.held = set(held)
        self.initial = set(initial)
        self.clicked = set(clicked)

    def is_key_held(self, key):
        return key in self.held

    def is_key_on_initial_click(self, key):
        return key in self.initial

    def is_key_clicked(self, key):
        return key in self.clicked


def test_controls_is_abstract():
    with pytest.raises(TypeError):
        Controls()


def test_unbound_action_reports_nothing():
    controls = KeyboardControls(FakeKeyboard(held={"space"}))
    assert controls.get_action(Action.JUMP) is None
    assert controls.is_action_held(Action.JUMP) is False


def test_bindings_from_constructor():
    kb = FakeKeyboard(held={"left"}, initial={"space"}, clicked={"enter"})
    controls = KeyboardControls(
        kb, {Action.LEFT: "left", Action.JUMP: "space", Action.SELECT: "enter"}
    )
    assert controls.is_action_held(Action.LEFT) is True
    assert controls.is_action_held(Action.JUMP) is False
    assert controls.is_action_on_initial_click(Action.JUMP) is True
    assert controls.is_action_clicked(Action.SELECT) is True
    assert controls.is_action_clicked(Action.LEFT) is False


def test_set_action_rebinds():
    kb = FakeKeyboard(held={"d"})
    controls = KeyboardControls(kb, {Action.RIGHT: "right"})
    assert controls.is_action_held(Action.RIGHT) is False
    controls.set_action(Action.RIGHT, "d")
    assert controls.get_action(Action.RIGHT) == "d"
    assert controls.is_action_held(Action.RIGHT) is True


def test_invalid_action_rejected():
    controls = KeyboardControls(FakeKeyboard())
    with pytest.raises(ValueError):
        controls.set_action("fly", "f")