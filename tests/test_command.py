import pytest

from catalogue.patterns.command import (
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    Switch,
)


@pytest.fixture
def switch():
    return Switch(Light())


def test_named_commands(switch):
    assert switch.execute_command("ON") == "light turned on"
    assert switch.light.is_on
    assert switch.execute_command("off") == "light turned off"
    assert not switch.light.is_on
    assert len(switch.history) == 2


def test_unknown_command(switch):
    with pytest.raises(ValueError, match="Unexpected command"):
        switch.execute_command("DIM")
    assert switch.history == []


def test_undo_restores_previous_state(switch):
    switch.execute_command("ON")
    switch.execute_command("OFF")
    switch.undo()
    assert switch.light.is_on
    switch.undo()
    assert not switch.light.is_on


def test_undo_without_history(switch):
    with pytest.raises(RuntimeError):
        switch.undo()


def test_macro_undoes_in_reverse_order(switch):
    switch.execute_command("ON")
    macro = MacroCommand([LightOffCommand(switch.light), LightOnCommand(switch.light)])
    assert switch.execute(macro) == "light turned off; light turned on"
    switch.undo()
    assert switch.light.is_on


def test_demo(catalogue):
    result = catalogue.run("command")
    assert result["results"][:4] == [
        "light turned on",
        "light turned off",
        "light turned on",
        "light turned on",
    ]
    assert result["light_on"] is True
