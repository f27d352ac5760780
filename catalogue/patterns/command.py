"""
Command design pattern.

Theory:
    Encapsulates a request as an object, thereby letting clients be
    parameterised with different requests, queue or log requests, and
    support undoable operations. The object invoking an operation is
    decoupled from the one that knows how to perform it.

    Undo is supported by letting ``execute()`` keep whatever is needed to
    reverse its effect and adding an ``undo()`` operation. The invoker keeps
    a history of issued commands; prototypes can be used to copy commands
    into that history. Rolling back the history of a failed sequence of
    commands gives transactional behaviour.

Participants:
    - ``Command``: declares ``execute()`` and ``undo()``.
    - ``LightOnCommand``, ``LightOffCommand``: concrete commands binding a
      receiver to an action.
    - ``MacroCommand``: a command made of a sequence of commands.
    - ``Switch``: the invoker. It decides when commands run and keeps the
      history used for undo.
    - ``Light``: the receiver, which knows how to carry out the request.

Modifications and Strategies:
    - Macro commands execute a sequence of elementary commands and undo them
      in reverse order.
    - Callbacks store commands to be run later; the command's lifetime is
      then independent of the original request.
    - Wizards collect changes and only apply them on ``finish()``.
    - Undo can group several commands into one step, as text editors do with
      a burst of key presses.

Known Uses:
    - Undo/redo stacks.
    - Wizards.
    - Logging requests for re-execution and transactional operations.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Dict, List, Sequence

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Light:
    """The receiver."""

    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return "light turned on"

    def turn_off(self) -> str:
        self.is_on = False
        return "light turned off"


class Command(ABC):
    """The command interface."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the request."""

    @abstractmethod
    def undo(self) -> str:
        """Reverse the effect of the last execute()."""


class LightOnCommand(Command):
    def __init__(self, light: Light) -> None:
        self.light = light
        self._was_on = False

    def execute(self) -> str:
        self._was_on = self.light.is_on
        return self.light.turn_on()

    def undo(self) -> str:
        return self.light.turn_on() if self._was_on else self.light.turn_off()


class LightOffCommand(Command):
    def __init__(self, light: Light) -> None:
        self.light = light
        self._was_on = False

    def execute(self) -> str:
        self._was_on = self.light.is_on
        return self.light.turn_off()

    def undo(self) -> str:
        return self.light.turn_on() if self._was_on else self.light.turn_off()


class MacroCommand(Command):
    """A sequence of commands run as one."""

    def __init__(self, commands: Sequence[Command]) -> None:
        self.commands = list(commands)

    def execute(self) -> str:
        return "; ".join(command.execute() for command in self.commands)

    def undo(self) -> str:
        return "; ".join(command.undo() for command in reversed(self.commands))


class Switch:
    """The invoker, keeping a history of executed commands."""

    def __init__(self, light: Light | None = None) -> None:
        self.light = light or Light()
        self._history: Deque[Command] = deque()

    @property
    def history(self) -> List[Command]:
        return list(self._history)

    def execute(self, command: Command) -> str:
        result = command.execute()
        self._history.append(command)
        return result

    def execute_command(self, cmd: str) -> str:
        """Turn a command name into a command object and execute it.

        Args:
            cmd: "ON" or "OFF", case-insensitive

        Returns:
            The receiver's response

        Raises:
            ValueError: If the command name is unknown
        """
        name = cmd.strip().upper()
        if name == "ON":
            command: Command = LightOnCommand(self.light)
        elif name == "OFF":
            command = LightOffCommand(self.light)
        else:
            raise ValueError(f"Unexpected command: {cmd!r}")
        return self.execute(command)

    def undo(self) -> str:
        """Undo the most recent command.

        Raises:
            RuntimeError: If there is nothing to undo
        """
        if not self._history:
            raise RuntimeError("No command to undo")
        return self._history.pop().undo()


@pattern(category=Category.BEHAVIOURAL)
class CommandDemo(PatternDemo):
    """Flips a light through a switch, then undoes the last steps."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Run named commands, a macro, and two undos.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with 'results', 'undone' and the final 'light_on' state
        """
        switch = Switch()
        results: List[str] = []

        for name in ("ON", "OFF", "ON", "ON"):
            results.append(switch.execute_command(name))
            self.step(f"{name}: {results[-1]}", verbose)

        blink = MacroCommand([LightOffCommand(switch.light), LightOnCommand(switch.light)])
        results.append(switch.execute(blink))
        self.step(f"Macro: {results[-1]}", verbose)

        undone = [switch.undo(), switch.undo()]
        self.step(f"Undone: {undone}", verbose)

        return {"results": results, "undone": undone, "light_on": switch.light.is_on}
