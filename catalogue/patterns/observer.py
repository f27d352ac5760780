"""
Observer design pattern.

Theory:
    Defines a one-to-many dependency between objects so that when the
    subject changes state, all its dependents (observers) are notified and
    updated automatically. Subject and observers stay loosely coupled: the
    subject only knows that its observers implement ``update``.

    Separating application data from its representation is the usual goal,
    as in Model-View-Controller. It is a form of publish-subscribe.

Participants:
    - ``Observable``: the subject interface, holding the list of observers
      and the operations to add and remove them.
    - ``Observer``: declares ``update``, through which observers get told
      about changes.
    - ``Model``: the concrete subject whose state interests the observers.
    - ``View``: a concrete observer.

Modifications and Strategies:
    - Push model: ``update`` carries the changed data, as implemented here.
      In the pull model observers query the subject after the notification.
    - Change managers delay notifications so that several changes are fused
      into one update.
    - Observers can register for specific kinds of events only.
    - A mediator can sit between many subjects and observers.

Attention:
    A simple operation can cascade into many unexpected updates. Notifying
    only on actual state changes, or only during idle times, keeps this in
    check. Cyclic dependencies lead to endless chains of updates.

Known Uses:
    - Colour pickers.
    - GUI event handling.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Observer(ABC):
    """Interface of the dependents."""

    @abstractmethod
    def update(self, data: Any) -> str:
        """React to a change of the subject; returns a description of it."""


class Observable:
    """Subject keeping its observers in registration order."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def register_observer(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: Observer) -> bool:
        """Remove an observer.

        Returns:
            True if it was registered, False otherwise
        """
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    def notify_observers(self, data: Any) -> List[str]:
        return [observer.update(data) for observer in self._observers]


class View(Observer):
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, data: Any) -> str:
        return f"View {self.name} got data: {data}"


class Model(Observable):
    """The concrete subject."""

    def __init__(self, data: Any = 0) -> None:
        super().__init__()
        self.data = data

    def set_data(self, data: Any) -> List[str]:
        self.data = data
        return self.notify_observers(data)


@pattern(category=Category.BEHAVIOURAL)
class ObserverDemo(PatternDemo):
    """Three views following one model."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Update the model, detach a view and update again.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'updates' of each round
        """
        model = Model()
        views = [View(f"view_{i}") for i in range(3)]
        for view in views:
            model.register_observer(view)

        updates = []
        for data in (24, 100):
            updates.append(model.set_data(data))
            for line in updates[-1]:
                self.step(line, verbose)

        model.unregister_observer(views[1])
        self.step("view_1 unregistered", verbose)
        updates.append(model.set_data(1130113))
        for line in updates[-1]:
            self.step(line, verbose)

        return {"updates": updates}
