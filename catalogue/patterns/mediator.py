"""
Mediator design pattern.

Theory:
    Defines an object that encapsulates how a set of objects interact. The
    mediator promotes loose coupling by keeping objects from referring to
    each other explicitly, and lets their interaction vary independently.

    Colleagues only talk to the mediator, which makes them easier to reuse.

Participants:
    - ``Mediator``: the interface for communicating with colleagues.
    - ``ParticipantMediator``: the concrete mediator coordinating the
      buttons and the display.
    - ``ButtonView``, ``ButtonSearch``, ``ButtonBook``, ``Display``: the
      colleagues. Each button knows its mediator once registered and routes
      its clicks through it.

Modifications and Strategies:
    Colleagues can notify the mediator with a generic message carrying the
    sender, letting the mediator dispatch on it. The observer pattern is a
    common way to wire colleagues to the mediator.

Attention:
    The mediator centralises control; without care it turns into a
    monolith that knows too much.

Known Uses:
    - Dialog boxes coordinating their widgets.
    - Chat rooms relaying messages between participants.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Button(ABC):
    """A colleague counting its presses."""

    def __init__(self) -> None:
        self.press_count = 0
        self.mediator: Optional["Mediator"] = None

    def press(self) -> None:
        self.press_count += 1

    def click(self) -> str:
        """Ask the mediator to handle a click on this button.

        Raises:
            RuntimeError: If the button is not registered with a mediator
        """
        if self.mediator is None:
            raise RuntimeError(f"{type(self).__name__} is not registered with a mediator")
        return self._notify(self.mediator)

    @abstractmethod
    def _notify(self, mediator: "Mediator") -> str:
        """Forward the click to the matching mediator action."""


class ButtonView(Button):
    def _notify(self, mediator: "Mediator") -> str:
        return mediator.view()


class ButtonSearch(Button):
    def _notify(self, mediator: "Mediator") -> str:
        return mediator.search()


class ButtonBook(Button):
    def _notify(self, mediator: "Mediator") -> str:
        return mediator.book()


class Display:
    """A colleague showing what the mediator tells it."""

    def __init__(self) -> None:
        self.last_shown = ""

    def show(self, text: str) -> str:
        self.last_shown = text
        return text


class Mediator(ABC):
    """The mediator interface."""

    @abstractmethod
    def view(self) -> str:
        """Handle the view button."""

    @abstractmethod
    def search(self) -> str:
        """Handle the search button."""

    @abstractmethod
    def book(self) -> str:
        """Handle the book button."""


class ParticipantMediator(Mediator):
    """Coordinates the three buttons and the display."""

    def __init__(self) -> None:
        self._view: Optional[ButtonView] = None
        self._search: Optional[ButtonSearch] = None
        self._book: Optional[ButtonBook] = None
        self._display: Optional[Display] = None

    def register_view(self, button: ButtonView) -> None:
        button.mediator = self
        self._view = button

    def register_search(self, button: ButtonSearch) -> None:
        button.mediator = self
        self._search = button

    def register_book(self, button: ButtonBook) -> None:
        button.mediator = self
        self._book = button

    def register_display(self, display: Display) -> None:
        self._display = display

    @staticmethod
    def _require(colleague: Any, kind: str) -> Any:
        if colleague is None:
            raise RuntimeError(f"No {kind} registered with mediator")
        return colleague

    def _press_and_show(self, button: Optional[Button], kind: str, text: str) -> str:
        self._require(button, f"{kind} button").press()
        return self._require(self._display, "display").show(text)

    def view(self) -> str:
        return self._press_and_show(self._view, "view", "viewing")

    def search(self) -> str:
        return self._press_and_show(self._search, "search", "searching")

    def book(self) -> str:
        return self._press_and_show(self._book, "book", "booking")

    def get_counts(self) -> Tuple[int, int, int]:
        """Press counts as (view, search, book).

        Raises:
            RuntimeError: If one of the buttons is missing
        """
        return (
            self._require(self._view, "view button").press_count,
            self._require(self._search, "search button").press_count,
            self._require(self._book, "book button").press_count,
        )


@pattern(category=Category.BEHAVIOURAL)
class MediatorDemo(PatternDemo):
    """Clicks buttons that only know the mediator."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Wire the colleagues and click through them.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'shown' texts and the final 'counts'
        """
        view, search, book = ButtonView(), ButtonSearch(), ButtonBook()
        mediator = ParticipantMediator()
        mediator.register_view(view)
        mediator.register_search(search)
        mediator.register_book(book)
        mediator.register_display(Display())

        shown = []
        for button in (view, book, search, view):
            shown.append(button.click())
            self.step(f"{type(button).__name__} clicked: {shown[-1]}", verbose)

        counts = mediator.get_counts()
        self.step(f"Press counts (view, search, book): {counts}", verbose)
        return {"shown": shown, "counts": counts}
