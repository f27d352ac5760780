"""
Abstract factory design pattern.

Theory:
    Provides an interface for creating families of related or dependent
    objects without specifying their concrete classes. It is essentially a
    combination of the factory method pattern and the strategy pattern: the
    client picks one concrete factory and from then on creates every product
    through the abstract interface only.

    Avoiding hard-coded constructors makes the client more flexible, keeps
    products of one family consistent with each other, and makes adding a
    whole new family a matter of adding one factory.

Participants:
    - ``Button``, ``Window``: abstract products created by the factory.
    - ``LinuxButton``, ``OSXButton``, ``LinuxWindow``, ``OSXWindow``:
      concrete products.
    - ``GUIFactory``: the abstract factory declaring one creation method per
      product.
    - ``LinuxFactory``, ``OSXFactory``: concrete factories, each building the
      products of one family.
    - The client: here ``AbstractFactoryDemo``; usually code written by a
      library user that only knows ``GUIFactory``.

Modifications and Strategies:
    Only one factory per family is ever needed, so concrete factories are
    often singletons. The abstract factory may also provide default
    implementations when a sensible default product exists.

Attention:
    Adding a new kind of product means extending the abstract factory and
    every concrete factory. Without a default implementation this breaks all
    existing factories.

Known Uses:
    - Creation of UI controls for different windowing systems.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, Type

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Button(ABC):
    """A generic button."""

    @abstractmethod
    def paint(self) -> str:
        """Return the label painted on the button."""


class Window(ABC):
    """A generic window."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Return the (width, height) of the window."""


class GUIFactory(ABC):
    """Abstract factory creating one family of widgets."""

    @abstractmethod
    def create_button(self) -> Button:
        """Create a button of this family."""

    @abstractmethod
    def create_window(self) -> Window:
        """Create a window of this family."""


class LinuxButton(Button):
    def paint(self) -> str:
        return "LinuxButton"


class LinuxWindow(Window):
    def size(self) -> Tuple[int, int]:
        return (400, 400)


class OSXButton(Button):
    def paint(self) -> str:
        return "OSXButton"


class OSXWindow(Window):
    def size(self) -> Tuple[int, int]:
        return (800, 800)


class LinuxFactory(GUIFactory):
    """Builds Linux widgets."""

    def create_button(self) -> Button:
        return LinuxButton()

    def create_window(self) -> Window:
        return LinuxWindow()


class OSXFactory(GUIFactory):
    """Builds OSX widgets."""

    def create_button(self) -> Button:
        return OSXButton()

    def create_window(self) -> Window:
        return OSXWindow()


FACTORIES: Dict[str, Type[GUIFactory]] = {
    "linux": LinuxFactory,
    "osx": OSXFactory,
}


def factory_for(system: str) -> GUIFactory:
    """Select the factory for an operating system.

    Args:
        system: System name, case-insensitive ("linux" or "osx")

    Returns:
        A concrete GUIFactory

    Raises:
        ValueError: If no factory exists for the system
    """
    try:
        return FACTORIES[system.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"No widget factory for system: {system!r} "
            f"(available: {sorted(FACTORIES)})"
        ) from None


@pattern(category=Category.CREATIONAL)
class AbstractFactoryDemo(PatternDemo):
    """Builds one button and one window with every factory."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Create the widgets of each family through the abstract interface.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary of system -> {'button', 'window'}
        """
        results: Dict[str, Any] = {}

        for system in FACTORIES:
            factory = factory_for(system)
            button = factory.create_button()
            window = factory.create_window()
            results[system] = {"button": button.paint(), "window": window.size()}
            self.step(
                f"{type(factory).__name__} painted {button.paint()} "
                f"in a {window.size()[0]}x{window.size()[1]} window",
                verbose,
            )

        return results
