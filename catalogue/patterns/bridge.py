"""
Bridge design pattern.

Theory:
    Decouples an abstraction from its implementation so that the two can
    vary independently. There are two layers: an abstraction that clients
    use and an implementor interface that the abstraction delegates to. An
    object receives its implementor when it is built, new implementors can
    then be added independently of how the abstraction evolves, and
    subclassing the abstraction never needs to know which implementor is in
    use.

Participants:
    - ``DrawingAPI``: the implementor interface. It need not match the
      abstraction's interface; usually it offers primitive operations and the
      abstraction builds higher-level operations on top of them.
    - ``DrawingRed``, ``DrawingBlue``: concrete implementors.
    - ``Shape``: the abstraction, holding a reference to an implementor.
    - ``ColouredShape``: a refined abstraction.

Modifications and Strategies:
    The abstraction should do as much as possible in terms of the
    implementor's primitives (like ``draw()`` below) without knowing the
    concrete implementor.

    Clients may switch the implementor at runtime, which matters when the
    right implementor is not known at construction time. A default
    implementor can be used until then.

    Implementors can be shared between several abstractions to reduce the
    number of implementor objects.

Known Uses:
    - libg++ uses it for some of its common data structures.
    - GUI toolkits separating widgets from platform window systems.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class DrawingAPI(ABC):
    """The implementor interface."""

    @abstractmethod
    def draw_circle(self) -> str:
        """Draw a circle."""

    @abstractmethod
    def draw_rectangle(self) -> str:
        """Draw a rectangle."""


class DrawingRed(DrawingAPI):
    def draw_circle(self) -> str:
        return "red circle"

    def draw_rectangle(self) -> str:
        return "red rectangle"


class DrawingBlue(DrawingAPI):
    def draw_circle(self) -> str:
        return "blue circle"

    def draw_rectangle(self) -> str:
        return "blue rectangle"


class Shape(ABC):
    """The abstraction."""

    def __init__(self, api: DrawingAPI) -> None:
        self.api = api

    @abstractmethod
    def draw_circle(self) -> str:
        """Draw the circle part of the shape."""

    @abstractmethod
    def draw_rectangle(self) -> str:
        """Draw the rectangle part of the shape."""

    def draw(self) -> str:
        return f"Shape drawing a {self.draw_circle()} and a {self.draw_rectangle()}"


class ColouredShape(Shape):
    """A refined abstraction delegating to its drawing API."""

    def draw_circle(self) -> str:
        return self.api.draw_circle()

    def draw_rectangle(self) -> str:
        return self.api.draw_rectangle()


@pattern(category=Category.STRUCTURAL)
class BridgeDemo(PatternDemo):
    """Draws the same shape through two implementors."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Draw with each implementor, then swap one at runtime.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with 'blue', 'red' and 'swapped' drawings
        """
        blue_shape = ColouredShape(DrawingBlue())
        red_shape = ColouredShape(DrawingRed())
        blue = blue_shape.draw()
        red = red_shape.draw()
        self.step(blue, verbose)
        self.step(red, verbose)

        blue_shape.api = DrawingRed()
        swapped = blue_shape.draw()
        self.step(f"After swapping the implementor: {swapped}", verbose)

        return {"blue": blue, "red": red, "swapped": swapped}
