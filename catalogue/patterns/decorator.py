"""
Decorator design pattern.

Theory:
    Attaches additional responsibilities to an object dynamically, as a
    flexible alternative to subclassing. Responsibilities are added to a
    single object rather than to a whole class, it can be decided at runtime
    which decorators to add, and any combination of decorators works
    without extra classes. Since decorators nest recursively, there is no
    limit to the responsibilities that can be stacked.

Participants:
    - ``Shape``: the component interface for objects that can have
      responsibilities added. It should stay lightweight since components
      get wrapped into each other.
    - ``Circle``: a concrete component.
    - ``ColouredShape``: the decorator. It keeps a reference to a component,
      satisfies the component interface, and forwards requests while adding
      its own behaviour.

Modifications and Strategies:
    Composite is often used together with Decorator. A decorator can be seen
    as a degenerate composite holding exactly one component, with the
    difference that it adds responsibilities.

    Python's ``@decorator`` syntax applies the same idea to functions:
    a wrapper with the same call signature that adds behaviour around the
    wrapped function.

Attention:
    A decorated object is not identical to its component, so identity and
    equality checks can give unexpected results (a ``Circle`` compared with a
    ``ColouredShape`` wrapping that same ``Circle``).

Known Uses:
    - Scroll panes and borders in GUI toolkits.
    - Layered I/O streams (buffering, compression, encryption).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Shape(ABC):
    """The component interface."""

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def description(self) -> str:
        """Describe the shape."""


class Circle(Shape):
    """A concrete component."""

    # pylint: disable=too-few-public-methods

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def description(self) -> str:
        return f"Circle of radius {self.radius:g}"


class ColouredShape(Shape):
    """Decorator adding a colour to any shape."""

    # pylint: disable=too-few-public-methods

    def __init__(self, colour: str, shape: Shape) -> None:
        self.colour = colour
        self.shape = shape

    def description(self) -> str:
        return f"{self.shape.description()} which is coloured {self.colour}"


@pattern(category=Category.STRUCTURAL)
class DecoratorDemo(PatternDemo):
    """Wraps a circle in two colour decorators."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Decorate a circle once, then decorate the decorated circle.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'plain', 'red' and 'green_red' descriptions
        """
        circle = Circle(3.5)
        red_circle = ColouredShape("red", circle)
        green_red_circle = ColouredShape("green", red_circle)

        for shape in (circle, red_circle, green_red_circle):
            self.step(shape.description(), verbose)

        return {
            "plain": circle.description(),
            "red": red_circle.description(),
            "green_red": green_red_circle.description(),
        }
