"""
Builder design pattern.

Theory:
    Separates the construction of a complex object from its representation,
    so that the same construction process can create different
    representations. The algorithm assembling the object becomes independent
    of the parts that make it up and of how they are put together.

Participants:
    - ``Builder``: specifies the abstract interface for creating the parts of
      a product.
    - ``CarBuilder``: a concrete builder. It constructs and keeps track of the
      representation it creates and hands out the finished product.
    - ``CarBuilderDirector``: the director, constructing the object through
      the builder interface only.
    - ``Car``: the product, the complex object under construction.

Modifications and Strategies:
    The pattern is close to the abstract factory. A builder focuses on
    constructing one complex object step by step and only hands it out when
    ``build()`` is called, whereas an abstract factory builds a family of
    objects and returns each one immediately.

    A builder frequently builds a composite, so the two patterns are often
    used together. Setters returning the builder itself give the familiar
    fluent interface.

Attention:
    ``CarBuilder.build()`` returns a copy so that later builder calls do not
    mutate cars already handed out. For very large products this copy can be
    expensive; handing over ownership and resetting the builder is the usual
    alternative.

Known Uses:
    - Text converters (RTF reader building ASCII, TeX or widget output).
    - Query builders in database libraries.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


@dataclass
class Car:
    """The product.

    Attributes:
        wheels: Number of wheels
        seats: Number of seats
        colour: Paint colour
    """

    wheels: int = 0
    seats: int = 0
    colour: str = "black"

    def description(self) -> str:
        """Return a description of the car."""
        return (
            f"This is a {self.colour} car with {self.wheels} wheels "
            f"and {self.seats} seats."
        )


class Builder(ABC):
    """Abstract builder.

    Part setters refuse to run unless a concrete builder overrides them, so
    a builder only implements the steps it supports.
    """

    def set_wheels(self, num: int) -> "Builder":
        raise NotImplementedError(f"{type(self).__name__} cannot set wheels")

    def set_seats(self, num: int) -> "Builder":
        raise NotImplementedError(f"{type(self).__name__} cannot set seats")

    def set_colour(self, colour: str) -> "Builder":
        raise NotImplementedError(f"{type(self).__name__} cannot set colour")

    @abstractmethod
    def build(self) -> Any:
        """Return the finished product."""


class CarBuilder(Builder):
    """Concrete builder assembling a Car."""

    def __init__(self) -> None:
        self._car = Car()

    def set_wheels(self, num: int) -> "CarBuilder":
        self._car.wheels = num
        return self

    def set_seats(self, num: int) -> "CarBuilder":
        self._car.seats = num
        return self

    def set_colour(self, colour: str) -> "CarBuilder":
        self._car.colour = colour
        return self

    def build(self) -> Car:
        return copy.copy(self._car)


class CarBuilderDirector:
    """Director running the construction sequence for a family car."""

    # pylint: disable=too-few-public-methods

    def __init__(self, builder: Optional[Builder] = None) -> None:
        self.builder = builder or CarBuilder()

    def construct(self) -> Car:
        """Build a red car with four wheels and five seats."""
        self.builder.set_colour("red")
        self.builder.set_wheels(4)
        self.builder.set_seats(5)
        return self.builder.build()


@pattern(category=Category.CREATIONAL)
class BuilderDemo(PatternDemo):
    """Lets the director build a car, then builds a custom one fluently."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Run the director and a hand-driven builder.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with 'directed' and 'custom' car descriptions
        """
        director = CarBuilderDirector()
        directed = director.construct()
        self.step(f"Director built: {directed.description()}", verbose)

        custom = CarBuilder().set_colour("yellow").set_wheels(3).set_seats(2).build()
        self.step(f"Fluent builder built: {custom.description()}", verbose)

        return {
            "directed": directed.description(),
            "custom": custom.description(),
        }
