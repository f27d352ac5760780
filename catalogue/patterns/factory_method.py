"""
Factory method design pattern.

Theory:
    Defines an interface for creating an object but lets subclasses decide
    which class to instantiate: a "virtual constructor". Clients work with
    products through their interface without knowing their concrete types.

Participants:
    - ``Car``: the product, defining the interface of the objects the
      factory method creates.
    - ``Sedan``: a concrete product.
    - ``CarFactory``: the creator, declaring the factory method
      ``make_car()``.
    - ``SedanFactory``: a concrete creator overriding the factory method to
      return a ``Sedan``.

Modifications and Strategies:
    The creator can take a parameter naming the product to create
    (``ParameterisedCarFactory``). All products then share one creation
    interface, which makes it easy to extend or change what the creator
    produces.

    In Python a class object is itself a factory, so passing classes around
    is often enough. The explicit creator pays off once construction needs
    logic of its own.

Known Uses:
    - Test frameworks creating test case instances.
    - Document/application frameworks creating documents of a concrete type.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Car(ABC):
    """The product interface."""

    @abstractmethod
    def get_type(self) -> str:
        """Return the car type."""


class Sedan(Car):
    def get_type(self) -> str:
        return "Sedan"


class Hatchback(Car):
    def get_type(self) -> str:
        return "Hatchback"


class CarFactory(ABC):
    """The creator."""

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def make_car(self) -> Car:
        """The factory method."""


class SedanFactory(CarFactory):
    """A creator building sedans."""

    def make_car(self) -> Car:
        return Sedan()


class ParameterisedCarFactory:
    """A creator whose factory method takes the kind of car to build."""

    # pylint: disable=too-few-public-methods

    PRODUCTS: Dict[str, Type[Car]] = {
        "sedan": Sedan,
        "hatchback": Hatchback,
    }

    def make_car(self, kind: str) -> Car:
        """Build a car of the given kind.

        Args:
            kind: Product name, case-insensitive

        Returns:
            The new car

        Raises:
            ValueError: If the kind is unknown
        """
        product = self.PRODUCTS.get(kind.lower())
        if product is None:
            raise ValueError(f"Unknown car kind: {kind!r}")
        return product()


@pattern(category=Category.CREATIONAL)
class FactoryMethodDemo(PatternDemo):
    """Builds cars through a fixed and a parameterised creator."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Build a sedan, then one car of every kind.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with 'sedan' and the 'parameterised' car types
        """
        sedan = SedanFactory().make_car()
        self.step(f"SedanFactory made a {sedan.get_type()}", verbose)

        factory = ParameterisedCarFactory()
        kinds = [factory.make_car(kind).get_type() for kind in factory.PRODUCTS]
        self.step(f"ParameterisedCarFactory made {', '.join(kinds)}", verbose)

        return {"sedan": sedan.get_type(), "parameterised": kinds}
