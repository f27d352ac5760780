"""
Proxy design pattern.

Theory:
    Provides a surrogate or placeholder for another object to control access
    to it. A proxy can postpone the construction of the real object until it
    is needed, cache results to avoid calls to the real object, or check
    preconditions before forwarding an operation.

Participants:
    - ``Drivable``: the subject, the interface shared by the proxy and the
      real object so that they are interchangeable.
    - ``ProxyCar``: a protection proxy keeping a reference to the real car
      and only forwarding requests when the driver is old enough.
    - ``LazyCar``: a virtual proxy creating the real car on first use.
    - ``Car``: the real subject.

Modifications and Strategies:
    Proxy types:

    - Remote proxy: a local representative of an object in another address
      space.
    - Virtual proxy: a placeholder for an expensive object, creating it only
      when a client first needs it.
    - Protection proxy: controls access rights to the original object.
    - Smart reference: performs additional actions when the object is
      accessed, such as reference counting or copy on write.

Attention:
    Identity checks between an object and its proxy can give unexpected
    results.

Known Uses:
    - Smart pointers and copy-on-write objects.
    - Lazy-loading ORM relations.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category

MINIMUM_DRIVING_AGE = 18


class Drivable(ABC):
    """The subject interface."""

    @abstractmethod
    def drive(self) -> str:
        """Drive the car."""


class Car(Drivable):
    """The real subject."""

    def drive(self) -> str:
        return "car is driving"


class ProxyCar(Drivable):
    """Protection proxy checking the driver's age."""

    def __init__(self, driver_age: int, car: Drivable) -> None:
        self.driver_age = driver_age
        self._car = car

    def drive(self) -> str:
        if self.driver_age > MINIMUM_DRIVING_AGE:
            return self._car.drive()
        return "driver is too young"


class LazyCar(Drivable):
    """Virtual proxy building the real car on the first drive()."""

    def __init__(self, factory: Callable[[], Drivable] = Car) -> None:
        self._factory = factory
        self._car: Optional[Drivable] = None

    @property
    def is_loaded(self) -> bool:
        return self._car is not None

    def drive(self) -> str:
        if self._car is None:
            self._car = self._factory()
        return self._car.drive()


@pattern(category=Category.STRUCTURAL)
class ProxyDemo(PatternDemo):
    """Drives through a protection proxy and a virtual proxy."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Try a young and an adult driver, then a lazily built car.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'young_driver', 'adult_driver' and 'lazy'
            results
        """
        car = Car()
        young = ProxyCar(16, car).drive()
        self.step(f"Driver aged 16: {young}", verbose)
        adult = ProxyCar(19, car).drive()
        self.step(f"Driver aged 19: {adult}", verbose)

        lazy = LazyCar()
        self.step(f"Lazy car loaded before driving: {lazy.is_loaded}", verbose)
        lazy_result = lazy.drive()
        self.step(f"Lazy car loaded after driving: {lazy.is_loaded}", verbose)

        return {"young_driver": young, "adult_driver": adult, "lazy": lazy_result}
