"""
Template method design pattern.

Theory:
    Defines the skeleton of an algorithm in an operation, deferring some
    steps to subclasses. Subclasses redefine steps without changing the
    structure of the algorithm, which is written in terms of abstract
    operations the subclasses provide.

    Python's ``sorted()`` is a template method: the sorting skeleton is
    fixed and the comparison is supplied by the elements' ``__lt__``.

Participants:
    - ``WeightedObject``: implements the comparison primitive that the
      sorting template relies on. ``functools.total_ordering`` derives the
      other comparisons from ``__lt__`` and ``__eq__``.
    - ``Routine``: an abstract class whose ``do_something`` template calls
      abstract steps and one hook with a default.
    - ``SpecificRoutine``: fills in the abstract steps.

Modifications and Strategies:
    Templates often provide hooks: operations with a default behaviour that
    subclasses may override but do not have to.

Known Uses:
    - Found in almost every abstract class.
    - Central in class libraries and frameworks.
"""

from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, Dict

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


@total_ordering
class WeightedObject:
    """Ordered by weight, then by name."""

    def __init__(self, name: str, weight: float) -> None:
        self.name = name
        self.weight = weight

    def _key(self):
        return (self.weight, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedObject):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "WeightedObject") -> bool:
        if not isinstance(other, WeightedObject):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def describe(self) -> str:
        return f"{self.name} with weight {self.weight:g}"

    def __repr__(self) -> str:
        return f"WeightedObject({self.name!r}, {self.weight!r})"


class Routine(ABC):
    """Template with two abstract steps and a hook."""

    def do_something(self) -> str:
        return f"starting {self.step_one()}; {self.step_two()} and {self.step_three()}"

    @abstractmethod
    def step_one(self) -> str:
        pass

    def step_two(self) -> str:
        return "doing thing 2"

    @abstractmethod
    def step_three(self) -> str:
        pass


class SpecificRoutine(Routine):
    def step_one(self) -> str:
        return "do specific thing 1"

    def step_three(self) -> str:
        return "do generic thing 3"


@pattern(category=Category.BEHAVIOURAL)
class TemplateMethodDemo(PatternDemo):
    """Sorts weighted objects and runs a routine template."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Sort objects through their ordering and run the routine.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'sorted' descriptions and the 'routine' output
        """
        objects = [
            WeightedObject("object1", 3),
            WeightedObject("object2", 2),
            WeightedObject("object3", 1),
            WeightedObject("object4", 4),
            WeightedObject("object0", 2),
        ]
        ordered = [obj.describe() for obj in sorted(objects)]
        for line in ordered:
            self.step(line, verbose)

        routine = SpecificRoutine().do_something()
        self.step(routine, verbose)
        return {"sorted": ordered, "routine": routine}
