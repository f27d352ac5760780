"""
Strategy design pattern.

Theory:
    Selects an algorithm at runtime. Instead of implementing one algorithm
    directly, the context receives at runtime which member of a family of
    interchangeable algorithms to use. This removes conditionals, makes new
    algorithms easy to add and keeps algorithm-specific data structures away
    from clients.

Participants:
    - ``Algorithm``: the strategy interface common to every algorithm.
    - ``FastAlgorithm``, ``SlowAlgorithm``: concrete strategies.
    - ``SomeObject``: the context holding the strategy in use.

Modifications and Strategies:
    Passing every parameter from the context to the strategy keeps them
    decoupled at the cost of passing data some algorithms do not need.
    Alternatively the context passes itself and the strategy pulls what it
    needs.

    In Python any callable returning a string can act as a strategy, so
    plain functions work without a class hierarchy.

Attention:
    The strategy interface must be general enough for every algorithm,
    which can cause communication overhead.

Known Uses:
    - Line breaking algorithms.
    - Sorting with a key function.
    - Encryption and decryption algorithms.

State vs Strategy:
    Concrete strategies do not know about each other and expose few
    methods. States know their successors, may carry data, and often expose
    many operations.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Union

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Algorithm(ABC):
    """Interface implemented by every algorithm."""

    @abstractmethod
    def run(self) -> str:
        """Run the algorithm."""


class FastAlgorithm(Algorithm):
    def run(self) -> str:
        return "very fast algorithm"


class SlowAlgorithm(Algorithm):
    def run(self) -> str:
        return "very slow algorithm ..."


Behaviour = Union[Algorithm, Callable[[], str]]


class SomeObject:
    """Context whose behaviour depends on the attached algorithm."""

    def __init__(self, behaviour: Behaviour) -> None:
        self.behaviour = behaviour

    def set_behaviour(self, behaviour: Behaviour) -> None:
        self.behaviour = behaviour

    def run(self) -> str:
        if isinstance(self.behaviour, Algorithm):
            return self.behaviour.run()
        return self.behaviour()


@pattern(category=Category.BEHAVIOURAL)
class StrategyDemo(PatternDemo):
    """Swaps the algorithm of one object at runtime."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Run with the slow, the fast and a plain-function strategy.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'runs' in order
        """
        some_object = SomeObject(SlowAlgorithm())
        runs = [some_object.run()]
        self.step(f"Slow: {runs[-1]}", verbose)

        some_object.set_behaviour(FastAlgorithm())
        runs.append(some_object.run())
        self.step(f"Fast: {runs[-1]}", verbose)

        some_object.set_behaviour(lambda: "plain function algorithm")
        runs.append(some_object.run())
        self.step(f"Function: {runs[-1]}", verbose)

        return {"runs": runs}
