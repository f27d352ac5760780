"""
Iterator design pattern.

Theory:
    Provides a way to access the elements of an aggregate object
    sequentially without exposing its underlying representation. The same
    aggregate may be traversed in different ways depending on the context,
    and several traversals may be in progress at once.

    In Python the pattern is part of the language: ``__iter__`` is the
    factory method of the aggregate and ``__next__`` the traversal operation
    of the iterator. Generators are the most compact way to write one.

Participants:
    - ``Iterator``: the interface for accessing and traversing elements,
      here the ``collections.abc.Iterator`` protocol.
    - ``Fibonacci``: a concrete iterator keeping track of its current
      position.
    - ``Iterable``: the interface for aggregates creating iterators.
    - ``CustomList``: a concrete aggregate returning a fresh ``Fibonacci``
      iterator on every call to ``iter()``.

Modifications and Strategies:
    The traversal algorithm can live in the iterator, as it does here, or in
    the aggregate with the iterator only storing a cursor.

    Null iterators help with boundary cases; in Python an empty iterator or
    an immediate ``StopIteration`` plays that role.

Attention:
    Modifying an aggregate while traversing it is dangerous. Robust
    iterators guarantee that insertions and removals do not interfere with
    traversals without copying the aggregate.

Known Uses:
    Everywhere: ``for`` loops, comprehensions, ``itertools``.
"""

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Dict

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Fibonacci(Iterator):
    """Infinite Fibonacci sequence starting 1, 1, 2."""

    def __init__(self) -> None:
        self._current = 0
        self._next = 1

    def __next__(self) -> int:
        self._current, self._next = self._next, self._current + self._next
        return self._current


class CustomList(Iterable):
    """Aggregate whose elements are the Fibonacci numbers."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __iter__(self) -> Fibonacci:
        return Fibonacci()

    def __repr__(self) -> str:
        return f"CustomList({self.name!r})"


@pattern(category=Category.BEHAVIOURAL)
class IteratorDemo(PatternDemo):
    """Runs two independent traversals over the same aggregate."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Take the first ten numbers, then start a second traversal.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'first_ten' numbers and the 'restarted'
            head of a fresh traversal
        """
        numbers = CustomList("my list")

        first_ten = list(islice(numbers, 10))
        self.step(f"First ten of {numbers.name}: {first_ten}", verbose)

        restarted = list(islice(numbers, 3))
        self.step(f"A fresh traversal starts again: {restarted}", verbose)

        return {"first_ten": first_ten, "restarted": restarted}
