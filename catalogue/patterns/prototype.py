"""
Prototype design pattern.

Theory:
    Specifies the kind of objects to create using a prototypical instance,
    and creates new objects by copying that prototype. The copying is
    delegated to the instance itself, so the client never needs to know the
    concrete class it is cloning.

    This reduces the number of classes in a system: instead of a subclass per
    configuration, a handful of preconfigured prototypes are kept and copied.
    It fits best when instances of a class can only have one of a few
    different combinations of state.

Participants:
    - ``Prototype``: declares the ``clone()`` interface.
    - ``Document``: a concrete prototype.
    - ``PrototypeRegistry``: the prototype manager, holding named prototypes.
    - The client: creates new objects by asking the registry for clones
      rather than calling constructors.

Modifications and Strategies:
    A prototype manager is useful as soon as more than one prototype exists.
    Each prototype must decide between a deep and a shallow copy depending on
    what its attributes are and how the copies are used: a shallow clone
    shares mutable attributes with its prototype.

    In Python ``copy.copy`` and ``copy.deepcopy`` already implement cloning
    for ordinary objects; ``__copy__``/``__deepcopy__`` customise it.

Known Uses:
    - Copy and paste in editors.
    - Document templates.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, TypeVar

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category

PrototypeT = TypeVar("PrototypeT", bound="Prototype")


class Prototype:
    """Mixin giving objects a clone() operation."""

    # pylint: disable=too-few-public-methods

    def clone(self: PrototypeT, deep: bool = True, **overrides: Any) -> PrototypeT:
        """Copy this object and apply attribute overrides to the copy.

        Args:
            deep: Whether mutable attributes are copied too
            **overrides: Attributes to set on the clone

        Returns:
            The clone

        Raises:
            AttributeError: If an override names an unknown attribute
        """
        duplicate = copy.deepcopy(self) if deep else copy.copy(self)
        for key, value in overrides.items():
            if not hasattr(duplicate, key):
                raise AttributeError(
                    f"{type(self).__name__} has no attribute {key!r}"
                )
            setattr(duplicate, key, value)
        return duplicate


@dataclass
class Document(Prototype):
    """A concrete prototype.

    Attributes:
        title: Document title
        author: Document author
        tags: Free-form tags
        sections: Section headings in order
    """

    title: str
    author: str = ""
    tags: List[str] = field(default_factory=list)
    sections: List[str] = field(default_factory=list)


class PrototypeRegistry:
    """Prototype manager holding named prototypes."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, name: str, prototype: Prototype) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        self._prototypes.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._prototypes)

    def create(self, name: str, **overrides: Any) -> Any:
        """Clone a registered prototype.

        Args:
            name: Name the prototype was registered under
            **overrides: Attributes to set on the clone

        Returns:
            A deep clone of the prototype

        Raises:
            ValueError: If no prototype is registered under the name
        """
        prototype = self._prototypes.get(name)
        if prototype is None:
            raise ValueError(f"No prototype registered as {name!r}")
        return prototype.clone(**overrides)


@pattern(category=Category.CREATIONAL)
class PrototypeDemo(PatternDemo):
    """Creates reports and memos from registered document prototypes."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Clone two prototypes and show the clones are independent.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the cloned documents and the untouched prototype
        """
        report = Document(
            title="Report",
            tags=["internal"],
            sections=["Summary", "Findings", "Recommendations"],
        )
        registry = PrototypeRegistry()
        registry.register("report", report)
        registry.register("memo", Document(title="Memo", sections=["Body"]))
        self.step(f"Registered prototypes: {', '.join(registry.names())}", verbose)

        quarterly = registry.create("report", title="Q3 Report", author="finance")
        quarterly.tags.append("quarterly")
        self.step(f"Cloned report as {quarterly.title!r} with tags {quarterly.tags}", verbose)

        memo = registry.create("memo", author="hr")
        self.step(f"Cloned memo for {memo.author!r}", verbose)

        return {
            "quarterly": quarterly,
            "memo": memo,
            "prototype_tags": list(report.tags),
        }
