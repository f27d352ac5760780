"""
Composite design pattern.

Theory:
    Composes objects into tree structures to represent part-whole
    hierarchies. Composite lets clients treat individual objects and
    compositions of objects uniformly: wherever client code expects a
    primitive object it can also take a composite.

    One abstract class represents both primitives and their containers,
    which makes client code independent of the internal structure. A
    composite holds any number of leaves and other composites.

    Composition differs from aggregation in that parts belong to exactly one
    whole and disappear with it; aggregated parts can outlive their parent
    and belong to several wholes.

Participants:
    - ``Graphic``: the component, declaring the interface for objects in the
      composition.
    - ``Ellipse``: a leaf, a primitive object without children.
    - ``CompositeGraphic``: a composite storing child components, implementing
      the child-related operations and forwarding requests to its children.

Modifications and Strategies:
    Keeping an explicit reference to the parent in each component
    simplifies traversal and management of the structure.

    Composite is often combined with Decorator. Both then share a common
    parent class, and decorators must support child management operations
    such as ``add()`` and ``remove()``.

Attention:
    When clients manage the structure, anything implementing the component
    interface can be added, so restricting the allowed children requires
    runtime checks. Care must also be taken not to create cycles or to add
    one component to several composites.

Known Uses:
    - Grouping in drawing editors.
    - Widget hierarchies in GUI toolkits (labels and check boxes are leaves).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Graphic(ABC):
    """The component."""

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def render(self) -> str:
        """Return the textual rendering of the graphic."""


class Ellipse(Graphic):
    """A leaf."""

    # pylint: disable=too-few-public-methods

    def render(self) -> str:
        return "Ellipse"


class CompositeGraphic(Graphic):
    """A graphic made of other graphics."""

    def __init__(self, *children: Graphic) -> None:
        self._children: List[Graphic] = list(children)

    @property
    def children(self) -> List[Graphic]:
        return list(self._children)

    def contains(self, graphic: Graphic) -> bool:
        """Whether the graphic appears anywhere below this composite."""
        return any(
            child is graphic
            or (isinstance(child, CompositeGraphic) and child.contains(graphic))
            for child in self._children
        )

    def add(self, graphic: Graphic) -> None:
        """Add a child graphic.

        Raises:
            ValueError: If the graphic is this composite or one of its
                ancestors, which would make rendering recurse forever
        """
        if graphic is self or (
            isinstance(graphic, CompositeGraphic) and graphic.contains(self)
        ):
            raise ValueError("A composite cannot contain itself")
        self._children.append(graphic)

    def remove(self, graphic: Optional[Graphic] = None) -> None:
        """Remove a child, or the last added one when none is given.

        Raises:
            ValueError: If the graphic is not a child
            IndexError: If the composite is empty and no graphic is given
        """
        if graphic is None:
            self._children.pop()
        else:
            self._children.remove(graphic)

    def render(self) -> str:
        return "".join(child.render() for child in self._children)

    def __len__(self) -> int:
        return len(self._children)


@pattern(category=Category.STRUCTURAL)
class CompositeDemo(PatternDemo):
    """Renders a two-level tree of ellipses."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Build the tree, render it, then remove the last group.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the 'full' and 'pruned' renderings
        """
        group_1 = CompositeGraphic(Ellipse(), Ellipse(), Ellipse())
        group_2 = CompositeGraphic(Ellipse())

        root = CompositeGraphic()
        root.add(group_1)
        root.add(group_2)
        full = root.render()
        self.step(f"Whole tree renders as {full}", verbose)

        root.remove()
        pruned = root.render()
        self.step(f"Without the last group: {pruned}", verbose)

        return {"full": full, "pruned": pruned}
