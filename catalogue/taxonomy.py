"""
Taxonomy of the design pattern catalogue.

This module contains the enums and data structures used to classify
patterns and to describe a registered pattern.
"""

import re
import textwrap
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Tuple, Type

if TYPE_CHECKING:
    from catalogue.patterns.base import PatternDemo


class Category(Enum):
    """The three classic families of object-oriented design patterns."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIOURAL = "behavioural"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Resolve a category from its value or member name.

        Args:
            value: Category member, value ("structural") or name ("STRUCTURAL").
                "behavioral" is accepted as well.

        Returns:
            The matching Category

        Raises:
            ValueError: If no category matches
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        if key == "behavioral":
            key = cls.BEHAVIOURAL.value
        for member in cls:
            if member.value == key:
                return member

        raise ValueError(
            f"Unknown category: {value!r} "
            f"(expected one of {[member.value for member in cls]})"
        )


_SECTION_HEADER = re.compile(r"^([A-Z][A-Za-z ]*):\s*$")


def parse_docstring(text: str) -> Tuple[str, Dict[str, str]]:
    """Split a pattern module docstring into a summary and named sections.

    A section starts with an unindented ``Header:`` line; its body is the
    indented block that follows.

    Args:
        text: The raw module docstring

    Returns:
        Tuple of (summary line, {section header: dedented body})
    """
    lines = textwrap.dedent(text or "").strip().splitlines()
    summary = lines[0].strip() if lines else ""

    sections: Dict[str, str] = {}
    current: str = ""
    body: List[str] = []

    for line in lines[1:]:
        match = _SECTION_HEADER.match(line)
        if match:
            if current:
                sections[current] = textwrap.dedent("\n".join(body)).strip()
            current = match.group(1)
            body = []
        elif current:
            body.append(line)

    if current:
        sections[current] = textwrap.dedent("\n".join(body)).strip()

    return summary, sections


@dataclass
class PatternDefinition:
    """A pattern registered in the catalogue.

    Attributes:
        name: Identifier of the pattern (e.g. "abstract_factory")
        title: Display title (e.g. "Abstract Factory")
        category: Pattern family
        demo_class: The PatternDemo subclass running the worked example
        summary: One-line summary taken from the module docstring
        sections: Prose sections (Theory, Participants, ...) of the module
    """

    name: str
    title: str
    category: Category
    demo_class: Type["PatternDemo"]
    summary: str = ""
    sections: Dict[str, str] = field(default_factory=dict)

    @property
    def module(self) -> str:
        """Dotted path of the module implementing the pattern."""
        return self.demo_class.__module__

    def to_dict(self) -> Dict[str, object]:
        """Convert the definition to a dictionary.

        Returns:
            Dictionary representation without the demo class
        """
        return {
            "name": self.name,
            "title": self.title,
            "category": self.category.value,
            "module": self.module,
            "summary": self.summary,
            "sections": dict(self.sections),
        }
