"""
Facade design pattern.

Theory:
    Provides a unified interface to a set of interfaces in a subsystem. The
    facade defines a higher-level interface that makes the subsystem easier
    to use, typically when the subsystem is complex, made of many
    interdependent classes, or its source is not available.

    A compiler is the classic example: it is made of a parser, a code
    generator, an optimiser and a linker, but most clients only want to
    compile some source code. The compiler facade chains the subsystem calls
    into a single one, without hiding the low-level components from the
    clients that need them.

Participants:
    - ``Compiler``: the facade. It knows which subsystem classes are
      responsible for a request and delegates to them.
    - ``Parser``, ``CodeGenerator``, ``Optimiser``, ``Linker``: subsystem
      classes doing the actual work. They have no knowledge of the facade.
    - The optimiser reports "optimising generated machine code". Older
      write-ups of this example print "optimising generate machine code";
      the grammar is fixed here and the other stage texts are unchanged.

Modifications and Strategies:
    Coupling between clients and the subsystem can be reduced further by
    making the facade abstract, with concrete facades for different
    subsystem implementations. Passing the subsystem objects into the facade
    has the same effect on a smaller scale.

Known Uses:
    - Compilers.
    - Any library offering a simple general-purpose entry point over a more
      complex code base.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Dict, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class Parser:
    def run(self) -> str:
        return "parsing source code"


class CodeGenerator:
    def run(self) -> str:
        return "generating machine code"


class Optimiser:
    def run(self) -> str:
        return "optimising generated machine code"


class Linker:
    def run(self) -> str:
        return "linking code"


class Compiler:
    """The facade over the compilation subsystems."""

    def __init__(
        self,
        parser: Optional[Parser] = None,
        generator: Optional[CodeGenerator] = None,
        optimiser: Optional[Optimiser] = None,
        linker: Optional[Linker] = None,
    ) -> None:
        self.parser = parser or Parser()
        self.generator = generator or CodeGenerator()
        self.optimiser = optimiser or Optimiser()
        self.linker = linker or Linker()

    def run(self) -> str:
        """Run every compilation stage in order, one result per line."""
        return "\n".join(
            (
                self.parser.run(),
                self.generator.run(),
                self.optimiser.run(),
                self.linker.run(),
            )
        )


@pattern(category=Category.STRUCTURAL)
class FacadeDemo(PatternDemo):
    """Compiles through the facade."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Run the compiler facade.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the ordered 'stages'
        """
        stages = Compiler().run().splitlines()
        for stage in stages:
            self.step(stage, verbose)
        return {"stages": stages}
