"""
Base class for pattern demos.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from catalogue.observability.hooks import CatalogueEvent

if TYPE_CHECKING:
    from catalogue.catalogue import Catalogue


class PatternDemo(ABC):
    """Abstract base class for the worked example of a pattern."""

    # pylint: disable=too-few-public-methods

    pattern_name: str = ""

    def __init__(self, catalogue: "Catalogue") -> None:
        """Initialize the demo.

        Args:
            catalogue: The catalogue instance running the demo
        """
        self.catalogue = catalogue
        self._step_count = 0

    @property
    def label(self) -> str:
        """Prefix used for verbose output, e.g. "[Builder]"."""
        return "[" + self.pattern_name.replace("_", " ").title().replace(" ", "") + "]"

    def step(self, message: str, verbose: bool = False, **data: Any) -> None:
        """Report one step of the worked example.

        Fires a DEMO_STEP event, logs at debug level and prints the step
        when verbose.

        Args:
            message: What happened in this step
            verbose: Whether to print the step
            **data: Additional data attached to the event
        """
        self._step_count += 1
        self.catalogue.hooks.trigger(
            CatalogueEvent.DEMO_STEP,
            pattern=self.pattern_name,
            session_id=self.catalogue.session_id,
            data={"step": self._step_count, "message": message, **data},
        )
        self.catalogue.logger.debug(
            message, pattern=self.pattern_name, step=self._step_count
        )
        if verbose:
            print(f"{self.label} {message}")

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        """Run the demo with a fresh step counter.

        Args:
            verbose: Whether to print progress

        Returns:
            The results of execute()
        """
        self._step_count = 0
        return self.execute(verbose=verbose)

    @abstractmethod
    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Execute the worked example.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary of the example's observable results
        """
