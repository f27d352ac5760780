"""
Catalogue for listing, describing and running pattern demos.

This module provides the Catalogue class that discovers the pattern
modules, exposes their prose and runs their worked examples with
logging and event hooks around every run.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import re
import time
import uuid
from typing import Any, Dict, List, Optional

from catalogue.config import CatalogueConfig
from catalogue.observability.hooks import (
    CatalogueEvent,
    EventHookRegistry,
    default_hook_registry,
)
from catalogue.observability.logging import CatalogueLogger, get_logger
from catalogue.patterns.base import PatternDemo
from catalogue.registry import PatternRegistry, default_registry
from catalogue.taxonomy import Category, PatternDefinition

PATTERN_PACKAGE = "catalogue.patterns"

# Errors reported through DEMO_ERROR before being re-raised
DEMO_ERRORS = (
    ArithmeticError,
    AttributeError,
    LookupError,
    RuntimeError,
    TypeError,
    ValueError,
)


def normalize_name(name: str) -> str:
    """Turn a user supplied pattern name into a registry key.

    "Abstract Factory", "abstract-factory" and "abstract_factory" all
    become "abstract_factory".

    Args:
        name: Pattern name as typed by a user

    Returns:
        Normalised pattern name
    """
    return re.sub(r"[\s\-]+", "_", name.strip()).lower()


class Catalogue:
    """Catalogue of design patterns with runnable demos.

    Usage:
        catalogue = Catalogue()

        # Browse
        catalogue.list_patterns(Category.STRUCTURAL)
        print(catalogue.describe("flyweight"))

        # Run a worked example
        result = catalogue.run("builder", verbose=True)
    """

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        config: Optional[CatalogueConfig] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the catalogue.

        Args:
            registry: Pattern registry to read definitions from
            hook_registry: Event hook registry for observability
            config: Catalogue configuration (enabled categories)
            session_id: Session identifier for logging/tracing
        """
        self._registry = registry or default_registry
        self._hooks = hook_registry or default_hook_registry
        self._config = config or CatalogueConfig()
        self._session_id = session_id or str(uuid.uuid4())

        self._logger: CatalogueLogger = get_logger(
            name="catalogue",
            session_id=self._session_id,
        )

        self._registry.discover_package(PATTERN_PACKAGE)

        enabled = set(self._config.categories)
        self._definitions: Dict[str, PatternDefinition] = {
            name: definition
            for name, definition in self._registry.get_all().items()
            if definition.category in enabled
        }
        self._demos: Dict[str, PatternDemo] = {
            name: definition.demo_class(self)
            for name, definition in self._definitions.items()
        }

        self._hooks.trigger(
            CatalogueEvent.CATALOGUE_LOADED,
            session_id=self._session_id,
            data={
                "patterns": len(self._definitions),
                "categories": list(self._config.enabled_categories),
            },
        )
        self._logger.info(
            f"Catalogue loaded with {len(self._definitions)} patterns",
            extra={"categories": list(self._config.enabled_categories)},
        )

    @property
    def hooks(self) -> EventHookRegistry:
        """Get the event hook registry."""
        return self._hooks

    @property
    def logger(self) -> CatalogueLogger:
        """Get the catalogue logger."""
        return self._logger

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def config(self) -> CatalogueConfig:
        return self._config

    def list_patterns(self, category: Optional[Category | str] = None) -> List[str]:
        """Get the sorted names of the available patterns.

        Args:
            category: Only list patterns of this category

        Returns:
            List of pattern names
        """
        wanted = Category.parse(category) if category is not None else None
        return sorted(
            name
            for name, definition in self._definitions.items()
            if wanted is None or definition.category is wanted
        )

    def get_definition(self, name: str) -> PatternDefinition:
        """Get a pattern definition by name.

        Args:
            name: Pattern name, in any of the forms normalize_name accepts

        Returns:
            The pattern definition

        Raises:
            ValueError: If the pattern is unknown or its category disabled
        """
        key = normalize_name(name)
        definition = self._definitions.get(key)
        if definition is None:
            raise ValueError(f"Pattern '{name}' not found")
        return definition

    def describe(self, name: str) -> str:
        """Format the prose of a pattern for display.

        Args:
            name: Pattern name

        Returns:
            Title, category, summary and every docstring section
        """
        definition = self.get_definition(name)
        lines = [
            f"{definition.title} ({definition.category.value})",
            "=" * 60,
        ]
        if definition.summary:
            lines.extend([definition.summary, ""])
        for header, body in definition.sections.items():
            lines.append(f"{header}:")
            lines.extend(f"    {line}" if line else "" for line in body.splitlines())
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def summary(self) -> Dict[str, List[str]]:
        """Get the available pattern names grouped by category.

        Returns:
            Dictionary of category value -> sorted pattern names
        """
        return {
            category.value: self.list_patterns(category)
            for category in self._config.categories
        }

    def run(self, name: str, verbose: bool = False) -> Dict[str, Any]:
        """Run the worked example of a pattern.

        Args:
            name: Pattern name
            verbose: Whether to print the demo steps

        Returns:
            The demo's results

        Raises:
            ValueError: If the pattern is unknown
        """
        definition = self.get_definition(name)
        demo = self._demos[definition.name]
        category = definition.category.value

        self._hooks.trigger(
            CatalogueEvent.DEMO_START,
            pattern=definition.name,
            category=category,
            session_id=self._session_id,
        )
        self._logger.info(
            f"Running demo: {definition.title}",
            pattern=definition.name,
            category=category,
        )
        if verbose:
            print(f"\n{demo.label} {definition.title}: {definition.summary}")

        start_time = time.perf_counter()

        try:
            result = demo.run(verbose=verbose)
        except DEMO_ERRORS as e:
            duration_ms = (time.perf_counter() - start_time) * 1000

            self._hooks.trigger(
                CatalogueEvent.DEMO_ERROR,
                pattern=definition.name,
                category=category,
                session_id=self._session_id,
                duration_ms=duration_ms,
                error=e,
            )
            self._logger.error(
                f"Demo failed: {definition.title} - {e}",
                pattern=definition.name,
                category=category,
                duration_ms=duration_ms,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        self._hooks.trigger(
            CatalogueEvent.DEMO_END,
            pattern=definition.name,
            category=category,
            session_id=self._session_id,
            duration_ms=duration_ms,
            data={"result_keys": sorted(result)},
        )
        self._logger.info(
            f"Demo completed: {definition.title}",
            pattern=definition.name,
            category=category,
            duration_ms=duration_ms,
        )
        return result

    def run_all(
        self,
        category: Optional[Category | str] = None,
        verbose: bool = False,
    ) -> Dict[str, Dict[str, Any]]:
        """Run the worked example of every available pattern.

        Args:
            category: Only run patterns of this category
            verbose: Whether to print the demo steps

        Returns:
            Dictionary of pattern name -> demo results
        """
        return {
            name: self.run(name, verbose=verbose)
            for name in self.list_patterns(category)
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"Catalogue(patterns={len(self)}, session_id={self._session_id!r})"
