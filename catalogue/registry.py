"""
Pattern registration and discovery.

This module provides a decorator-based system for registering pattern
demos, and a registry for discovering and looking them up.
"""

import importlib
import inspect
import pkgutil
from typing import Callable, Dict, List, Optional, Type, TypeVar

from catalogue.observability.logging import get_logger
from catalogue.taxonomy import Category, PatternDefinition, parse_docstring

DemoT = TypeVar("DemoT", bound=type)

# Global registry of patterns, filled by the @pattern decorator
_PATTERN_REGISTRY: Dict[str, PatternDefinition] = {}

_logger = get_logger("registry")


def pattern(
    category: Category | str,
    name: Optional[str] = None,
    title: Optional[str] = None,
) -> Callable[[DemoT], DemoT]:
    """Decorator to register a PatternDemo subclass in the catalogue.

    Usage:
        @pattern(category=Category.CREATIONAL)
        class BuilderDemo(PatternDemo):
            ...

    Args:
        category: Pattern family
        name: Pattern name (defaults to the defining module's name)
        title: Display title (defaults to the title-cased name)

    Returns:
        Decorator function
    """

    def decorator(demo_class: DemoT) -> DemoT:
        module = inspect.getmodule(demo_class)
        pattern_name = name or demo_class.__module__.rsplit(".", 1)[-1]
        pattern_title = title or pattern_name.replace("_", " ").title()

        summary, sections = parse_docstring(module.__doc__ if module else "")

        definition = PatternDefinition(
            name=pattern_name,
            title=pattern_title,
            category=Category.parse(category),
            demo_class=demo_class,
            summary=summary,
            sections=sections,
        )

        _PATTERN_REGISTRY[pattern_name] = definition
        demo_class.pattern_name = pattern_name  # type: ignore[attr-defined]

        # Return the original class (not wrapped)
        return demo_class

    return decorator


class PatternRegistry:
    """Registry for managing and discovering patterns.

    This class provides methods to register, discover, and retrieve
    pattern definitions from the global registry and from packages.
    """

    def __init__(self) -> None:
        """Initialize the registry with already registered patterns."""
        self._patterns: Dict[str, PatternDefinition] = {}
        self._load_global_registry()

    def _load_global_registry(self) -> None:
        """Load patterns from the global registry."""
        self._patterns.update(_PATTERN_REGISTRY)

    def register(self, definition: PatternDefinition) -> None:
        """Register a pattern definition.

        Args:
            definition: The pattern definition to register
        """
        self._patterns[definition.name] = definition

    def get(self, name: str) -> Optional[PatternDefinition]:
        """Get a pattern by name.

        Args:
            name: The pattern name

        Returns:
            PatternDefinition if found, None otherwise
        """
        return self._patterns.get(name)

    def get_demo_class(self, name: str) -> Optional[Type[object]]:
        """Get a pattern's demo class by name.

        Args:
            name: The pattern name

        Returns:
            The demo class if found, None otherwise
        """
        definition = self._patterns.get(name)
        return definition.demo_class if definition else None

    def list_patterns(self, category: Optional[Category | str] = None) -> List[str]:
        """Get the sorted names of registered patterns.

        Args:
            category: Only list patterns of this category

        Returns:
            List of pattern names
        """
        wanted = Category.parse(category) if category is not None else None
        return sorted(
            name
            for name, definition in self._patterns.items()
            if wanted is None or definition.category is wanted
        )

    def get_all(self) -> Dict[str, PatternDefinition]:
        """Get all registered patterns.

        Returns:
            Dictionary of pattern name to PatternDefinition
        """
        return dict(self._patterns)

    def discover_package(self, package: str = "catalogue.patterns") -> int:
        """Discover and load patterns from the modules of a package.

        This method imports every module in the package and registers
        any demo class decorated with @pattern. A module that fails to
        import is logged and skipped.

        Args:
            package: Dotted name of the package holding pattern modules

        Returns:
            Number of patterns discovered
        """
        initial_count = len(self._patterns)
        pkg = importlib.import_module(package)

        for module_info in pkgutil.iter_modules(pkg.__path__):
            if module_info.name.startswith("_") or module_info.name == "base":
                continue

            module_name = f"{package}.{module_info.name}"
            try:
                importlib.import_module(module_name)
                # Patterns are auto-registered via the @pattern decorator
            except Exception as e:  # pylint: disable=broad-exception-caught
                _logger.warning(
                    f"Failed to load pattern module {module_name}: {e}",
                    extra={"module": module_name},
                )

        # Reload global registry after discovery
        self._load_global_registry()

        discovered = len(self._patterns) - initial_count
        _logger.debug(
            f"Discovered {discovered} patterns in {package}",
            extra={"package": package, "total": len(self._patterns)},
        )
        return discovered

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns


# Create a default registry instance
default_registry = PatternRegistry()
