"""
Catalogue of object-oriented design patterns.

This package provides one worked example per classic design pattern,
a registry describing them and a Catalogue to list, describe and run
the examples with logging and event hooks.
"""

from catalogue.catalogue import Catalogue, normalize_name
from catalogue.config import CatalogueConfig
from catalogue.observability import (
    CatalogueEvent,
    CatalogueLogger,
    EventHookRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from catalogue.patterns.base import PatternDemo
from catalogue.registry import PatternRegistry, default_registry, pattern
from catalogue.taxonomy import Category, PatternDefinition

__all__ = [
    # Core components
    "Catalogue",
    "CatalogueConfig",
    "Category",
    "PatternDefinition",
    "PatternDemo",
    "PatternRegistry",
    "default_registry",
    "normalize_name",
    "pattern",
    # Observability
    "CatalogueEvent",
    "CatalogueLogger",
    "EventHookRegistry",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]
