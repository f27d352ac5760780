"""
Observability module for the pattern catalogue.

This module provides structured logging and event hooks for monitoring
and debugging demo runs.
"""

from .hooks import (
    CatalogueEvent,
    EventData,
    EventHookRegistry,
    default_hook_registry,
)
from .logging import CatalogueLogger, configure_logging, get_logger

__all__ = [
    # Logging
    "CatalogueLogger",
    "configure_logging",
    "get_logger",
    # Hooks
    "CatalogueEvent",
    "EventData",
    "EventHookRegistry",
    "default_hook_registry",
]
