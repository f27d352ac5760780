"""
Event hooks for the pattern catalogue.

This module provides an event hook system that allows external code to
subscribe to demo lifecycle events for monitoring, logging, and custom
integrations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from catalogue.observability.logging import get_logger


class CatalogueEvent(Enum):
    """Event types that can be hooked into.

    Events are triggered at key points in the catalogue and demo lifecycle.
    """

    # Catalogue lifecycle events
    CATALOGUE_LOADED = "catalogue_loaded"

    # Demo events
    DEMO_START = "demo_start"
    DEMO_STEP = "demo_step"
    DEMO_END = "demo_end"
    DEMO_ERROR = "demo_error"

    # Custom events
    CUSTOM = "custom"


@dataclass
class EventData:
    """Data payload for an event.

    Attributes:
        event: The event type
        timestamp: When the event occurred
        pattern: Name of the pattern (if applicable)
        category: Category of the pattern (if applicable)
        session_id: Session identifier
        data: Additional event-specific data
        error: Error information (if applicable)
        duration_ms: Duration of the operation (if applicable)
    """

    event: CatalogueEvent
    timestamp: datetime = field(default_factory=datetime.now)
    pattern: Optional[str] = None
    category: Optional[str] = None
    session_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None
    duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event data to dictionary.

        Returns:
            Dictionary representation of the event
        """
        result: Dict[str, Any] = {
            "event": self.event.value,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.pattern:
            result["pattern"] = self.pattern
        if self.category:
            result["category"] = self.category
        if self.session_id:
            result["session_id"] = self.session_id
        if self.data:
            result["data"] = self.data
        if self.error:
            result["error"] = str(self.error)
        if self.duration_ms is not None:
            result["duration_ms"] = self.duration_ms

        return result


# Type alias for hook callbacks
HookCallback = Callable[[EventData], None]

_logger = get_logger("hooks")


class EventHookRegistry:
    """Registry for event hooks.

    Allows subscribing to events and triggering callbacks when events occur.

    Usage:
        registry = EventHookRegistry()

        # Subscribe to events
        registry.on(CatalogueEvent.DEMO_START, my_callback)
        registry.on_all(my_universal_callback)

        # Trigger events
        registry.trigger(CatalogueEvent.DEMO_START, pattern="builder")

        # Unsubscribe
        registry.off(CatalogueEvent.DEMO_START, my_callback)
    """

    KNOWN_FIELDS = {"pattern", "category", "session_id", "error", "duration_ms"}

    def __init__(self) -> None:
        """Initialize an empty hook registry."""
        self._hooks: Dict[CatalogueEvent, List[HookCallback]] = {}
        self._global_hooks: List[HookCallback] = []
        self._enabled: bool = True

    def on(self, event: CatalogueEvent, callback: HookCallback) -> None:
        """Subscribe to a specific event.

        Args:
            event: Event type to subscribe to
            callback: Function to call when event occurs
        """
        if event not in self._hooks:
            self._hooks[event] = []
        if callback not in self._hooks[event]:
            self._hooks[event].append(callback)

    def on_all(self, callback: HookCallback) -> None:
        """Subscribe to all events.

        Args:
            callback: Function to call for any event
        """
        if callback not in self._global_hooks:
            self._global_hooks.append(callback)

    def off(self, event: CatalogueEvent, callback: HookCallback) -> None:
        """Unsubscribe from a specific event.

        Args:
            event: Event type to unsubscribe from
            callback: Callback to remove
        """
        if event in self._hooks and callback in self._hooks[event]:
            self._hooks[event].remove(callback)

    def off_all(self, callback: HookCallback) -> None:
        """Unsubscribe from all events.

        Args:
            callback: Callback to remove from global hooks
        """
        if callback in self._global_hooks:
            self._global_hooks.remove(callback)

    def clear(self, event: Optional[CatalogueEvent] = None) -> None:
        """Clear hooks for an event or all events.

        Args:
            event: Specific event to clear, or None for all
        """
        if event:
            self._hooks[event] = []
        else:
            self._hooks.clear()
            self._global_hooks.clear()

    def _build_event(self, event: CatalogueEvent, fields: Dict[str, Any]) -> EventData:
        """Split trigger keywords into EventData fields and the 'data' payload.

        A ``data`` dict is merged into the payload; every other unknown
        keyword becomes a payload entry of its own.
        """
        known = {key: value for key, value in fields.items() if key in self.KNOWN_FIELDS}
        payload: Dict[str, Any] = {}
        for key, value in fields.items():
            if key in self.KNOWN_FIELDS:
                continue
            if key == "data" and isinstance(value, dict):
                payload.update(value)
            else:
                payload[key] = value
        return EventData(event=event, data=payload, **known)

    def trigger(
        self,
        event: CatalogueEvent,
        event_data: Optional[EventData] = None,
        **kwargs: Any,
    ) -> None:
        """Trigger an event and call all registered callbacks.

        Callbacks for the event run first, then global callbacks. A callback
        that raises is logged and skipped.

        Args:
            event: Event type to trigger
            event_data: Prebuilt payload; built from kwargs when omitted
            **kwargs: pattern, category, session_id, error and duration_ms
                set the matching EventData fields; ``data`` and any other
                keyword end up in EventData.data
        """
        if not self._enabled:
            return

        payload = event_data or self._build_event(event, kwargs)

        for callback in self._hooks.get(event, []) + self._global_hooks:
            try:
                callback(payload)
            except (AttributeError, LookupError, RuntimeError, TypeError, ValueError) as e:
                _logger.warning(
                    f"Hook {getattr(callback, '__name__', callback)!r} failed "
                    f"on {event.value}: {e}",
                    pattern=payload.pattern,
                )

    def enable(self) -> None:
        """Enable event triggering."""
        self._enabled = True

    def disable(self) -> None:
        """Disable event triggering (hooks won't be called)."""
        self._enabled = False

    @property
    def is_enabled(self) -> bool:
        """Check if event triggering is enabled."""
        return self._enabled

    def list_hooks(self, event: Optional[CatalogueEvent] = None) -> Dict[str, int]:
        """List registered hooks.

        Args:
            event: Specific event to list, or None for all

        Returns:
            Dictionary of event -> hook count
        """
        if event:
            return {event.value: len(self._hooks.get(event, []))}

        result = {e.value: len(hooks) for e, hooks in self._hooks.items()}
        result["_global"] = len(self._global_hooks)
        return result


# Registry used when a Catalogue is built without one
default_hook_registry = EventHookRegistry()
