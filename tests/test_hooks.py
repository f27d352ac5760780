import logging
from unittest.mock import MagicMock

from catalogue.observability.hooks import CatalogueEvent, EventData, EventHookRegistry
from catalogue.observability.logging import ROOT_LOGGER_NAME


class TestEventHookRegistry:
    def setup_method(self):
        self.registry = EventHookRegistry()

    def test_trigger_builds_event_data(self):
        callback = MagicMock()
        self.registry.on(CatalogueEvent.DEMO_START, callback)

        self.registry.trigger(
            CatalogueEvent.DEMO_START,
            pattern="builder",
            session_id="s1",
            data={"step": 1},
            verbose=True,
        )

        event = callback.call_args[0][0]
        assert isinstance(event, EventData)
        assert event.pattern == "builder"
        assert event.session_id == "s1"
        assert event.data == {"step": 1, "verbose": True}

    def test_specific_hooks_run_before_global_hooks(self):
        calls = []
        self.registry.on_all(lambda event: calls.append("global"))
        self.registry.on(CatalogueEvent.DEMO_END, lambda event: calls.append("specific"))

        self.registry.trigger(CatalogueEvent.DEMO_END)
        assert calls == ["specific", "global"]

    def test_off_and_off_all(self):
        callback = MagicMock()
        self.registry.on(CatalogueEvent.DEMO_END, callback)
        self.registry.on_all(callback)
        self.registry.off(CatalogueEvent.DEMO_END, callback)
        self.registry.off_all(callback)

        self.registry.trigger(CatalogueEvent.DEMO_END)
        callback.assert_not_called()

    def test_disabled_registry_calls_nothing(self):
        callback = MagicMock()
        self.registry.on_all(callback)
        self.registry.disable()
        self.registry.trigger(CatalogueEvent.CUSTOM)
        assert not self.registry.is_enabled
        callback.assert_not_called()

        self.registry.enable()
        self.registry.trigger(CatalogueEvent.CUSTOM)
        callback.assert_called_once()

    def test_failing_hook_does_not_stop_others(self):
        failing = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        self.registry.on(CatalogueEvent.DEMO_STEP, failing)
        self.registry.on(CatalogueEvent.DEMO_STEP, healthy)

        self.registry.trigger(CatalogueEvent.DEMO_STEP)
        healthy.assert_called_once()

    def test_failing_hook_is_logged_with_pattern(self, caplog):
        caplog.set_level(logging.WARNING, logger=ROOT_LOGGER_NAME)
        self.registry.on(CatalogueEvent.DEMO_STEP, MagicMock(side_effect=KeyError("missing")))

        self.registry.trigger(CatalogueEvent.DEMO_STEP, pattern="visitor", data={"step": 2})

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "demo_step" in record.getMessage()
        assert record.pattern == "visitor"

    def test_prebuilt_event_data_is_passed_through(self):
        callback = MagicMock()
        self.registry.on(CatalogueEvent.CUSTOM, callback)
        prepared = EventData(event=CatalogueEvent.CUSTOM, pattern="memento", data={"k": 1})

        self.registry.trigger(CatalogueEvent.CUSTOM, prepared, pattern="ignored")

        callback.assert_called_once_with(prepared)

    def test_list_hooks_and_clear(self):
        self.registry.on(CatalogueEvent.DEMO_START, MagicMock())
        self.registry.on_all(MagicMock())
        assert self.registry.list_hooks() == {"demo_start": 1, "_global": 1}
        assert self.registry.list_hooks(CatalogueEvent.DEMO_END) == {"demo_end": 0}

        self.registry.clear()
        assert self.registry.list_hooks() == {"_global": 0}


def test_event_data_to_dict():
    error = ValueError("bad")
    event = EventData(
        event=CatalogueEvent.DEMO_ERROR,
        pattern="command",
        error=error,
        duration_ms=1.5,
    )
    result = event.to_dict()
    assert result["event"] == "demo_error"
    assert result["pattern"] == "command"
    assert result["error"] == "bad"
    assert result["duration_ms"] == 1.5
    assert "session_id" not in result
