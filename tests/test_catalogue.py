from unittest.mock import MagicMock

import pytest

from catalogue import Catalogue, CatalogueConfig, normalize_name
from catalogue.observability.hooks import CatalogueEvent, EventData
from catalogue.patterns.command import Switch


@pytest.mark.parametrize(
    "name", ["Abstract Factory", "abstract-factory", "abstract_factory", " ABSTRACT  factory "]
)
def test_normalize_name(name):
    assert normalize_name(name) == "abstract_factory"


def test_catalogue_loaded_event(hooks):
    callback = MagicMock()
    hooks.on(CatalogueEvent.CATALOGUE_LOADED, callback)
    Catalogue(hook_registry=hooks, session_id="s1")

    event = callback.call_args[0][0]
    assert event.session_id == "s1"
    assert event.data["patterns"] == 20


def test_summary_groups_by_category(catalogue):
    summary = catalogue.summary()
    assert list(summary) == ["creational", "structural", "behavioural"]
    assert "observer" in summary["behavioural"]
    assert len(catalogue) == 20


def test_get_definition_unknown(catalogue):
    with pytest.raises(ValueError, match="not found"):
        catalogue.get_definition("monad")


def test_describe(catalogue):
    text = catalogue.describe("chain-of-responsibility")
    assert text.startswith("Chain Of Responsibility (behavioural)")
    assert "Theory:" in text
    assert "Participants:" in text


def test_run_fires_lifecycle_events(catalogue, hooks):
    events = []
    hooks.on_all(events.append)

    catalogue.run("strategy")

    kinds = [event.event for event in events]
    assert kinds[0] is CatalogueEvent.DEMO_START
    assert kinds[-1] is CatalogueEvent.DEMO_END
    assert CatalogueEvent.DEMO_STEP in kinds
    assert events[-1].duration_ms >= 0
    assert all(event.pattern == "strategy" for event in events)
    steps = [e.data["step"] for e in events if e.event is CatalogueEvent.DEMO_STEP]
    assert steps == [1, 2, 3]


def test_step_hooks_receive_event_data(catalogue, hooks):
    received = []
    hooks.on(CatalogueEvent.DEMO_STEP, received.append)

    catalogue.run("strategy")

    assert received
    assert all(isinstance(event, EventData) for event in received)
    assert all(isinstance(event.data["message"], str) for event in received)


def test_raising_step_hook_does_not_break_run(catalogue, hooks):
    expected = catalogue.run("strategy")
    failing = MagicMock(side_effect=RuntimeError("hook exploded"))
    ends = MagicMock()
    hooks.on(CatalogueEvent.DEMO_STEP, failing)
    hooks.on(CatalogueEvent.DEMO_END, ends)

    assert catalogue.run("strategy") == expected
    assert failing.call_count == 3
    ends.assert_called_once()


def test_run_error_fires_event_and_reraises(catalogue, hooks, monkeypatch):
    errors = MagicMock()
    hooks.on(CatalogueEvent.DEMO_ERROR, errors)

    def broken(self, cmd):
        raise ValueError(f"Unexpected command: {cmd!r}")

    monkeypatch.setattr(Switch, "execute_command", broken)

    with pytest.raises(ValueError):
        catalogue.run("command")

    event = errors.call_args[0][0]
    assert event.pattern == "command"
    assert isinstance(event.error, ValueError)


def test_verbose_run_prints_steps(catalogue, capsys):
    catalogue.run("facade", verbose=True)
    out = capsys.readouterr().out
    assert "[Facade] parsing source code" in out
    assert "[Facade] linking code" in out


def test_run_all_by_category(catalogue):
    results = catalogue.run_all("creational")
    assert sorted(results) == catalogue.list_patterns("creational")


def test_every_demo_runs(catalogue):
    results = catalogue.run_all()
    assert len(results) == 20
    assert all(isinstance(result, dict) for result in results.values())


def test_disabled_categories_are_hidden(hooks):
    config = CatalogueConfig(enabled_categories=["structural"])
    catalogue = Catalogue(hook_registry=hooks, config=config)

    assert catalogue.summary() == {"structural": catalogue.list_patterns()}
    assert "builder" not in catalogue
    with pytest.raises(ValueError):
        catalogue.run("builder")
