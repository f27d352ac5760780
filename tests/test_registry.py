import logging

import pytest

from catalogue.observability.logging import ROOT_LOGGER_NAME
from catalogue.patterns.base import PatternDemo
from catalogue.registry import PatternRegistry, default_registry, pattern
from catalogue.taxonomy import Category, PatternDefinition, parse_docstring

DOCSTRING = """
Sample design pattern.

Theory:
    First paragraph.

    Second paragraph.

Participants:
    - ``Thing``: does things.
"""


def test_parse_docstring():
    summary, sections = parse_docstring(DOCSTRING)
    assert summary == "Sample design pattern."
    assert list(sections) == ["Theory", "Participants"]
    assert sections["Theory"] == "First paragraph.\n\nSecond paragraph."
    assert sections["Participants"] == "- ``Thing``: does things."


def test_parse_empty_docstring():
    assert parse_docstring("") == ("", {})


@pytest.mark.parametrize("value", ["behavioral", "Behavioural", Category.BEHAVIOURAL])
def test_category_parse(value):
    assert Category.parse(value) is Category.BEHAVIOURAL


def test_category_parse_unknown():
    with pytest.raises(ValueError):
        Category.parse("concurrency")


class TestPatternRegistry:
    def setup_method(self):
        self.registry = PatternRegistry()
        self.registry.discover_package("catalogue.patterns")

    def test_every_pattern_is_discovered(self):
        assert len(self.registry) == 20
        assert "base" not in self.registry
        assert "abstract_factory" in self.registry

    def test_list_by_category(self):
        assert self.registry.list_patterns(Category.CREATIONAL) == [
            "abstract_factory",
            "builder",
            "factory_method",
            "prototype",
            "singleton",
        ]
        assert len(self.registry.list_patterns("structural")) == 7
        assert len(self.registry.list_patterns("behavioural")) == 8

    def test_definitions_carry_prose(self):
        definition = self.registry.get("flyweight")
        assert definition.title == "Flyweight"
        assert definition.summary == "Flyweight design pattern."
        assert "Theory" in definition.sections
        assert definition.module == "catalogue.patterns.flyweight"
        assert definition.to_dict()["category"] == "structural"

    def test_unknown_pattern(self):
        assert self.registry.get("monad") is None
        assert self.registry.get_demo_class("monad") is None

    def test_discovery_is_idempotent(self):
        assert self.registry.discover_package("catalogue.patterns") == 0


def test_decorator_registers_demo():
    @pattern(category="behavioural", name="sample_pattern", title="Sample")
    class SampleDemo(PatternDemo):
        def execute(self, verbose=False):
            return {}

    try:
        registry = PatternRegistry()
        assert SampleDemo.pattern_name == "sample_pattern"
        assert registry.get_demo_class("sample_pattern") is SampleDemo
        assert registry.get("sample_pattern").category is Category.BEHAVIOURAL
    finally:
        from catalogue import registry as registry_module

        registry_module._PATTERN_REGISTRY.pop("sample_pattern", None)


def test_register_explicit_definition():
    registry = PatternRegistry()
    definition = PatternDefinition(
        name="extra",
        title="Extra",
        category=Category.CREATIONAL,
        demo_class=PatternDemo,
    )
    registry.register(definition)
    assert registry.get("extra") is definition
    assert "extra" not in default_registry


def test_discovery_skips_module_failing_at_import(tmp_path, monkeypatch, caplog):
    package_dir = tmp_path / "broken_patterns"
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("")
    (package_dir / "broken.py").write_text('raise ValueError("bad module")\n')
    (package_dir / "plain.py").write_text("VALUE = 1\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    caplog.set_level(logging.WARNING, logger=ROOT_LOGGER_NAME)

    registry = PatternRegistry()
    assert registry.discover_package("broken_patterns") == 0

    messages = [record.getMessage() for record in caplog.records]
    assert any("broken_patterns.broken" in message and "bad module" in message for message in messages)
