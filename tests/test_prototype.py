import pytest

from catalogue.patterns.prototype import Document, PrototypeRegistry


@pytest.fixture
def report():
    return Document(title="Report", tags=["internal"], sections=["Summary"])


def test_deep_clone_is_independent(report):
    clone = report.clone(title="Copy")
    clone.tags.append("draft")
    assert clone.title == "Copy"
    assert report.title == "Report"
    assert report.tags == ["internal"]


def test_shallow_clone_shares_mutable_state(report):
    clone = report.clone(deep=False)
    clone.tags.append("shared")
    assert report.tags == ["internal", "shared"]


def test_clone_rejects_unknown_attribute(report):
    with pytest.raises(AttributeError):
        report.clone(pages=3)


def test_registry_create_and_unregister(report):
    registry = PrototypeRegistry()
    registry.register("report", report)
    registry.register("memo", Document(title="Memo"))
    assert registry.names() == ["memo", "report"]

    created = registry.create("report", author="finance")
    assert created.author == "finance"
    assert created is not report

    registry.unregister("report")
    with pytest.raises(ValueError):
        registry.create("report")


def test_demo(catalogue):
    result = catalogue.run("prototype")
    assert result["quarterly"].title == "Q3 Report"
    assert result["quarterly"].tags == ["internal", "quarterly"]
    assert result["memo"].author == "hr"
    assert result["prototype_tags"] == ["internal"]
