import pytest

from catalogue.patterns.composite import CompositeGraphic, Ellipse


def test_nested_render():
    root = CompositeGraphic(CompositeGraphic(Ellipse(), Ellipse()), Ellipse())
    assert root.render() == "EllipseEllipseEllipse"


def test_remove_last_and_specific_child():
    first, second = Ellipse(), Ellipse()
    group = CompositeGraphic(first, second)
    group.remove(first)
    assert group.children == [second]
    group.remove()
    assert len(group) == 0


def test_remove_from_empty_composite():
    with pytest.raises(IndexError):
        CompositeGraphic().remove()


def test_cannot_contain_itself():
    group = CompositeGraphic()
    with pytest.raises(ValueError):
        group.add(group)


def test_cannot_contain_an_ancestor():
    outer = CompositeGraphic()
    middle = CompositeGraphic()
    inner = CompositeGraphic()
    outer.add(middle)
    middle.add(inner)

    with pytest.raises(ValueError):
        inner.add(outer)
    assert len(inner) == 0
    assert outer.contains(inner)
    assert not inner.contains(outer)


def test_children_is_a_copy():
    group = CompositeGraphic(Ellipse())
    group.children.clear()
    assert len(group) == 1


def test_demo(catalogue):
    result = catalogue.run("composite")
    assert result == {"full": "Ellipse" * 4, "pruned": "Ellipse" * 3}
