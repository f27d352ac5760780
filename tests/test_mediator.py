import pytest

from catalogue.patterns.mediator import (
    Button,
    ButtonBook,
    ButtonSearch,
    ButtonView,
    Display,
    ParticipantMediator,
)


@pytest.fixture
def wired():
    view, search, book = ButtonView(), ButtonSearch(), ButtonBook()
    mediator = ParticipantMediator()
    mediator.register_view(view)
    mediator.register_search(search)
    mediator.register_book(book)
    mediator.register_display(Display())
    return mediator, view, search, book


def test_mediator_routes_and_counts(wired):
    mediator = wired[0]
    assert mediator.view() == "viewing"
    assert mediator.book() == "booking"
    assert mediator.search() == "searching"
    assert mediator.view() == "viewing"
    assert mediator.get_counts() == (2, 1, 1)


def test_buttons_click_through_mediator(wired):
    mediator, view, search, book = wired
    assert view.mediator is mediator
    assert book.click() == "booking"
    assert search.click() == "searching"
    assert mediator.get_counts() == (0, 1, 1)


def test_missing_colleague():
    with pytest.raises(RuntimeError):
        ParticipantMediator().view()


def test_missing_display():
    mediator = ParticipantMediator()
    mediator.register_view(ButtonView())
    with pytest.raises(RuntimeError, match="display"):
        mediator.view()


def test_unregistered_button():
    with pytest.raises(RuntimeError):
        ButtonView().click()


def test_button_needs_a_mediator_action():
    with pytest.raises(TypeError):
        Button()


def test_demo(catalogue):
    result = catalogue.run("mediator")
    assert result["shown"] == ["viewing", "booking", "searching", "viewing"]
    assert result["counts"] == (2, 1, 1)
