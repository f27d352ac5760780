import pytest

from catalogue.patterns.chain_of_responsibility import (
    Employee,
    PurchaseRequest,
    build_chain,
)


@pytest.fixture
def chain():
    return build_chain(
        Employee("manager", 5_000),
        Employee("director", 10_000),
        Employee("president", 40_000),
    )


@pytest.mark.parametrize(
    "amount, expected",
    [
        (500, "manager will approve $500 for office supplies"),
        (5_000, "director will approve $5000 for office supplies"),
        (39_999, "president will approve $39999 for office supplies"),
        (40_000, "Request amount is too high"),
    ],
)
def test_request_travels_until_handled(chain, amount, expected):
    assert chain.process_request(PurchaseRequest(amount, "office supplies")) == expected


def test_set_successor_returns_successor():
    manager = Employee("manager", 5_000)
    director = Employee("director", 10_000)
    assert manager.set_successor(director) is director
    assert manager.successor is director


def test_empty_chain():
    with pytest.raises(ValueError):
        build_chain()


def test_demo(catalogue):
    decisions = catalogue.run("chain of responsibility")["decisions"]
    assert decisions[0] == "vice-president will approve $12000 for general expenses"
    assert decisions[1] == "Request amount is too high"
    assert decisions[2] == "manager will approve $500 for desk repair"
