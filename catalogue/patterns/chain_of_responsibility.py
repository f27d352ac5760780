"""
Chain of responsibility design pattern.

Theory:
    Avoids coupling the sender of a request to its receiver by giving more
    than one object a chance to handle it. The receiving objects are chained
    and the request is passed along the chain until one of them handles it.

    Each handler decides which requests it is responsible for and forwards
    the rest to its successor. It is an object-oriented form of a chain of
    ``if``/``elif`` blocks whose condition-action pairs can be rearranged and
    reconfigured at runtime.

Participants:
    - ``PurchasePower``: the handler interface, holding the successor link.
    - ``Employee``: a concrete handler approving purchases below its limit.
    - ``PurchaseRequest``: the request travelling along the chain.
    - The client: initiates the request on the first handler of the chain.

Modifications and Strategies:
    Some handlers can act as dispatchers sending a request in several
    directions, forming a tree of responsibilities; logging frameworks with
    hierarchical loggers work this way.

    Structurally the pattern is nearly identical to Decorator. The
    difference is that every decorator handles the request, whereas exactly
    one handler of the chain does.

    Handlers may be of different classes as long as they share the
    interface. A single class is enough here since all handlers differ only
    in their data.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category

UNHANDLED = "Request amount is too high"


@dataclass(frozen=True)
class PurchaseRequest:
    """A purchase waiting for approval."""

    amount: int
    purpose: str


class PurchasePower(ABC):
    """Handler interface with the successor link."""

    def __init__(self) -> None:
        self.successor: Optional["PurchasePower"] = None

    def set_successor(self, successor: "PurchasePower") -> "PurchasePower":
        """Link the next handler; returns it so chains read left to right."""
        self.successor = successor
        return successor

    @property
    @abstractmethod
    def allowable(self) -> int:
        """Amounts strictly below this are approved by the handler."""

    @property
    @abstractmethod
    def role(self) -> str:
        """Who approves the request."""

    def process_request(self, request: PurchaseRequest) -> str:
        if request.amount < self.allowable:
            return f"{self.role} will approve ${request.amount} for {request.purpose}"
        if self.successor is not None:
            return self.successor.process_request(request)
        return UNHANDLED


class Employee(PurchasePower):
    """A concrete handler."""

    def __init__(self, role: str, allowable: int) -> None:
        super().__init__()
        self._role = role
        self._allowable = allowable

    @property
    def allowable(self) -> int:
        return self._allowable

    @property
    def role(self) -> str:
        return self._role

    def __repr__(self) -> str:
        return f"Employee(role={self._role!r}, allowable={self._allowable})"


def build_chain(*handlers: PurchasePower) -> PurchasePower:
    """Link handlers in the given order.

    Returns:
        The first handler of the chain

    Raises:
        ValueError: If no handler is given
    """
    if not handlers:
        raise ValueError("A chain needs at least one handler")
    for current, successor in zip(handlers, handlers[1:]):
        current.set_successor(successor)
    return handlers[0]


@pattern(category=Category.BEHAVIOURAL)
class ChainOfResponsibilityDemo(PatternDemo):
    """Sends purchase requests up the management chain."""

    REQUESTS = [
        PurchaseRequest(12_000, "general expenses"),
        PurchaseRequest(1_000_000, "buy a house"),
        PurchaseRequest(500, "desk repair"),
        PurchaseRequest(35_000, "company car"),
        PurchaseRequest(9_000, "retreat event"),
    ]

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Process every request from the bottom of the chain.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the ordered 'decisions'
        """
        chain = build_chain(
            Employee("manager", 5_000),
            Employee("director", 10_000),
            Employee("vice-president", 20_000),
            Employee("president", 40_000),
        )

        decisions: List[str] = []
        for request in self.REQUESTS:
            decision = chain.process_request(request)
            decisions.append(decision)
            self.step(f"${request.amount} for {request.purpose}: {decision}", verbose)

        return {"decisions": decisions}
