"""
State design pattern.

Theory:
    Implements a state machine in an object-oriented way: each state is a
    class implementing the state interface, and transitions happen by
    swapping the state object held by the context. The context appears to
    change its class when its internal state changes.

    State-specific behaviour is localised, conditionals over the current
    state disappear, new states are easy to add and transitions are
    explicit.

Participants:
    - ``Post``: the context clients use. It holds the current state and
      delegates state-dependent requests to it.
    - ``State``: the interface encapsulating state-dependent behaviour.
    - ``Draft``, ``PendingReview``, ``Published``: the concrete states.

Modifications and Strategies:
    Transitions can be decided by the context or by the states. Here each
    state returns its successor, and the context only installs it. A state
    that does not accept a transition returns itself.

    States without data can be shared; creating them ahead of time saves
    work when transitions happen often.

Known Uses:
    - Tools in drawing programs.
    - Ticket machines.
    - TCP connection handling.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class State(ABC):
    """Interface of the post states."""

    name = "state"

    @abstractmethod
    def request_review(self) -> "State":
        """State after a review was requested."""

    @abstractmethod
    def approve(self) -> "State":
        """State after an approval."""

    def content(self, post: "Post") -> str:
        return ""


class Draft(State):
    name = "draft"

    def request_review(self) -> State:
        return PendingReview()

    def approve(self) -> State:
        return self


class PendingReview(State):
    name = "pending review"

    def request_review(self) -> State:
        return self

    def approve(self) -> State:
        return Published()


class Published(State):
    name = "published"

    def request_review(self) -> State:
        return self

    def approve(self) -> State:
        return self

    def content(self, post: "Post") -> str:
        return post.text


class Post:
    """A blog post going through draft, review and publication."""

    def __init__(self) -> None:
        self.state: State = Draft()
        self.text = ""

    def add_text(self, text: str) -> None:
        self.text += text

    @property
    def content(self) -> str:
        """The visible content; empty until the post is published."""
        return self.state.content(self)

    def request_review(self) -> None:
        self.state = self.state.request_review()

    def approve(self) -> None:
        self.state = self.state.approve()


@pattern(category=Category.BEHAVIOURAL)
class StateDemo(PatternDemo):
    """Walks a post from draft to publication."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Write, review and approve a post.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the '(state, content)' pairs after each action
        """
        post = Post()
        history = []

        def record(action: str) -> None:
            history.append((post.state.name, post.content))
            self.step(f"{action}: state={post.state.name!r} content={post.content!r}", verbose)

        post.add_text("I ate a salad for lunch today")
        record("add_text")
        post.approve()
        record("approve")
        post.request_review()
        record("request_review")
        post.approve()
        record("approve")

        return {"history": history}
