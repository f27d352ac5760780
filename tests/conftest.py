"""Shared fixtures for the catalogue tests."""

import logging

import pytest

from catalogue import Catalogue
from catalogue.observability.hooks import EventHookRegistry
from catalogue.observability.logging import ROOT_LOGGER_NAME
from catalogue.patterns.singleton import SingletonReader


@pytest.fixture
def hooks():
    return EventHookRegistry()


@pytest.fixture
def catalogue(hooks):
    return Catalogue(hook_registry=hooks, session_id="test-session")


@pytest.fixture(autouse=True)
def reset_singleton():
    SingletonReader._reset()
    yield
    SingletonReader._reset()


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
