import pytest

from catalogue.patterns.abstract_factory import (
    LinuxFactory,
    OSXFactory,
    factory_for,
)


def test_linux_factory_builds_linux_family():
    factory = LinuxFactory()
    assert factory.create_button().paint() == "LinuxButton"
    assert factory.create_window().size() == (400, 400)


def test_osx_factory_builds_osx_family():
    factory = OSXFactory()
    assert factory.create_button().paint() == "OSXButton"
    assert factory.create_window().size() == (800, 800)


def test_factory_for_is_case_insensitive():
    assert isinstance(factory_for("Linux"), LinuxFactory)
    assert isinstance(factory_for("OSX"), OSXFactory)


def test_factory_for_unknown_system():
    with pytest.raises(ValueError):
        factory_for("amiga")


def test_demo(catalogue):
    result = catalogue.run("abstract_factory")
    assert result["linux"] == {"button": "LinuxButton", "window": (400, 400)}
    assert result["osx"] == {"button": "OSXButton", "window": (800, 800)}
