from concurrent.futures import ThreadPoolExecutor

import pytest

from catalogue.patterns.singleton import SingletonReader


def test_direct_construction_is_refused():
    with pytest.raises(RuntimeError):
        SingletonReader()


def test_every_handle_is_the_same_instance():
    first = SingletonReader.get_instance()
    second = SingletonReader.get_instance()
    first.set(0)
    second.set(1)
    assert first is second
    assert SingletonReader.get_instance().get() == 1


def test_concurrent_increments():
    reader = SingletonReader.get_instance()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: SingletonReader.get_instance().increment(), range(100)))
    assert reader.get() == 100


def test_demo(catalogue):
    result = catalogue.run("singleton")
    assert result == {"value": 1, "same_instance": True, "distinct_instances": 1}
