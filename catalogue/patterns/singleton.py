"""
Singleton design pattern.

Theory:
    Ensures a class has only one instance and provides a global point of
    access to it. The class itself guarantees that no other instance is
    created, which makes it an alternative to global variables in a
    namespace. Clients reach the instance exclusively through
    ``get_instance()``.

    Compared to a module of plain functions, a singleton object:

    1. can use runtime information for its initial creation,
    2. can implement an interface and be passed where that interface is
       expected,
    3. can be extended to a limited number of instances larger than one.

Participants:
    - ``SingletonReader``: the singleton, defining ``get_instance()`` which
      lets clients access the unique instance. Direct instantiation from the
      outside is refused.

Modifications and Strategies:
    - ``get_instance()`` uses lazy initialisation: the object is only created
      when first required. Creation is guarded by a class-level lock and the
      instance is checked again once the lock is held, so concurrent first
      calls still create one instance.
    - Shared data held by the singleton needs its own mutex when several
      threads write to it.
    - In Python a module is already a singleton; the class form is useful
      when the instance has to be created lazily or passed as an object.

Attention:
    A singleton used as a store of global data usually hides a design
    problem. It also couples its clients tightly together, and that coupling
    is hard to spot when reading any single client.

Known Uses:
    - A music player playing only one song at a time.
    - A cache giving fast access to frequently used objects.
    - The single owner of some hardware resource.
    - State objects of the state pattern.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category

_CREATION_TOKEN = object()


class SingletonReader:
    """The singleton, holding one mutex-guarded value."""

    _instance: Optional["SingletonReader"] = None
    _instance_lock = threading.Lock()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CREATION_TOKEN:
            raise RuntimeError(
                "SingletonReader cannot be instantiated directly; "
                "use SingletonReader.get_instance()"
            )
        self._data_lock = threading.Lock()
        self._data: int = 0

    @classmethod
    def get_instance(cls) -> "SingletonReader":
        """Return the unique instance, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(_CREATION_TOKEN)
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Drop the instance. Only meant for tests."""
        with cls._instance_lock:
            cls._instance = None

    def get(self) -> int:
        with self._data_lock:
            return self._data

    def set(self, value: int) -> None:
        with self._data_lock:
            self._data = value

    @contextmanager
    def locked(self) -> Iterator["SingletonReader"]:
        """Hold the data lock for a read-modify-write sequence.

        Use ``_data`` directly inside the block; ``get``/``set`` would
        deadlock since the lock is not reentrant.
        """
        with self._data_lock:
            yield self

    def increment(self) -> int:
        with self.locked():
            self._data += 1
            return self._data


@pattern(category=Category.CREATIONAL)
class SingletonDemo(PatternDemo):
    """Writes through several handles and reads the value back."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Show every handle sees the same instance and data.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the value read back, whether all handles are the
            same object, and the number of distinct instances seen by threads
        """
        first = SingletonReader.get_instance()
        first.set(0)
        self.step("First handle wrote 0", verbose)

        second = SingletonReader.get_instance()
        second.set(1)
        self.step("Second handle wrote 1", verbose)

        reader = SingletonReader.get_instance()
        value = reader.get()
        self.step(f"Third handle read {value}", verbose)

        with ThreadPoolExecutor(max_workers=8) as pool:
            instances = list(pool.map(lambda _: SingletonReader.get_instance(), range(16)))
        distinct = len({id(instance) for instance in instances})
        self.step(f"16 threads saw {distinct} distinct instance(s)", verbose)

        return {
            "value": value,
            "same_instance": first is second is reader,
            "distinct_instances": distinct,
        }
