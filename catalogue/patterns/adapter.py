"""
Adapter design pattern.

Theory:
    Converts the interface of an existing class into another interface that
    clients expect. Adapters let classes work together that otherwise could
    not because of incompatible interfaces, without modifying their source
    code.

    The adapter either inherits the adaptee's implementation (class adapter,
    via multiple inheritance) or holds an adaptee and forwards requests to it
    (object adapter). The example below is an object adapter: the
    ``USBCharger`` owns the ``IPhone`` it is charging.

Participants:
    - ``TargetInterface``: the domain-specific interface the client uses.
    - ``Client``: requires the objects it handles to implement
      ``TargetInterface``.
    - ``IPhone``: the adaptee, with the needed behaviour behind a different
      interface.
    - ``USBCharger``: the adapter, exposing the adaptee through
      ``TargetInterface``.

Modifications and Strategies:
    In languages with multiple inheritance, such as Python, a class adapter
    simply subclasses both the target and the adaptee.

    How much work an adapter does depends on how similar the interfaces are.
    Here only a method name differs; in general arguments may need
    converting or objects creating, which costs performance compared to the
    original interface.

    Two-way adapters also expose the adaptee's interface, so they can be
    used wherever the adaptee is used.

Known Uses:
    - InterViews uses it for some graphics objects.
    - Wrapping third-party clients behind an application's own interface.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class TargetInterface(ABC):
    """The interface the client expects."""

    @abstractmethod
    def recharge(self) -> str:
        """Recharge the connected device."""


class Client:
    """Client only working with TargetInterface."""

    @staticmethod
    def do_stuff_with_usb(obj: TargetInterface) -> str:
        return obj.recharge()


class IPhone:
    """The adaptee."""

    def charge(self) -> str:
        return "Is charging"


class USBCharger(TargetInterface):
    """Object adapter giving an IPhone the TargetInterface."""

    def __init__(self, phone: Optional[IPhone] = None) -> None:
        self.phone = phone or IPhone()

    def recharge(self) -> str:
        return f"{self.phone.charge()} using a USB-C adapter"


class IPhoneClassAdapter(IPhone, TargetInterface):
    """Class adapter: inherits the adaptee and implements the target."""

    def recharge(self) -> str:
        return f"{self.charge()} using a USB-C adapter"


@pattern(category=Category.STRUCTURAL)
class AdapterDemo(PatternDemo):
    """Charges a phone through an object adapter and a class adapter."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Let the client charge through both adapters.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with 'object_adapter' and 'class_adapter' results
        """
        object_result = Client.do_stuff_with_usb(USBCharger())
        self.step(f"Object adapter: {object_result}", verbose)

        class_result = Client.do_stuff_with_usb(IPhoneClassAdapter())
        self.step(f"Class adapter: {class_result}", verbose)

        return {"object_adapter": object_result, "class_adapter": class_result}
