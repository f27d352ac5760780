"""
Flyweight design pattern.

Theory:
    Reduces memory usage by sharing as much data as possible between similar
    objects. In a text editor, every character could be a glyph object
    holding its font outline, metrics and formatting as well as its position,
    yet only the position differs from one character to the next. Everything
    else can be shared between all characters.

    The flyweight is the shared object, used in many contexts at once. It
    stores the intrinsic state (independent of the context) while each
    context stores its extrinsic state (dependent on the context). Sharing
    mutable flyweights between threads requires locking.

Participants:
    - ``CheeseBrand``: the flyweight. Usually a flyweight interface exists so
      that the factory can produce flyweights of several classes; it is left
      out here for brevity.
    - ``Menu``: the flyweight factory. It creates and manages the flyweights
      and makes sure they are shared. Unusually, the shared intrinsic state
      is mutable here (stock levels), so the factory also updates it.
    - ``CheeseShop``: a client keeping its own extrinsic state (units sold and
      revenue) while using the shared menu.

Modifications and Strategies:
    The factory can offer an interface to build flyweights of different
    classes. Clients must never build flyweights themselves, otherwise
    nothing is shared.

Known Uses:
    - Glyphs in document editors.
    - Interned strings and small integer caches in language runtimes.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from catalogue.patterns.base import PatternDemo
from catalogue.registry import pattern
from catalogue.taxonomy import Category


class OutOfStockError(Exception):
    """Raised when a cheese is unknown or not in stock in the quantity asked."""

    def __init__(self, name: str, requested: float, available: float = 0.0) -> None:
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Out of stock: {name!r} (requested {requested:g}, "
            f"available {available:g})"
        )


@dataclass(eq=False)
class CheeseBrand:
    """The flyweight: one brand of cheese shared by all shops."""

    name: str
    cost: float
    quantity: float

    def reduce_quantity(self, quantity: float) -> None:
        if quantity > self.quantity:
            raise OutOfStockError(self.name, quantity, self.quantity)
        self.quantity -= quantity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheeseBrand):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class Menu:
    """The flyweight factory shared by every CheeseShop."""

    def __init__(self) -> None:
        self._items: Dict[str, CheeseBrand] = {}
        self._lock = threading.Lock()

    def add(self, name: str, cost: float, quantity: float) -> CheeseBrand:
        """Add a brand, or update cost and quantity of an existing one.

        Returns:
            The shared flyweight for the brand
        """
        with self._lock:
            cheese = self._items.get(name)
            if cheese is None:
                cheese = CheeseBrand(name, cost, quantity)
                self._items[name] = cheese
            else:
                cheese.cost = cost
                cheese.quantity = quantity
            return cheese

    def get(self, name: str) -> Optional[CheeseBrand]:
        with self._lock:
            return self._items.get(name)

    def sell(self, name: str, quantity: float) -> float:
        """Take cheese out of the shared stock.

        Args:
            name: Brand name
            quantity: Units to sell

        Returns:
            The unit cost of the brand

        Raises:
            OutOfStockError: If the brand is unknown or the stock too low
        """
        with self._lock:
            cheese = self._items.get(name)
            if cheese is None:
                raise OutOfStockError(name, quantity)
            cheese.reduce_quantity(quantity)
            return cheese.cost

    def __len__(self) -> int:
        return len(self._items)


class CheeseShop:
    """Client sharing the menu, with its own sales figures."""

    def __init__(self, menu: Menu) -> None:
        self.menu = menu
        self._units_sold = 0.0
        self._revenue = 0.0

    def stock_cheese(self, name: str, cost: float, quantity: float) -> None:
        self.menu.add(name, cost, quantity)

    def sell(self, name: str, quantity: float) -> None:
        """Sell cheese; sales figures only change when the sale succeeds.

        Raises:
            OutOfStockError: If the menu cannot serve the quantity
        """
        cost = self.menu.sell(name, quantity)
        self._units_sold += quantity
        self._revenue += cost * quantity

    @property
    def units_sold(self) -> float:
        return self._units_sold

    @property
    def revenue(self) -> float:
        return self._revenue


@pattern(category=Category.STRUCTURAL)
class FlyweightDemo(PatternDemo):
    """Two shops selling from one shared menu."""

    def execute(self, verbose: bool = False) -> Dict[str, Any]:
        """Stock and sell cheese from two shops sharing the menu.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with per-shop 'units_sold'/'revenue' and the list of
            'refused' sales
        """
        menu = Menu()
        shop_1 = CheeseShop(menu)
        shop_2 = CheeseShop(menu)
        refused: List[str] = []

        def attempt(shop: CheeseShop, label: str, name: str, quantity: float) -> None:
            try:
                shop.sell(name, quantity)
                self.step(f"{label} sold {quantity:g} {name}", verbose)
            except OutOfStockError as e:
                refused.append(f"{label}: {e}")
                self.step(f"{label} refused: {e}", verbose)

        attempt(shop_1, "shop 1", "blue", 10)
        shop_1.stock_cheese("blue", 2.5, 10)
        attempt(shop_2, "shop 2", "blue", 5)
        shop_2.stock_cheese("white", 1.25, 20)
        attempt(shop_2, "shop 2", "white", 10)
        attempt(shop_1, "shop 1", "blue", 10)
        attempt(shop_1, "shop 1", "white", 10)
        attempt(shop_1, "shop 1", "white", 1)

        return {
            "shop_1": {"units_sold": shop_1.units_sold, "revenue": shop_1.revenue},
            "shop_2": {"units_sold": shop_2.units_sold, "revenue": shop_2.revenue},
            "refused": refused,
        }
