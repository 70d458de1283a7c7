"""Shop items with stock keeping and a buy-five-get-one sales rule."""

from __future__ import annotations

import sys

__all__ = ["Item", "Fruit", "Seasoning", "Snack", "OutOfStockError"]

MAX_NAME_LENGTH = 8
MAX_INVENTORY = 9999999999
VALID_UNITS = ("kg", "g", "package")


class OutOfStockError(ValueError):
    """Raised when an item with no inventory is sold."""


def _format_number(value: float) -> str:
    return f"{value:g}"


class Item:
    """A product on sale, with its price, stock and sales record."""

    def __init__(self, name: str, price: float, inventory: int, unit: str) -> None:
        self.name = name
        self.price = price
        self.inventory = inventory
        self.unit = unit
        self._sold_count = 0
        self._discount = 0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise ValueError("Name cannot be empty.")
        if len(value) > MAX_NAME_LENGTH:
            print(f"Only the first {MAX_NAME_LENGTH} characters are saved.")
            value = value[:MAX_NAME_LENGTH]
        self._name = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if value < 0.0:
            raise ValueError("Price cannot be negative.")
        self._price = float(value)

    @property
    def inventory(self) -> int:
        return self._inventory

    @inventory.setter
    def inventory(self, value: int) -> None:
        if value < 0 or value > MAX_INVENTORY:
            raise ValueError(
                "Inventory cannot be negative or a very large number [0 , 9999999999]"
            )
        self._inventory = int(value)

    @property
    def unit(self) -> str:
        return self._unit

    @unit.setter
    def unit(self, value: str) -> None:
        if value not in VALID_UNITS:
            raise ValueError(
                "Invalid unit type. Use 'kg', 'g', or 'package' in lowercase."
            )
        self._unit = value

    @property
    def sold_count(self) -> int:
        return self._sold_count

    @property
    def discount(self) -> int:
        return self._discount

    def sell(self) -> Item:
        """Sell one unit, adding a free unit whenever the sales rule grants one."""
        if self.inventory < 1:
            raise OutOfStockError("Item out of stock.")
        self._sold_count += 1
        self.inventory -= 1

        if self._sold_count % 5 == self._sold_count // 5 - 1:
            if self.inventory < 1:
                sys.stderr.write(
                    "Your discount cannot be calculated due to lack of inventory."
                )
                return self
            self._sold_count += 1
            self._discount += 1
            self.inventory -= 1
        return self

    def _summary(self) -> str:
        return (
            f"{self.name:<8} ${_format_number(self.price):<10}"
            f" per {self.unit:<8} ((Quantity ---> {self.sold_count:<3} {self.unit}))"
        )

    def __str__(self) -> str:
        return self._summary()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, price={self.price!r}, "
            f"inventory={self.inventory!r})"
        )


class Fruit(Item):
    """Fruit sold by the kilogram."""

    def __init__(
        self, name: str, price: float, inventory: int, is_greenhouse: bool
    ) -> None:
        super().__init__(name, price, inventory, "kg")
        self.is_greenhouse = bool(is_greenhouse)

    def __str__(self) -> str:
        kind = "GreenHouse" if self.is_greenhouse else "Natural"
        return (
            f"----------Fruit:\n{self._summary()}"
            f"   [Cultivation type -> {kind}]\n"
        )


class Seasoning(Item):
    """Seasoning sold by the gram, with a quality rating from 1 to 10."""

    def __init__(
        self, name: str, price: float, inventory: int, quality_rating: int
    ) -> None:
        super().__init__(name, price, inventory, "g")
        self.quality_rating = quality_rating

    @property
    def quality_rating(self) -> int:
        return self._quality_rating

    @quality_rating.setter
    def quality_rating(self, value: int) -> None:
        if value < 1 or value > 10:
            raise ValueError(
                "The spice quality rating must be a number between 1 and 10."
            )
        self._quality_rating = int(value)

    def __str__(self) -> str:
        return (
            f"----------Seasoning:\n{self._summary()}"
            f"   [Spice quality rate -> {self.quality_rating}]\n"
        )


class Snack(Item):
    """Snack sold by the package, each of a given weight in grams."""

    def __init__(
        self, name: str, price: float, inventory: int, package_weight: float
    ) -> None:
        super().__init__(name, price, inventory, "package")
        self.package_weight = package_weight

    @property
    def package_weight(self) -> float:
        return self._package_weight

    @package_weight.setter
    def package_weight(self, value: float) -> None:
        if value <= 0.0:
            raise ValueError("Package weight must be positive.")
        self._package_weight = float(value)

    def __str__(self) -> str:
        return (
            f"----------Snack:\n{self._summary()}"
            f"   [Weight of each package -> {_format_number(self.package_weight)} g]\n"
        )