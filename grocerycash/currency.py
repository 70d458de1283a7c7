"""Money amounts in a few fixed currencies, with arithmetic and comparison."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "UnsupportedCurrencyError",
    "Usd",
    "Eur",
    "Irr",
]


class CurrencyMismatchError(ValueError):
    """Raised when two amounts in different currencies are combined."""


class UnsupportedCurrencyError(RuntimeError):
    """Raised when a result cannot be built for a currency unit."""


def _format_number(value: float) -> str:
    return f"{value:g}"


class Currency(ABC):
    """An amount of money in one currency."""

    unit: str

    def __init__(self, amount: float) -> None:
        self._amount = float(amount)

    @property
    def amount(self) -> float:
        return self._amount

    @abstractmethod
    def to_usd(self) -> float:
        """Return the amount converted to US dollars."""

    def print(self) -> None:
        """Write the amount and unit to standard output."""
        print(str(self), end="")

    def _combine(self, other: Currency, result: float) -> Currency:
        if self.unit != other.unit:
            raise CurrencyMismatchError("Currencies must be the same.")
        cls = _BY_UNIT.get(self.unit)
        if cls is None:
            raise UnsupportedCurrencyError("Currency type not supported.")
        return cls(result)

    def __add__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._combine(other, self.amount + other.amount)

    def __sub__(self, other: object) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._combine(other, self.amount - other.amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.unit == other.unit and self.amount == other.amount

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.unit, self.amount))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.to_usd() < other.to_usd()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.to_usd() > other.to_usd()

    def __str__(self) -> str:
        return f"{_format_number(self.amount)} {self.unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.amount!r})"


class Usd(Currency):
    """US dollars."""

    unit = "USD"

    def to_usd(self) -> float:
        return self.amount


class Eur(Currency):
    """Euros."""

    unit = "EUR"
    RATE = 1.1203

    def to_usd(self) -> float:
        return self.amount * self.RATE


class Irr(Currency):
    """Iranian rials."""

    unit = "IRR"
    PER_USD = 80.0

    def to_usd(self) -> float:
        return self.amount / self.PER_USD


_BY_UNIT: dict[str, type[Currency]] = {cls.unit: cls for cls in (Usd, Eur, Irr)}