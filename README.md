# grocerycash

A small library for a grocery point of sale. It models items that are sold
from stock and money amounts in a few currencies.

## Installation

```
pip install .
```

## Items

`grocerycash.items.Item` is the base for goods sold from stock. It is built
from a name, a price, an inventory count and a unit, and checks each of them:

- `name` must not be empty. A longer name is cut to its first 8 characters,
  and a note saying so is printed.
- `price` must not be negative.
- `inventory` must be between 0 and 9999999999.
- `unit` must be `"kg"`, `"g"` or `"package"`.

Breaking any of these rules raises `ValueError`, both when the item is made
and when the attribute is set later.

Three kinds of item set the unit for you:

- `Fruit(name, price, inventory, is_greenhouse)`, sold per `kg`.
- `Seasoning(name, price, inventory, quality_rating)`, sold per `g`; the
  rating must be from 1 to 10.
- `Snack(name, price, inventory, package_weight)`, sold per `package`; the
  weight, in grams, must be positive.

`sell()` sells one unit: it takes one from `inventory` and adds one to
`sold_count`. On some sales the item also hands out a free unit, which takes
one more from stock, adds one more to `sold_count` and one to `discount`. The
first free unit comes with the 5th sale. If no stock is left for the free
unit, a note is written to standard error and the free unit is skipped.
Selling an item with no stock raises `OutOfStockError`, a subclass of
`ValueError`. `sell()` returns the item itself.

`str()` of an item gives a formatted line with its name, price, unit and the
quantity sold; the three kinds add a heading and their own detail.

```python
from grocerycash.items import Fruit

apple = Fruit("Apple", 2.5, 20, True)
apple.sell()
print(apple.sold_count, apple.inventory)   # 1 19
print(apple)
```

## Currencies

`grocerycash.currency` has `Usd`, `Eur` and `Irr`, each an amount in one
currency, with `amount`, `unit` and `to_usd()`. The conversion rates are
fixed: 1 EUR is 1.1203 USD, and 80 IRR is 1 USD.

- `+` and `-` work on two amounts in the same currency and give a new amount
  in that currency. Mixing currencies raises `CurrencyMismatchError`, a
  subclass of `ValueError`.
- `<` and `>` compare any two amounts by their value in US dollars.
- `==` holds only for the same currency and the same amount.
- `str()` gives the amount and the unit, and `print()` writes that to
  standard output without a newline.

```python
from grocerycash.currency import Eur, Usd

total = Usd(10.0) + Usd(5.5)
print(total)                    # 15.5 USD
print(Eur(10.0) > Usd(10.0))    # True
```

## What it does not do

This is a library only. It has no command, no screen for a cashier, and no
storage: items and amounts live only in memory. Prices on items are plain
numbers and are not tied to the currency classes, and amounts are not
converted between currencies except through `to_usd()`.

## Running the tests

```
pip install .[test]
pytest
```