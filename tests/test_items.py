import pytest

from grocerycash.items import Fruit, Item, OutOfStockError, Seasoning, Snack


def test_constructor_sets_units_per_kind():
    assert Fruit("Apple", 2.5, 10, True).unit == "kg"
    assert Seasoning("Pepper", 1.0, 10, 5).unit == "g"
    assert Snack("Chips", 1.0, 10, 50).unit == "package"


def test_empty_name_rejected():
    with pytest.raises(ValueError, match="Name cannot be empty."):
        Item("", 1.0, 1, "kg")


def test_long_name_truncated_with_notice(capsys):
    item = Item("Watermelon", 1.0, 1, "kg")
    assert item.name == "Watermelon"[:8]
    assert "Only the first 8 characters are saved." in capsys.readouterr().out


def test_negative_price_rejected():
    with pytest.raises(ValueError, match="Price cannot be negative."):
        Item("Bread", -0.5, 1, "kg")


@pytest.mark.parametrize("inventory", [-1, 9999999999 + 1])
def test_inventory_out_of_range_rejected(inventory):
    with pytest.raises(ValueError, match="Inventory cannot be negative"):
        Item("Bread", 1.0, inventory, "kg")


def test_invalid_unit_rejected():
    with pytest.raises(ValueError, match="Invalid unit type"):
        Item("Bread", 1.0, 1, "KG")


def test_unit_can_be_changed_to_valid_value():
    item = Item("Bread", 1.0, 1, "kg")
    item.unit = "package"
    assert item.unit == "package"


@pytest.mark.parametrize("rating", [0, 11])
def test_quality_rating_bounds(rating):
    with pytest.raises(ValueError, match="between 1 and 10"):
        Seasoning("Salt", 1.0, 1, rating)


@pytest.mark.parametrize("weight", [0.0, -3.0])
def test_package_weight_must_be_positive(weight):
    with pytest.raises(ValueError, match="Package weight must be positive."):
        Snack("Chips", 1.0, 1, weight)


def test_sell_out_of_stock():
    item = Item("Bread", 1.0, 0, "kg")
    with pytest.raises(OutOfStockError, match="Item out of stock."):
        item.sell()


def test_sell_keeps_stock_balanced():
    item = Item("Rice", 1.0, 30, "kg")
    for _ in range(12):
        item.sell()
        assert item.sold_count + item.inventory == 30


def test_fifth_sale_grants_free_unit():
    item = Item("Rice", 1.0, 10, "kg")
    for _ in range(4):
        item.sell()
    assert item.discount == 0
    item.sell()
    assert item.discount == 1
    assert item.sold_count == 6
    assert item.inventory == 10 - item.sold_count


def test_discount_skipped_without_inventory(capsys):
    item = Item("Rice", 1.0, 5, "kg")
    for _ in range(5):
        item.sell()
    assert item.discount == 0
    assert item.inventory == 0
    assert "lack of inventory" in capsys.readouterr().err


def test_sell_returns_item_for_chaining():
    item = Item("Rice", 1.0, 3, "kg")
    assert item.sell().sell() is item
    assert item.sold_count == 2


def test_fruit_str_format():
    fruit = Fruit("Apple", 2.5, 10, True)
    assert str(fruit) == (
        "----------Fruit:\n"
        "Apple    $2.5        per kg       ((Quantity ---> 0   kg))"
        "   [Cultivation type -> GreenHouse]\n"
    )


def test_natural_fruit_label():
    assert "[Cultivation type -> Natural]" in str(Fruit("Pear", 1.0, 1, False))


def test_seasoning_and_snack_str_tail():
    assert str(Seasoning("Salt", 1.0, 1, 7)).endswith("   [Spice quality rate -> 7]\n")
    assert str(Snack("Chips", 1.0, 1, 50)).endswith(
        "   [Weight of each package -> 50 g]\n"
    )
    assert str(Snack("Chips", 1.0, 1, 50)).startswith("----------Snack:\n")


def test_str_reflects_sales():
    item = Item("Rice", 1.0, 10, "kg")
    item.sell()
    assert f"((Quantity ---> {item.sold_count:<3} kg))" in str(item)