import re

import pytest

from drillbox import shopping
from drillbox.shopping import (
    MAX_CART_ITEMS,
    MAX_PRODUCTS,
    CartItem,
    Product,
    Shop,
    ShoppingError,
    current_date,
)


@pytest.fixture
def shop(tmp_path):
    return Shop(tmp_path / "products.txt", tmp_path / "history.txt")


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_add_product_appends_record(shop):
    product = shop.add_product(7, "Blue Pen", 1.5)
    assert product == Product(7, "Blue Pen", 1.5)
    assert shop.products == (product,)
    lines = shop.products_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["ID: 7 | NAME: Blue Pen | PRICE: $1.50"]


def test_add_product_rejects_bad_name(shop):
    with pytest.raises(ShoppingError):
        shop.add_product(1, "   ", 2.0)
    with pytest.raises(ShoppingError):
        shop.add_product(1, "two\nlines", 2.0)
    with pytest.raises(ShoppingError):
        shop.add_product(1, "n" * 50, 2.0)
    assert shop.products == ()


def test_product_list_has_limit(shop):
    for product_id in range(MAX_PRODUCTS):
        shop.add_product(product_id, f"item{product_id}", 1.0)
    assert shop.products_full
    with pytest.raises(ShoppingError, match="full"):
        shop.add_product(999, "extra", 1.0)
    assert len(shop.products) == MAX_PRODUCTS


def test_add_to_cart_requires_known_product(shop):
    with pytest.raises(ShoppingError, match="not found"):
        shop.add_to_cart(3, 1)
    assert shop.cart == ()


@pytest.mark.parametrize("quantity", [0, -2])
def test_add_to_cart_rejects_bad_quantity(shop, quantity):
    shop.add_product(3, "Mug", 4.25)
    with pytest.raises(ShoppingError, match="Invalid quantity"):
        shop.add_to_cart(3, quantity)
    assert shop.cart == ()


def test_cart_has_limit(shop):
    shop.add_product(3, "Mug", 4.25)
    for _ in range(MAX_CART_ITEMS):
        shop.add_to_cart(3, 1)
    with pytest.raises(ShoppingError, match="full"):
        shop.add_to_cart(3, 1)
    assert len(shop.cart) == MAX_CART_ITEMS


def test_cart_lines_and_total(shop):
    mug = shop.add_product(3, "Mug", 4.25)
    pen = shop.add_product(7, "Blue Pen", 1.5)
    shop.add_to_cart(7, 2)
    shop.add_to_cart(3, 3)
    lines = shop.cart_lines()
    assert [(p, i) for p, i, _ in lines] == [(pen, CartItem(7, 2)), (mug, CartItem(3, 3))]
    for product, item, cost in lines:
        assert cost == pytest.approx(product.price * item.quantity)
    assert shop.cart_total() == pytest.approx(sum(cost for _, _, cost in lines))


def test_checkout_writes_history_and_empties_cart(shop):
    shop.add_product(7, "Blue Pen", 1.5)
    shop.add_to_cart(7, 2)
    expected_total = shop.cart_total()
    total = shop.checkout("01-02-2024")
    assert total == pytest.approx(expected_total)
    assert shop.cart == ()
    assert shop.purchase_history() == [
        "ITEM NUMBER: 1 --> DATE: 01-02-2024 | PRODUCT ID: 7 | NAME: Blue Pen"
        " | PRICE: $1.50 | QUANTITY: 2 | COST: $3.00 | TOTAL: $3.00"
    ]


def test_history_accumulates_over_checkouts(shop):
    shop.add_product(3, "Mug", 4.25)
    shop.add_to_cart(3, 1)
    shop.add_to_cart(3, 2)
    shop.checkout("05-05-2024")
    shop.add_to_cart(3, 1)
    shop.checkout("06-05-2024")
    history = shop.purchase_history()
    assert len(history) == 3
    assert [line.split(" -->")[0] for line in history] == [
        "ITEM NUMBER: 1",
        "ITEM NUMBER: 2",
        "ITEM NUMBER: 1",
    ]
    assert "DATE: 06-05-2024" in history[2]


def test_checkout_of_empty_cart_fails(shop):
    with pytest.raises(ShoppingError, match="Cart is empty"):
        shop.checkout("01-01-2024")
    assert not shop.history_path.exists()


def test_missing_history_raises(shop):
    with pytest.raises(ShoppingError, match="No purchase history found"):
        shop.purchase_history()


def test_checkout_defaults_to_current_date(shop):
    shop.add_product(3, "Mug", 4.25)
    shop.add_to_cart(3, 1)
    shop.checkout()
    assert f"DATE: {current_date()} |" in shop.purchase_history()[0]


def test_current_date_format():
    stamp = current_date()
    match = re.fullmatch(r"(\d{2})-(\d{2})-(\d{4,})", stamp)
    assert match is not None
    day, month, _ = (int(part) for part in match.groups())
    assert 1 <= day <= 31
    assert 1 <= month <= 12


def test_main_session(monkeypatch, capsys, tmp_path):
    products = tmp_path / "p.txt"
    history = tmp_path / "h.txt"
    _feed(
        monkeypatch,
        ["1", "7", "Blue Pen", "1.5", "2", "3", "7", "2", "4", "5", "6", "0"],
    )
    code = shopping.main(["--products", str(products), "--history", str(history)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Product added successfully!" in out
    assert "ID: 7 | NAME: Blue Pen | PRICE: $1.50" in out
    assert "Product successfully added to the cart!" in out
    assert "PRODUCT: Blue Pen | PRICE: $1.50 | QUANTITY: 2" in out
    assert "Checkout successful! Total Amount: $3.00" in out
    assert "=== PURCHASE HISTORY ===" in out
    assert out.rstrip().endswith("EXITING!!!")
    assert len(history.read_text(encoding="utf-8").splitlines()) == 1


def test_main_reports_errors(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, ["9", "2", "4", "5", "6", "3", "42"])
    code = shopping.main(
        ["--products", str(tmp_path / "p.txt"), "--history", str(tmp_path / "h.txt")]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "ERROR: Invalid option, please try again" in out
    assert "ERROR: No products to display" in out
    assert "ERROR: Your cart is empty" in out
    assert "ERROR: Cart is empty, add items before checkout" in out
    assert "ERROR: No purchase history found" in out
    assert "ERROR: Product not found, please try again" in out