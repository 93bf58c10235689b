"""Online shop: a product list, a shopping cart, checkout and a purchase history.

Products and the cart live in memory for the session. Each product added is
also appended to a products file. Each checkout appends one line per cart item
to a history file.
"""

from __future__ import annotations

import argparse
import datetime as _dt
from dataclasses import dataclass
from pathlib import Path

MAX_PRODUCTS = 100
MAX_CART_ITEMS = 50
DEFAULT_PRODUCTS_FILE = "products.txt"
DEFAULT_HISTORY_FILE = "history.txt"

_NAME_LIMIT = 49


class ShoppingError(Exception):
    """Raised when a shop operation cannot be carried out."""


@dataclass(frozen=True)
class Product:
    """A product offered by the shop."""

    product_id: int
    name: str
    price: float

    def describe(self) -> str:
        return f"ID: {self.product_id} | NAME: {self.name} | PRICE: ${self.price:.2f}"


@dataclass(frozen=True)
class CartItem:
    """A product id and how many of it are in the cart."""

    product_id: int
    quantity: int


def current_date() -> str:
    """Return today's local date as DD-MM-YYYY."""
    today = _dt.date.today()
    return f"{today.day:02d}-{today.month:02d}-{today.year}"


class Shop:
    """Products and cart of one shopping session."""

    def __init__(
        self,
        products_path: str | Path = DEFAULT_PRODUCTS_FILE,
        history_path: str | Path = DEFAULT_HISTORY_FILE,
    ) -> None:
        self.products_path = Path(products_path)
        self.history_path = Path(history_path)
        self._products: list[Product] = []
        self._cart: list[CartItem] = []

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def cart(self) -> tuple[CartItem, ...]:
        return tuple(self._cart)

    @property
    def products_full(self) -> bool:
        return len(self._products) >= MAX_PRODUCTS

    @property
    def cart_full(self) -> bool:
        return len(self._cart) >= MAX_CART_ITEMS

    def find_product(self, product_id: int) -> Product | None:
        """Return the first product with ``product_id``, or None."""
        return next((p for p in self._products if p.product_id == product_id), None)

    def add_product(self, product_id: int, name: str, price: float) -> Product:
        """Add a product and append it to the products file."""
        if self.products_full:
            raise ShoppingError("Cannot add more products! The product list is full")
        if not name.strip() or "\n" in name or "\r" in name:
            raise ShoppingError("product name must be a non-empty single line")
        if len(name) > _NAME_LIMIT:
            raise ShoppingError(f"product name is longer than {_NAME_LIMIT} characters")
        product = Product(int(product_id), name, float(price))
        try:
            with self.products_path.open("a", encoding="utf-8") as records:
                records.write(product.describe() + "\n")
        except OSError as exc:
            raise ShoppingError("Could not save products to file") from exc
        self._products.append(product)
        return product

    def add_to_cart(self, product_id: int, quantity: int) -> CartItem:
        """Put ``quantity`` of a known product into the cart."""
        if self.cart_full:
            raise ShoppingError("Cannot add more items! The cart is full")
        if self.find_product(product_id) is None:
            raise ShoppingError("Product not found, please try again")
        if quantity <= 0:
            raise ShoppingError("Invalid quantity")
        item = CartItem(int(product_id), int(quantity))
        self._cart.append(item)
        return item

    def cart_lines(self) -> list[tuple[Product, CartItem, float]]:
        """Return ``(product, item, cost)`` for each cart item, in cart order."""
        lines = []
        for item in self._cart:
            product = self.find_product(item.product_id)
            if product is not None:
                lines.append((product, item, product.price * item.quantity))
        return lines

    def cart_total(self) -> float:
        """Return the total cost of the cart."""
        return sum(cost for _, _, cost in self.cart_lines())

    def checkout(self, date: str | None = None) -> float:
        """Record the cart in the history file, empty the cart and return its total."""
        if not self._cart:
            raise ShoppingError("Cart is empty, add items before checkout")
        when = date if date is not None else current_date()
        total = self.cart_total()
        entries = []
        for number, item in enumerate(self._cart, start=1):
            product = self.find_product(item.product_id)
            if product is None:
                continue
            cost = product.price * item.quantity
            entries.append(
                f"ITEM NUMBER: {number} --> DATE: {when} | PRODUCT ID: {product.product_id}"
                f" | NAME: {product.name} | PRICE: ${product.price:.2f}"
                f" | QUANTITY: {item.quantity} | COST: ${cost:.2f} | TOTAL: ${total:.2f}\n"
            )
        try:
            with self.history_path.open("a", encoding="utf-8") as history:
                history.writelines(entries)
        except OSError as exc:
            raise ShoppingError("Could not find the history file") from exc
        self._cart.clear()
        return total

    def purchase_history(self) -> list[str]:
        """Return the lines of the history file."""
        try:
            text = self.history_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ShoppingError("No purchase history found") from exc
        return text.splitlines()


_MENU = (
    "========= MENU =========\n"
    "1. Add Product\n"
    "2. Display Products\n"
    "3. Add to Cart\n"
    "4. View Cart\n"
    "5. Checkout\n"
    "6. View Purchase History\n"
    "0. Exit"
)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _ask_float(prompt: str) -> float | None:
    try:
        return float(input(prompt).strip())
    except ValueError:
        return None


def _add_product(shop: Shop) -> None:
    if shop.products_full:
        print("ERROR: Cannot add more products! The product list is full")
        return
    product_id = _ask_int("Enter product id: ")
    name = input("Enter product name: ").strip()
    price = _ask_float("Enter product price: ")
    if product_id is None or price is None:
        print("ERROR: Invalid product details\n")
        return
    try:
        shop.add_product(product_id, name, price)
    except ShoppingError as exc:
        print(f"ERROR: {exc}\n")
        return
    print("\nProduct added successfully!\n")


def _display_products(shop: Shop) -> None:
    if not shop.products:
        print("ERROR: No products to display\n")
        return
    print("===== PRODUCT LIST =====")
    for product in shop.products:
        print(product.describe())
    print()


def _add_to_cart(shop: Shop) -> None:
    if shop.cart_full:
        print("ERROR: Cannot add more items! The cart is full")
        return
    product_id = _ask_int("Enter product id to add to the cart: ")
    product = shop.find_product(product_id) if product_id is not None else None
    if product is None:
        print("\nERROR: Product not found, please try again\n")
        return
    quantity = _ask_int(
        f"Enter quantity for product id/name '{product.product_id}'/'{product.name}': "
    )
    if quantity is None or quantity <= 0:
        print("ERROR: Invalid quantity")
        return
    shop.add_to_cart(product.product_id, quantity)
    print("\nProduct successfully added to the cart!\n")


def _view_cart(shop: Shop) -> None:
    if not shop.cart:
        print("ERROR: Your cart is empty\n")
        return
    print("====== CART ITEMS ======")
    for product, item, cost in shop.cart_lines():
        print(
            f"PRODUCT: {product.name} | PRICE: ${product.price:.2f}"
            f" | QUANTITY: {item.quantity} | COST: ${cost:.2f}"
        )
    print(f"Total: ${shop.cart_total():.2f}\n")


def _checkout(shop: Shop) -> None:
    try:
        total = shop.checkout()
    except ShoppingError as exc:
        print(f"ERROR: {exc}\n")
        return
    print(f"Checkout successful! Total Amount: ${total:.2f}\n")


def _view_history(shop: Shop) -> None:
    try:
        lines = shop.purchase_history()
    except ShoppingError as exc:
        print(f"ERROR: {exc}\n")
        return
    print("=== PURCHASE HISTORY ===")
    for line in lines:
        print(line)
    print()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shop menu."""
    parser = argparse.ArgumentParser(description="Manage products, a cart and purchases.")
    parser.add_argument("--products", default=DEFAULT_PRODUCTS_FILE, help="products file")
    parser.add_argument("--history", default=DEFAULT_HISTORY_FILE, help="history file")
    args = parser.parse_args(argv)

    shop = Shop(args.products, args.history)
    actions = {
        1: _add_product,
        2: _display_products,
        3: _add_to_cart,
        4: _view_cart,
        5: _checkout,
        6: _view_history,
    }
    while True:
        print(_MENU)
        try:
            option = _ask_int("Enter the option (0-6): ")
        except EOFError:
            print()
            return 0
        print()
        if option == 0:
            print("EXITING!!!")
            return 0
        action = actions.get(option) if option is not None else None
        if action is None:
            print("ERROR: Invalid option, please try again\n")
            continue
        try:
            action(shop)
        except EOFError:
            print()
            return 0