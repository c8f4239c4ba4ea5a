#!/usr/bin/env python3
"""
Console shop.

Usage:
    python -m shopcart                 # interactive menu
    python -m shopcart --currency USD  # amounts shown in dollars
    python -m shopcart jobs            # background jobs demo
"""

import argparse
import asyncio
import sys
from typing import Callable, List, Optional

from shopcart.cart import CartService, CartView, ShopContext
from shopcart.catalog import display_info
from shopcart.config import Settings, get_settings
from shopcart.errors import (
    CartError,
    ERROR_INVALID_CHOICE,
    ERROR_INVALID_PRODUCT_ID,
    ERROR_INVALID_QUANTITY,
)
from shopcart.jobs import run_jobs
from shopcart.logging import get_logger, sanitize_string_for_logging, set_log_level
from shopcart.money import DEFAULT_CURRENCY, format_money

logger = get_logger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = (
    "\nMenu:",
    "1. View Products",
    "2. Add to Cart",
    "3. Remove from Cart",
    "4. View Cart",
    "5. Checkout",
    "6. Exit",
)


def _read_int(input_fn: InputFn, prompt: str) -> Optional[int]:
    """Read an integer; None if the input is not numeric."""
    raw = input_fn(prompt)
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug(f"Rejected non-numeric input {sanitize_string_for_logging(raw)!r}")
        return None


class Menu:
    """Numbered menu dispatching to the cart service."""

    def __init__(
        self,
        service: CartService,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.service = service
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.currency = currency

    def money(self, value) -> str:
        return format_money(value, self.currency)

    def show_products(self) -> None:
        self.output_fn("\nAvailable Products (Grouped by Category):")
        for category, products in self.service.list_products().items():
            self.output_fn(f"\n{category.value}:")
            for product in products:
                self.output_fn(display_info(product, self.currency))

    def show_cart(self, view: CartView) -> None:
        if view.is_empty:
            self.output_fn("Cart is empty.")
            return
        self.output_fn("\nYour Cart:")
        for line in view.lines:
            self.output_fn(
                f"ID: {line.product_id}, Name: {line.product.name}, "
                f"Qty: {line.quantity}, Price: {self.money(line.total_price)}"
            )
        self.output_fn(f"Total: {self.money(view.total)}")

    def add_to_cart(self) -> None:
        product_id = _read_int(self.input_fn, "Enter Product ID: ")
        if product_id is None:
            self.output_fn(ERROR_INVALID_PRODUCT_ID)
            return
        quantity = _read_int(self.input_fn, "Enter Quantity: ")
        if quantity is None:
            self.output_fn(ERROR_INVALID_QUANTITY)
            return
        self.service.add_to_cart(product_id, quantity)
        self.output_fn("Added to cart.")

    def remove_from_cart(self) -> None:
        product_id = _read_int(self.input_fn, "Enter Product ID to remove: ")
        if product_id is None:
            self.output_fn(ERROR_INVALID_PRODUCT_ID)
            return
        self.service.remove_from_cart(product_id)
        self.output_fn("Removed from cart.")

    def checkout(self) -> None:
        receipt = self.service.checkout()
        self.show_cart(receipt.view)
        self.output_fn("Checking out... Thank you for shopping!")

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the user asked to exit."""
        actions = {
            "1": self.show_products,
            "2": self.add_to_cart,
            "3": self.remove_from_cart,
            "4": lambda: self.show_cart(self.service.view_cart()),
            "5": self.checkout,
        }
        choice = choice.strip()
        if choice == "6":
            return False

        action = actions.get(choice)
        if action is None:
            self.output_fn(ERROR_INVALID_CHOICE)
            return True

        try:
            action()
        except CartError as e:
            if e.product_id is not None:
                logger.info(f"Cart operation rejected: {type(e).__name__} (product {e.product_id})")
            else:
                logger.info(f"Cart operation rejected: {type(e).__name__}")
            self.output_fn(e.message)
        return True

    def run(self) -> None:
        while True:
            for line in MENU:
                self.output_fn(line)
            try:
                choice = self.input_fn("Enter choice: ")
                if not self.handle(choice):
                    break
            except EOFError:
                logger.debug("Input closed, leaving menu")
                break
        self.output_fn("Exiting... Goodbye!")


def run_menu(
    service: CartService,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    currency: str = DEFAULT_CURRENCY,
) -> None:
    """Run the interactive menu until the user exits or input ends."""
    Menu(service, input_fn=input_fn, output_fn=output_fn, currency=currency).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shopcart", description="Console shopping cart")
    parser.add_argument("--currency", help="Currency code for displayed amounts (e.g. INR, USD)")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("menu", "jobs"),
        default="menu",
        help="menu (default) or the background jobs demo",
    )
    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = (settings or get_settings()).with_overrides(
        currency=args.currency,
        log_level=args.log_level,
    )
    set_log_level(settings.log_level)

    if args.command == "jobs":
        asyncio.run(run_jobs(scale=settings.job_scale))
        return 0

    service = CartService(ShopContext.create())
    run_menu(service, currency=settings.currency)
    return 0


if __name__ == "__main__":
    sys.exit(main())
