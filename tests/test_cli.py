"""
Tests for the console menu
"""

import logging
from unittest.mock import patch

import pytest

from shopcart.cli import Menu, build_parser, main, run_menu
from shopcart.config import Settings


def run_script(service, console_factory, answers, currency="INR"):
    console = console_factory(answers)
    run_menu(service, input_fn=console.input, output_fn=console.print, currency=currency)
    return console


class TestMenuFlows:
    """End-to-end menu sessions with scripted input."""

    def test_exit(self, service, console_factory):
        """Test choice 6 leaves the loop."""
        console = run_script(service, console_factory, ["6"])

        assert "6. Exit" in console.lines
        assert console.lines[-1] == "Exiting... Goodbye!"

    def test_eof_exits_cleanly(self, service, console_factory):
        """Test closed input ends the session."""
        console = run_script(service, console_factory, [])

        assert console.lines[-1] == "Exiting... Goodbye!"

    def test_view_products(self, service, console_factory):
        """Test products are listed by category."""
        console = run_script(service, console_factory, ["1", "6"])

        assert "\nElectronics:" in console.lines
        assert "\nGrocery:" in console.lines
        assert "[E] ID: 1, Name: Laptop, Price: ₹100.00, Warranty: 24 months" in console.lines

    def test_add_and_view_cart(self, service, console_factory):
        """Test adding then viewing the cart."""
        console = run_script(service, console_factory, ["2", "1", "2", "2", "2", "1", "4", "6"])

        assert console.lines.count("Added to cart.") == 2
        assert "ID: 1, Name: Laptop, Qty: 2, Price: ₹200.00" in console.lines
        assert "ID: 2, Name: Earbuds, Qty: 1, Price: ₹50.00" in console.lines
        assert "Total: ₹250.00" in console.lines

    def test_add_invalid_product(self, service, console_factory):
        """Test unknown id is reported and the loop continues."""
        console = run_script(service, console_factory, ["2", "99", "1", "4", "6"])

        assert "Invalid product ID or quantity." in console.lines
        assert "Cart is empty." in console.lines
        assert service.view_cart().is_empty

    def test_add_non_numeric_id(self, service, console_factory):
        """Test non-numeric id is rejected before asking for quantity."""
        console = run_script(service, console_factory, ["2", "abc", "6"])

        assert "Invalid Product ID." in console.lines
        assert "Enter Quantity: " not in console.prompts

    def test_add_non_numeric_quantity(self, service, console_factory):
        """Test non-numeric quantity is rejected."""
        console = run_script(service, console_factory, ["2", "1", "two", "6"])

        assert "Invalid Quantity." in console.lines
        assert service.view_cart().is_empty

    def test_add_zero_quantity(self, service, console_factory):
        """Test zero quantity is reported as invalid."""
        console = run_script(service, console_factory, ["2", "1", "0", "6"])

        assert "Invalid product ID or quantity." in console.lines

    def test_remove(self, service, console_factory):
        """Test removing a line."""
        console = run_script(service, console_factory, ["2", "1", "1", "3", "1", "6"])

        assert "Removed from cart." in console.lines
        assert service.view_cart().is_empty

    def test_remove_missing(self, service, console_factory):
        """Test removing an absent line."""
        console = run_script(service, console_factory, ["3", "1", "6"])

        assert "Item not found in cart." in console.lines

    def test_remove_non_numeric(self, service, console_factory):
        """Test non-numeric id on remove."""
        console = run_script(service, console_factory, ["3", "x", "6"])

        assert "Invalid Product ID." in console.lines

    def test_checkout(self, service, console_factory):
        """Test checkout prints a receipt and empties the cart."""
        console = run_script(service, console_factory, ["2", "2", "3", "5", "6"])

        assert "ID: 2, Name: Earbuds, Qty: 3, Price: ₹150.00" in console.lines
        assert "Checking out... Thank you for shopping!" in console.lines
        assert service.view_cart().is_empty

    def test_checkout_empty(self, service, console_factory):
        """Test checkout of an empty cart is reported, not fatal."""
        console = run_script(service, console_factory, ["5", "4", "6"])

        assert "Cart is empty. Cannot proceed to checkout." in console.lines
        assert "Checking out... Thank you for shopping!" not in console.lines
        assert console.lines[-1] == "Exiting... Goodbye!"

    def test_rejection_log_omits_missing_product(self, service, console_factory, caplog):
        """Test errors without a product id are logged without one."""
        with caplog.at_level(logging.INFO, logger="shopcart.cli"):
            run_script(service, console_factory, ["5", "3", "7", "6"])

        messages = [r.getMessage() for r in caplog.records if r.name == "shopcart.cli"]
        assert "Cart operation rejected: EmptyCart" in messages
        assert "Cart operation rejected: NotFound (product 7)" in messages
        assert not any("None" in m for m in messages)

    def test_invalid_choice(self, service, console_factory):
        """Test unknown menu choice."""
        console = run_script(service, console_factory, ["9", "6"])

        assert "Invalid choice." in console.lines

    def test_currency(self, service, console_factory):
        """Test amounts follow the chosen currency."""
        console = run_script(service, console_factory, ["2", "1", "1", "4", "6"], currency="USD")

        assert "Total: $100.00" in console.lines


class TestMenuHandle:
    """Tests for single dispatch."""

    def test_handle_exit(self, service):
        """Test exit choice returns False."""
        assert Menu(service, output_fn=lambda _: None).handle("6") is False

    def test_handle_strips_whitespace(self, service):
        """Test choices tolerate surrounding whitespace."""
        lines = []
        menu = Menu(service, output_fn=lines.append)

        assert menu.handle(" 4 ") is True
        assert lines == ["Cart is empty."]


class TestMain:
    """Tests for the argparse entry point."""

    def test_parser_defaults(self):
        """Test menu is the default command."""
        args = build_parser().parse_args([])

        assert args.command == "menu"
        assert args.currency is None

    def test_main_runs_menu(self):
        """Test main wires settings into the menu."""
        with patch("shopcart.cli.run_menu") as mock_run_menu:
            assert main(["--currency", "usd"], settings=Settings()) == 0

        _, kwargs = mock_run_menu.call_args
        assert kwargs["currency"] == "USD"

    def test_main_runs_jobs(self):
        """Test jobs command runs the demo with the configured scale."""
        with patch("shopcart.cli.run_jobs") as mock_run_jobs, patch("shopcart.cli.asyncio.run") as mock_run:
            assert main(["jobs"], settings=Settings(job_scale=0.0)) == 0

        mock_run_jobs.assert_called_once_with(scale=0.0)
        mock_run.assert_called_once()

    def test_main_rejects_unknown_command(self):
        """Test argparse refuses unknown commands."""
        with pytest.raises(SystemExit):
            main(["dance"], settings=Settings())
