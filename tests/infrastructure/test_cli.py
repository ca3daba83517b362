"""End-to-end tests for the click CLI, driven through CliRunner."""

import json

import pytest
from click.testing import CliRunner

from shop.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "orders.log"


def _run(runner, log_file, keystrokes: list[str], *extra_args: str):
    return runner.invoke(
        cli,
        ["--log-file", str(log_file), *extra_args],
        input="\n".join(keystrokes) + "\n",
    )


class TestProductsCommand:

    def test_lists_built_in_catalog(self, runner, log_file):
        result = runner.invoke(cli, ["--log-file", str(log_file), "products"])
        assert result.exit_code == 0
        assert "P100" in result.output
        assert "Laptop" in result.output
        assert "$999.99" in result.output

    def test_custom_catalog(self, runner, log_file, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps([{"id": "T1", "name": "Tea", "price": "3.20"}]))
        result = runner.invoke(
            cli, ["--log-file", str(log_file), "--catalog", str(catalog), "products"]
        )
        assert result.exit_code == 0
        assert "Tea" in result.output
        assert "Laptop" not in result.output

    def test_broken_catalog_is_reported(self, runner, log_file, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text("[{")
        result = runner.invoke(
            cli, ["--log-file", str(log_file), "--catalog", str(catalog), "products"]
        )
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_foreign_currency_catalog_refused_at_startup(self, runner, log_file, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps(
            [{"id": "E1", "name": "Euro thing", "price": "5.00", "currency": "EUR"}]
        ))
        result = runner.invoke(
            cli,
            ["--log-file", str(log_file), "--catalog", str(catalog)],
            input="1\nE1\nn\n2\n5\n",
        )
        assert result.exit_code == 1
        assert "priced in EUR" in result.output
        assert "Product added successfully" not in result.output
        assert isinstance(result.exception, SystemExit)


class TestInteractiveSession:

    def test_full_checkout(self, runner, log_file):
        result = _run(runner, log_file, [
            "1", "P100", "y", "P100", "n",   # add the laptop twice
            "2", "y", "1",                   # view cart, check out, pay cash
            "4",                             # view orders
            "5",
        ])

        assert result.exit_code == 0, result.output
        assert "Product added successfully! (Laptop x2)" in result.output
        assert "Paid $1999.98 using Cash." in result.output
        assert "Order ID: ORD-000001" in result.output
        assert "Order ORD-000001  (paid with Cash)" in result.output
        assert "Thank you for shopping with us!" in result.output

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert "Order ID: ORD-000001 has been successfully checked out and paid using Cash." in lines[0]

    def test_cart_is_empty_after_checkout(self, runner, log_file):
        result = _run(runner, log_file, [
            "1", "P103", "n",
            "2", "y", "3",
            "2",
            "5",
        ])
        assert result.exit_code == 0, result.output
        assert "Paid $24.99 using GCash." in result.output
        assert "Your shopping cart is empty." in result.output

    def test_declining_checkout_keeps_cart(self, runner, log_file):
        result = _run(runner, log_file, [
            "1", "P104", "n",
            "2", "n",
            "2", "n",
            "5",
        ])
        assert result.exit_code == 0, result.output
        assert result.output.count("Keyboard") >= 3
        assert not log_file.exists()

    def test_unknown_product_reprompts(self, runner, log_file):
        result = _run(runner, log_file, ["1", "P999", "P101", "n", "5"])
        assert result.exit_code == 0, result.output
        assert "Product ID not found. Please try again." in result.output
        assert "Product added successfully! (Smartphone x1)" in result.output

    def test_invalid_menu_choice_reprompts(self, runner, log_file):
        result = _run(runner, log_file, ["9", "abc", "5"])
        assert result.exit_code == 0, result.output
        assert "not in the range" in result.output
        assert "Thank you for shopping with us!" in result.output

    def test_empty_cart_and_no_orders(self, runner, log_file):
        result = _run(runner, log_file, ["2", "3", "4", "5"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Your shopping cart is empty.") == 2
        assert "No orders yet." in result.output

    def test_update_quantity_to_zero_removes_product(self, runner, log_file):
        result = _run(runner, log_file, [
            "1", "P102", "n",
            "3", "P102", "0",
            "2",
            "5",
        ])
        assert result.exit_code == 0, result.output
        assert "Cart updated." in result.output
        assert "Your shopping cart is empty." in result.output

    def test_cart_capacity_limit(self, runner, log_file):
        result = _run(
            runner, log_file,
            ["1", "P100", "y", "P101", "5"],
            "--max-cart-lines", "1",
        )
        assert result.exit_code == 0, result.output
        assert "Cart is full (maximum 1 different products)" in result.output

    def test_audit_failure_is_a_warning_only(self, runner, tmp_path):
        # The log's parent "directory" is a regular file, so every write fails.
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        result = _run(runner, blocker / "orders.log", [
            "1", "P103", "n",
            "2", "y", "2",
            "4",
            "5",
        ])
        assert result.exit_code == 0, result.output
        assert "Warning: Unable to write audit log" in result.output
        assert "Order ORD-000001  (paid with Credit / Debit Card)" in result.output
