"""Tests for the admin CLI, run against a JSON store in tmp_path."""

import pytest
from click.testing import CliRunner

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "WARNING")
    bootstrap.settings.cache_clear()
    yield CliRunner()
    bootstrap.settings.cache_clear()


class TestProductCommands:

    def test_add_and_list(self, runner):
        result = runner.invoke(
            cli, ["product", "add", "--name", "Blue Widget", "--price", "10", "--stock", "5"]
        )
        assert result.exit_code == 0, result.output
        assert "Product #1 'Blue Widget' (blue-widget) added at $10.00" in result.output

        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "blue-widget" in result.output
        assert "$10.00" in result.output

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert "No products found." in result.output

    def test_duplicate_slug_is_reported(self, runner):
        runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "1"])
        result = runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "2"])
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_update_price(self, runner):
        runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "1"])
        result = runner.invoke(cli, ["product", "update", "--id", "1", "--price", "29.99"])
        assert result.exit_code == 0
        assert "price updated to $29.99" in result.output

    def test_set_stock(self, runner):
        runner.invoke(cli, ["product", "add", "--name", "Widget", "--price", "1"])
        result = runner.invoke(cli, ["product", "stock", "--id", "1", "--set", "12"])
        assert result.exit_code == 0
        assert "stock set to 12" in result.output

    def test_remove_unknown_product(self, runner):
        result = runner.invoke(cli, ["product", "remove", "--id", "9"])
        assert result.exit_code != 0
        assert "not found" in result.output


class TestOrderCommands:

    def _store_order(self):
        order = Order.create(
            user_id=1, items=[OrderItem("1", "Widget", Quantity(2), Money.of("10.00"))]
        )
        order.mark_paid()
        bootstrap.order_repository().add(order)
        return order

    def test_show(self, runner):
        order = self._store_order()
        result = runner.invoke(cli, ["order", "show", "--id", str(order.id)])
        assert result.exit_code == 0, result.output
        assert f"Order #{order.id}  (paid=yes)" in result.output
        assert "$20.00" in result.output

    def test_show_unknown(self, runner):
        result = runner.invoke(cli, ["order", "show", "--id", "42"])
        assert result.exit_code != 0
        assert "Order #42 not found" in result.output

    def test_list(self, runner):
        self._store_order()
        result = runner.invoke(cli, ["order", "list"])
        assert result.exit_code == 0
        assert "$20.00" in result.output
