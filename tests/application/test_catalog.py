"""Tests for the catalog use cases (queries and administration)."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeProductRepository, default_products


@pytest.fixture()
def repo():
    return FakeProductRepository(default_products())


class TestListProducts:

    def test_lists_every_product(self, repo):
        dtos = ListProductsHandler(repo).handle()
        assert {d.slug for d in dtos} == {"widget", "gadget", "deluxe-gizmo"}

    def test_prices_are_two_decimal_strings(self, repo):
        dtos = {d.id: d for d in ListProductsHandler(repo).handle()}
        assert dtos["1"].price == "10.00"

    def test_empty_catalog(self):
        assert ListProductsHandler(FakeProductRepository()).handle() == []


class TestShowProduct:

    def test_by_id(self, repo):
        assert ShowProductHandler(repo).handle("3").name == "Deluxe Gizmo"

    def test_by_slug(self, repo):
        assert ShowProductHandler(repo).handle("deluxe-gizmo").id == "3"

    def test_unknown_product(self, repo):
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowProductHandler(repo).handle("nope")


class TestAddProduct:

    def test_assigns_next_id(self, repo):
        dto = AddProductHandler(repo).handle(name="Sprocket", price="3.50", stock=4)
        assert dto.id == "4"
        assert dto.slug == "sprocket"
        assert repo.get_by_id("4").stock == 4

    def test_duplicate_slug_rejected(self, repo):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo).handle(name="Another", price="1.00", slug="widget")

    def test_invalid_price_rejected(self, repo):
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle(name="Sprocket", price="abc")


class TestUpdateProduct:

    def test_update_price(self, repo):
        dto = UpdateProductHandler(repo).handle("1", new_price="11.25")
        assert dto.price == "11.25"

    def test_update_stock(self, repo):
        dto = UpdateProductHandler(repo).handle("1", stock=0)
        assert dto.stock == 0

    def test_unknown_product(self, repo):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repo).handle("99", new_price="1.00")


class TestRemoveProduct:

    def test_removes(self, repo):
        RemoveProductHandler(repo).handle("2")
        assert repo.get_by_id("2") is None

    def test_unknown_product(self, repo):
        with pytest.raises(EntityNotFoundError):
            RemoveProductHandler(repo).handle("99")
