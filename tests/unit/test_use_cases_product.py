"""
Unit tests for product use cases (List, Get, Create, Update, Delete).
"""
import dataclasses
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from storefront.application.use_cases.product.create_product import CreateProductUseCase
from storefront.application.use_cases.product.delete_product import DeleteProductUseCase
from storefront.application.use_cases.product.get_product import GetProductUseCase
from storefront.application.use_cases.product.list_products import ListProductsUseCase
from storefront.application.use_cases.product.update_product import UpdateProductUseCase
from storefront.application.validation.product_validator import ProductValidator
from storefront.core.exceptions import PersistenceError, ProductNotFoundError, ProductValidationError
from storefront.domain.models.category import Category
from storefront.domain.models.product import Product
from storefront.infrastructure.storage.image_upload_handler import ImageUploadHandler


def _make_product(product_id: str = "p1", image: str = "old.jpg", **overrides) -> Product:
    values = dict(
        id=product_id,
        name="TV",
        description="A nice large television",
        category_id="c1",
        price=299,
        number_in_stock=5,
        product_image=image,
    )
    values.update(overrides)
    return Product(**values)


async def _assign_id(product: Product) -> Product:
    return dataclasses.replace(product, id="p-new")


async def _echo_update(product_id: str, product: Product) -> Product:
    return product


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def handler(upload_dir) -> ImageUploadHandler:
    return ImageUploadHandler(upload_dir=str(upload_dir), max_mb=1)


@pytest.fixture
def repo():
    return AsyncMock()


class TestListProductsUseCase:

    @pytest.mark.asyncio
    async def test_list_empty(self, repo):
        repo.list_all.return_value = []
        assert await ListProductsUseCase(repo).execute() == []

    @pytest.mark.asyncio
    async def test_list_returns_products_with_category_ids(self, repo):
        repo.list_all.return_value = [_make_product("p1"), _make_product("p2", name="Radio")]
        result = await ListProductsUseCase(repo).execute()
        assert [p.id for p in result] == ["p1", "p2"]
        assert result[1].name == "Radio"
        assert result[0].category == "c1"


class TestGetProductUseCase:

    @pytest.mark.asyncio
    async def test_get_resolves_category(self, repo):
        product = _make_product()
        product.category = Category(id="c1", name="Electronics")
        repo.find_by_id.return_value = product

        result = await GetProductUseCase(repo).execute("p1")

        assert result.id == "p1"
        assert result.category.id == "c1"
        assert result.category.name == "Electronics"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, repo):
        repo.find_by_id.return_value = None
        with pytest.raises(ProductNotFoundError, match="Product missing not found"):
            await GetProductUseCase(repo).execute("missing")


class TestCreateProductUseCase:

    @pytest.fixture
    def use_case(self, repo, handler):
        repo.create.side_effect = _assign_id
        return CreateProductUseCase(repo, handler, ProductValidator())

    @pytest.mark.asyncio
    async def test_create_persists_sanitized_fields_and_image(self, use_case, repo, valid_fields, make_upload, upload_dir):
        result = await use_case.execute(valid_fields, make_upload("tv.png", "image/png"))

        created = repo.create.await_args.args[0]
        assert created.name == "TV"
        assert created.description == "A nice large television"
        assert created.category_id == "c1"
        assert created.price == 299
        assert created.number_in_stock == 5
        assert created.product_image == (upload_dir / "tv.png").as_posix()
        assert (upload_dir / "tv.png").exists()
        assert result.id == "p-new"
        assert result.url == "/api/product/p-new"

    @pytest.mark.asyncio
    async def test_short_name_rejected_even_with_valid_image(self, use_case, repo, valid_fields, make_upload, upload_dir):
        valid_fields["name"] = "A"
        with pytest.raises(ProductValidationError) as exc_info:
            await use_case.execute(valid_fields, make_upload())

        assert [e.field for e in exc_info.value.errors] == ["name"]
        repo.create.assert_not_awaited()
        assert not upload_dir.exists()

    @pytest.mark.asyncio
    async def test_missing_image_rejected(self, use_case, repo, valid_fields):
        with pytest.raises(ProductValidationError) as exc_info:
            await use_case.execute(valid_fields, None)

        assert [(e.field, e.message) for e in exc_info.value.errors] == [
            ("productImage", "Product image is required")
        ]
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unsupported_image_reported_with_field_errors(self, use_case, repo, make_upload):
        fields = {"name": "TV", "description": "short", "category": "", "price": "1", "numberInStock": "1"}
        with pytest.raises(ProductValidationError) as exc_info:
            await use_case.execute(fields, make_upload("anim.gif", "image/gif"))

        assert [e.field for e in exc_info.value.errors] == ["description", "category", "productImage"]
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_failure_surfaces(self, repo, handler, valid_fields, make_upload):
        repo.create.side_effect = PersistenceError("Error creating product: E11000")
        use_case = CreateProductUseCase(repo, handler, ProductValidator())
        with pytest.raises(PersistenceError, match="E11000"):
            await use_case.execute(valid_fields, make_upload())


class TestUpdateProductUseCase:

    @pytest.fixture
    def use_case(self, repo, handler):
        repo.find_image_by_id.return_value = "old.jpg"
        repo.update_by_id.side_effect = _echo_update
        return UpdateProductUseCase(repo, handler, ProductValidator())

    @pytest.mark.asyncio
    async def test_update_without_file_keeps_prior_image(self, use_case, repo, valid_fields):
        result = await use_case.execute("p1", valid_fields, None)

        product_id, updated = repo.update_by_id.await_args.args
        assert product_id == "p1"
        assert updated.product_image == "old.jpg"
        assert result.product_image == "old.jpg"
        assert result.url == "/api/product/p1"

    @pytest.mark.asyncio
    async def test_update_with_file_replaces_image(self, use_case, repo, valid_fields, make_upload, upload_dir):
        result = await use_case.execute("p1", valid_fields, make_upload("new.jpg", "image/jpeg"))

        expected = (upload_dir / "new.jpg").as_posix()
        assert repo.update_by_id.await_args.args[1].product_image == expected
        assert result.product_image == expected

    @pytest.mark.asyncio
    async def test_invalid_fields_perform_no_write(self, use_case, repo, valid_fields):
        valid_fields["description"] = "tiny"
        with pytest.raises(ProductValidationError):
            await use_case.execute("p1", valid_fields, None)

        repo.find_image_by_id.assert_not_awaited()
        repo.update_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejected_image_is_an_error_not_silently_dropped(self, use_case, repo, valid_fields, make_upload):
        with pytest.raises(ProductValidationError) as exc_info:
            await use_case.execute("p1", valid_fields, make_upload("x.bmp", "image/bmp"))

        assert exc_info.value.errors[0].field == "productImage"
        repo.update_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_product_raises_not_found(self, use_case, repo, valid_fields, make_upload, upload_dir):
        repo.find_image_by_id.return_value = None
        with pytest.raises(ProductNotFoundError):
            await use_case.execute("nope", valid_fields, make_upload())

        repo.update_by_id.assert_not_awaited()
        assert not upload_dir.exists()

    @pytest.mark.asyncio
    async def test_product_deleted_between_lookup_and_update(self, use_case, repo, valid_fields):
        repo.update_by_id.side_effect = None
        repo.update_by_id.return_value = None
        with pytest.raises(ProductNotFoundError):
            await use_case.execute("p1", valid_fields, None)

    @pytest.mark.asyncio
    async def test_stored_product_without_image_needs_a_new_one(self, use_case, repo, valid_fields):
        repo.find_image_by_id.return_value = ""
        with pytest.raises(ProductValidationError) as exc_info:
            await use_case.execute("p1", valid_fields, None)

        assert exc_info.value.errors[0].field == "productImage"
        repo.update_by_id.assert_not_awaited()


class TestDeleteProductUseCase:

    @pytest.mark.asyncio
    async def test_delete_confirms_with_id(self, repo):
        repo.delete_by_id.return_value = True
        result = await DeleteProductUseCase(repo).execute("p1")
        assert result.message == "item p1 was deleted"

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, repo):
        repo.delete_by_id.return_value = False
        with pytest.raises(ProductNotFoundError):
            await DeleteProductUseCase(repo).execute("ghost")
