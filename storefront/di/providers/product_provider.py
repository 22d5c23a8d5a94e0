from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...application.validation.product_validator import ProductValidator
from ...infrastructure.storage.image_upload_handler import ImageUploadHandler
from ...application.use_cases.product.list_products import ListProductsUseCase
from ...application.use_cases.product.get_product import GetProductUseCase
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.update_product import UpdateProductUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider - registers all product-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all product use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ListProductsUseCase,
            lambda: ListProductsUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            GetProductUseCase,
            lambda: GetProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            CreateProductUseCase,
            lambda: CreateProductUseCase(
                product_repository=container.get(ProductRepository),
                upload_handler=container.get(ImageUploadHandler),
                validator=container.get(ProductValidator),
            )
        )
        
        container.register_factory(
            UpdateProductUseCase,
            lambda: UpdateProductUseCase(
                product_repository=container.get(ProductRepository),
                upload_handler=container.get(ImageUploadHandler),
                validator=container.get(ProductValidator),
            )
        )
        
        container.register_factory(
            DeleteProductUseCase,
            lambda: DeleteProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
