from .list_products import ListProductsUseCase
from .get_product import GetProductUseCase
from .create_product import CreateProductUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase

__all__ = [
    "ListProductsUseCase",
    "GetProductUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
