from .auth import VerifyCredentialUseCase
from .product import (
    ListProductsUseCase,
    GetProductUseCase,
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

__all__ = [
    "VerifyCredentialUseCase",
    "ListProductsUseCase",
    "GetProductUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
