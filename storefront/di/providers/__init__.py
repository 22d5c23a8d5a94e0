from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .storage_provider import StorageProvider
from .auth_provider import AuthProvider
from .product_provider import ProductProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "StorageProvider",
    "AuthProvider",
    "ProductProvider",
]
