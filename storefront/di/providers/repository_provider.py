from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            ProductRepository,
            MongoProductRepository(
                product_collection=container.get("product_collection"),
                category_collection=container.get("category_collection"),
            )
        )
