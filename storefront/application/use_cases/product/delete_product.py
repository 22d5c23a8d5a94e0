# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ProductNotFoundError
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import DeleteProductResponse

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for deleting a product (hard delete)"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: str) -> DeleteProductResponse:
        deleted = await self.product_repository.delete_by_id(product_id)
        if not deleted:
            raise ProductNotFoundError(product_id)
        
        logger.info(f"Deleted product {product_id}")
        return DeleteProductResponse(message=f"item {product_id} was deleted")
