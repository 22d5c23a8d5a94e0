# Local application imports
from ....core.exceptions import ProductNotFoundError
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductResponse


class GetProductUseCase:
    """Use case for getting a product by ID"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: str) -> ProductResponse:
        """
        Get a product by ID with its category resolved
        
        Args:
            product_id: ID of the product
            
        Returns:
            ProductResponse whose `category` is the referenced entity (or None)
            
        Raises:
            ProductNotFoundError: If no product matches
        """
        product = await self.product_repository.find_by_id(product_id)
        
        if product is None:
            raise ProductNotFoundError(product_id)
        
        return ProductResponse.from_domain(product, resolve_category=True)
