# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductResponse


class ListProductsUseCase:
    """Use case for listing every product"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self) -> List[ProductResponse]:
        products = await self.product_repository.list_all()
        return [ProductResponse.from_domain(product) for product in products]
