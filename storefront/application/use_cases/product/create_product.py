# Standard library imports
import logging
from typing import Any, Mapping, Optional

# Local application imports
from ....domain.models.product import Product
from ....domain.repositories.product_repository import ProductRepository
from ....infrastructure.storage.image_upload_handler import ImageUploadHandler, IncomingFile
from ...dto.product_dto import ProductResponse
from ...validation.product_validator import ProductValidator
from .product_request import check_product_request

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use case for creating a new product"""
    
    def __init__(
        self,
        product_repository: ProductRepository,
        upload_handler: ImageUploadHandler,
        validator: ProductValidator,
    ) -> None:
        self.product_repository = product_repository
        self.upload_handler = upload_handler
        self.validator = validator
    
    async def execute(
        self,
        fields: Mapping[str, Any],
        image: Optional[IncomingFile],
    ) -> ProductResponse:
        """
        Create a new product
        
        Args:
            fields: Raw form fields (name, description, category, price, numberInStock)
            image: Uploaded product image, None if not sent
            
        Returns:
            ProductResponse for the stored product
            
        Raises:
            ProductValidationError: If any field is invalid or the image is missing/rejected.
                Nothing is written in that case.
            PersistenceError: If the repository fails
        """
        sanitized, _ = check_product_request(
            self.validator,
            self.upload_handler,
            fields,
            image,
            image_required=True,
        )
        
        stored_image = await self.upload_handler.persist(image)
        
        new_product = Product(
            id=None,
            name=sanitized.name,
            description=sanitized.description,
            category_id=sanitized.category,
            price=sanitized.price,
            number_in_stock=sanitized.number_in_stock,
            product_image=stored_image.path or "",
        )
        
        saved_product = await self.product_repository.create(new_product)
        logger.info(f"Created product {saved_product.id} ({saved_product.name})")
        
        return ProductResponse.from_domain(saved_product)
