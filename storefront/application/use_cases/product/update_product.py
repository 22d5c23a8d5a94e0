# Standard library imports
import logging
from typing import Any, Mapping, Optional

# Local application imports
from ....core.exceptions import FieldError, ProductNotFoundError, ProductValidationError
from ....domain.constants import PRODUCT_IMAGE_FIELD
from ....domain.models.product import Product
from ....domain.repositories.product_repository import ProductRepository
from ....infrastructure.storage.image_upload_handler import ImageUploadHandler, IncomingFile
from ...dto.product_dto import ProductResponse
from ...validation.product_validator import ProductValidator
from .product_request import check_product_request

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """
    Use case for updating an existing product.
    
    Concurrent updates of the same product are last-write-wins.
    """
    
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
        product_id: str,
        fields: Mapping[str, Any],
        image: Optional[IncomingFile],
    ) -> ProductResponse:
        """
        Update a product, keeping its current image unless a new one is sent
        
        Args:
            product_id: ID of the product to update
            fields: Raw form fields (name, description, category, price, numberInStock)
            image: Replacement image, None to keep the current one
            
        Returns:
            ProductResponse for the updated product
            
        Raises:
            ProductValidationError: If any field is invalid or the image is rejected (no write)
            ProductNotFoundError: If no product matches
            PersistenceError: If the repository fails
        """
        sanitized, outcome = check_product_request(
            self.validator,
            self.upload_handler,
            fields,
            image,
            image_required=False,
        )
        
        current_image = await self.product_repository.find_image_by_id(product_id)
        if current_image is None:
            raise ProductNotFoundError(product_id)
        
        effective_image = current_image
        if outcome.accepted:
            stored_image = await self.upload_handler.persist(image)
            effective_image = stored_image.path or current_image
        elif not effective_image:
            raise ProductValidationError(
                [FieldError(field=PRODUCT_IMAGE_FIELD, message="Product image is required")]
            )
        
        updated_product = Product(
            id=product_id,
            name=sanitized.name,
            description=sanitized.description,
            category_id=sanitized.category,
            price=sanitized.price,
            number_in_stock=sanitized.number_in_stock,
            product_image=effective_image,
        )
        
        saved_product = await self.product_repository.update_by_id(product_id, updated_product)
        if saved_product is None:
            raise ProductNotFoundError(product_id)
        
        logger.info(f"Updated product {product_id} (image: {saved_product.product_image})")
        return ProductResponse.from_domain(saved_product)
