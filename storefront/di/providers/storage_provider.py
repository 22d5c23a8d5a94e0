from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...application.validation.product_validator import ProductValidator
from ...infrastructure.storage.image_upload_handler import ImageUploadHandler

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Registers the image upload handler and the product field validator"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            ImageUploadHandler,
            ImageUploadHandler(
                upload_dir=settings.product_image_upload_dir,
                max_mb=settings.product_image_max_mb,
                naming=settings.product_image_naming,
            )
        )
        container.register_singleton(ProductValidator, ProductValidator())
