"""Checks shared by the create and update use cases."""

# Standard library imports
import logging
from typing import Any, Mapping, Optional, Tuple

# Local application imports
from ....core.exceptions import FieldError, ProductValidationError
from ....domain.constants import PRODUCT_IMAGE_FIELD
from ....infrastructure.storage.image_upload_handler import (
    ImageUploadHandler,
    IncomingFile,
    UploadOutcome,
)
from ...validation.product_validator import ProductValidator, SanitizedProductFields

logger = logging.getLogger(__name__)


def check_product_request(
    validator: ProductValidator,
    upload_handler: ImageUploadHandler,
    fields: Mapping[str, Any],
    image: Optional[IncomingFile],
    image_required: bool,
) -> Tuple[SanitizedProductFields, UploadOutcome]:
    """
    Validate form fields and screen the image before anything is written
    
    A rejected content type is reported as a productImage field error; a
    missing image is an error only when `image_required` is set.
    
    Raises:
        ProductValidationError: With every field error collected
    """
    sanitized, errors = validator.collect(fields)
    outcome = upload_handler.screen(image)
    
    if outcome.rejected:
        errors.append(FieldError(field=PRODUCT_IMAGE_FIELD, message=outcome.reason or "Invalid image"))
    elif outcome.absent and image_required:
        errors.append(FieldError(field=PRODUCT_IMAGE_FIELD, message="Product image is required"))
    
    if errors:
        logger.info(f"Product request rejected: {[error.field for error in errors]}")
        raise ProductValidationError(errors)
    
    return sanitized, outcome
