"""
Shared constants for product image uploads.

Used by the upload handler and the product use cases. Single place for
easier updates.
"""

# -----------------------------------------------------------------------------
# Product images
# -----------------------------------------------------------------------------
PRODUCT_IMAGE_FIELD = "productImage"
ALLOWED_IMAGE_MIME = frozenset({"image/jpeg", "image/png"})

# Storage key strategies (see core.config product_image_naming)
IMAGE_NAMING_ORIGINAL = "original"
IMAGE_NAMING_UNIQUE = "unique"

UPLOAD_CHUNK_SIZE = 1024 * 1024
