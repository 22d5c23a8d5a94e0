from .product_validator import ProductValidator, SanitizedProductFields

__all__ = ["ProductValidator", "SanitizedProductFields"]
