from .category import Category
from .product import Product, PRODUCT_URL_PREFIX
from .claims import IdentityClaims, SELLER, ADMIN

__all__ = ["Category", "Product", "PRODUCT_URL_PREFIX", "IdentityClaims", "SELLER", "ADMIN"]
