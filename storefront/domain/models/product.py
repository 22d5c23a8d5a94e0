# Standard library imports
from dataclasses import dataclass
from typing import Optional, Union

# Local application imports
from .category import Category


PRODUCT_URL_PREFIX = "/api/product"

Number = Union[int, float]


@dataclass
class Product:
    """
    Pure domain model for Product entity - no external dependencies.
    
    `category_id` is the stored reference; `category` is only populated
    when a repository resolves the reference (detail lookups).
    """
    id: Optional[str]
    name: str
    description: str
    category_id: str
    price: Number
    number_in_stock: Number
    product_image: str
    category: Optional[Category] = None
    
    @property
    def url(self) -> str:
        """Resource URL of this product"""
        return f"{PRODUCT_URL_PREFIX}/{self.id}"
