from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access"""
    
    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID with its category resolved"""
        pass
    
    @abstractmethod
    async def find_image_by_id(self, product_id: str) -> Optional[str]:
        """Find only the stored image path of a product"""
        pass
    
    @abstractmethod
    async def update_by_id(self, product_id: str, product: Product) -> Optional[Product]:
        """Replace the mutable fields of an existing product (no upsert)"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, product_id: str) -> bool:
        """Delete product by ID, returns False when nothing matched"""
        pass
    
    @abstractmethod
    async def list_all(self) -> List[Product]:
        """List every product in storage order"""
        pass
