# Standard library imports
import logging
from typing import Optional, List, Dict, Any, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.models.category import Category
from ...domain.constants import ProductFields, CategoryFields
from .mongo_connection import get_product_collection, get_category_collection

logger = logging.getLogger(__name__)

# Driver failures plus documents BSON cannot encode (e.g. ints wider than 8 bytes)
_WRITE_ERRORS = (PyMongoError, BSONError, OverflowError)


def _to_object_id(value: str) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""
    
    def __init__(
        self,
        product_collection: Optional[AsyncIOMotorCollection] = None,
        category_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.product_collection = product_collection if product_collection is not None else get_product_collection()
        self.category_collection = category_collection if category_collection is not None else get_category_collection()
    
    async def create(self, product: Product) -> Product:
        """
        Persist a new product
        
        Args:
            product: Product domain model to insert (its ID is ignored)
            
        Returns:
            Stored Product domain model with ID set
            
        Raises:
            PersistenceError: If the insert fails (e.g. constraint violation)
        """
        try:
            result = await self.product_collection.insert_one(self._product_to_dict(product))
            new_document = await self.product_collection.find_one({ProductFields.MONGO_ID: result.inserted_id})
        except _WRITE_ERRORS as e:
            logger.error(f"Error creating product: {e}", exc_info=True)
            raise PersistenceError(f"Error creating product: {str(e)}")
        
        if new_document is None:
            raise PersistenceError("Product was created but could not be retrieved")
        return self._document_to_product(new_document)
    
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID and resolve its category reference
        
        Args:
            product_id: The product ID to find
            
        Returns:
            Product domain model with `category` populated if found, None otherwise.
            `category` stays None when the referenced category does not exist.
        """
        object_id = _to_object_id(product_id)
        if object_id is None:
            return None
        
        try:
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: object_id})
            if document is None:
                return None
            
            product = self._document_to_product(document)
            category_document = await self.category_collection.find_one(
                {CategoryFields.MONGO_ID: document.get(ProductFields.CATEGORY)}
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error finding product by ID: {str(e)}")
        
        if category_document is not None:
            product.category = self._document_to_category(category_document)
        return product
    
    async def find_image_by_id(self, product_id: str) -> Optional[str]:
        """
        Find only the image path of a product
        
        Args:
            product_id: The product ID
            
        Returns:
            Stored image path if the product exists, None otherwise
        """
        object_id = _to_object_id(product_id)
        if object_id is None:
            return None
        
        try:
            document = await self.product_collection.find_one(
                {ProductFields.MONGO_ID: object_id},
                {ProductFields.PRODUCT_IMAGE: 1},
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error finding product image: {str(e)}")
        
        if document is None:
            return None
        return document.get(ProductFields.PRODUCT_IMAGE) or ""
    
    async def update_by_id(self, product_id: str, product: Product) -> Optional[Product]:
        """
        Replace the mutable fields of an existing product
        
        Args:
            product_id: ID of the product to update
            product: Product domain model holding the new field values
            
        Returns:
            Post-update Product domain model, None if no product matched
        """
        object_id = _to_object_id(product_id)
        if object_id is None:
            return None
        
        try:
            updated_document = await self.product_collection.find_one_and_update(
                {ProductFields.MONGO_ID: object_id},
                {"$set": self._product_to_dict(product)},
                return_document=ReturnDocument.AFTER,
            )
        except _WRITE_ERRORS as e:
            logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
            raise PersistenceError(f"Error updating product: {str(e)}")
        
        if updated_document is None:
            return None
        return self._document_to_product(updated_document)
    
    async def delete_by_id(self, product_id: str) -> bool:
        """
        Delete product by ID
        
        Args:
            product_id: ID of the product to delete
            
        Returns:
            True if a product was deleted, False if none matched
        """
        object_id = _to_object_id(product_id)
        if object_id is None:
            return False
        
        try:
            result = await self.product_collection.delete_one({ProductFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
            raise PersistenceError(f"Error deleting product: {str(e)}")
        return result.deleted_count > 0
    
    async def list_all(self) -> List[Product]:
        """
        List every product
        
        Returns:
            List of Product domain models in storage order (categories not resolved)
        """
        try:
            cursor = self.product_collection.find({})
            products = []
            async for document in cursor:
                products.append(self._document_to_product(document))
            return products
        except PyMongoError as e:
            raise PersistenceError(f"Error listing products: {str(e)}")
    
    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        """
        Convert MongoDB document to Product domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Product domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        category_ref = document.get(ProductFields.CATEGORY)
        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            name=document.get(ProductFields.NAME, ""),
            description=document.get(ProductFields.DESCRIPTION, ""),
            category_id=str(category_ref) if category_ref is not None else "",
            price=document.get(ProductFields.PRICE, 0),
            number_in_stock=document.get(ProductFields.NUMBER_IN_STOCK, 0),
            product_image=document.get(ProductFields.PRODUCT_IMAGE, ""),
        )
    
    def _document_to_category(self, document: Dict[str, Any]) -> Category:
        return Category(
            id=str(document[CategoryFields.MONGO_ID]),
            name=document.get(CategoryFields.NAME, ""),
        )
    
    def _product_to_dict(self, product: Product) -> Dict[str, Any]:
        """
        Convert Product domain model to MongoDB document (mutable fields only)
        
        Args:
            product: Product domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        category_ref: Union[ObjectId, str] = _to_object_id(product.category_id) or product.category_id
        return {
            ProductFields.NAME: product.name,
            ProductFields.DESCRIPTION: product.description,
            ProductFields.CATEGORY: category_ref,
            ProductFields.PRICE: product.price,
            ProductFields.NUMBER_IN_STOCK: product.number_in_stock,
            ProductFields.PRODUCT_IMAGE: product.product_image,
        }
