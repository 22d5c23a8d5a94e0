from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.product import Product


class CategoryResponse(BaseModel):
    """DTO for a resolved category reference"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str


class ProductResponse(BaseModel):
    """DTO for product response (wire names match the storefront client)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    description: str
    # Category ID in listings, resolved category (or null) in detail lookups
    category: Union[CategoryResponse, str, None]
    price: Union[int, float]
    number_in_stock: Union[int, float] = Field(alias="numberInStock")
    product_image: str = Field(alias="productImage")
    url: str

    @classmethod
    def from_domain(cls, product: Product, resolve_category: bool = False) -> "ProductResponse":
        category: Union[CategoryResponse, str, None] = product.category_id
        if resolve_category:
            category = None
            if product.category is not None:
                category = CategoryResponse(id=product.category.id or "", name=product.category.name)

        return cls(
            id=product.id or "",
            name=product.name,
            description=product.description,
            category=category,
            price=product.price,
            number_in_stock=product.number_in_stock,
            product_image=product.product_image,
            url=product.url,
        )


class DeleteProductResponse(BaseModel):
    """DTO for delete confirmation"""
    message: str


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """DTO documenting every failure body"""
    message: str
    errors: Optional[List[FieldErrorResponse]] = None
