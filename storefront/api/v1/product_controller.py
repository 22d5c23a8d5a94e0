# Standard library imports
from typing import Dict, List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import RedirectResponse

# Local application imports
from ...application.dto.product_dto import DeleteProductResponse, ErrorResponse, ProductResponse
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase
from ...application.use_cases.product.get_product import GetProductUseCase
from ...application.use_cases.product.list_products import ListProductsUseCase
from ...application.use_cases.product.update_product import UpdateProductUseCase
from ...di.container import get_container
from ...domain.constants import PRODUCT_IMAGE_FIELD, ProductFields
from ...domain.models.claims import IdentityClaims
from .dependencies import require_admin, require_seller


router = APIRouter(tags=["products"])

_AUTH_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
}


def _form_fields(
    name: str,
    description: str,
    category: str,
    price: str,
    number_in_stock: str,
) -> Dict[str, str]:
    return {
        ProductFields.NAME: name,
        ProductFields.DESCRIPTION: description,
        ProductFields.CATEGORY: category,
        ProductFields.PRICE: price,
        ProductFields.NUMBER_IN_STOCK: number_in_stock,
    }


@router.get("", response_model=List[ProductResponse])
async def list_products() -> List[ProductResponse]:
    """
    List every product
    
    Returns:
        List of ProductResponse objects (category as ID)
    """
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)
    return await list_products_use_case.execute()


@router.post(
    "/create",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse}, **_AUTH_ERRORS},
)
async def create_product(
    name: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    price: str = Form(""),
    number_in_stock: str = Form("", alias=ProductFields.NUMBER_IN_STOCK),
    product_image: Optional[UploadFile] = File(None, alias=PRODUCT_IMAGE_FIELD),
    current_user: IdentityClaims = Depends(require_seller),
) -> RedirectResponse:
    """
    Create a new product from a multipart form
    
    Args:
        name, description, category, price, number_in_stock: Raw form fields
        product_image: Product image (image/jpeg or image/png), required
        current_user: Seller claims (from dependency)
        
    Returns:
        Redirect to the new product's URL
    """
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)
    
    product = await create_product_use_case.execute(
        fields=_form_fields(name, description, category, price, number_in_stock),
        image=product_image,
    )
    return RedirectResponse(url=product.url, status_code=status.HTTP_302_FOUND)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_product(product_id: str) -> ProductResponse:
    """
    Get a product by ID with its category resolved
    
    Args:
        product_id: ID of the product
        
    Returns:
        ProductResponse with the full category entity
    """
    container = get_container()
    get_product_use_case = container.get(GetProductUseCase)
    return await get_product_use_case.execute(product_id)


@router.delete(
    "/{product_id}/delete",
    response_model=DeleteProductResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}, **_AUTH_ERRORS},
)
async def delete_product(
    product_id: str,
    current_user: IdentityClaims = Depends(require_admin),
) -> DeleteProductResponse:
    """
    Delete a product
    
    Args:
        product_id: ID of the product
        current_user: Admin claims (from dependency)
        
    Returns:
        Confirmation message referencing the ID
    """
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)
    return await delete_product_use_case.execute(product_id)


@router.post(
    "/{product_id}/update",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
        **_AUTH_ERRORS,
    },
)
async def update_product(
    product_id: str,
    name: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    price: str = Form(""),
    number_in_stock: str = Form("", alias=ProductFields.NUMBER_IN_STOCK),
    product_image: Optional[UploadFile] = File(None, alias=PRODUCT_IMAGE_FIELD),
    current_user: IdentityClaims = Depends(require_seller),
) -> RedirectResponse:
    """
    Update a product from a multipart form
    
    Omitting productImage keeps the current image.
    
    Returns:
        Redirect to the updated product's URL
    """
    container = get_container()
    update_product_use_case = container.get(UpdateProductUseCase)
    
    product = await update_product_use_case.execute(
        product_id=product_id,
        fields=_form_fields(name, description, category, price, number_in_stock),
        image=product_image,
    )
    return RedirectResponse(url=product.url, status_code=status.HTTP_302_FOUND)
