"""
Product endpoints.

These routes expose CRUD operations for products.  Handlers only call
``ProductService``; missing products and rejected payloads surface as
``ProductNotFoundError`` and ``ProductValidationError`` and are turned
into 404 and 422 responses by the handlers registered in ``main``.
Bodies that cannot be parsed into the request schema are answered
with 400.
"""

from typing import List

from fastapi import APIRouter, Path, Request, Response, status

from inventory_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from inventory_api.app.services.product_service import ProductService

router = APIRouter()

# Identifiers are SQLite INTEGER values; anything wider is a malformed path.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


@router.get("", response_model=List[ProductRead])
async def list_products() -> List[ProductRead]:
    """Return all products.  No filtering, sorting or pagination."""
    return await ProductService.list_products()


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int = Path(..., ge=ID_MIN, le=ID_MAX)) -> ProductRead:
    """Retrieve a single product by its ID.  Returns 404 if absent."""
    return await ProductService.get_product(product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    request: Request,
    response: Response,
) -> ProductRead:
    """Create a product.

    The response carries a ``Location`` header pointing at the new
    product's URL.
    """
    product = await ProductService.create_product(product_in)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_in: ProductUpdate,
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
) -> ProductRead:
    """Replace name, quantity, price and description of a product."""
    return await ProductService.update_product(product_id, product_in)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_product(product_id: int = Path(..., ge=ID_MIN, le=ID_MAX)) -> None:
    """Delete a product.  Returns 204 with an empty body."""
    await ProductService.delete_product(product_id)
