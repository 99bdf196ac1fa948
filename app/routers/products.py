# app/routers/products.py
from fastapi import APIRouter, Depends, status

from app.models.product import Product
from app.schemas.product import DescriptionRead, DescriptionRequest, ProductCreate
from app.services.product_service import ProductService
from app.state import AppState, get_state

router = APIRouter(prefix="/products", tags=["Products"])

service = ProductService()


@router.get("", response_model=list[Product])
def list_products(
    state: AppState = Depends(get_state),
    q: str | None = None,
    skip: int = 0,
    limit: int | None = None,
):
    """
    List the catalog, newest additions first.

    - `q` filters by case-insensitive substring of the name.
    - `skip` / `limit` slice the result (dashboard uses limit=8).
    """
    return service.list_products(state, q=q, skip=skip, limit=limit)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    state: AppState = Depends(get_state),
):
    """
    Get a single product by id.
    """
    return service.get_product(state, product_id)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    payload: ProductCreate,
    state: AppState = Depends(get_state),
):
    """
    Add a product to the catalog and the persistence service.

    On rejection the catalog is left as it was and 502 is returned;
    the client keeps its form open for another try.
    """
    return await service.create_product(state, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_product(
    product_id: str,
    confirm: bool = False,
    state: AppState = Depends(get_state),
):
    """
    Delete a product. Requires `confirm=true`.
    """
    await service.delete_product(state, product_id, confirmed=confirm)
    return None


@router.post(
    "/describe",
    response_model=DescriptionRead,
    summary="Suggest a product description with AI",
)
async def describe_product(payload: DescriptionRequest):
    """
    Generate a short description from name and price.

    Always succeeds; on AI failure the description is a fallback message.
    """
    description = await service.suggest_description(payload)
    return DescriptionRead(description=description)
