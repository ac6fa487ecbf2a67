"""
Product endpoints for API v1.

``GET /products`` is the public catalogue and omits cost fields
(``purchasePrice`` and ``source``).  ``GET /products/full`` returns the
same records with every field and requires a token.  Lookups by ID and
by series are public and return full records.  Attributes that were
never set are left out of product responses rather than sent as null.

Routes with a fixed segment (``/full``, ``/series/...``) are declared
before ``/{product_id}`` so they are not captured by it.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from product_pricing_api.app.api.deps import get_product_service, verify_token
from product_pricing_api.app.api.routing import ProductRoute
from product_pricing_api.app.core.exceptions import InvalidReference, PricingError
from product_pricing_api.app.schemas.product import ProductCreate, ProductPublic, ProductRead
from product_pricing_api.app.services.product_service import ProductService

router = APIRouter(route_class=ProductRoute)


@router.get("", response_model=List[ProductPublic], response_model_exclude_none=True)
async def list_products(service: ProductService = Depends(get_product_service)) -> List[ProductPublic]:
    """Fetch all products without cost fields."""
    try:
        return await service.list_products(public_view=True)
    except PricingError as exc:
        raise exc.to_http_exception()


@router.get("/full", response_model=List[ProductRead], response_model_exclude_none=True)
async def list_products_full(
    current_user: Dict[str, Any] = Depends(verify_token),
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Fetch all products with every field (requires authentication)."""
    try:
        return await service.list_products(public_view=False)
    except PricingError as exc:
        raise exc.to_http_exception()


@router.get("/series/{series_id}", response_model=List[ProductRead], response_model_exclude_none=True)
async def list_products_by_series(
    series_id: str,
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Fetch the products of one series.

    Returns HTTP 404 if the series does not exist and an empty list if
    it has no products.
    """
    try:
        return await service.list_products_by_series(series_id)
    except PricingError as exc:
        raise exc.to_http_exception()


@router.get("/{product_id}", response_model=ProductRead, response_model_exclude_none=True)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    try:
        return await service.get_product(product_id)
    except PricingError as exc:
        raise exc.to_http_exception()


@router.post("", response_model=ProductRead, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product in an existing series.

    An unknown ``seriesId`` answers 400; store failures answer 500.
    """
    try:
        return await service.create_product(product_in)
    except InvalidReference as exc:
        raise exc.to_http_exception()
    except PricingError as exc:
        raise exc.to_http_exception(prefix="Error creating product: ")
