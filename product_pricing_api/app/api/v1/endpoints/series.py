"""
Series endpoints for API v1.

All routes are public.  Series can be created and read but never
updated or deleted.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from product_pricing_api.app.api.deps import get_series_service
from product_pricing_api.app.api.routing import StoreValidationRoute
from product_pricing_api.app.core.exceptions import PricingError
from product_pricing_api.app.schemas.series import SeriesCreate, SeriesRead
from product_pricing_api.app.services.series_service import SeriesService

router = APIRouter(route_class=StoreValidationRoute)


@router.post("", response_model=SeriesRead, status_code=status.HTTP_201_CREATED)
async def create_series(
    series_in: SeriesCreate,
    service: SeriesService = Depends(get_series_service),
) -> SeriesRead:
    """Create a new series.

    Duplicate, missing or empty names answer 500.
    """
    try:
        return await service.create_series(series_in)
    except PricingError as exc:
        raise exc.to_http_exception()


@router.get("", response_model=List[SeriesRead])
async def list_series(service: SeriesService = Depends(get_series_service)) -> List[SeriesRead]:
    try:
        return await service.list_series()
    except PricingError as exc:
        raise exc.to_http_exception()


@router.get("/{series_id}", response_model=SeriesRead)
async def get_series(
    series_id: str,
    service: SeriesService = Depends(get_series_service),
) -> SeriesRead:
    """Fetch a series by ID.  Returns HTTP 404 if it does not exist."""
    try:
        return await service.get_series(series_id)
    except PricingError as exc:
        raise exc.to_http_exception()
