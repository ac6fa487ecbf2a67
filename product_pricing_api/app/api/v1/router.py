"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
The auth router declares ``/register`` and ``/login`` itself, so it is
included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import auth, products, series

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(series.router, prefix="/series", tags=["series"])
router.include_router(products.router, prefix="/products", tags=["products"])
