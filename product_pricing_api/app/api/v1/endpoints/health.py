"""
Health check endpoint.

Mounted at the application root (``/health``) rather than under
``/api``.  Reports whether the database connection is open.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from product_pricing_api.app.api.deps import get_context
from product_pricing_api.app.core.context import AppContext

router = APIRouter()


@router.get("/health")
async def health(context: AppContext = Depends(get_context)) -> Dict[str, str]:
    database = "connected" if context.db.is_connected else "unavailable"
    return {"status": "ok", "database": database}
