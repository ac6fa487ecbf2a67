"""
Route classes for routers whose bodies go straight to the store.

On ``/api/series`` and ``/api/products`` a body the store cannot accept
(a missing series name, a price that is not a number) is reported as a
server error carrying the validation message, the same way any other
store failure on those routes is reported.  Other routers keep
FastAPI's 422 response.
"""

import logging
from typing import Any, Callable, Dict, Sequence

from fastapi import HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Render pydantic errors as ``"field: message"`` pairs."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


class StoreValidationRoute(APIRoute):
    """Answer request validation failures with 500 instead of 422."""

    error_prefix = ""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()
        prefix = self.error_prefix

        async def custom_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                message = format_validation_errors(exc.errors())
                logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"{prefix}{message}",
                )

        return custom_route_handler


class ProductRoute(StoreValidationRoute):
    error_prefix = "Error creating product: "
