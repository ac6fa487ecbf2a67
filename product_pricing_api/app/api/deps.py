"""
FastAPI dependencies.

Services are built per request from the :class:`AppContext` stored on
``app.state.context``.  They hold no state of their own beyond the
shared database handle and settings.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, Header, Request

from ..core.context import AppContext
from ..core.exceptions import TokenError
from ..services.auth_service import AuthService
from ..services.product_service import ProductService
from ..services.series_service import SeriesService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_auth_service(context: AppContext = Depends(get_context)) -> AuthService:
    return AuthService(context.db, context.settings)


def get_series_service(context: AppContext = Depends(get_context)) -> SeriesService:
    return SeriesService(context.db)


def get_product_service(context: AppContext = Depends(get_context)) -> ProductService:
    return ProductService(context.db)


def verify_token(
    request: Request,
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """Dependency guarding protected routes.

    A missing ``Authorization`` header is answered with 403 and a token
    that fails verification with 500.  On success the decoded claims are
    stored on ``request.state.user`` and returned.
    """
    try:
        claims = context.token_verifier.verify(authorization)
    except TokenError as exc:
        raise exc.to_http_exception()
    request.state.user = claims
    return claims
