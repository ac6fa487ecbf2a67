"""
Authentication endpoints: user registration and login.

Registration is meant for administrators setting up accounts; there is
no public sign‑up flow beyond this route.
"""

from fastapi import APIRouter, Depends, status

from product_pricing_api.app.api.deps import get_auth_service
from product_pricing_api.app.core.exceptions import PricingError
from product_pricing_api.app.schemas.user import MessageResponse, TokenResponse, UserCredentials
from product_pricing_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    credentials: UserCredentials,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Register a new user.

    A duplicate username is reported as a server error carrying the
    store's message, like any other store failure.
    """
    try:
        await service.register(credentials)
    except PricingError as exc:
        raise exc.to_http_exception()
    return MessageResponse(message="User registered")


@router.post("/login", response_model=TokenResponse)
async def login_user(
    credentials: UserCredentials,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Log in and return a JWT valid for one hour.

    Unknown usernames and wrong passwords both answer 400.
    """
    try:
        token = await service.login(credentials)
    except PricingError as exc:
        raise exc.to_http_exception()
    return TokenResponse(token=token)
