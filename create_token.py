"""Print a signed access token for an existing user.

Useful for calling protected routes (``/api/products/full``) from
scripts without going through ``/api/login``.  The token is signed with
``JWT_SECRET`` from the environment or ``.env``.

Usage:
    python create_token.py --user-id 65f0c2a1b4e3d9a8c7b6a5f4 --username admin --days 365
"""
import argparse

from product_pricing_api.app.core.config import settings
from product_pricing_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Create an access token for the Product Pricing API.")
    ap.add_argument("--user-id", required=True, help="User ID to embed in the token")
    ap.add_argument("--username", required=True, help="Username to embed in the token")
    ap.add_argument("--days", type=int, default=0, help="Lifetime in days (default: ACCESS_TOKEN_EXPIRE_MINUTES)")
    args = ap.parse_args()

    lifetime = args.days * 24 * 60 * 60 or settings.access_token_expire_minutes * 60
    token = create_access_token(
        {"id": args.user_id, "username": args.username},
        settings.jwt_secret,
        expires_in=lifetime,
    )
    print(token)


if __name__ == "__main__":
    main()
