"""
Business logic for user registration and login.
"""

import logging

from ..core.config import Settings
from ..core.db import Database, new_object_id
from ..core.exceptions import InvalidCredentials, StoreError
from ..core.security import create_access_token, hash_password, verify_password
from ..schemas.user import UserCredentials

logger = logging.getLogger(__name__)


class AuthService:
    """Registers users and issues access tokens."""

    def __init__(self, db: Database, settings: Settings) -> None:
        self.db = db
        self.settings = settings

    async def register(self, data: UserCredentials) -> None:
        """Store a new user with a bcrypt hash of the password.

        Raises ``ValidationConflict`` if the username is taken and
        ``StoreError`` if it is empty.
        """
        if not data.username:
            raise StoreError("username is required")
        hashed = hash_password(data.password, rounds=self.settings.bcrypt_rounds)
        user_id = new_object_id()
        self.db.execute(
            "INSERT INTO users (id, username, password) VALUES (?, ?, ?)",
            (user_id, data.username, hashed),
        )
        logger.info("Registered user %s", data.username)

    async def login(self, data: UserCredentials) -> str:
        """Check the credentials and return a signed access token.

        Raises ``InvalidCredentials`` for an unknown username or a
        wrong password.
        """
        row = self.db.fetchone(
            "SELECT id, username, password FROM users WHERE username = ?",
            (data.username,),
        )
        if row is None:
            logger.warning("Login failed for unknown user %s", data.username)
            raise InvalidCredentials("User not found")
        if not verify_password(data.password, row["password"]):
            logger.warning("Login failed for user %s: wrong password", data.username)
            raise InvalidCredentials("Invalid password")
        return create_access_token(
            {"id": row["id"], "username": row["username"]},
            self.settings.jwt_secret,
            expires_in=self.settings.access_token_expire_minutes * 60,
        )
