"""
Application context shared by all request handlers.

The context bundles the database handle and the settings (which hold
the token signing secret).  It is built once by ``create_app`` and
stored on ``app.state``; services receive what they need from it when
they are constructed.
"""

import logging
from dataclasses import dataclass, field

from .config import Settings
from .db import Database
from .exceptions import StoreError
from .security import TokenVerifier

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    db: Database
    token_verifier: TokenVerifier = field(init=False)

    def __post_init__(self) -> None:
        self.token_verifier = TokenVerifier(self.settings.jwt_secret)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(settings=settings, db=Database(settings.database_url))

    def open(self) -> None:
        """Connect to the database.

        A failed connection is logged and the application keeps
        serving; each request touching the store then fails with
        ``StoreUnavailable``.
        """
        try:
            self.db.connect()
        except StoreError:
            logger.exception("Could not connect to database %s", self.db.path)

    def close(self) -> None:
        self.db.close()
