"""
Security helpers for password hashing and JWT authentication.

Tokens are standard HS256 JSON Web Tokens built with HMAC‑SHA256 and
base64url encoding.  They embed the caller's claims plus ``iat`` and
``exp`` timestamps and are signed with the secret held by the
application context.  Passwords are hashed with bcrypt using a random
per‑password salt.
"""

import base64
import binascii
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

import bcrypt

from .exceptions import InvalidToken, MissingToken

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], secret: str, expires_in: int = 3600) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` fields holding
    UNIX timestamps.  The token is a string of the form
    ``header.payload.signature``, where each part is base64url
    encoded.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"id": ..., "username": ...}``).
    secret : str
        Signing secret.
    expires_in : int
        Lifetime of the token in seconds.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    now = int(time.time())
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_in
    header = {"alg": ALGORITHM, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret: str) -> Dict[str, Any]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, checks the
    algorithm, verifies the HMAC signature and checks the ``exp``
    field.

    Raises
    ------
    InvalidToken
        If the token is malformed, signed with another key or expired.
        ``reason`` tells these cases apart for logging.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise InvalidToken(reason="malformed")
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        actual_sig = _b64_url_decode(signature_b64)
        payload = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise InvalidToken(reason="malformed") from exc
    if not isinstance(header, dict) or header.get("alg") != ALGORITHM:
        raise InvalidToken(reason="unsupported algorithm")
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, secret)
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        raise InvalidToken(reason="invalid signature")
    if not isinstance(payload, dict):
        raise InvalidToken(reason="malformed")
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or exp <= time.time():
        raise InvalidToken(reason="expired")
    return payload


def extract_token(authorization: Optional[str]) -> str:
    """Return the token carried by an ``Authorization`` header value.

    Both ``Bearer <token>`` and a bare token are accepted.
    """
    if not authorization or not authorization.strip():
        raise MissingToken()
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() == "bearer":
        value = credentials.strip()
        if not value:
            raise MissingToken()
    return value


class TokenVerifier:
    """Validates access tokens presented on protected routes."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, authorization: Optional[str]) -> Dict[str, Any]:
        """Return the decoded claims for an ``Authorization`` header value.

        Raises :class:`MissingToken` when no token is present and
        :class:`InvalidToken` when it does not verify.
        """
        token = extract_token(authorization)
        try:
            return decode_access_token(token, self._secret)
        except InvalidToken as exc:
            logger.warning("Rejected access token: %s", exc.reason)
            raise


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with bcrypt.

    A fresh salt is generated for each call, so hashing the same
    password twice gives different strings.  ``rounds`` is the bcrypt
    cost factor.
    """
    secret = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored bcrypt hash."""
    secret = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(secret, hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
